class GameContext:
    """
    The presentation side of the game. The engine only ever calls these two
    methods, in the order the narrative is produced.
    """

    def write(self, text):
        raise NotImplementedError

    def end_game(self):
        pass


class TranscriptContext(GameContext):
    """Keeps every written segment in memory. Used by tests and scripted runs."""

    def __init__(self):
        self.lines = []
        self.ended = False

    def write(self, text):
        self.lines.append(text)

    def end_game(self):
        self.ended = True

    @property
    def text(self):
        return "\n".join(self.lines)

    def clear(self):
        self.lines = []
