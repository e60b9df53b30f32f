from engine.world import Item


class Interactable:
    """
    A behavior attached to a Location, fired when the player arrives there.

    Implementations read and mutate the GameState they are handed directly
    and may write narrative through the context. Ending the game goes through
    state.end(context).
    """

    def interact(self, context, state):
        raise NotImplementedError


class AncientOak(Interactable):
    WIN_TEXT = "The Magic Compass glows. The oak tree opens, revealing a path out. You escape!"
    SILENT_TEXT = "The oak tree remains silent. Perhaps you need something special to proceed."

    def interact(self, context, state):
        if state.has_item(Item.MAGIC_COMPASS):
            context.write(self.WIN_TEXT)
            state.end(context)
        else:
            context.write(self.SILENT_TEXT)


# Keys used by the 'interactable' field of the world data.
INTERACTABLES = {
    'ancient_oak': AncientOak,
}
