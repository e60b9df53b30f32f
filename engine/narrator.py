OPENING_TEXT = "You awaken in a mysterious forest with no memory of how you got there."
GAME_OVER_TEXT = "The game is over. Please reset to play again."
UNKNOWN_COMMAND_TEXT = "I don't understand that command."
NO_EXIT_TEXT = "You can't go that way."
EMPTY_INVENTORY_TEXT = "Your inventory is empty."

HELP_TEXT = """Available commands:
- Movement: north, south, east, west
- Actions: look, take [item], use [item], inventory
- help: Displays this help message"""


class Narrator:
    """
    Turns engine state into the player-facing text.
    Holds no state of its own; the Director decides what gets said and when.
    """

    def describe_location(self, location):
        """Returns the lines for a location: name, description, exits, item."""
        lines = [
            f"You are at the {location.name}.",
            location.description,
        ]
        if location.exits:
            exit_list = ", ".join(direction.value for direction in location.exits)
            lines.append(f"Exits are: {exit_list}.")
        if location.item is not None:
            lines.append(f"You see a {location.item.display_name} here.")
        return lines

    def inventory_report(self, inventory):
        if not inventory:
            return EMPTY_INVENTORY_TEXT
        item_list = ", ".join(item.display_name for item in inventory)
        return f"You are carrying: {item_list}."

    def moved(self, direction):
        return f"You move {direction.value}."

    def picked_up(self, item):
        return f"You pick up the {item.display_name}."

    def not_here(self, name):
        return f"There is no {name} here."

    def used(self, item):
        return f"You use the {item.display_name}, but nothing happens."

    def not_carried(self, name):
        return f"You don't have a {name}."

    def interpreting_as(self, command):
        return f"(Interpreting as: {command})"
