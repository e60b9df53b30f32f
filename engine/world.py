from enum import Enum


class WorldGraphError(ValueError):
    """Raised when the static world data breaks one of its invariants."""


class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class Item(Enum):
    MAGIC_COMPASS = "Magic Compass"

    @property
    def display_name(self):
        return self.value

    @classmethod
    def from_display_name(cls, name):
        for item in cls:
            if item.value == name:
                return item
        return None


# Static world data. Turned into Location objects by engine.state.build_world().
WORLD_DATA = {
    'title': 'The Magic Compass',
    'start_location': 'Mysterious Clearing',
    'locations': [
        {
            'name': 'Mysterious Clearing',
            'description': 'A circular clearing surrounded by ancient trees. The ground is covered in strange symbols.',
            'exits': {'north': 'Whispering Woods'},
        },
        {
            'name': 'Whispering Woods',
            'description': 'Trees here seem to whisper secrets. The path splits.',
            'exits': {'south': 'Mysterious Clearing', 'east': 'Crystal Cave', 'west': 'Abandoned Hut'},
        },
        {
            'name': 'Crystal Cave',
            'description': "A cave glittering with crystals. It's both beautiful and eerie.",
            'exits': {'west': 'Whispering Woods'},
            'item': 'Magic Compass',
        },
        {
            'name': 'Abandoned Hut',
            'description': 'An old hut that seems to have been left in a hurry.',
            'exits': {'east': 'Whispering Woods', 'north': 'Enchanted River'},
        },
        {
            'name': 'Enchanted River',
            'description': 'A river with water that glows faintly. A rickety bridge crosses it.',
            'exits': {'south': 'Abandoned Hut', 'north': 'Ancient Oak'},
            'hazard': {
                'requires': 'Magic Compass',
                'message': 'You try to cross the river without the Magic Compass. '
                           'You fall in and are transformed into a tree.',
            },
        },
        {
            'name': 'Ancient Oak',
            'description': 'A massive oak tree with a door carved into its trunk.',
            'exits': {'south': 'Enchanted River'},
            'interactable': 'ancient_oak',
        },
    ],
}


class Hazard:
    """Arriving without `required_item` is fatal."""

    def __init__(self, required_item, message):
        self.required_item = required_item
        self.message = message


class Location:
    def __init__(self, name, description, exits=None, item=None, interactable=None, hazard=None):
        self.name = name
        self.description = description
        self.exits = exits or {}  # Direction -> location name
        self.item = item
        self.interactable = interactable
        self.hazard = hazard

    def __repr__(self):
        return f"Location({self.name!r})"
