import logging

from engine.interactables import INTERACTABLES
from engine.world import WORLD_DATA, Direction, Hazard, Item, Location, WorldGraphError

logger = logging.getLogger(__name__)


def build_world(data=WORLD_DATA):
    """
    Turns the static world data into a fresh location table.
    Returns (location_table, start_location_name).

    Every call builds new Location objects, so taking an item in one game
    never leaks into another. Raises WorldGraphError if any exit, item,
    hazard or interactable reference does not resolve.
    """
    table = {}

    # 1. BUILD LOCATIONS
    for loc_data in data['locations']:
        name = loc_data['name']
        if name in table:
            raise WorldGraphError(f"Duplicate location name: {name}")

        exits = {}
        for direction_name, target in loc_data.get('exits', {}).items():
            try:
                direction = Direction(direction_name)
            except ValueError:
                raise WorldGraphError(f"{name}: unknown direction '{direction_name}'") from None
            exits[direction] = target

        item = None
        if loc_data.get('item'):
            item = _resolve_item(name, loc_data['item'])

        interactable = None
        if loc_data.get('interactable'):
            behavior_key = loc_data['interactable']
            if behavior_key not in INTERACTABLES:
                raise WorldGraphError(f"{name}: unknown interactable '{behavior_key}'")
            interactable = INTERACTABLES[behavior_key]()

        hazard = None
        if loc_data.get('hazard'):
            hazard_data = loc_data['hazard']
            hazard = Hazard(_resolve_item(name, hazard_data['requires']), hazard_data['message'])

        table[name] = Location(name, loc_data['description'], exits, item, interactable, hazard)

    # 2. VALIDATE EXITS
    for location in table.values():
        for direction, target in location.exits.items():
            if target not in table:
                raise WorldGraphError(
                    f"{location.name}: exit {direction.value} leads to unknown location '{target}'"
                )

    start = data['start_location']
    if start not in table:
        raise WorldGraphError(f"Unknown start location: {start}")

    logger.debug("World built: %d locations, start at %s", len(table), start)
    return table, start


def _resolve_item(location_name, display_name):
    item = Item.from_display_name(display_name)
    if item is None:
        raise WorldGraphError(f"{location_name}: unknown item '{display_name}'")
    return item


class GameState:
    """
    The mutable side of a game: where the player is, what they carry,
    the location table and whether the game is still running.
    """

    def __init__(self, location_table, start_location_name):
        self.location_table = location_table
        self.current_location = location_table[start_location_name]
        self.inventory = []
        self.is_running = True

    def location_by_name(self, name):
        return self.location_table.get(name)

    def has_item(self, item):
        return item in self.inventory

    def take_item_from_current(self, name):
        """Case-insensitive pickup from the current location. Returns the Item or None."""
        item = self.current_location.item
        if item is None or item.display_name.lower() != name.lower():
            return None
        self.current_location.item = None
        self.inventory.append(item)
        return item

    def end(self, context):
        self.is_running = False
        logger.info("Game ended at %s", self.current_location.name)
        context.end_game()


def new_game(data=WORLD_DATA):
    table, start = build_world(data)
    return GameState(table, start)
