import logging

from engine.narrator import (
    GAME_OVER_TEXT,
    HELP_TEXT,
    NO_EXIT_TEXT,
    OPENING_TEXT,
    UNKNOWN_COMMAND_TEXT,
    Narrator,
)
from engine.state import new_game
from engine.world import Direction, Item

logger = logging.getLogger(__name__)

DIRECTION_WORDS = [direction.value for direction in Direction]


class Director:
    def __init__(self, state=None, listener=None):
        """
        The Director is the STATE MACHINE.
        It parses player text into a command, applies it to the GameState
        and writes the outcome through the context it is handed.
        """
        self.state = state if state is not None else new_game()
        self.listener = listener
        self.narrator = Narrator()

    # ==========================================================
    # 1. ENTRY POINTS
    # ==========================================================
    def start(self, context):
        context.write(OPENING_TEXT)
        self.look(context)

    def handle(self, user_input, context):
        """
        Processes one line of player input.
        Once the game has ended, nothing is parsed.
        """
        if not self.state.is_running:
            context.write(GAME_OVER_TEXT)
            return

        command = self.parse(user_input)

        if command['tool'] == 'unknown' and self.listener is not None and user_input.strip():
            mapped = self.listener.map_command(user_input, self.valid_commands())
            if mapped:
                context.write(self.narrator.interpreting_as(mapped))
                command = self.parse(mapped)

        logger.debug("Parsed %r -> %s", user_input, command)
        self.execute(command, context)

    # ==========================================================
    # 2. THE PARSER
    # ==========================================================
    def parse(self, user_input):
        """
        Free text -> {"tool": ..., "parameters": {...}}. First match wins.
        """
        text = user_input.strip().lower()

        if text == "help":
            return {"tool": "help", "parameters": {}}
        if text in DIRECTION_WORDS:
            return {"tool": "move", "parameters": {"direction": Direction(text)}}
        if text.startswith("take "):
            return {"tool": "take", "parameters": {"item_name": text[5:]}}
        if text.startswith("use "):
            return {"tool": "use", "parameters": {"item_name": text[4:]}}
        if text == "look":
            return {"tool": "look", "parameters": {}}
        if text == "inventory":
            return {"tool": "inventory", "parameters": {}}
        return {"tool": "unknown", "parameters": {}}

    def execute(self, command, context):
        """Master Router: command dict -> action."""
        tool = command.get('tool')
        params = command.get('parameters', {})

        if tool == 'help':
            context.write(HELP_TEXT)
        elif tool == 'move':
            self.move(params['direction'], context)
        elif tool == 'take':
            self.take_item(params['item_name'], context)
        elif tool == 'use':
            self.use_item(params['item_name'], context)
        elif tool == 'look':
            self.look(context)
        elif tool == 'inventory':
            context.write(self.narrator.inventory_report(self.state.inventory))
        else:
            context.write(UNKNOWN_COMMAND_TEXT)

    # ==========================================================
    # 3. ACTIONS
    # ==========================================================
    def move(self, direction, context):
        target_name = self.state.current_location.exits.get(direction)
        target = self.state.location_by_name(target_name) if target_name else None

        if target is None:
            context.write(NO_EXIT_TEXT)
            return

        self.state.current_location = target
        logger.debug("Moved %s to %s", direction.value, target.name)
        context.write(self.narrator.moved(direction))
        self.look(context)
        self.check_special_conditions(context)

    def take_item(self, item_name, context):
        item = self.state.take_item_from_current(item_name)
        if item is None:
            context.write(self.narrator.not_here(item_name))
        else:
            context.write(self.narrator.picked_up(item))

    def use_item(self, item_name, context):
        # Using an item has no effect yet.
        item = Item.from_display_name(item_name.title())
        if item is not None and self.state.has_item(item):
            context.write(self.narrator.used(item))
        else:
            context.write(self.narrator.not_carried(item_name))

    def look(self, context):
        for line in self.narrator.describe_location(self.state.current_location):
            context.write(line)

    # ==========================================================
    # 4. SPECIAL CONDITIONS (after a successful move only)
    # ==========================================================
    def check_special_conditions(self, context):
        location = self.state.current_location
        hazard = location.hazard

        if hazard is not None and not self.state.has_item(hazard.required_item):
            context.write(hazard.message)
            self.state.end(context)
        elif location.interactable is not None:
            location.interactable.interact(context, self.state)

    # ==========================================================
    # 5. HELPERS
    # ==========================================================
    def valid_commands(self):
        """Every command that would do something right now. Fed to the Listener."""
        cmds = ["help", "look", "inventory"]
        cmds.extend(DIRECTION_WORDS)

        item_here = self.state.current_location.item
        if item_here is not None:
            cmds.append(f"take {item_here.display_name.lower()}")
        for item in self.state.inventory:
            cmds.append(f"use {item.display_name.lower()}")
        return cmds
