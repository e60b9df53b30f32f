import unittest

from engine.context import TranscriptContext
from engine.interactables import INTERACTABLES, AncientOak, Interactable
from engine.state import new_game
from engine.world import Item


class TestAncientOak(unittest.TestCase):
    def setUp(self):
        self.state = new_game()
        self.state.current_location = self.state.location_by_name("Ancient Oak")
        self.context = TranscriptContext()
        self.oak = AncientOak()

    def test_with_compass_the_player_escapes(self):
        self.state.inventory.append(Item.MAGIC_COMPASS)

        self.oak.interact(self.context, self.state)

        self.assertEqual(self.context.lines, [AncientOak.WIN_TEXT])
        self.assertFalse(self.state.is_running)
        self.assertTrue(self.context.ended)

    def test_without_compass_nothing_happens(self):
        self.oak.interact(self.context, self.state)
        self.oak.interact(self.context, self.state)

        self.assertEqual(self.context.lines, [AncientOak.SILENT_TEXT, AncientOak.SILENT_TEXT])
        self.assertTrue(self.state.is_running)
        self.assertFalse(self.context.ended)
        self.assertEqual(self.state.current_location.name, "Ancient Oak")

    def test_registry(self):
        self.assertIs(INTERACTABLES['ancient_oak'], AncientOak)
        with self.assertRaises(NotImplementedError):
            Interactable().interact(self.context, self.state)


if __name__ == '__main__':
    unittest.main()
