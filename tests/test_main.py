import os
import tempfile
import unittest
from unittest import mock

import main
from engine.director import Director


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self.tmp.name, "config.yaml")

    def tearDown(self):
        self.tmp.cleanup()

    def test_default_config_is_created(self):
        config = main.load_config(self.config_path)

        self.assertTrue(os.path.exists(self.config_path))
        self.assertEqual(config, {
            'listener_enabled': False,
            'listener_model': 'gpt-5-nano',
            'debug_mode': False,
        })

    def test_saved_config_round_trips(self):
        config = main.load_config(self.config_path)
        config['debug_mode'] = True
        main.save_config(config, self.config_path)

        self.assertTrue(main.load_config(self.config_path)['debug_mode'])

    def test_listener_off_by_default(self):
        self.assertIsNone(main.build_listener({'listener_enabled': False}))

    def test_listener_needs_an_api_key(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(main.build_listener({'listener_enabled': True}))


class TestConsoleContext(unittest.TestCase):
    def test_game_over_is_flagged(self):
        context = main.ConsoleContext()
        director = Director()

        with mock.patch.object(main.console, "print"):
            director.start(context)
            for cmd in ["north", "west", "north"]:
                director.handle(cmd, context)

        self.assertTrue(context.ended)
        self.assertFalse(director.state.is_running)


if __name__ == '__main__':
    unittest.main()
