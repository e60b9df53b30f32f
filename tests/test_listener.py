import unittest
from types import SimpleNamespace

from engine.listener import Listener

VALID = ["help", "look", "inventory", "north", "south", "east", "west"]


class MockOpenAIClient:
    """Stands in for openai.OpenAI: records requests, returns a canned reply."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.requests = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class TestListener(unittest.TestCase):
    def test_maps_to_a_valid_command(self):
        client = MockOpenAIClient(content='{"command": "north"}')
        listener = Listener(model_name="test-model", client=client)

        self.assertEqual(listener.map_command("head up the path", VALID), "north")

        request = client.requests[0]
        self.assertEqual(request['model'], "test-model")
        self.assertEqual(request['response_format'], {"type": "json_object"})
        self.assertEqual(request['messages'][1], {"role": "user", "content": "head up the path"})
        self.assertIn("- inventory", request['messages'][0]['content'])

    def test_rejects_invented_commands(self):
        client = MockOpenAIClient(content='{"command": "climb tree"}')
        listener = Listener(client=client)

        self.assertIsNone(listener.map_command("climb the tree", VALID))

    def test_null_answer(self):
        client = MockOpenAIClient(content='{"command": null}')
        listener = Listener(client=client)

        self.assertIsNone(listener.map_command("sing", VALID))

    def test_bad_json_is_logged_not_raised(self):
        client = MockOpenAIClient(content="north, probably")
        listener = Listener(client=client)

        with self.assertLogs("engine.listener", level="WARNING"):
            self.assertIsNone(listener.map_command("go up", VALID))

    def test_api_failure_is_logged_not_raised(self):
        client = MockOpenAIClient(error=RuntimeError("Invalid API key provided"))
        listener = Listener(client=client)

        with self.assertLogs("engine.listener", level="WARNING") as logs:
            self.assertIsNone(listener.map_command("go up", VALID))
        self.assertIn("OpenAI API Key is invalid or missing.", logs.output[0])


if __name__ == '__main__':
    unittest.main()
