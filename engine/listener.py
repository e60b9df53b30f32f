import json
import logging
import os

from openai import OpenAI

logger = logging.getLogger(__name__)


class Listener:
    def __init__(self, model_name="gpt-5-nano", client=None):
        """
        The Listener maps free text the Director could not parse onto one of
        the commands the Director does understand. It never invents commands:
        anything outside `valid_commands` is thrown away.
        """
        self.client = client or OpenAI(api_key=os.getenv("OPENAI_API_KEY"))
        self.model = model_name

    def map_command(self, user_input, valid_commands):
        """
        Returns one entry of `valid_commands`, or None if the model could not
        map the input (or the call failed).
        """
        command_list = "\n".join(f"- {cmd}" for cmd in valid_commands)
        system_prompt = f"""
        ROLE: You are the command parser of a text adventure.
        TASK: Map the player's input to exactly one of the Valid Commands.

        ### VALID COMMANDS
        {command_list}

        ### RULES
        1. Output **VALID JSON ONLY**, with a single key "command".
        2. The value MUST be copied verbatim from the Valid Commands list.
        3. If nothing fits, output {{"command": null}}.
        """

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_input}
                ],
                response_format={"type": "json_object"},
                temperature=1
            )

            content = response.choices[0].message.content
            mapped = json.loads(content).get('command')

        except Exception as e:
            if "Invalid API key" in str(e):
                error_msg = "OpenAI API Key is invalid or missing."
            else:
                error_msg = str(e)
            logger.warning("[Listener Error] %s", error_msg)
            return None

        if mapped not in valid_commands:
            logger.debug("Listener answer %r is not a valid command", mapped)
            return None
        return mapped
