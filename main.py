import logging
import os
import sys
import time

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.markdown import Markdown
from rich.prompt import Prompt
from rich.theme import Theme

# Import Engine Components
from engine.context import GameContext
from engine.director import Director
from engine.listener import Listener
from engine.state import new_game
from engine.world import WORLD_DATA, WorldGraphError

# --- CONFIGURATION ---
CONFIG_PATH = "config.yaml"
DEFAULT_CONFIG = """
# MAGIC COMPASS CONFIGURATION
# ---------------------------
# The listener maps commands the parser does not know onto ones it does.
# It needs OPENAI_API_KEY in your .env and is off by default.

listener_enabled: false
listener_model: gpt-5-nano
debug_mode: false
"""
EXIT_WORDS = ["quit", "exit", "menu"]

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",
    "dim": "dim",
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})

load_dotenv()
console = Console(theme=custom_theme)


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def load_config(config_path=CONFIG_PATH):
    """
    Loads config.yaml or creates default if missing.
    """
    if not os.path.exists(config_path):
        with open(config_path, "w") as f:
            f.write(DEFAULT_CONFIG.strip() + "\n")

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def save_config(config, config_path=CONFIG_PATH):
    with open(config_path, "w") as f:
        yaml.dump(config, f, default_flow_style=False)


def setup_logging(debug_mode):
    logging.basicConfig(
        level=logging.DEBUG if debug_mode else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def build_listener(config):
    """Returns a Listener when it is switched on and usable, else None."""
    if not config.get('listener_enabled', False):
        return None
    if not os.getenv("OPENAI_API_KEY"):
        console.print("\n[warning]WARNING:[/] listener_enabled is set but no OPENAI_API_KEY was found.")
        console.print("[dim]Unknown commands will not be interpreted.[/dim]")
        return None

    return Listener(model_name=config.get('listener_model', 'gpt-5-nano'))


class ConsoleContext(GameContext):
    """Writes narrative to the rich console."""

    def __init__(self):
        self.ended = False

    def write(self, text):
        console.print(f"\n{text}", highlight=False)

    def end_game(self):
        self.ended = True
        console.print()
        console.print(Panel("[info]GAME OVER[/info]", border_style="info", width=60))


def show_welcome_screen(config):
    clear_screen()

    welcome_md = Markdown(f"""
    # {WORLD_DATA['title'].upper()}

    A short walk through an enchanted forest.

    > *Find your way out.*
    """)

    console.print(Panel(
        welcome_md,
        border_style="info",
        padding=(1, 2),
        width=60
    ))

    console.print("\n[dim]Select an option:[/dim]\n")

    debug_state = "On" if config.get('debug_mode', False) else "Off"
    menu_options = [
        ("1", "Start New Game"),
        ("D", f"Toggle Debug Mode (current: {debug_state})"),
        ("2", "Quit")
    ]

    for key, label in menu_options:
        console.print(f" [[info]{key}[/info]] {label}")

    print()
    choice = Prompt.ask(" >", choices=["1", "2", "D", "d"], default="1")
    return choice


# ============================================
# GAME LOOP
# ============================================
def start_game(config):
    clear_screen()

    # 1. BUILD THE WORLD
    try:
        state = new_game()
    except WorldGraphError as e:
        console.print(Panel(f"[warning]WORLD DATA ERROR:[/]\nThe world map is broken.\nDetails: {e}", border_style="warning"))
        time.sleep(3)
        return

    # 2. INITIALIZE ENGINE
    listener = build_listener(config)
    director = Director(state, listener=listener)
    context = ConsoleContext()

    console.print(Panel(
        f"[bold blue]{WORLD_DATA['title']}[/bold blue]",
        title="GAME STARTED",
        border_style="info"
    ))
    director.start(context)
    console.print("\n[dim]Type 'help' for commands, 'quit' to return to menu.[/dim]\n")

    # 3. THE LOOP
    while True:
        user_input = Prompt.ask("\n[info]>[/info]")

        if user_input.strip().lower() in EXIT_WORDS:
            break

        director.handle(user_input, context)

        if context.ended:
            Prompt.ask("\n[dim]Press Enter to return to the menu[/dim]", default="", show_default=False)
            break


# ============================================
# MAIN
# ============================================
def main():
    def toggle_debug(current_config):
        """Toggles the debug_mode flag in config.yaml."""
        current_config['debug_mode'] = not current_config.get('debug_mode', False)
        save_config(current_config)
        clear_screen()
        console.print(Panel(
            f"[info]DEBUG MODE:[/][bold]{' ON' if current_config['debug_mode'] else ' OFF'}[/bold]",
            border_style="info"
        ))
        time.sleep(1)

    while True:
        # Re-load config to get the latest debug state for the menu label
        try:
            config = load_config()
        except yaml.YAMLError as e:
            console.print(Panel(f"[warning]YAML STRUCTURE ERROR:[/]\nCheck {CONFIG_PATH} for indentation or syntax errors.\nDetails: {e}", border_style="warning"))
            sys.exit(1)

        setup_logging(config.get('debug_mode', False))
        choice = show_welcome_screen(config)

        if choice == "1":
            start_game(config)
        elif choice.upper() == "D":
            toggle_debug(config)
        elif choice == "2":
            console.print("\nGoodbye.")
            sys.exit()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, EOFError):
        console.print("\nExiting.")
