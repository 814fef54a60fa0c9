# src/inspector_shell/core/handlers/config_handler.py
import json
import logging
from typing import List

from inspector_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

config_help_text = """
  config list                Show the current configuration as JSON.
  config get <key>           Show a single value (e.g., inspect.default_backend).
  config set <key> <value>   Set a config value for the session (e.g., debug.level INFO).
  config reset               Reload the configuration from settings.json.
""".strip("\n")


def handle_config(args: List[str]) -> int:
    """Handles the 'config' command for viewing and modifying session configuration."""
    if not args:
        print(config_help_text)
        return 1

    command = args[0]

    if command == "list":
        print(json.dumps(config_manager.get_all(), indent=2))
        return 0

    if command == "get":
        if len(args) != 2:
            print("Usage: config get <key>")
            return 1
        value = config_manager.get_nested(args[1])
        if value is None:
            print(f"Config key '{args[1]}' is not set.")
            return 1
        print(json.dumps(value) if isinstance(value, (dict, list)) else value)
        return 0

    if command == "set":
        if len(args) < 3:
            print("Usage: config set <key> <value>")
            return 1
        key_path = args[1]
        value = " ".join(args[2:])

        if value.startswith('"') and value.endswith('"'):
            value = value[1:-1]

        if config_manager.set_nested(key_path, value):
            new_value = config_manager.get_nested(key_path)
            print(f"Config updated: {key_path} = {new_value} (type: {type(new_value).__name__})")
            return 0
        print(f"Error: Failed to set config value for key '{key_path}'.")
        return 1

    if command == "reset":
        config_manager.reset()
        print("Configuration has been reset to the values from settings.json.")
        return 0

    print(f"Unknown command: 'config {command}'.")
    return 1
