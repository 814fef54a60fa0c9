# src/inspector_shell/core/command_registry.py
import logging
from typing import Callable, Dict

from inspector_shell.core.discovery import discover_handlers

logger = logging.getLogger(__name__)

# Filled by register_all_commands() from the handlers package.
CommandRegistry: Dict[str, Callable[..., int]] = {}
COMMAND_HELP_TEXTS: Dict[str, str] = {}


def register_command(name: str, handler: Callable[..., int]) -> None:
    """Maps a command name onto its handle_* function."""
    CommandRegistry[name] = handler
    logger.debug("Registered command '%s'", name)


def register_all_commands() -> None:
    """Registers every discovered handler; existing names are left alone."""
    discovered_handlers, discovered_help_texts = discover_handlers()

    for name, handler in discovered_handlers.items():
        if name not in CommandRegistry:
            register_command(name, handler)

    COMMAND_HELP_TEXTS.update(discovered_help_texts)
    logger.debug("Successfully registered %d handlers.", len(CommandRegistry))
