from __future__ import annotations

import logging
import sys

from inspector_shell.core.command_registry import (
    COMMAND_HELP_TEXTS,
    CommandRegistry,
    register_all_commands,
)
from inspector_shell.core.managers.config_manager import config_manager
from inspector_shell.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Initialize logging based on configuration."""
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        module_specific_levels=config_manager.get_nested("logging.module_levels"),
        silenced_loggers=config_manager.get_nested("logging.silenced"),
    )


def print_help() -> None:
    print("Usage: inspector <command> [args]\n\nCommands:")
    for name in sorted(COMMAND_HELP_TEXTS):
        print(COMMAND_HELP_TEXTS[name])


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the inspector from the command line."""
    setup_logging()
    register_all_commands()

    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ("help", "-h", "--help"):
        print_help()
        return 0

    command, rest = args[0], args[1:]
    handler = CommandRegistry.get(command)
    if handler is None:
        print(f"Unknown command: '{command}'. Type 'inspector help' for a list of commands.")
        return 1

    logger.debug("Executing '%s' with %s", command, rest)
    return handler(rest)


if __name__ == "__main__":
    sys.exit(main())
