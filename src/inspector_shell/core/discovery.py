import importlib
import logging
import pkgutil
from typing import Any, Dict, Tuple

logger = logging.getLogger(__name__)

HANDLERS_PACKAGE = "inspector_shell.core.handlers"


def discover_handlers() -> Tuple[Dict[str, Any], Dict[str, str]]:
    """
    Loads every '*_handler' module in the handlers package and returns two dictionaries:
    1. A map of command names to their handler function.
    2. A map of command names to their help text string.
    """
    discovered_handlers: Dict[str, Any] = {}
    discovered_help_texts: Dict[str, str] = {}

    handlers_pkg = importlib.import_module(HANDLERS_PACKAGE)
    logger.debug("Scanning for handlers in: '%s'", HANDLERS_PACKAGE)

    for _, name, _ in sorted(pkgutil.iter_modules(handlers_pkg.__path__), key=lambda m: m.name):
        if not name.endswith("_handler"):
            continue

        module = importlib.import_module(f"{HANDLERS_PACKAGE}.{name}")

        for attr_name in dir(module):
            if attr_name.startswith("handle_"):
                handler_func = getattr(module, attr_name)
                if callable(handler_func):
                    command_name = attr_name.replace("handle_", "")
                    discovered_handlers[command_name] = handler_func
                    logger.debug("Discovered command '%s'", command_name)

            elif attr_name.endswith("_help_text"):
                help_text_var = getattr(module, attr_name)
                if isinstance(help_text_var, str):
                    command_name = attr_name.replace("_help_text", "")
                    discovered_help_texts[command_name] = help_text_var

    return discovered_handlers, discovered_help_texts
