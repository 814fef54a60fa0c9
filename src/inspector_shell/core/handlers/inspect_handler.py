# src/inspector_shell/core/handlers/inspect_handler.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from inspector.errors import InspectorError
from inspector.inspection import get_inspect
from inspector.model import Backend
from inspector_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

inspect_help_text = """
  inspect <FILE|-> [--backend selendroid|uiautomator]
      Prints the interesting elements of a saved page source (JSON or uiautomator XML).
      Reads the page source from stdin when FILE is '-'.
""".strip()


def handle_inspect(args: List[str]) -> int:
    parser = argparse.ArgumentParser(prog="inspect", description="Inspect a saved page source.")
    parser.add_argument("source", metavar="FILE", help="Page source file, or '-' for stdin.")
    parser.add_argument("--backend", choices=[b.value for b in Backend], default=None,
                        help="Backend that produced the source (default: inspect.default_backend).")

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    backend = pargs.backend or config_manager.get_nested("inspect.default_backend", Backend.UIAUTOMATOR.value)

    try:
        if pargs.source == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(pargs.source).read_bytes()
    except OSError as e:
        logger.error("Could not read page source %s: %s", pargs.source, e)
        print(f"Error: could not read '{pargs.source}': {e}")
        return 1

    try:
        report = get_inspect(raw, backend)
    except InspectorError as e:
        logger.error("Inspection of %s failed: %s", pargs.source, e)
        print(f"Error: {e}")
        return 1

    print(report, end="")
    return 0
