# src/inspector_shell/core/handlers/tags_handler.py
import argparse
import json
import logging
from typing import List

from inspector.errors import InvalidRoleError
from inspector.query.criteria import build_find_criteria
from inspector.query.tags import resolve, supported_roles

logger = logging.getLogger(__name__)

tags_help_text = """
  tags <ROLE> [--criteria]
      Prints the Android classes a tag name resolves to, or the 'find all' payload with --criteria.
  tags --list
      Prints the supported tag names.
""".strip()


def handle_tags(args: List[str]) -> int:
    parser = argparse.ArgumentParser(prog="tags", description="Resolve tag names to Android classes.")
    parser.add_argument("role", nargs="?", help="Tag name, e.g. button.")
    parser.add_argument("--criteria", action="store_true", help="Print the find criteria as JSON.")
    parser.add_argument("--list", action="store_true", help="List the supported tag names.")

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    if pargs.list:
        print("\n".join(supported_roles()))
        return 0

    if pargs.role is None:
        parser.print_help()
        return 1

    try:
        if pargs.criteria:
            print(json.dumps(build_find_criteria(pargs.role)))
        else:
            print("\n".join(resolve(pargs.role)))
    except InvalidRoleError as e:
        logger.warning("Rejected tag name %r", e.role)
        print(f"Error: {e}. Supported: {', '.join(supported_roles())}")
        return 1
    return 0
