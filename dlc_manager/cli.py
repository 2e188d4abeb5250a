#!/usr/bin/env python3
"""
Command-line interface for dlc_manager

Shows the install dialog of a game from an app info JSON document
(local file or URL) and plans an install request.
"""

import argparse
import logging
import sys

from dlc_manager import constants, utils
from dlc_manager.session import GameManagerSession
from dlc_manager.sources import JsonAppSource, SourceError


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def open_session(args) -> GameManagerSession:
    """Load the source and open a session for the requested game."""
    source = JsonAppSource.load(args.source)
    session = GameManagerSession(
        source,
        storage_path=args.storage_path,
        branch=args.branch
    )
    session.open(args.game_id)
    return session


def print_items(session: GameManagerSession, debug: bool = False):
    """Print catalog rows with checkbox and lock markers."""
    for row in session.items():
        box = utils.CHECKBOX_ON if row.checked else utils.CHECKBOX_OFF
        lock = f" {utils.SYMBOL_LOCKED}" if not row.enabled else ""
        label = row.label(debug).replace("\n", "\n      ")
        print(f"  {box} {row.app_id:>10}  {label}{lock}")


def cmd_list(args):
    """Handle list command to show the catalog of a game."""
    session = open_session(args)

    print(f"Install options for {args.game_id}:\n")
    print_items(session, args.verbose)
    print(f"\n{session.install_size_display()}")
    return 0


def cmd_plan(args):
    """Handle plan command to apply toggles and show the install request."""
    session = open_session(args)

    for app_id in args.select:
        if not session.toggle(app_id, True):
            print(f"{utils.SYMBOL_ERROR} Can not select {app_id} (locked or not in catalog)")
    for app_id in args.deselect:
        if not session.toggle(app_id, False):
            print(f"{utils.SYMBOL_ERROR} Can not deselect {app_id} (locked or not in catalog)")

    print(f"Install plan for {args.game_id}:\n")
    print_items(session, args.verbose)

    summary = session.get_size_summary()
    print(f"\n{summary}")

    if not session.can_confirm():
        if not summary.has_enough_space:
            print(f"{utils.SYMBOL_ERROR} Not enough space at {session.storage_path}")
        else:
            print(f"{utils.SYMBOL_ERROR} Nothing new to install")
        return 1

    request = session.confirm()
    print(f"{utils.SYMBOL_CHECK} Install allowed")
    print(f"DLC to request: {', '.join(str(app_id) for app_id in request) or '(base game only)'}")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DLC Manager - plan game + DLC installs from a depot catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
               "  dlc-manager list apps.json 1000                 # Show install options\n"
               "  dlc-manager plan apps.json 1000 --select 20     # Plan an install\n"
               "  dlc-manager plan https://host/apps.json 1000 --deselect 10"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging and show depot IDs"
    )

    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Use ASCII symbols only"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("source", help="App info JSON file or http(s) URL")
    common.add_argument("game_id", type=int, help="Base game app ID")
    common.add_argument(
        "--storage-path",
        default=None,
        help=f"Install root to check free space on (default: ${constants.ENV_STORAGE_PATH} or ~/Games)"
    )
    common.add_argument(
        "--branch",
        default=None,
        help=f"Branch to read sizes from (default: ${constants.ENV_BRANCH} or {constants.DEFAULT_BRANCH})"
    )

    list_parser = subparsers.add_parser("list", parents=[common], help="Show install options for a game")
    list_parser.set_defaults(func=cmd_list)

    plan_parser = subparsers.add_parser("plan", parents=[common], help="Plan an install request")
    plan_parser.add_argument(
        "--select",
        type=int,
        action="append",
        default=[],
        metavar="APP_ID",
        help="Select a DLC (repeatable)"
    )
    plan_parser.add_argument(
        "--deselect",
        type=int,
        action="append",
        default=[],
        metavar="APP_ID",
        help="Deselect a DLC (repeatable)"
    )
    plan_parser.set_defaults(func=cmd_plan)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)
    utils.setup_symbols(args.ascii)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130
    except SourceError as e:
        print(f"{utils.SYMBOL_ERROR} {e}")
        return 1
    except Exception as e:
        logging.exception("Unexpected error")
        print(f"\n{utils.SYMBOL_ERROR} Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
