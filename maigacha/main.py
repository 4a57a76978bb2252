import argparse
import logging
import sys
from typing import List, Optional

from maigacha.commands import history, pulls, simulation
from maigacha.config import AppConfig, setup_logging
from maigacha.errors import MaigachaError

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# ============================================================
# ARGUMENT PARSING
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maigacha",
        description="Keep a list of common and rare items and pull one at random by weight.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  maigacha add "Item 1" common 0.5     # Add a common item with weight 0.5
  maigacha add "Item 2" rare 2         # Add a rare item with weight 2
  maigacha list                        # Show the list grouped by category
  maigacha pull                        # Pull one item
  maigacha remove "Item 1"             # Remove an item
        """
    )
    parser.add_argument(
        "-f", "--file",
        help="File to use for the commands. Created if it doesn't exist. "
             "Defaults to $MAIGACHA_FILE, else <config dir>/maigacha/maigacha.json",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured category names",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)
    pulls.register(subparsers)
    history.register(subparsers)
    simulation.register(subparsers)

    return parser


# ============================================================
# MAIN ENTRY POINT
# ============================================================

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = AppConfig.from_args(args, isatty=sys.stdout.isatty())
        logger.debug("Using store %s", config.store_path)
        args.handler(args, config)
    except MaigachaError as e:
        logger.debug("Command %s failed: %s", args.command, type(e).__name__)
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
