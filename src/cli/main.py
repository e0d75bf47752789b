"""Entry point: `reversi` (or `python -m src.cli`)."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console

from src.cli.terminal import TerminalLoop
from src.services.reversi_service import ReversiService

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="reversi", description="Two-player Reversi in the terminal."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (logs go to stderr). Default: WARNING",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    console = Console(highlight=False, markup=False)
    loop = TerminalLoop(ReversiService(), console)
    try:
        loop.run()
    except KeyboardInterrupt:
        console.print()
        logging.getLogger(__name__).info("Interrupted by user.")
    return 0
