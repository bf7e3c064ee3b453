"""
Command-line interface for propgen-kit.

Draws sample values from the built-in generators together with the split
path each one came from, and replays a single value from a seed and a path.
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import get_config
from .core.arbitrary import ARBITRARY_BOOL, ARBITRARY_INT, ARBITRARY_NAT, shrink_candidates
from .core.random_source import resolve_seed
from .services.replay_service import ReplayService
from .utilities.constants import ValidationError
from .utilities.formatters import format_word

ARBITRARIES = {
    "bool": ARBITRARY_BOOL,
    "nat": ARBITRARY_NAT,
    "int": ARBITRARY_INT,
}

COLORS = {
    "header": "#00d4ff",
    "value": "#ffd93d",
    "muted": "#6c757d",
    "error": "#ff6b6b",
}

SHRINK_PREVIEW = 4


class CLIArgumentParser:
    """Argument parser with one subparser per command."""

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="propgen", description="Sample and replay splittable generators"
        )
        self.parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        self.parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )
        self.subparsers = self.parser.add_subparsers(dest="command", help="Available commands")
        self._setup_parsers()

    def parse_args(self, args=None) -> argparse.Namespace:
        return self.parser.parse_args(args)

    def _setup_parsers(self) -> None:
        parser_sample = self.subparsers.add_parser(
            "sample", help="Draw one value per size and show where each came from"
        )
        parser_sample.add_argument("--type", choices=sorted(ARBITRARIES), default="int")
        parser_sample.add_argument(
            "--seed",
            type=lambda text: int(text, 0),
            help="Root seed (default: configured or fresh)",
        )
        parser_sample.add_argument(
            "--max-size", type=int, help="Largest size to draw at (default: configured)"
        )

        parser_replay = self.subparsers.add_parser(
            "replay", help="Regenerate the value drawn at a split path"
        )
        parser_replay.add_argument("seed", type=lambda text: int(text, 0), help="Root seed")
        parser_replay.add_argument("path", help="Split path such as LRRL, or <root>")
        parser_replay.add_argument("--type", choices=sorted(ARBITRARIES), default="int")
        parser_replay.add_argument("--size", type=int, default=0, help="Ambient size")


def create_cli_parser() -> CLIArgumentParser:
    return CLIArgumentParser()


def run_sample(args: argparse.Namespace, console: Console) -> None:
    """Print a table of sampled values with their split paths and shrinks."""
    config = get_config()
    max_size = config.max_size if args.max_size is None else args.max_size
    if max_size < 0:
        raise ValidationError(f"max-size must be non-negative, got {max_size}")

    seed = resolve_seed(config) if args.seed is None else args.seed
    arbitrary = ARBITRARIES[args.type]
    preview = min(SHRINK_PREVIEW, config.shrink_limit)
    service = ReplayService(seed)

    table = Table(title=f"{args.type} samples, seed {seed}", header_style=COLORS["header"])
    table.add_column("Size", justify="right")
    table.add_column("Path", style=COLORS["muted"])
    table.add_column("Value", justify="right", style=COLORS["value"])
    table.add_column("Shrinks")

    current = service.root()
    for size in range(max_size + 1):
        left, current = current.split()
        value = arbitrary.arbitrary().generate(size, left)
        shrinks = shrink_candidates(arbitrary, value, limit=preview)
        table.add_row(str(size), str(left.path), repr(value), ", ".join(map(repr, shrinks)))

    console.print(table)


def run_replay(args: argparse.Namespace, console: Console) -> None:
    """Print the value and word found at one split path."""
    service = ReplayService(args.seed)
    value = service.replay(ARBITRARIES[args.type].arbitrary(), args.size, args.path)
    word = service.word_at(args.path)

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style=COLORS["muted"])
    table.add_column("Value")
    table.add_row("Seed", str(args.seed))
    table.add_row("Path", args.path)
    table.add_row("Word", format_word(word))
    table.add_row("Value", Text(repr(value), style=COLORS["value"]))
    console.print(table)


COMMANDS = {
    "sample": run_sample,
    "replay": run_replay,
}


def main(argv=None, console: Console | None = None) -> int:
    """CLI entry point; returns the process exit code."""
    parser = create_cli_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.parser.print_help()
        return 0

    try:
        COMMANDS[args.command](args, console)
    except (ValidationError, TypeError) as e:
        console.print(Text(f"Error: {e}", style=COLORS["error"]))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
