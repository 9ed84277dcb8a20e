"""Command-line interface for the line splitter."""

import argparse
import logging
import sys

from line_splitter import __version__
from line_splitter.config import build_config
from line_splitter.errors import ConfigurationError, SplitterError
from line_splitter.pipeline.types import DEFAULT_QUEUE_SIZE
from line_splitter.splitter.split import main_split

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="line-splitter",
        description="Splits a file on line endings into chunks of a specified size.",
    )

    parser.add_argument(
        "-b",
        "--bytes",
        required=True,
        metavar="N[k|m]",
        help=(
            "Maximum size of a chunk in bytes; append k or m for "
            "kilobytes (x1000) or megabytes (x1000000)"
        ),
    )

    parser.add_argument(
        "file",
        help="Path to the file to split",
    )

    parser.add_argument(
        "dir",
        nargs="?",
        default=None,
        help="Directory to write the chunks into (default: current directory)",
    )

    parser.add_argument(
        "--queue-size",
        type=int,
        default=DEFAULT_QUEUE_SIZE,
        help=f"Lines buffered between reader and writer (default: {DEFAULT_QUEUE_SIZE})",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        config = build_config(args.bytes, args.file, args.dir, queue_size=args.queue_size)
    except ConfigurationError as exc:
        parser.error(str(exc))

    try:
        main_split(config)
    except SplitterError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
