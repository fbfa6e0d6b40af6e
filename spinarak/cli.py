"""Command-line front end: parses argv into a RunConfig and runs the dispatcher."""
import argparse
import logging
import os
import sys
from typing import List, Optional

from spinarak.container import Container
from spinarak.domain.run_config import RunConfig
from spinarak.exceptions import UsageError

logger = logging.getLogger(__name__)

DESCRIPTION = """
This program accepts one or more URLs as positional arguments and
outputs the number of times the specified target word was found
on each page.
"""


class _UsageFormatter(argparse.RawDescriptionHelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage: "
        return super().add_usage(usage, actions, groups, prefix)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog or os.path.basename(sys.argv[0]),
        usage="%(prog)s [options] URL1 [URL2 [URL3 ...]]",
        description=DESCRIPTION,
        formatter_class=_UsageFormatter,
    )
    parser.add_argument("-word", "--word", default="", help="The word to search for.")
    parser.add_argument(
        "-workers",
        "--workers",
        type=int,
        default=1,
        help="The number of workers to use (default: 1).",
    )
    parser.add_argument("links", nargs="*", metavar="URL", help="A page to search.")
    return parser


def parse_args(argv: Optional[List[str]] = None, parser: Optional[argparse.ArgumentParser] = None) -> RunConfig:
    """Parse and validate command-line arguments.

    Raises UsageError if the word is missing, the worker count is below 1,
    or no links were given.
    """
    parser = parser or build_parser()
    args = parser.parse_args(argv)

    if args.word == "":
        raise UsageError("Need a word to process.")
    if args.workers < 1:
        raise UsageError("Number of workers must be greater than 0.")
    if not args.links:
        raise UsageError("Need links to process.")

    return RunConfig(word=args.word, num_workers=args.workers, links=tuple(args.links))


def setup_logging(level: str) -> None:
    """Send diagnostics to stderr so stdout carries only results."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main(argv: Optional[List[str]] = None, container: Optional[Container] = None) -> int:
    container = container or Container()
    setup_logging(container.config.SPINARAK_LOG_LEVEL())

    parser = build_parser()
    try:
        run_config = parse_args(argv, parser=parser)
    except UsageError as e:
        print(f"{e.message}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    logger.debug("Searching for %r across %d links", run_config.word, len(run_config.links))
    container.dispatcher().run(run_config)
    return 0
