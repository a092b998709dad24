"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from common.config import Config, load_config
from common.errors import BlogBuilderError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def positive_int(value: str) -> int:
    """argparse type for counts."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def add_common_arguments(
    parser: argparse.ArgumentParser,
    count: bool = False,
    topics: bool = False,
) -> argparse.ArgumentParser:
    """Add the url argument and the options shared by every command."""
    parser.add_argument("url", help="Website URL, e.g. https://example.com")
    parser.add_argument("-o", "--output", default=None, help="Output directory (default: ~/.blog-builder)")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    if count:
        parser.add_argument(
            "-c",
            "--count",
            type=positive_int,
            default=None,
            help="Number of articles (default: BLOG_BUILDER_ARTICLE_COUNT or 10)",
        )
    if topics:
        parser.add_argument("-t", "--topics", default=None, help="Comma-separated topics to focus on")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Load Config with the command line taking precedence."""
    return load_config(
        overrides={
            "output_dir": args.output,
            "article_count": getattr(args, "count", None),
            "topics": getattr(args, "topics", None),
            "verbose": args.verbose or None,
        },
        config_path=args.config,
    )


def run_command(action: Callable[[], None], failure_message: str) -> None:
    """Run a command, logging any error and exiting with status 1."""
    try:
        action()
    except BlogBuilderError as e:
        logger.error("%s: %s", failure_message, e.message)
        logger.debug("Error details: %s", e.to_dict())
        sys.exit(1)
    except Exception as e:
        logger.error("%s: %s", failure_message, e)
        logger.debug("Traceback", exc_info=True)
        sys.exit(1)
