"""Helper functions for generate_articles CLI."""

from __future__ import annotations

import argparse
from typing import Optional

from common.cli_helpers import add_common_arguments


def parse_generate_articles_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    '''Parse CLI arguments for generate_articles.'''
    parser = argparse.ArgumentParser(description="Generate articles for planned briefs")
    add_common_arguments(parser, count=True)
    return parser.parse_args(argv)
