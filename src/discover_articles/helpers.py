"""Helper functions for discover_articles CLI."""

from __future__ import annotations

import argparse
from typing import Optional

from common.cli_helpers import add_common_arguments
from common.storage import INVENTORY_FILE, Store
from discover_articles.models import ArticleInventory


def parse_discover_articles_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    '''Parse CLI arguments for discover_articles.'''
    parser = argparse.ArgumentParser(description="Discover existing blog articles on the site")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def load_inventory(store: Store) -> Optional[ArticleInventory]:
    '''Load existing-articles.json, or None when discovery has not run.'''
    data = store.read_json(INVENTORY_FILE)
    if data is None:
        return None
    return ArticleInventory.from_dict(data)
