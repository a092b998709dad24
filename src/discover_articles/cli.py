"""CLI for discovering a site's existing blog articles."""

from __future__ import annotations

import logging
from typing import Optional

from common.cli_helpers import config_from_args, run_command, setup_logging
from discover_articles.discover_articles import discover_articles
from discover_articles.helpers import parse_discover_articles_args

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_discover_articles_args(argv)
    setup_logging(args.verbose)

    def _run() -> None:
        config = config_from_args(args)
        result = discover_articles(args.url, config)
        logger.info("Found %d articles", len(result.articles))
        logger.info("Articles saved to: %s", result.inventory_path)

    run_command(_run, "Discovery failed")


if __name__ == "__main__":
    main()
