"""CLI for generating articles from the article plan."""

from __future__ import annotations

import logging
from typing import Optional

from common.cli_helpers import config_from_args, run_command, setup_logging
from common.llm import Generator
from generate_articles.generate_articles import generate_articles
from generate_articles.helpers import parse_generate_articles_args

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_generate_articles_args(argv)
    setup_logging(args.verbose)

    def _run() -> None:
        config = config_from_args(args)
        result = generate_articles(args.url, config, Generator.from_config(config))
        for article in result.articles:
            logger.info("Generated: %s", article.title)
        logger.info("Articles saved to: %s", result.output_path)

    run_command(_run, "Generation failed")


if __name__ == "__main__":
    main()
