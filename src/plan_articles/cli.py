"""CLI for planning article briefs from the site analysis."""

from __future__ import annotations

import logging
from typing import Optional

from common.cli_helpers import config_from_args, run_command, setup_logging
from common.llm import Generator
from plan_articles.helpers import parse_plan_articles_args
from plan_articles.plan_articles import plan_articles

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_plan_articles_args(argv)
    setup_logging(args.verbose)

    def _run() -> None:
        config = config_from_args(args)
        result = plan_articles(args.url, config, Generator.from_config(config))
        logger.info("Identified %d content gaps", len(result.gaps))
        for i, brief in enumerate(result.articles, 1):
            logger.info("%d. %s [%s]", i, brief.title, brief.id)
        logger.info("Plan saved to: %s", result.plan_path)

    run_command(_run, "Planning failed")


if __name__ == "__main__":
    main()
