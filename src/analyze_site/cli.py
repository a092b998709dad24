"""CLI for analyzing a website's brand and writing blog-plan.md."""

from __future__ import annotations

import logging
from typing import Optional

from analyze_site.analyze_site import analyze_site
from analyze_site.helpers import parse_analyze_site_args
from common.cli_helpers import config_from_args, run_command, setup_logging
from common.llm import Generator

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_analyze_site_args(argv)
    setup_logging(args.verbose)

    def _run() -> None:
        config = config_from_args(args)
        result = analyze_site(args.url, config, Generator.from_config(config))
        logger.info("Site analysis complete for %s", result.analysis.name)
        logger.info("Blog plan saved to: %s", result.plan_path)

    run_command(_run, "Analysis failed")


if __name__ == "__main__":
    main()
