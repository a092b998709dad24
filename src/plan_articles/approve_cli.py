"""CLI for approving planned briefs before generation."""

from __future__ import annotations

import logging
from typing import Optional

from common.cli_helpers import config_from_args, run_command, setup_logging
from common.config import split_csv
from plan_articles.helpers import parse_approve_briefs_args
from plan_articles.plan_articles import approve_briefs

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_approve_briefs_args(argv)
    setup_logging(args.verbose)

    def _run() -> None:
        config = config_from_args(args)
        ids = split_csv(args.ids) if args.ids else None
        approved = approve_briefs(args.url, config, ids=ids)
        for brief in approved:
            logger.info("Approved: %s [%s]", brief.title, brief.id)

    run_command(_run, "Approval failed")


if __name__ == "__main__":
    main()
