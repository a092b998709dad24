"""Helper functions for plan_articles CLI and the generate stage."""

from __future__ import annotations

import argparse
from typing import Optional

from common.cli_helpers import add_common_arguments
from common.errors import MissingArtifactError
from common.storage import PLAN_FILE, Store
from plan_articles.models import ArticlePlan


def parse_plan_articles_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    '''Parse CLI arguments for plan_articles.'''
    parser = argparse.ArgumentParser(description="Generate content strategy and article briefs")
    add_common_arguments(parser, count=True, topics=True)
    return parser.parse_args(argv)


def parse_approve_briefs_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    '''Parse CLI arguments for approving planned briefs.'''
    parser = argparse.ArgumentParser(description="Approve planned article briefs")
    add_common_arguments(parser)
    parser.add_argument(
        "--ids",
        default=None,
        help="Comma-separated brief ids to approve (default: every planned brief)",
    )
    return parser.parse_args(argv)


def load_plan(store: Store) -> ArticlePlan:
    '''Load article-plan.json, failing fast when the plan stage has not run.'''
    data = store.read_json(PLAN_FILE)
    if data is None:
        raise MissingArtifactError("Article plan", "plan")
    return ArticlePlan.from_dict(data)


def save_plan(store: Store, plan: ArticlePlan):
    return store.write_json(PLAN_FILE, plan.to_dict())
