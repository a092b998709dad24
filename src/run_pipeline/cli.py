"""`blog-builder` command: one entry point with a subcommand per stage."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from analyze_site.analyze_site import analyze_site
from common.cli_helpers import add_common_arguments, config_from_args, run_command, setup_logging
from common.config import Config, split_csv
from common.llm import Generator
from discover_articles.discover_articles import discover_articles
from generate_articles.generate_articles import generate_articles
from plan_articles.plan_articles import approve_briefs, plan_articles
from run_pipeline.run_pipeline import run_pipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blog-builder",
        description="Analyze websites and generate brand-aligned blog content",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_common_arguments(subparsers.add_parser("analyze", help="Analyze a website and generate blog-plan.md"))
    add_common_arguments(subparsers.add_parser("discover", help="Find existing blog articles on a website"))
    add_common_arguments(
        subparsers.add_parser("plan", help="Generate content strategy and article briefs"),
        count=True,
        topics=True,
    )
    p_approve = add_common_arguments(subparsers.add_parser("approve", help="Approve planned article briefs"))
    p_approve.add_argument("--ids", default=None, help="Comma-separated brief ids (default: every planned brief)")
    add_common_arguments(
        subparsers.add_parser("generate", help="Generate articles from the plan"),
        count=True,
    )
    add_common_arguments(
        subparsers.add_parser("run", help="Full pipeline: analyze, discover, plan, generate"),
        count=True,
        topics=True,
    )
    return parser


def _analyze(args: argparse.Namespace, config: Config) -> None:
    result = analyze_site(args.url, config, Generator.from_config(config))
    logger.info("Site analysis complete for %s", result.analysis.name)
    logger.info("Blog plan saved to: %s", result.plan_path)


def _discover(args: argparse.Namespace, config: Config) -> None:
    result = discover_articles(args.url, config)
    logger.info("Found %d articles", len(result.articles))
    logger.info("Articles saved to: %s", result.inventory_path)


def _plan(args: argparse.Namespace, config: Config) -> None:
    result = plan_articles(args.url, config, Generator.from_config(config))
    logger.info("Planned %d articles and %d gaps", len(result.articles), len(result.gaps))
    logger.info("Plan saved to: %s", result.plan_path)


def _approve(args: argparse.Namespace, config: Config) -> None:
    ids = split_csv(args.ids) if args.ids else None
    approved = approve_briefs(args.url, config, ids=ids)
    logger.info("Approved %d briefs", len(approved))


def _generate(args: argparse.Namespace, config: Config) -> None:
    result = generate_articles(args.url, config, Generator.from_config(config))
    logger.info("Generated %d articles", len(result.articles))
    logger.info("Articles saved to: %s", result.output_path)


def _run(args: argparse.Namespace, config: Config) -> None:
    result = run_pipeline(args.url, config, Generator.from_config(config))
    logger.info("Pipeline complete: %d articles generated", len(result.generated.articles))
    logger.info("Articles saved to: %s", result.generated.output_path)


COMMANDS = {
    "analyze": (_analyze, "Analysis failed"),
    "discover": (_discover, "Discovery failed"),
    "plan": (_plan, "Planning failed"),
    "approve": (_approve, "Approval failed"),
    "generate": (_generate, "Generation failed"),
    "run": (_run, "Pipeline failed"),
}


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    action, failure_message = COMMANDS[args.command]
    run_command(lambda: action(args, config_from_args(args)), failure_message)


if __name__ == "__main__":
    main()
