"""Run every stage in order for one site."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from analyze_site.analyze_site import analyze_site
from analyze_site.models import AnalyzeResult
from common.config import Config, site_output_dir
from common.llm import Generator
from common.storage import Store
from discover_articles.discover_articles import discover_articles
from discover_articles.models import DiscoverResult
from generate_articles.generate_articles import generate_articles
from generate_articles.models import GenerateResult
from plan_articles.models import PlanResult
from plan_articles.plan_articles import plan_articles

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    analysis: AnalyzeResult
    discovery: DiscoverResult
    plan: PlanResult
    generated: GenerateResult


def run_pipeline(
    url: str,
    config: Config,
    generator: Generator,
    store: Optional[Store] = None,
) -> PipelineResult:
    """analyze -> discover -> plan -> generate. The first failing stage aborts the run."""
    store = store or Store(site_output_dir(config, url))

    logger.info("Step 1/4: Analyzing website")
    analysis = analyze_site(url, config, generator, store=store)

    logger.info("Step 2/4: Discovering existing articles")
    discovery = discover_articles(url, config, store=store)

    logger.info("Step 3/4: Planning new content")
    plan = plan_articles(url, config, generator, store=store)

    logger.info("Step 4/4: Generating articles")
    generated = generate_articles(url, config, generator, store=store)

    return PipelineResult(analysis=analysis, discovery=discovery, plan=plan, generated=generated)
