"""Identify content gaps and plan new article briefs."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional
from uuid import uuid4

from analyze_site.helpers import load_site_analysis
from analyze_site.models import SiteAnalysis
from common.config import Config, site_output_dir
from common.datetime import utc_now_iso
from common.errors import ValidationError
from common.llm import Generator
from common.storage import BLOG_PLAN_FILE, Store, slugify
from discover_articles.helpers import load_inventory
from discover_articles.models import ExistingArticle
from plan_articles.blog_plan import splice_blog_plan
from plan_articles.helpers import load_plan, save_plan
from plan_articles.instructions import (
    GRADIENT_OPTIONS,
    PATTERN_OPTIONS,
    PLAN_ARTICLES_INSTRUCTIONS,
)
from plan_articles.models import (
    ArticleBrief,
    ArticlePlan,
    BriefStatus,
    ContentGap,
    PlanResult,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Engineering"
DEFAULT_TARGET_LENGTH = 1500
WORDS_PER_MINUTE = 200


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def build_planning_context(
    analysis: SiteAnalysis,
    existing_articles: list[ExistingArticle],
    config: Config,
) -> str:
    """Format the brand profile, inventory and task into the planning prompt."""
    voice = analysis.brand_voice
    sections = [
        "# Site Analysis\n\n"
        f"**Brand:** {analysis.name}\n"
        f"**Industry:** {analysis.industry}\n"
        f"**Description:** {analysis.description}\n",
        f"## Target Audience\n{_bullets(analysis.target_audience)}\n",
        f"## Value Propositions\n{_bullets(analysis.value_propositions)}\n",
        f"## Key Topics\n{_bullets(analysis.key_topics)}\n",
        "## Brand Voice\n"
        f"- Tone: {voice.tone}\n"
        f"- Formality: {voice.formality}\n"
        f"- Style: {voice.sentence_style}\n",
    ]

    if existing_articles:
        listing = "\n\n".join(
            f"- **{a.title}**\n  Topics: {', '.join(a.topics)}\n  Length: {a.word_count} words"
            for a in existing_articles
        )
        sections.append(f"## Existing Articles ({len(existing_articles)} found)\n\n{listing}\n")
    else:
        sections.append("## Existing Articles\nNo existing blog articles found. This is a fresh start!\n")

    if config.topics:
        sections.append(f"## Requested Focus Topics\n{_bullets(config.topics)}\n")

    sections.append(
        "## Task\n"
        f"Generate {config.article_count} article recommendations that:\n"
        "1. Fill content gaps based on the brand's offerings\n"
        "2. Target the identified audience segments\n"
        "3. Align with the brand voice\n"
        "4. Are suitable for Medium and/or LinkedIn\n"
        "5. Mix educational, thought leadership, and practical how-to content\n"
    )

    return "\n".join(sections)


def build_brief(raw: dict[str, Any], index: int) -> ArticleBrief:
    """Turn one planned article from the LLM into a brief with id, status and defaults.

    Missing values get defaults. Values outside the platform and pattern
    enumerations raise ValidationError. The slug always goes through
    slugify() since it names the output directory.
    """
    title = raw.get("title") or ""
    if not title:
        raise ValidationError(f"Planned article {index + 1} has no title")

    try:
        target_length = int(raw.get("targetLength") or DEFAULT_TARGET_LENGTH)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid targetLength {raw.get('targetLength')!r}") from exc

    data = {
        **raw,
        "id": uuid4().hex,
        "status": BriefStatus.PLANNED.value,
        "slug": slugify(str(raw.get("slug") or title)) or f"article-{index + 1}",
        "subtitle": raw.get("subtitle") or raw.get("angle", ""),
        "category": raw.get("category") or DEFAULT_CATEGORY,
        "targetLength": target_length,
        "platform": raw.get("platform") or "both",
        "gradient": raw.get("gradient") or GRADIENT_OPTIONS[index % len(GRADIENT_OPTIONS)],
        "pattern": raw.get("pattern") or PATTERN_OPTIONS[index % len(PATTERN_OPTIONS)],
        "readTime": raw.get("readTime") or f"{math.ceil(target_length / WORDS_PER_MINUTE)} min read",
    }
    return ArticleBrief.from_dict(data)


def dedupe_slugs(briefs: list[ArticleBrief]) -> None:
    """Suffix repeated slugs with -2, -3, ... so every brief gets its own directory."""
    seen: set[str] = set()
    for brief in briefs:
        slug, n = brief.slug, 2
        while slug in seen:
            slug = f"{brief.slug}-{n}"
            n += 1
        if slug != brief.slug:
            logger.warning("Duplicate slug %s renamed to %s", brief.slug, slug)
            brief.slug = slug
        seen.add(slug)


def plan_articles(
    url: str,
    config: Config,
    generator: Generator,
    store: Optional[Store] = None,
) -> PlanResult:
    """
    Ask the LLM for content gaps and article briefs; write article-plan.json.

    Requires site-analysis.json. existing-articles.json is used when present.
    Also rewrites the gap and recommendation sections of blog-plan.md.
    """
    store = store or Store(site_output_dir(config, url))

    analysis = load_site_analysis(store)
    inventory = load_inventory(store)
    existing_articles = inventory.articles if inventory else []
    logger.info("Planning with %d existing articles", len(existing_articles))

    plan_data = generator.generate_json(
        PLAN_ARTICLES_INSTRUCTIONS,
        build_planning_context(analysis, existing_articles, config),
        max_tokens=8192,
        temperature=0.8,
    )
    if not isinstance(plan_data, dict):
        raise ValidationError("Plan response must be a JSON object")

    gaps = [ContentGap.from_dict(g) for g in plan_data.get("gaps") or []]
    raw_articles = (plan_data.get("articles") or [])[: config.article_count]
    articles = [build_brief(raw, i) for i, raw in enumerate(raw_articles)]
    dedupe_slugs(articles)

    plan = ArticlePlan(
        generated_at=utc_now_iso(),
        site_url=url,
        gaps=gaps,
        articles=articles,
    )
    plan_path = save_plan(store, plan)
    logger.info("Planned %d articles and %d gaps", len(articles), len(gaps))

    blog_plan = store.read_text(BLOG_PLAN_FILE)
    if blog_plan is None:
        logger.warning("%s not found, skipping plan summary", BLOG_PLAN_FILE)
    else:
        store.write_text(BLOG_PLAN_FILE, splice_blog_plan(blog_plan, articles, gaps))

    return PlanResult(articles=articles, gaps=gaps, plan_path=plan_path)


def approve_briefs(
    url: str,
    config: Config,
    store: Optional[Store] = None,
    ids: Optional[list[str]] = None,
) -> list[ArticleBrief]:
    """Move planned briefs (all, or those in `ids`) to approved and save the plan."""
    store = store or Store(site_output_dir(config, url))
    plan = load_plan(store)

    if ids:
        unknown = [brief_id for brief_id in ids if plan.find(brief_id) is None]
        if unknown:
            raise ValidationError(f"Unknown brief ids: {', '.join(unknown)}")
        briefs = [plan.find(brief_id) for brief_id in ids]
    else:
        briefs = [b for b in plan.articles if b.status is BriefStatus.PLANNED]

    for brief in briefs:
        brief.advance(BriefStatus.APPROVED)

    save_plan(store, plan)
    logger.info("Approved %d briefs", len(briefs))
    return briefs
