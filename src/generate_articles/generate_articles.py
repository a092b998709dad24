"""Write full articles and Medium/LinkedIn variants for planned briefs."""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from analyze_site.helpers import load_site_analysis
from analyze_site.models import SiteAnalysis
from common.config import Config, site_output_dir
from common.datetime import utc_now_iso
from common.llm import Generator
from common.storage import ARTICLES_DIR, Store
from generate_articles.blog_metadata import (
    BLOG_TS_FILE,
    README_FILE,
    build_blog_posts,
    render_blog_ts,
    render_readme,
)
from generate_articles.instructions import (
    ARTICLE_INSTRUCTIONS,
    GRADIENT_DESCRIPTIONS,
    LINKEDIN_INSTRUCTIONS,
    MEDIUM_INSTRUCTIONS,
)
from generate_articles.models import GeneratedArticle, GenerateResult, MermaidDiagram
from plan_articles.helpers import load_plan, save_plan
from plan_articles.models import ArticleBrief, ArticlePlan, BriefStatus

logger = logging.getLogger(__name__)

MERMAID_BLOCK = re.compile(r"```mermaid\n([\s\S]*?)```")
EXCERPT_MIN_CHARS = 50
EXCERPT_CHARS = 300
META_DESCRIPTION_CHARS = 160


def extract_mermaid_diagrams(content: str) -> list[MermaidDiagram]:
    return [
        MermaidDiagram(id=f"diagram-{i}", description=f"Diagram {i + 1}", code=match.group(1).strip())
        for i, match in enumerate(MERMAID_BLOCK.finditer(content))
    ]


def extract_excerpt(content: str) -> str:
    """First non-heading line longer than 50 characters, cut to 300 plus "..."."""
    lines = [line for line in content.split("\n") if line.strip()]
    first = next(
        (line for line in lines if not line.startswith("#") and len(line) > EXCERPT_MIN_CHARS),
        None,
    )
    if first is None:
        return ""
    return first[:EXCERPT_CHARS].strip() + "..."


def build_article_prompt(brief: ArticleBrief, analysis: SiteAnalysis) -> str:
    voice = analysis.brand_voice
    outline = "\n".join(f"{i}. {section}" for i, section in enumerate(brief.outline, 1))
    return (
        f"Write a {brief.target_length}-word article with the following specifications:\n\n"
        f"**Title:** {brief.title}\n\n"
        f"**Topic:** {brief.topic}\n\n"
        f"**Angle/Perspective:** {brief.angle}\n\n"
        f"**Target Audience:** {brief.target_audience}\n\n"
        f"**Keywords to Include:** {', '.join(brief.keywords)}\n\n"
        f"**Outline:**\n{outline}\n\n"
        "**Brand Voice Guidelines:**\n"
        f"- Tone: {voice.tone}\n"
        f"- Formality: {voice.formality}\n"
        f"- Style: {voice.sentence_style}\n"
        f"- Key vocabulary: {', '.join(voice.vocabulary)}\n"
        f"- Avoid: {', '.join(voice.avoid_words)}\n\n"
        "**Brand Context:**\n"
        f"{analysis.name} is a {analysis.industry} company that {analysis.description}.\n"
        f"Their key value propositions are: {', '.join(analysis.value_propositions)}.\n\n"
        "Write a complete, publication-ready article following the outline."
    )


def build_medium_prompt(brief: ArticleBrief, content: str) -> str:
    gradient = GRADIENT_DESCRIPTIONS.get(brief.gradient, brief.gradient)
    return (
        "Format this article for Medium publication.\n\n"
        "**Use this hero image specification:**\n"
        f"Gradient: {brief.gradient} ({gradient})\n"
        f"Pattern: {brief.pattern.value} pattern overlay\n"
        f"Article title for alt text: {brief.title}\n\n"
        f"**Article to format:**\n\n{content}"
    )


def build_linkedin_prompt(content: str) -> str:
    return f"Adapt this article for LinkedIn (under 3000 characters, engaging format):\n\n{content}"


def generate_single_article(
    brief: ArticleBrief,
    analysis: SiteAnalysis,
    generator: Generator,
) -> GeneratedArticle:
    """Generate the article for one brief, then the variants its platform asks for."""
    content = generator.generate_text(
        ARTICLE_INSTRUCTIONS,
        build_article_prompt(brief, analysis),
        max_tokens=4096,
        temperature=0.7,
    )

    medium_content = None
    if brief.platform.wants_medium:
        medium_content = generator.generate_text(
            MEDIUM_INSTRUCTIONS,
            build_medium_prompt(brief, content),
            max_tokens=4096,
            temperature=0.5,
        )

    linkedin_content = None
    if brief.platform.wants_linkedin:
        linkedin_content = generator.generate_text(
            LINKEDIN_INSTRUCTIONS,
            build_linkedin_prompt(content),
            max_tokens=2048,
            temperature=0.6,
        )

    excerpt = extract_excerpt(content)
    return GeneratedArticle(
        brief_id=brief.id,
        slug=brief.slug,
        title=brief.title,
        subtitle=brief.subtitle,
        category=brief.category,
        content=content,
        excerpt=excerpt,
        meta_description=excerpt[:META_DESCRIPTION_CHARS],
        tags=list(brief.keywords),
        generated_at=utc_now_iso(),
        gradient=brief.gradient,
        pattern=brief.pattern.value,
        read_time=brief.read_time,
        mermaid_diagrams=extract_mermaid_diagrams(content),
        medium_content=medium_content,
        linkedin_content=linkedin_content,
    )


def write_article_files(store: Store, article: GeneratedArticle) -> None:
    article_dir = f"{ARTICLES_DIR}/{article.slug}"
    store.write_text(f"{article_dir}/article.md", article.content)
    if article.medium_content is not None:
        store.write_text(f"{article_dir}/medium.md", article.medium_content)
    if article.linkedin_content is not None:
        store.write_text(f"{article_dir}/linkedin.md", article.linkedin_content)
    store.write_json(f"{article_dir}/metadata.json", article.metadata())


def collect_metadata(store: Store, plan: ArticlePlan) -> list[dict[str, Any]]:
    """metadata.json of every generated brief, in plan order."""
    records = []
    for brief in plan.articles:
        if not brief.is_generated:
            continue
        data = store.read_json(f"{ARTICLES_DIR}/{brief.slug}/metadata.json")
        if data is None:
            logger.warning("Missing metadata for generated article %s", brief.slug)
            continue
        records.append(data)
    return records


def generate_articles(
    url: str,
    config: Config,
    generator: Generator,
    store: Optional[Store] = None,
) -> GenerateResult:
    """
    Generate articles for briefs not yet generated, at most `config.article_count`.

    The plan is saved after every brief so an interrupted run resumes with
    the remaining briefs. blog.ts and README.md are rebuilt from all
    generated articles at the end.
    """
    store = store or Store(site_output_dir(config, url))

    analysis = load_site_analysis(store)
    plan = load_plan(store)
    output_path = store.ensure_dir(ARTICLES_DIR)

    pending = plan.pending(config.article_count)
    logger.info("Generating %d of %d planned articles", len(pending), len(plan.articles))

    articles = []
    for i, brief in enumerate(pending, 1):
        logger.info("[%d/%d] %s", i, len(pending), brief.title)
        article = generate_single_article(brief, analysis, generator)
        write_article_files(store, article)

        brief.advance(BriefStatus.GENERATED)
        save_plan(store, plan)
        articles.append(article)

    posts = build_blog_posts(collect_metadata(store, plan))
    store.write_text(f"{ARTICLES_DIR}/{BLOG_TS_FILE}", render_blog_ts(posts))
    store.write_text(f"{ARTICLES_DIR}/{README_FILE}", render_readme())
    logger.info("Wrote %s with %d posts", BLOG_TS_FILE, len(posts))

    return GenerateResult(articles=articles, output_path=output_path)
