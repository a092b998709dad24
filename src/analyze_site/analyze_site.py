"""Infer a site's business profile and brand voice from its pages."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

from analyze_site.helpers import render_blog_plan
from analyze_site.instructions import ANALYZE_SITE_INSTRUCTIONS
from analyze_site.models import AnalyzeResult, BrandVoice, KeyPage, SiteAnalysis
from common.config import Config, domain_from_url, site_output_dir
from common.datetime import utc_now_iso
from common.errors import FetchError, ValidationError
from common.fetch import RateLimitedFetcher
from common.llm import Generator
from common.serialization import deserialize_dataclass
from common.storage import BLOG_PLAN_FILE, SITE_ANALYSIS_FILE, Store
from extract_content.extract_content import extract_main_content, extract_metadata
from extract_content.links import extract_links

logger = logging.getLogger(__name__)

KEY_PAGE_PATH = re.compile(r"/(about|services|products|solutions|platform|features)", re.IGNORECASE)
MAX_KEY_PAGES = 3
HOME_CONTENT_CHARS = 6000
KEY_PAGE_CONTENT_CHARS = 2000


def fetch_key_pages(html: str, url: str, fetch: Callable[[str], str]) -> list[KeyPage]:
    """Fetch up to MAX_KEY_PAGES about/services/product pages linked from the home page.

    Pages that fail to fetch are skipped.
    """
    candidates = [
        link for link in extract_links(html, url)
        if KEY_PAGE_PATH.search(urlsplit(link).path)
    ]
    pages = []

    for link in candidates:
        if len(pages) >= MAX_KEY_PAGES:
            break
        try:
            page_html = fetch(link)
        except FetchError as e:
            logger.warning("Skipping key page %s: %s", link, e.message)
            continue
        pages.append(
            KeyPage(
                url=link,
                title=extract_metadata(page_html).title,
                content=extract_main_content(page_html),
            )
        )

    return pages


def _build_analysis_prompt(url: str, html: str, key_pages: list[KeyPage]) -> str:
    metadata = extract_metadata(html)
    content = extract_main_content(html)

    lines = [
        f"Website: {url}",
        f"Title: {metadata.title}",
        f"Description: {metadata.description}",
    ]
    if metadata.keywords:
        lines.append(f"Keywords: {', '.join(metadata.keywords)}")
    lines += ["", "Home page content:", content[:HOME_CONTENT_CHARS], ""]

    for page in key_pages:
        lines += [
            f"Page: {page.title or page.url} ({page.url})",
            page.content[:KEY_PAGE_CONTENT_CHARS],
            "",
        ]

    return "\n".join(lines)


def _as_list(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def build_site_analysis(url: str, data: dict[str, Any], fallback_name: str = "") -> SiteAnalysis:
    """Build a SiteAnalysis from the LLM's JSON, filling anything it left out."""
    voice_data = data.get("brandVoice")
    if not isinstance(voice_data, dict):
        voice_data = {}
    brand_voice = deserialize_dataclass(BrandVoice, voice_data)
    for name in ("vocabulary", "avoid_words", "example_phrases"):
        setattr(brand_voice, name, _as_list(getattr(brand_voice, name)))

    return SiteAnalysis(
        url=url,
        domain=domain_from_url(url),
        name=data.get("name") or fallback_name or domain_from_url(url),
        description=data.get("description", ""),
        industry=data.get("industry", ""),
        target_audience=_as_list(data.get("targetAudience")),
        value_propositions=_as_list(data.get("valuePropositions")),
        key_topics=_as_list(data.get("keyTopics")),
        brand_voice=brand_voice,
        analyzed_at=utc_now_iso(),
    )


def analyze_site(
    url: str,
    config: Config,
    generator: Generator,
    store: Optional[Store] = None,
    fetch: Optional[Callable[[str], str]] = None,
) -> AnalyzeResult:
    """Analyze the site and write site-analysis.json and the blog-plan.md template."""
    if fetch is None:
        with RateLimitedFetcher(config.rate_limit, timeout=config.timeout) as fetcher:
            return analyze_site(url, config, generator, store=store, fetch=fetcher)

    store = store or Store(site_output_dir(config, url))

    logger.info("Analyzing %s", url)
    html = fetch(url)
    key_pages = fetch_key_pages(html, url, fetch)
    logger.info("Fetched %d key pages", len(key_pages))

    data = generator.generate_json(
        ANALYZE_SITE_INSTRUCTIONS,
        _build_analysis_prompt(url, html, key_pages),
        max_tokens=4096,
        temperature=0.5,
    )
    if not isinstance(data, dict):
        raise ValidationError("Site analysis response must be a JSON object")
    analysis = build_site_analysis(url, data, fallback_name=extract_metadata(html).title)

    analysis_path = store.write_json(SITE_ANALYSIS_FILE, analysis.to_dict())
    plan_path = store.write_text(BLOG_PLAN_FILE, render_blog_plan(analysis))

    logger.info("Site analysis saved to %s", analysis_path)
    return AnalyzeResult(analysis=analysis, plan_path=plan_path)
