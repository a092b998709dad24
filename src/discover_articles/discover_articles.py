"""Discover the articles a site has already published."""

from __future__ import annotations

import logging
from typing import Callable, Optional
from urllib.parse import urljoin

from lxml import etree

from common.config import Config, site_output_dir
from common.datetime import utc_now_iso
from common.errors import FetchError
from common.fetch import RateLimitedFetcher
from common.storage import INVENTORY_FILE, Store
from discover_articles.models import (
    ArticleInventory,
    ArticleOutcome,
    DiscoverResult,
    ExistingArticle,
    SkipReason,
)
from extract_content.extract_content import (
    extract_main_content,
    extract_metadata,
    extract_publish_date,
    extract_topics,
)
from extract_content.links import (
    extract_article_links,
    find_blog_links,
    pick_listing_url,
)
from extract_content.models import PageContent
from extract_content.selectors import COMMON_BLOG_PATHS

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 100
MAX_CONTENT_CHARS = 5000
EXCERPT_CHARS = 200

Fetch = Callable[[str], str]


def build_article(page: PageContent) -> ArticleOutcome:
    """Turn a fetched candidate page into an article, or a skip outcome.

    A candidate is accepted only with a non-empty title and at least
    MIN_CONTENT_LENGTH characters of main content.
    """
    url, html = page.url, page.raw_html
    metadata = extract_metadata(html)
    content = extract_main_content(html)

    if not metadata.title:
        return ArticleOutcome.skipped(url, SkipReason.MISSING_TITLE)
    if len(content) < MIN_CONTENT_LENGTH:
        return ArticleOutcome.skipped(
            url, SkipReason.CONTENT_TOO_SHORT, f"{len(content)} characters"
        )

    excerpt = metadata.description or content[:EXCERPT_CHARS].strip() + "..."

    return ArticleOutcome.ok(
        ExistingArticle(
            url=url,
            title=metadata.title,
            published_at=extract_publish_date(html),
            excerpt=excerpt,
            topics=extract_topics(content, metadata.keywords),
            # Counted before truncation
            word_count=len(content.split()),
            content=content[:MAX_CONTENT_CHARS],
        )
    )


def fetch_article(url: str, fetch: Fetch) -> ArticleOutcome:
    """Fetch and validate one candidate. Fetch and parse failures become a skip outcome."""
    try:
        html = fetch(url)
    except FetchError as e:
        return ArticleOutcome.skipped(url, SkipReason.FETCH_FAILED, e.message)
    try:
        return build_article(PageContent(url=url, raw_html=html))
    except (etree.LxmlError, ValueError) as e:
        return ArticleOutcome.skipped(url, SkipReason.PARSE_FAILED, str(e))


def probe_blog_paths(url: str, fetch: Fetch) -> list[str]:
    """Try the common blog paths in order; return the links of the first that has any.

    A path that cannot be fetched counts as not found.
    """
    for path in COMMON_BLOG_PATHS:
        probe_url = urljoin(url, path)
        try:
            html = fetch(probe_url)
        except FetchError as e:
            logger.debug("No blog at %s: %s", probe_url, e.message)
            continue

        links = find_blog_links(html, probe_url)
        if links:
            logger.info("Found %d blog links at %s", len(links), probe_url)
            return links

    return []


def discover_articles(
    url: str,
    config: Config,
    store: Optional[Store] = None,
    fetch: Optional[Fetch] = None,
) -> DiscoverResult:
    """
    Crawl the site's blog listing and write existing-articles.json.

    The inventory is rewritten wholesale on every run and only after the
    whole batch has been processed. Failing to fetch the home page or the
    listing page aborts the run; individual articles that fail are skipped.
    """
    if fetch is None:
        with RateLimitedFetcher(config.rate_limit, timeout=config.timeout) as fetcher:
            return discover_articles(url, config, store=store, fetch=fetcher)

    store = store or Store(site_output_dir(config, url))

    logger.info("Discovering articles on %s", url)
    main_html = fetch(url)
    blog_links = find_blog_links(main_html, url)

    if not blog_links:
        logger.info("No blog links on home page, probing common paths")
        blog_links = probe_blog_paths(url, fetch)

    listing_url = pick_listing_url(blog_links)
    outcomes: list[ArticleOutcome] = []

    if listing_url:
        logger.info("Using blog listing %s", listing_url)
        listing_html = fetch(listing_url)
        candidates = extract_article_links(listing_html, listing_url)
        logger.info(
            "Found %d candidate articles, checking up to %d",
            len(candidates),
            config.max_articles,
        )

        for candidate in candidates[: config.max_articles]:
            outcome = fetch_article(candidate, fetch)
            outcomes.append(outcome)
            if outcome.accepted:
                logger.info("Found article: %s", outcome.article.title)
            elif outcome.skip_reason in (SkipReason.FETCH_FAILED, SkipReason.PARSE_FAILED):
                logger.warning("Skipping %s: %s", candidate, outcome.detail)
            else:
                logger.debug("Skipping %s: %s %s", candidate, outcome.skip_reason.value, outcome.detail)
    else:
        logger.warning("No blog section found on %s", url)

    articles = [o.article for o in outcomes if o.accepted]
    inventory = ArticleInventory(
        discovered_at=utc_now_iso(),
        blog_url=listing_url,
        articles=articles,
    )
    inventory_path = store.write_json(INVENTORY_FILE, inventory.to_dict())

    logger.info("Saved %d articles to %s", len(articles), inventory_path)
    return DiscoverResult(articles=articles, inventory_path=inventory_path, outcomes=outcomes)
