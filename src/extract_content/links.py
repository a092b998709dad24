"""Same-site link extraction and article-link classification."""

from __future__ import annotations

import logging
from typing import Iterable, Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from lxml.cssselect import CSSSelector

from extract_content.extract_content import parse_html
from extract_content.selectors import (
    ARTICLE_LINKS,
    BLOG_PATH_PATTERNS,
    LISTING_PATH,
    NON_ARTICLE_PATH,
)

logger = logging.getLogger(__name__)

ANCHORS = CSSSelector("a[href]", translator="html")

_DEFAULT_PORTS = {"http": 80, "https": 443}


def resolve_url(href: Optional[str], base_url: str) -> Optional[str]:
    """Resolve `href` against `base_url` into a normalized absolute URL.

    Scheme and host are lowercased, default ports dropped and an empty path
    becomes "/". Returns None for empty or malformed hrefs.
    """
    if not href or not href.strip():
        return None

    try:
        parts = urlsplit(urljoin(base_url, href.strip()))
        hostname = parts.hostname
        port = parts.port
    except ValueError:
        return None

    if not parts.scheme or not hostname:
        return None

    scheme = parts.scheme.lower()
    netloc = hostname
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{hostname}:{port}"
    if parts.username:
        userinfo = parts.username + (f":{parts.password}" if parts.password else "")
        netloc = f"{userinfo}@{netloc}"

    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, parts.fragment))


def _hostname(url: str) -> Optional[str]:
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


def _path(url: str) -> str:
    return urlsplit(url).path or "/"


def _same_site_links(hrefs: Iterable[str], base_url: str) -> list[str]:
    """Resolve hrefs, keep those on the base hostname, dedup in first-seen order."""
    base_host = _hostname(base_url)
    links: dict[str, None] = {}

    for href in hrefs:
        url = resolve_url(href, base_url)
        if url is None or _hostname(url) != base_host:
            continue
        links.setdefault(url, None)

    return list(links)


def extract_links(html: str, base_url: str) -> list[str]:
    """Every same-hostname link on the page, deduplicated, in document order."""
    doc = parse_html(html)
    return _same_site_links((a.get("href") for a in ANCHORS(doc)), base_url)


def is_blog_path(path: str) -> bool:
    return any(pattern.search(path) for pattern in BLOG_PATH_PATTERNS)


def find_blog_links(html: str, base_url: str) -> list[str]:
    """Same-hostname links whose path looks like a blog, news or articles section."""
    return [url for url in extract_links(html, base_url) if is_blog_path(_path(url))]


def pick_listing_url(blog_links: list[str]) -> Optional[str]:
    """Prefer a /blog, /news or /articles landing page, else the first blog link."""
    for link in blog_links:
        if LISTING_PATH.search(_path(link)):
            return link
    return blog_links[0] if blog_links else None


def extract_article_links(listing_html: str, base_url: str) -> list[str]:
    """
    Candidate article URLs on a blog listing page, in first-seen order.

    Matches of every ARTICLE_LINK_SELECTORS entry are unioned in selector
    order. Links to other hosts, to taxonomy/pagination/account pages and to
    the listing page itself are dropped. This is best-effort: callers still
    validate each candidate after fetching it.
    """
    doc = parse_html(listing_html)
    listing_path = _path(base_url)

    hrefs = (
        anchor.get("href")
        for selector in ARTICLE_LINKS
        for anchor in selector(doc)
    )

    article_urls = []
    for url in _same_site_links(hrefs, base_url):
        path = _path(url)
        if NON_ARTICLE_PATH.search(path) or path == listing_path:
            continue
        article_urls.append(url)

    logger.debug("Found %d candidate article links on %s", len(article_urls), base_url)
    return article_urls
