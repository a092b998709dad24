"""Main-content, metadata, publish-date and topic extraction from raw HTML."""

from __future__ import annotations

import logging
import re
from typing import Optional

from lxml import etree
from lxml import html as lxml_html

from extract_content.models import ExtractedMetadata
from extract_content.selectors import (
    BOILERPLATE,
    MAIN_CONTENT,
    MAX_TOPICS,
    PUBLISH_DATE,
    TOPIC_VOCABULARY,
)

logger = logging.getLogger(__name__)

_PARSER = lxml_html.HTMLParser(encoding="utf-8")
_EMPTY_DOCUMENT = "<html><body></body></html>"


def parse_html(html: str) -> lxml_html.HtmlElement:
    """Parse a full HTML document.

    Empty input, or input lxml cannot build a tree from (a comment-only page,
    a bare XML declaration), yields an empty document.
    """
    if not html or not html.strip():
        html = _EMPTY_DOCUMENT
    try:
        return lxml_html.document_fromstring(html.encode("utf-8"), parser=_PARSER)
    except etree.ParserError as e:
        logger.debug("Unparseable document, treating as empty: %s", e)
        return lxml_html.document_fromstring(_EMPTY_DOCUMENT.encode("utf-8"), parser=_PARSER)


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs and blank-line runs, then trim.

    Every body text goes through this so word counts are comparable.
    """
    text = re.sub(r"\s+", " ", text)
    text = re.sub(r"\n\s*\n", "\n\n", text)
    return text.strip()


def _body(doc: lxml_html.HtmlElement) -> lxml_html.HtmlElement:
    body = doc.find("body")
    return body if body is not None else doc


def extract_main_content(html: str) -> str:
    """
    Return the normalized text of the page's main content area.

    Boilerplate (navigation, header, footer, aside, scripts, styles, ad,
    cookie and popup containers) is removed first. The text of the first
    element matching MAIN_CONTENT_SELECTORS is used; when nothing matches, or
    the match is empty, the whole body text is used instead.
    """
    doc = parse_html(html)

    for element in BOILERPLATE(doc):
        if element.getparent() is not None:
            element.drop_tree()

    content = ""
    for selector in MAIN_CONTENT:
        matches = selector(doc)
        if matches:
            content = matches[0].text_content()
            break

    if not normalize_whitespace(content):
        content = _body(doc).text_content()

    return normalize_whitespace(content)


def _first_attr(doc: lxml_html.HtmlElement, xpath: str) -> str:
    values = doc.xpath(xpath)
    return values[0].strip() if values else ""


def _first_text(doc: lxml_html.HtmlElement, tag: str) -> str:
    element = doc.find(f".//{tag}")
    return element.text_content().strip() if element is not None else ""


def extract_metadata(html: str) -> ExtractedMetadata:
    """Read title, description and keywords from the page.

    Title: <title>, then og:title, then the first <h1>.
    Description: meta description, then og:description.
    Keywords: comma-separated meta keywords, trimmed, empties dropped.
    """
    doc = parse_html(html)

    title = (
        _first_text(doc, "title")
        or _first_attr(doc, '//meta[@property="og:title"]/@content')
        or _first_text(doc, "h1")
    )

    description = (
        _first_attr(doc, '//meta[@name="description"]/@content')
        or _first_attr(doc, '//meta[@property="og:description"]/@content')
    )

    keywords_str = _first_attr(doc, '//meta[@name="keywords"]/@content')
    keywords = [k.strip() for k in keywords_str.split(",") if k.strip()]

    return ExtractedMetadata(title=title, description=description, keywords=keywords)


def extract_publish_date(html: str) -> Optional[str]:
    """Return the first non-empty publish date found, or None.

    Tries <time datetime>, then date/published-classed elements, then the
    article:published_time meta tag. Each candidate's value is its datetime
    attribute, else its content attribute, else its trimmed text.
    """
    doc = parse_html(html)

    for selector in PUBLISH_DATE:
        matches = selector(doc)
        if not matches:
            continue
        element = matches[0]
        value = (
            (element.get("datetime") or "").strip()
            or (element.get("content") or "").strip()
            or element.text_content().strip()
        )
        if value:
            return value

    return None


def extract_topics(content: str, keywords: list[str]) -> list[str]:
    """Seed topics with keywords, then add vocabulary words found in the content.

    Matching is a case-insensitive substring test. At most MAX_TOPICS are kept.
    """
    topics = list(keywords)
    content_lower = content.lower()

    for word in TOPIC_VOCABULARY:
        if word in content_lower and word not in topics:
            topics.append(word)

    return topics[:MAX_TOPICS]
