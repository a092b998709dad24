"""Ordered selector and pattern tables driving the extraction heuristics.

Order matters: main-content selectors are tried first-match-wins, article-link
selectors are unioned in the order listed.
"""

import re

from lxml.cssselect import CSSSelector

# Elements removed before main-content extraction.
BOILERPLATE_SELECTORS = [
    "script",
    "style",
    "nav",
    "header",
    "footer",
    "aside",
    ".sidebar",
    ".navigation",
    ".menu",
    ".footer",
    ".header",
    ".ads",
    ".advertisement",
    ".cookie-banner",
    ".popup",
]

# Semantic landmarks before generic content classes.
MAIN_CONTENT_SELECTORS = [
    "main",
    "article",
    '[role="main"]',
    ".content",
    ".main-content",
    "#content",
    "#main",
    ".post-content",
    ".entry-content",
    ".article-content",
]

# Article cards and listing patterns, then generic heading anchors.
ARTICLE_LINK_SELECTORS = [
    "article a",
    ".post a",
    ".blog-post a",
    ".article-card a",
    ".entry a",
    ".news-item a",
    '[class*="article"] a',
    '[class*="post"] a',
    "h2 a",
    "h3 a",
]

PUBLISH_DATE_SELECTORS = [
    "time[datetime]",
    '[class*="date"]',
    '[class*="published"]',
    'meta[property="article:published_time"]',
]

BLOG_PATH_PATTERNS = [
    re.compile(r"/blog/?$", re.IGNORECASE),
    re.compile(r"/blog/", re.IGNORECASE),
    re.compile(r"/news/?$", re.IGNORECASE),
    re.compile(r"/news/", re.IGNORECASE),
    re.compile(r"/articles?/?$", re.IGNORECASE),
    re.compile(r"/articles?/", re.IGNORECASE),
    re.compile(r"/posts?/?$", re.IGNORECASE),
    re.compile(r"/posts?/", re.IGNORECASE),
    re.compile(r"/insights?/?$", re.IGNORECASE),
    re.compile(r"/resources?/?$", re.IGNORECASE),
]

# Path of a blog section's landing page, preferred as the listing to crawl.
LISTING_PATH = re.compile(r"/(blog|news|articles)/?$", re.IGNORECASE)

# Taxonomy, pagination and account pages that are never articles.
NON_ARTICLE_PATH = re.compile(r"/(tag|category|author|page|search|login|signup)", re.IGNORECASE)

# Paths probed, in order, when the home page links to no blog section.
COMMON_BLOG_PATHS = ["/blog", "/news", "/articles", "/insights", "/resources"]

TOPIC_VOCABULARY = [
    "ai",
    "artificial intelligence",
    "machine learning",
    "startup",
    "saas",
    "product",
    "development",
    "engineering",
    "design",
    "marketing",
    "growth",
    "security",
    "compliance",
    "data",
    "analytics",
    "cloud",
    "mobile",
    "web",
]

MAX_TOPICS = 5


def compile_selectors(selectors: list[str]) -> list[CSSSelector]:
    return [CSSSelector(selector, translator="html") for selector in selectors]


BOILERPLATE = CSSSelector(", ".join(BOILERPLATE_SELECTORS), translator="html")
MAIN_CONTENT = compile_selectors(MAIN_CONTENT_SELECTORS)
ARTICLE_LINKS = compile_selectors(ARTICLE_LINK_SELECTORS)
PUBLISH_DATE = compile_selectors(PUBLISH_DATE_SELECTORS)
