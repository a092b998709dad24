"""Data models for discover_articles pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from common.serialization import deserialize_dataclass, serialize_dataclass


@dataclass(frozen=True)
class ExistingArticle:
    """An article already published on the site."""
    url: str
    title: str
    excerpt: str
    topics: list[str]
    word_count: int
    published_at: Optional[str] = None
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExistingArticle":
        return deserialize_dataclass(cls, data)


@dataclass
class ArticleInventory:
    """Contents of existing-articles.json."""
    discovered_at: str
    blog_url: Optional[str]
    articles: list[ExistingArticle] = field(default_factory=list)

    @property
    def article_count(self) -> int:
        return len(self.articles)

    def to_dict(self) -> dict[str, Any]:
        return {
            "discoveredAt": self.discovered_at,
            "blogUrl": self.blog_url,
            "articleCount": self.article_count,
            "articles": [serialize_dataclass(a) for a in self.articles],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArticleInventory":
        return cls(
            discovered_at=data.get("discoveredAt", ""),
            blog_url=data.get("blogUrl"),
            articles=[ExistingArticle.from_dict(a) for a in data.get("articles", [])],
        )


class SkipReason(str, Enum):
    """Why a candidate article was dropped."""
    FETCH_FAILED = "fetch_failed"
    MISSING_TITLE = "missing_title"
    CONTENT_TOO_SHORT = "content_too_short"
    PARSE_FAILED = "parse_failed"


@dataclass(frozen=True)
class ArticleOutcome:
    """Result of processing one candidate: an article, or the reason it was skipped."""
    url: str
    article: Optional[ExistingArticle] = None
    skip_reason: Optional[SkipReason] = None
    detail: str = ""

    @property
    def accepted(self) -> bool:
        return self.article is not None

    @classmethod
    def ok(cls, article: ExistingArticle) -> "ArticleOutcome":
        return cls(url=article.url, article=article)

    @classmethod
    def skipped(cls, url: str, reason: SkipReason, detail: str = "") -> "ArticleOutcome":
        return cls(url=url, skip_reason=reason, detail=detail)


@dataclass
class DiscoverResult:
    articles: list[ExistingArticle]
    inventory_path: Path
    outcomes: list[ArticleOutcome] = field(default_factory=list)
