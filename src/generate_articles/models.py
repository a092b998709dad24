"""Data models for generate_articles pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from common.serialization import serialize_dataclass

# Bodies written to their own Markdown files rather than metadata.json.
CONTENT_FIELDS = ("content", "mediumContent", "linkedinContent")


@dataclass(frozen=True)
class MermaidDiagram:
    id: str
    description: str
    code: str


@dataclass
class GeneratedArticle:
    """A finished article and its platform variants for one brief."""
    brief_id: str
    slug: str
    title: str
    subtitle: str
    category: str
    content: str
    excerpt: str
    meta_description: str
    tags: list[str]
    generated_at: str
    gradient: str
    pattern: str
    read_time: str
    mermaid_diagrams: list[MermaidDiagram] = field(default_factory=list)
    medium_content: Optional[str] = None
    linkedin_content: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return serialize_dataclass(self)

    def metadata(self) -> dict[str, Any]:
        """Everything except the content bodies, as written to metadata.json."""
        return {k: v for k, v in self.to_dict().items() if k not in CONTENT_FIELDS}


@dataclass(frozen=True)
class BlogPost:
    """One entry of the `blogPosts` array in blog.ts."""
    slug: str
    title: str
    subtitle: str
    category: str
    read_time: str
    gradient: str
    pattern: str
    tags: list[str]
    published_at: str

    @classmethod
    def from_metadata(cls, data: dict[str, Any]) -> "BlogPost":
        return cls(
            slug=data.get("slug", ""),
            title=data.get("title", ""),
            subtitle=data.get("subtitle", ""),
            category=data.get("category", ""),
            read_time=data.get("readTime", ""),
            gradient=data.get("gradient", ""),
            pattern=data.get("pattern", ""),
            tags=list(data.get("tags") or []),
            published_at=(data.get("generatedAt") or "")[:10],
        )

    def to_dict(self) -> dict[str, Any]:
        return serialize_dataclass(self)


@dataclass
class GenerateResult:
    articles: list[GeneratedArticle]
    output_path: Path
