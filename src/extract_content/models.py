"""Data models for content extraction."""

from dataclasses import dataclass, field


@dataclass
class PageContent:
    """A fetched page. Consumed immediately, never persisted."""
    url: str
    raw_html: str


@dataclass(frozen=True)
class ExtractedMetadata:
    """Title, description and keywords read from a page's head."""
    title: str = ""
    description: str = ""
    keywords: list[str] = field(default_factory=list)
