"""Data models for plan_articles pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from common.errors import InvalidStatusTransition, ValidationError
from common.serialization import serialize_dataclass
from common.storage import slugify


def _parse_enum(enum_cls: type[Enum], value: Any, field_name: str) -> Enum:
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"Invalid {field_name} {value!r}; expected one of: {allowed}",
            details={"field": field_name, "value": value},
        ) from exc


def _parse_slug(value: Any) -> str:
    """Slugs name output directories, so only slugify() output is accepted."""
    slug = value or ""
    if not slug or slugify(slug) != slug:
        raise ValidationError(f"Invalid slug {value!r}", details={"field": "slug", "value": value})
    return slug


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Platform(str, Enum):
    MEDIUM = "medium"
    LINKEDIN = "linkedin"
    BOTH = "both"

    @property
    def wants_medium(self) -> bool:
        return self in (Platform.MEDIUM, Platform.BOTH)

    @property
    def wants_linkedin(self) -> bool:
        return self in (Platform.LINKEDIN, Platform.BOTH)


class Pattern(str, Enum):
    DOTS = "dots"
    GRID = "grid"
    WAVES = "waves"
    CIRCUIT = "circuit"


class BriefStatus(str, Enum):
    """Lifecycle of a brief. Moves forward only: planned -> approved -> generated."""
    PLANNED = "planned"
    APPROVED = "approved"
    GENERATED = "generated"

    @property
    def rank(self) -> int:
        return list(BriefStatus).index(self)

    @classmethod
    def advance(cls, current: "BriefStatus", target: "BriefStatus") -> "BriefStatus":
        """Return `target` if it is later than `current`.

        Raises:
            InvalidStatusTransition: For a backward or same-state move.
        """
        if target.rank <= current.rank:
            raise InvalidStatusTransition(current.value, target.value)
        return target


@dataclass(frozen=True)
class ContentGap:
    """A topic the existing content underserves."""
    topic: str
    priority: Priority
    rationale: str
    suggested_angles: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContentGap":
        return cls(
            topic=data.get("topic", ""),
            priority=_parse_enum(Priority, data.get("priority"), "priority"),
            rationale=data.get("rationale", ""),
            suggested_angles=list(data.get("suggestedAngles") or []),
        )


@dataclass
class ArticleBrief:
    """A planned article. `status` is the checkpoint generation resumes from."""
    id: str
    slug: str
    title: str
    subtitle: str
    topic: str
    angle: str
    category: str
    target_audience: str
    keywords: list[str]
    outline: list[str]
    target_length: int
    platform: Platform
    status: BriefStatus
    gradient: str
    pattern: Pattern
    read_time: str

    def advance(self, target: BriefStatus) -> None:
        self.status = BriefStatus.advance(self.status, target)

    @property
    def is_generated(self) -> bool:
        return self.status is BriefStatus.GENERATED

    def to_dict(self) -> dict[str, Any]:
        return serialize_dataclass(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArticleBrief":
        return cls(
            id=data["id"],
            slug=_parse_slug(data.get("slug")),
            title=data.get("title", ""),
            subtitle=data.get("subtitle", ""),
            topic=data.get("topic", ""),
            angle=data.get("angle", ""),
            category=data.get("category", ""),
            target_audience=data.get("targetAudience", ""),
            keywords=list(data.get("keywords") or []),
            outline=list(data.get("outline") or []),
            target_length=int(data.get("targetLength") or 0),
            platform=_parse_enum(Platform, data.get("platform"), "platform"),
            status=_parse_enum(BriefStatus, data.get("status"), "status"),
            gradient=data.get("gradient", ""),
            pattern=_parse_enum(Pattern, data.get("pattern"), "pattern"),
            read_time=data.get("readTime", ""),
        )


@dataclass
class ArticlePlan:
    """Contents of article-plan.json."""
    generated_at: str
    site_url: str
    gaps: list[ContentGap] = field(default_factory=list)
    articles: list[ArticleBrief] = field(default_factory=list)

    def pending(self, limit: Optional[int] = None) -> list[ArticleBrief]:
        """Briefs not yet generated, in plan order, at most `limit`."""
        briefs = [b for b in self.articles if not b.is_generated]
        return briefs if limit is None else briefs[:limit]

    def find(self, brief_id: str) -> Optional[ArticleBrief]:
        return next((b for b in self.articles if b.id == brief_id), None)

    def to_dict(self) -> dict[str, Any]:
        return serialize_dataclass(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArticlePlan":
        articles = [ArticleBrief.from_dict(a) for a in data.get("articles", [])]
        ids = [a.id for a in articles]
        if len(ids) != len(set(ids)):
            raise ValidationError("Article plan contains duplicate brief ids")
        slugs = [a.slug for a in articles]
        if len(slugs) != len(set(slugs)):
            raise ValidationError("Article plan contains duplicate slugs")
        return cls(
            generated_at=data.get("generatedAt", ""),
            site_url=data.get("siteUrl", ""),
            gaps=[ContentGap.from_dict(g) for g in data.get("gaps", [])],
            articles=articles,
        )


@dataclass
class PlanResult:
    articles: list[ArticleBrief]
    gaps: list[ContentGap]
    plan_path: Path
