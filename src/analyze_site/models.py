"""Data models for analyze_site pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from common.serialization import deserialize_dataclass, serialize_dataclass


@dataclass
class BrandVoice:
    tone: str = "professional"
    formality: str = "semi-formal"
    vocabulary: list[str] = field(default_factory=list)
    sentence_style: str = ""
    avoid_words: list[str] = field(default_factory=list)
    example_phrases: list[str] = field(default_factory=list)


@dataclass
class SiteAnalysis:
    """Contents of site-analysis.json."""
    url: str
    domain: str
    name: str
    description: str
    industry: str
    target_audience: list[str]
    value_propositions: list[str]
    key_topics: list[str]
    brand_voice: BrandVoice
    analyzed_at: str

    def to_dict(self) -> dict[str, Any]:
        return serialize_dataclass(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SiteAnalysis":
        analysis = deserialize_dataclass(cls, data)
        if isinstance(analysis.brand_voice, dict):
            analysis.brand_voice = deserialize_dataclass(BrandVoice, analysis.brand_voice)
        return analysis


@dataclass
class KeyPage:
    """A secondary page fetched to give the analysis more context."""
    url: str
    title: str
    content: str


@dataclass
class AnalyzeResult:
    analysis: SiteAnalysis
    plan_path: Path
