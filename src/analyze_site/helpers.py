"""Helper functions for analyze_site CLI and later stages."""

from __future__ import annotations

import argparse
from typing import Optional

from analyze_site.models import SiteAnalysis
from common.cli_helpers import add_common_arguments
from common.errors import MissingArtifactError
from common.storage import SITE_ANALYSIS_FILE, Store


def parse_analyze_site_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    '''Parse CLI arguments for analyze_site.'''
    parser = argparse.ArgumentParser(description="Analyze a website and generate blog-plan.md")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def load_site_analysis(store: Store) -> SiteAnalysis:
    '''Load site-analysis.json, failing fast when the analyze stage has not run.'''
    data = store.read_json(SITE_ANALYSIS_FILE)
    if data is None:
        raise MissingArtifactError("Site analysis", "analyze")
    return SiteAnalysis.from_dict(data)


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items) if items else "- (none identified)"


def render_blog_plan(analysis: SiteAnalysis) -> str:
    """Initial blog-plan.md. The plan stage later fills in the placeholder sections."""
    voice = analysis.brand_voice
    return f"""# Blog Plan: {analysis.name}

Generated from {analysis.url} on {analysis.analyzed_at[:10]}.

## Brand Overview

**{analysis.name}** is a {analysis.industry} company that {analysis.description}

### Target Audience
{_bullets(analysis.target_audience)}

### Value Propositions
{_bullets(analysis.value_propositions)}

### Key Topics
{_bullets(analysis.key_topics)}

## Brand Voice

- **Tone:** {voice.tone}
- **Formality:** {voice.formality}
- **Sentence style:** {voice.sentence_style}
- **Vocabulary:** {", ".join(voice.vocabulary)}
- **Avoid:** {", ".join(voice.avoid_words)}

### Example Phrases
{_bullets(voice.example_phrases)}

## Content Inventory

Run `blog-builder discover {analysis.url}` to inventory existing articles, then
`blog-builder plan {analysis.url}` to identify content gaps.

## Recommended Articles

Run `blog-builder plan {analysis.url}` to generate article recommendations.

## Next Steps

1. `blog-builder discover {analysis.url}`: inventory existing articles
2. `blog-builder plan {analysis.url}`: identify gaps and plan new articles
3. `blog-builder generate {analysis.url}`: write the planned articles
"""
