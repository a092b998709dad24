"""Splice planning results into the human-readable blog-plan.md."""

from __future__ import annotations

import re

from plan_articles.models import ArticleBrief, ContentGap

# Section headers written by the analyze stage's template.
INVENTORY_SECTION = re.compile(
    r"## Content (?:Inventory|Gaps)[\s\S]*?(?=## Recommended Articles|## Next Steps)"
)
RECOMMENDED_SECTION = re.compile(r"## Recommended Articles[\s\S]*?(?=## Next Steps)")


def render_gaps_section(gaps: list[ContentGap]) -> str:
    blocks = []
    for gap in gaps:
        angles = "\n".join(f"- {angle}" for angle in gap.suggested_angles)
        blocks.append(
            f"### {gap.topic} ({gap.priority.value} priority)\n"
            f"{gap.rationale}\n\n"
            f"**Suggested Angles:**\n{angles}\n"
        )
    return "## Content Gaps\n\n" + "\n".join(blocks)


def render_articles_section(articles: list[ArticleBrief]) -> str:
    blocks = []
    for i, a in enumerate(articles, 1):
        outline = "\n".join(f"1. {section}" for section in a.outline)
        blocks.append(
            f"### {i}. {a.title}\n\n"
            f"> {a.subtitle}\n\n"
            f"- **Slug:** {a.slug}\n"
            f"- **Category:** {a.category}\n"
            f"- **Topic:** {a.topic}\n"
            f"- **Angle:** {a.angle}\n"
            f"- **Target Audience:** {a.target_audience}\n"
            f"- **Platform:** {a.platform.value}\n"
            f"- **Target Length:** {a.target_length} words (~{a.read_time})\n"
            f"- **Keywords:** {', '.join(a.keywords)}\n"
            f"- **Visual Theme:** {a.gradient} gradient, {a.pattern.value} pattern\n\n"
            f"**Outline:**\n{outline}\n"
        )
    return "## Recommended Articles\n\n" + "\n---\n\n".join(blocks)


def splice_blog_plan(content: str, articles: list[ArticleBrief], gaps: list[ContentGap]) -> str:
    """Replace the inventory and recommendation placeholders with the plan.

    The Content Inventory section (or the Content Gaps section of an earlier
    run) becomes Content Gaps and the Recommended Articles section is
    rewritten. Both stop at the next fixed header, so
    Next Steps is preserved. Sections that are absent are left alone.
    """
    gaps_section = render_gaps_section(gaps) + "\n\n"
    articles_section = render_articles_section(articles) + "\n\n"

    content = INVENTORY_SECTION.sub(lambda _: gaps_section, content, count=1)
    content = RECOMMENDED_SECTION.sub(lambda _: articles_section, content, count=1)
    return content
