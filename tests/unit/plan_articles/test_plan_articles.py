"""Tests for plan_articles.plan_articles module."""

from unittest.mock import Mock

import pytest

from analyze_site.helpers import render_blog_plan
from analyze_site.models import BrandVoice, SiteAnalysis
from common.config import Config
from common.errors import InvalidStatusTransition, MissingArtifactError, ValidationError
from common.storage import BLOG_PLAN_FILE, INVENTORY_FILE, PLAN_FILE, SITE_ANALYSIS_FILE, Store
from discover_articles.models import ArticleInventory
from plan_articles.helpers import load_plan
from plan_articles.models import BriefStatus, Pattern, Platform
from plan_articles.plan_articles import approve_briefs, build_brief, build_planning_context, plan_articles

SITE = "https://acme.io"

ANALYSIS = SiteAnalysis(
    url=SITE,
    domain="acme.io",
    name="Acme",
    description="automates compliance",
    industry="compliance software",
    target_audience=["CTOs"],
    value_propositions=["Audit-ready in weeks"],
    key_topics=["SOC 2"],
    brand_voice=BrandVoice(tone="friendly", sentence_style="Short sentences."),
    analyzed_at="2024-01-01T00:00:00.000Z",
)

INVENTORY = {
    "discoveredAt": "2024-01-02T00:00:00.000Z",
    "blogUrl": f"{SITE}/blog",
    "articleCount": 1,
    "articles": [
        {
            "url": f"{SITE}/blog/soc2",
            "title": "What is SOC 2?",
            "excerpt": "An intro",
            "topics": ["compliance"],
            "wordCount": 900,
        }
    ],
}


def llm_plan(count: int = 3) -> dict:
    return {
        "gaps": [
            {"topic": "ISO 27001", "priority": "high", "rationale": "Not covered", "suggestedAngles": ["Cost"]}
        ],
        "articles": [
            {
                "title": f"Article Number {i}",
                "topic": "compliance",
                "angle": f"Angle {i}",
                "targetAudience": "CTOs",
                "keywords": ["soc 2"],
                "outline": ["Intro"],
            }
            for i in range(1, count + 1)
        ],
    }


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(output_dir=tmp_path, openai_api_key="sk-test", article_count=3)


@pytest.fixture
def store(config) -> Store:
    store = Store(config.output_dir / "acme.io")
    store.write_json(SITE_ANALYSIS_FILE, ANALYSIS.to_dict())
    return store


def generator_for(data) -> Mock:
    generator = Mock()
    generator.generate_json.return_value = data
    return generator


class TestBuildPlanningContext:
    def test_includes_existing_articles_and_topics(self, config) -> None:
        config.topics = ["ISO 27001"]
        articles = ArticleInventory.from_dict(INVENTORY).articles
        context = build_planning_context(ANALYSIS, articles, config)

        assert "**Brand:** Acme" in context
        assert "## Existing Articles (1 found)" in context
        assert "What is SOC 2?" in context
        assert "Length: 900 words" in context
        assert "## Requested Focus Topics\n- ISO 27001" in context
        assert "Generate 3 article recommendations" in context

    def test_fresh_start(self, config) -> None:
        context = build_planning_context(ANALYSIS, [], config)
        assert "No existing blog articles found" in context
        assert "Requested Focus Topics" not in context


class TestBuildBrief:
    def test_defaults(self) -> None:
        brief = build_brief({"title": "Why SOC 2 Matters!", "angle": "From the trenches", "targetLength": 1700}, 11)

        assert len(brief.id) == 32
        assert brief.status is BriefStatus.PLANNED
        assert brief.slug == "why-soc-2-matters"
        assert brief.subtitle == "From the trenches"
        assert brief.category == "Engineering"
        assert brief.platform is Platform.BOTH
        assert brief.gradient == "purple"
        assert brief.pattern is Pattern.CIRCUIT
        assert brief.read_time == "9 min read"

    def test_keeps_llm_values(self) -> None:
        brief = build_brief(
            {"title": "T", "slug": "custom", "platform": "linkedin", "pattern": "waves", "gradient": "rose"}, 0
        )
        assert brief.slug == "custom"
        assert brief.platform is Platform.LINKEDIN
        assert brief.pattern is Pattern.WAVES
        assert brief.gradient == "rose"
        assert brief.read_time == "8 min read"

    def test_invalid_pattern_rejected(self) -> None:
        with pytest.raises(ValidationError, match="pattern"):
            build_brief({"title": "T", "pattern": "stripes"}, 0)

    def test_invalid_platform_rejected(self) -> None:
        with pytest.raises(ValidationError, match="platform"):
            build_brief({"title": "T", "platform": "tiktok"}, 0)

    def test_missing_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            build_brief({"angle": "x"}, 0)

    def test_unsafe_llm_slug_sanitized(self) -> None:
        brief = build_brief({"title": "Hello", "slug": "../../escaped"}, 0)
        assert brief.slug == "escaped"

    def test_punctuation_only_title_gets_fallback_slug(self) -> None:
        assert build_brief({"title": "???"}, 4).slug == "article-5"

    def test_llm_status_and_id_ignored(self) -> None:
        brief = build_brief({"title": "T", "id": "fixed", "status": "generated"}, 0)
        assert brief.id != "fixed"
        assert brief.status is BriefStatus.PLANNED


class TestPlanArticles:
    def test_writes_plan_and_splices_blog_plan(self, config, store) -> None:
        store.write_json(INVENTORY_FILE, INVENTORY)
        store.write_text(BLOG_PLAN_FILE, render_blog_plan(ANALYSIS))
        generator = generator_for(llm_plan(4))

        result = plan_articles(SITE, config, generator, store=store)

        assert [a.title for a in result.articles] == ["Article Number 1", "Article Number 2", "Article Number 3"]
        assert len({a.id for a in result.articles}) == 3
        assert result.gaps[0].topic == "ISO 27001"
        assert generator.generate_json.call_args.kwargs == {"max_tokens": 8192, "temperature": 0.8}
        assert "What is SOC 2?" in generator.generate_json.call_args.args[1]

        saved = store.read_json(PLAN_FILE)
        assert result.plan_path == store.path(PLAN_FILE)
        assert saved["siteUrl"] == SITE
        assert [a["status"] for a in saved["articles"]] == ["planned"] * 3
        assert saved["articles"][0]["slug"] == "article-number-1"

        blog_plan = store.read_text(BLOG_PLAN_FILE)
        assert "## Content Gaps" in blog_plan
        assert "### 3. Article Number 3" in blog_plan
        assert "## Next Steps" in blog_plan

    def test_runs_without_inventory_or_blog_plan(self, config, store) -> None:
        result = plan_articles(SITE, config, generator_for(llm_plan(2)), store=store)
        assert len(result.articles) == 2
        assert not store.exists(BLOG_PLAN_FILE)

    def test_requires_site_analysis(self, config, tmp_path) -> None:
        generator = generator_for(llm_plan())
        with pytest.raises(MissingArtifactError, match="blog-builder analyze"):
            plan_articles(SITE, config, generator, store=Store(tmp_path / "empty"))
        generator.generate_json.assert_not_called()

    def test_invalid_pattern_writes_no_plan(self, config, store) -> None:
        data = llm_plan(2)
        data["articles"][1]["pattern"] = "stripes"
        with pytest.raises(ValidationError):
            plan_articles(SITE, config, generator_for(data), store=store)
        assert not store.exists(PLAN_FILE)

    def test_duplicate_slugs_get_suffixes(self, config, store) -> None:
        data = llm_plan(3)
        for article in data["articles"]:
            article["slug"] = "same-post"

        result = plan_articles(SITE, config, generator_for(data), store=store)

        assert [a.slug for a in result.articles] == ["same-post", "same-post-2", "same-post-3"]
        saved = load_plan(store)
        assert [a.slug for a in saved.articles] == ["same-post", "same-post-2", "same-post-3"]

    def test_non_object_response_rejected(self, config, store) -> None:
        with pytest.raises(ValidationError):
            plan_articles(SITE, config, generator_for([]), store=store)


class TestApproveBriefs:
    def _plan(self, config, store):
        return plan_articles(SITE, config, generator_for(llm_plan(3)), store=store)

    def test_approves_every_planned_brief(self, config, store) -> None:
        self._plan(config, store)
        approved = approve_briefs(SITE, config, store=store)

        assert len(approved) == 3
        assert [a["status"] for a in store.read_json(PLAN_FILE)["articles"]] == ["approved"] * 3
        assert approve_briefs(SITE, config, store=store) == []

    def test_approves_selected_ids(self, config, store) -> None:
        result = self._plan(config, store)
        target = result.articles[1].id

        approved = approve_briefs(SITE, config, store=store, ids=[target])

        assert [b.id for b in approved] == [target]
        statuses = [a["status"] for a in store.read_json(PLAN_FILE)["articles"]]
        assert statuses == ["planned", "approved", "planned"]

    def test_unknown_id_rejected(self, config, store) -> None:
        self._plan(config, store)
        with pytest.raises(ValidationError, match="nope"):
            approve_briefs(SITE, config, store=store, ids=["nope"])

    def test_already_approved_id_rejected(self, config, store) -> None:
        target = self._plan(config, store).articles[0].id
        approve_briefs(SITE, config, store=store, ids=[target])
        with pytest.raises(InvalidStatusTransition):
            approve_briefs(SITE, config, store=store, ids=[target])

    def test_requires_plan(self, config, store) -> None:
        with pytest.raises(MissingArtifactError, match="blog-builder plan"):
            approve_briefs(SITE, config, store=store)
