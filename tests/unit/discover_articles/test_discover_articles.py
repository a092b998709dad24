"""Tests for discover_articles.discover_articles module."""

import json
from unittest.mock import Mock, patch

import pytest
from lxml import etree

from common.config import Config
from common.errors import FetchError
from common.storage import INVENTORY_FILE, Store
from discover_articles.discover_articles import (
    build_article,
    discover_articles,
    fetch_article,
    probe_blog_paths,
)
from discover_articles.helpers import load_inventory
from discover_articles.models import SkipReason
from extract_content.models import PageContent

SITE = "https://example.com"
BODY = "Cloud security teams ship faster when compliance is automated. " * 5


def article_html(title: str, body: str = BODY, extra_head: str = "") -> str:
    return (
        f"<html><head><title>{title}</title>{extra_head}</head>"
        f"<body><nav>Home Blog</nav><article><p>{body}</p></article></body></html>"
    )


def listing_html(*paths: str) -> str:
    cards = "".join(f'<div class="blog-post"><a href="{p}">{p}</a></div>' for p in paths)
    return f"<html><body><nav><a href='/blog'>Blog</a></nav>{cards}</body></html>"


def fake_fetch(pages: dict) -> Mock:
    def fetch(url: str) -> str:
        if url not in pages:
            raise FetchError(url, "404", status_code=404)
        return pages[url]

    return Mock(side_effect=fetch)


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(output_dir=tmp_path, openai_api_key="sk-test", rate_limit=0)


@pytest.fixture
def store(tmp_path) -> Store:
    return Store(tmp_path / "example.com")


class TestBuildArticle:
    def test_accepts_valid_article(self) -> None:
        html = article_html(
            "Automating Compliance",
            extra_head='<meta name="keywords" content="compliance">',
        )
        outcome = build_article(PageContent(url=f"{SITE}/blog/a", raw_html=html))

        assert outcome.accepted
        article = outcome.article
        assert article.title == "Automating Compliance"
        assert article.topics[0] == "compliance"
        assert "security" in article.topics
        assert article.excerpt.endswith("...")
        assert "Home Blog" not in article.content

    def test_description_used_as_excerpt(self) -> None:
        html = article_html("T", extra_head='<meta name="description" content="Short summary">')
        outcome = build_article(PageContent(url=f"{SITE}/blog/a", raw_html=html))
        assert outcome.article.excerpt == "Short summary"

    def test_missing_title_rejected(self) -> None:
        html = f"<html><body><article><p>{BODY}</p></article></body></html>"
        outcome = build_article(PageContent(url=f"{SITE}/blog/a", raw_html=html))
        assert not outcome.accepted
        assert outcome.skip_reason is SkipReason.MISSING_TITLE

    def test_short_content_rejected(self) -> None:
        outcome = build_article(PageContent(url=f"{SITE}/blog/a", raw_html=article_html("T", "x" * 99)))
        assert outcome.skip_reason is SkipReason.CONTENT_TOO_SHORT
        assert outcome.detail == "99 characters"

    def test_word_count_before_truncation(self) -> None:
        body = "word " * 2000
        outcome = build_article(PageContent(url=f"{SITE}/blog/long", raw_html=article_html("Long", body)))
        assert outcome.article.word_count == 2000
        assert len(outcome.article.content) == 5000


class TestFetchArticle:
    def test_fetch_failure_is_skip(self) -> None:
        outcome = fetch_article(f"{SITE}/blog/gone", fake_fetch({}))
        assert outcome.skip_reason is SkipReason.FETCH_FAILED
        assert "404" in outcome.detail

    def test_unparseable_page_is_skip(self) -> None:
        outcome = fetch_article(f"{SITE}/blog/moved", fake_fetch({f"{SITE}/blog/moved": "<!-- moved -->"}))
        assert not outcome.accepted
        assert outcome.skip_reason is SkipReason.MISSING_TITLE

    def test_parser_error_is_skip(self) -> None:
        fetch = fake_fetch({f"{SITE}/blog/bad": article_html("Bad")})
        with patch(
            "discover_articles.discover_articles.extract_metadata",
            side_effect=etree.ParserError("Document is empty"),
        ):
            outcome = fetch_article(f"{SITE}/blog/bad", fetch)

        assert outcome.skip_reason is SkipReason.PARSE_FAILED
        assert outcome.detail == "Document is empty"


class TestProbeBlogPaths:
    def test_stops_at_first_path_with_links(self) -> None:
        fetch = fake_fetch({
            f"{SITE}/news": '<html><body><a href="/news">News</a><a href="/news/launch">Launch</a></body></html>',
            f"{SITE}/articles": '<html><body><a href="/articles/x">X</a></body></html>',
        })
        links = probe_blog_paths(SITE, fetch)

        assert links == [f"{SITE}/news", f"{SITE}/news/launch"]
        assert [c.args[0] for c in fetch.call_args_list] == [f"{SITE}/blog", f"{SITE}/news"]

    def test_nothing_found(self) -> None:
        fetch = fake_fetch({})
        assert probe_blog_paths(SITE, fetch) == []
        assert fetch.call_count == 5


class TestDiscoverArticles:
    def test_inventory_from_listing(self, config, store) -> None:
        fetch = fake_fetch({
            SITE: '<html><body><a href="/blog">Blog</a></body></html>',
            f"{SITE}/blog": listing_html("/blog/good-1", "/blog/no-title", "/blog/short", "/blog/gone", "/blog/good-2"),
            f"{SITE}/blog/good-1": article_html("Good One"),
            f"{SITE}/blog/no-title": f"<html><body><article><p>{BODY}</p></article></body></html>",
            f"{SITE}/blog/short": article_html("Short", "Too short"),
            f"{SITE}/blog/good-2": article_html("Good Two"),
        })

        result = discover_articles(SITE, config, store=store, fetch=fetch)

        assert [a.title for a in result.articles] == ["Good One", "Good Two"]
        assert [o.skip_reason for o in result.outcomes if not o.accepted] == [
            SkipReason.MISSING_TITLE,
            SkipReason.CONTENT_TOO_SHORT,
            SkipReason.FETCH_FAILED,
        ]

        data = json.loads(result.inventory_path.read_text())
        assert result.inventory_path == store.path(INVENTORY_FILE)
        assert data["blogUrl"] == f"{SITE}/blog"
        assert data["articleCount"] == 2
        assert data["articles"][0]["wordCount"] > 0
        assert "discoveredAt" in data

        inventory = load_inventory(store)
        assert inventory.article_count == 2
        assert inventory.articles[1].url == f"{SITE}/blog/good-2"

    def test_probes_when_home_page_has_no_blog_links(self, config, store) -> None:
        fetch = fake_fetch({
            SITE: '<html><body><a href="/pricing">Pricing</a></body></html>',
            f"{SITE}/news": '<html><body><a href="/news">News</a></body></html>',
        })
        result = discover_articles(SITE, config, store=store, fetch=fetch)

        assert result.articles == []
        assert store.read_json(INVENTORY_FILE)["blogUrl"] == f"{SITE}/news"

    def test_unparseable_candidate_does_not_abort_batch(self, config, store) -> None:
        fetch = fake_fetch({
            SITE: '<html><body><a href="/blog">Blog</a></body></html>',
            f"{SITE}/blog": listing_html("/blog/a", "/blog/b"),
            f"{SITE}/blog/a": "<!-- moved -->",
            f"{SITE}/blog/b": article_html("Still Here"),
        })
        result = discover_articles(SITE, config, store=store, fetch=fetch)

        assert [a.url for a in result.articles] == [f"{SITE}/blog/b"]
        assert store.read_json(INVENTORY_FILE)["articleCount"] == 1

    def test_unparseable_blog_path_counts_as_not_found(self, config, store) -> None:
        fetch = fake_fetch({
            SITE: '<?xml version="1.0"?>',
            f"{SITE}/blog": "<!-- down -->",
            f"{SITE}/news": '<html><body><a href="/news">News</a></body></html>',
        })
        result = discover_articles(SITE, config, store=store, fetch=fetch)

        assert result.articles == []
        assert store.read_json(INVENTORY_FILE)["blogUrl"] == f"{SITE}/news"

    def test_no_blog_section(self, config, store) -> None:
        fetch = fake_fetch({SITE: "<html><body><p>Landing page</p></body></html>"})
        result = discover_articles(SITE, config, store=store, fetch=fetch)

        data = store.read_json(INVENTORY_FILE)
        assert result.articles == []
        assert data["blogUrl"] is None
        assert data["articleCount"] == 0

    def test_caps_candidates_at_max_articles(self, config, store) -> None:
        config.max_articles = 2
        paths = [f"/blog/post-{i}" for i in range(5)]
        pages = {
            SITE: '<html><body><a href="/blog">Blog</a></body></html>',
            f"{SITE}/blog": listing_html(*paths),
        }
        pages.update({f"{SITE}{p}": article_html(p) for p in paths})

        result = discover_articles(SITE, config, store=store, fetch=fake_fetch(pages))
        assert len(result.outcomes) == 2

    def test_home_page_failure_writes_nothing(self, config, store) -> None:
        with pytest.raises(FetchError):
            discover_articles(SITE, config, store=store, fetch=fake_fetch({}))
        assert not store.exists(INVENTORY_FILE)

    def test_rerun_replaces_inventory(self, config, store) -> None:
        store.write_json(INVENTORY_FILE, {"articles": [{"url": "stale"}]})
        fetch = fake_fetch({SITE: "<html><body></body></html>"})
        discover_articles(SITE, config, store=store, fetch=fetch)
        assert store.read_json(INVENTORY_FILE)["articles"] == []
