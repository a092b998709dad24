"""Tests for extract_content.links module."""

from extract_content.links import (
    extract_article_links,
    extract_links,
    find_blog_links,
    is_blog_path,
    pick_listing_url,
    resolve_url,
)

BASE = "https://example.com"


class TestResolveUrl:
    def test_relative_path(self) -> None:
        assert resolve_url("/blog/post", BASE) == "https://example.com/blog/post"

    def test_normalizes_scheme_host_and_port(self) -> None:
        assert resolve_url("HTTPS://Example.COM:443", BASE) == "https://example.com/"

    def test_keeps_non_default_port_query_and_fragment(self) -> None:
        assert resolve_url("http://example.com:8080/a?b=1#c", BASE) == "http://example.com:8080/a?b=1#c"

    def test_empty_or_malformed(self) -> None:
        assert resolve_url("", BASE) is None
        assert resolve_url("   ", BASE) is None
        assert resolve_url("http://[bad", BASE) is None
        assert resolve_url("mailto:hello@example.com", BASE) is None


class TestExtractLinks:
    def test_same_host_only_and_deduplicated(self) -> None:
        html = """
        <html><body>
          <a href="/about">About</a>
          <a href="https://example.com/about">About again</a>
          <a href="https://EXAMPLE.com:443/about">Same, differently written</a>
          <a href="https://other.com/blog">Elsewhere</a>
          <a href="https://sub.example.com/blog">Subdomain</a>
          <a href="/pricing">Pricing</a>
          <a>No href</a>
        </body></html>
        """
        assert extract_links(html, BASE) == [
            "https://example.com/about",
            "https://example.com/pricing",
        ]


class TestBlogPaths:
    def test_is_blog_path(self) -> None:
        assert is_blog_path("/blog")
        assert is_blog_path("/blog/my-post")
        assert is_blog_path("/Insights/")
        assert is_blog_path("/article/x")
        assert not is_blog_path("/pricing")
        assert not is_blog_path("/insights/q1")

    def test_find_blog_links(self) -> None:
        html = '<html><body><a href="/blog">Blog</a><a href="/pricing">Pricing</a></body></html>'
        assert find_blog_links(html, BASE) == ["https://example.com/blog"]

    def test_pick_listing_prefers_landing_page(self) -> None:
        links = ["https://example.com/blog/first-post", "https://example.com/blog/"]
        assert pick_listing_url(links) == "https://example.com/blog/"

    def test_pick_listing_falls_back_to_first(self) -> None:
        assert pick_listing_url(["https://example.com/posts/a"]) == "https://example.com/posts/a"
        assert pick_listing_url([]) is None


class TestExtractArticleLinks:
    def test_blog_post_cards_and_tag_exclusion(self) -> None:
        cards = "".join(
            f'<div class="blog-post"><a href="/blog/post-{i}">Post {i}</a></div>' for i in range(1, 6)
        )
        html = f'<html><body>{cards}<div class="blog-post"><a href="/blog/tag/ai">AI</a></div></body></html>'

        links = extract_article_links(html, "https://example.com/blog")

        assert links == [f"https://example.com/blog/post-{i}" for i in range(1, 6)]
        assert "https://example.com/blog/tag/ai" not in links

    def test_excludes_off_site_listing_and_account_links(self) -> None:
        html = """
        <html><body>
          <article>
            <a href="/blog/real-post">Real</a>
            <a href="/blog">Back to blog</a>
            <a href="/login">Log in</a>
            <a href="/blog/page/2">Next page</a>
            <a href="https://medium.com/@acme/post">Cross-post</a>
          </article>
        </body></html>
        """
        assert extract_article_links(html, "https://example.com/blog") == ["https://example.com/blog/real-post"]

    def test_union_in_selector_order(self) -> None:
        html = """
        <html><body>
          <h2><a href="/blog/from-heading">Heading link</a></h2>
          <article><a href="/blog/from-article">Article link</a></article>
          <div class="post"><a href="/blog/from-article">Duplicate</a></div>
        </body></html>
        """
        assert extract_article_links(html, "https://example.com/blog") == [
            "https://example.com/blog/from-article",
            "https://example.com/blog/from-heading",
        ]
