# tests/unit/test_joiner.py
"""Tests for URL fragment joining."""

from site_urls.joiner import deduplicate_double_slashes, deduplicate_subdirectory, url_join

ROOT_SITE = "http://my-ghost-blog.com/"


class TestUrlJoinSlashes:
    """Tests for duplicate slash handling."""

    def test_deduplicates_slashes(self):
        assert url_join(["/", "/my/", "/blog/"], ROOT_SITE) == "/my/blog/"
        assert url_join(["/", "//my/", "/blog/"], ROOT_SITE) == "/my/blog/"
        assert url_join(["/", "/", "/"], ROOT_SITE) == "/"

    def test_slash_slash_is_root(self):
        assert url_join(["/", "/"], ROOT_SITE) == "/"

    def test_keeps_protocol_slashes(self):
        assert url_join(["http://myurl.com", "/rss"], ROOT_SITE) == "http://myurl.com/rss"
        assert url_join(["https://myurl.com/", "/rss"], ROOT_SITE) == "https://myurl.com/rss"

    def test_empty_middle_fragment_is_noop(self):
        assert url_join(["/a", "", "b"], ROOT_SITE) == "/a/b"

    def test_no_fragments(self):
        assert url_join([], ROOT_SITE) == ""
        assert url_join([""], ROOT_SITE) == ""


class TestUrlJoinSchemeless:
    """Tests for protocol-relative (//host) URLs."""

    def test_keeps_leading_double_slash(self):
        assert url_join(["//myurl.com", "/rss"], ROOT_SITE) == "//myurl.com/rss"
        assert url_join(["//myurl.com/", "/rss"], ROOT_SITE) == "//myurl.com/rss"
        assert url_join(["//myurl.com//", "rss"], ROOT_SITE) == "//myurl.com/rss"

    def test_leading_empty_fragment_dropped(self):
        assert url_join(["", "//myurl.com", "rss"], ROOT_SITE) == "//myurl.com/rss"


class TestUrlJoinSubdirectory:
    """Tests for removing a doubled sub-directory."""

    def test_single_level_subdir(self):
        site = "http://my-ghost-blog.com/blog"
        assert url_join(["blog", "blog/about"], site) == "blog/about"
        assert url_join(["blog/", "blog/about"], site) == "blog/about"

    def test_nested_subdir(self):
        site = "http://my-ghost-blog.com/my/blog"
        assert url_join(["my/blog", "my/blog/about"], site) == "my/blog/about"
        assert url_join(["my/blog/", "my/blog/about"], site) == "my/blog/about"

    def test_subdir_matching_tld_is_not_stripped(self):
        site = "http://ghost.blog/blog"
        assert url_join(["ghost.blog/blog", "ghost/"], site) == "ghost.blog/blog/ghost/"
        assert url_join(["ghost.blog", "blog", "ghost/"], site) == "ghost.blog/blog/ghost/"

    def test_absolute_url_with_doubled_subdir(self):
        site = "http://my-ghost-blog.com/blog/"
        result = url_join(["http://my-ghost-blog.com/blog/", "/blog/about/"], site)
        assert result == "http://my-ghost-blog.com/blog/about/"


class TestDeduplicateSubdirectory:
    def test_no_subdir_is_noop(self):
        assert deduplicate_subdirectory("/blog/blog/", "http://example.com") == "/blog/blog/"

    def test_collapses_once(self):
        result = deduplicate_subdirectory("/blog/blog/post/", "http://example.com/blog/")
        assert result == "/blog/post/"

    def test_duplicate_at_end(self):
        assert deduplicate_subdirectory("/blog/blog", "http://example.com/blog") == "/blog"

    def test_partial_segment_not_matched(self):
        url = "/blog/blogroll/"
        assert deduplicate_subdirectory(url, "http://example.com/blog") == url

    def test_regex_characters_in_subdir(self):
        url = "/c++/c++/x"
        assert deduplicate_subdirectory(url, "http://example.com/c++") == "/c++/x"


class TestDeduplicateDoubleSlashes:
    def test_collapses_path_slashes(self):
        assert deduplicate_double_slashes("/a//b///c") == "/a/b/c"

    def test_keeps_scheme(self):
        assert deduplicate_double_slashes("https://example.com//a") == "https://example.com/a"
