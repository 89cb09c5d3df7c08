# tests/unit/test_permalinks.py
"""Tests for permalink pattern substitution."""

from datetime import UTC, datetime

from freezegun import freeze_time

from site_urls.permalinks import replace_permalink

POST = {
    "id": "3",
    "slug": "short-and-sweet",
    "published_at": "2016-05-18T06:30:00Z",
    "primary_author": {"slug": "joe-blogs"},
    "primary_tag": {"slug": "news"},
}


class TestReplacePermalink:
    def test_slug_only(self):
        assert replace_permalink("/:slug/", POST) == "/short-and-sweet/"

    def test_date_tokens(self):
        assert replace_permalink("/:year/:month/:day/:slug/", POST) == (
            "/2016/05/18/short-and-sweet/"
        )

    def test_id(self):
        assert replace_permalink("/:id/", POST) == "/3/"

    def test_author_and_tag(self):
        assert replace_permalink("/:primary_tag/:primary_author/:slug/", POST) == (
            "/news/joe-blogs/short-and-sweet/"
        )
        assert replace_permalink("/:author/:slug/", POST) == "/joe-blogs/short-and-sweet/"

    def test_primary_fallback(self):
        post = {"slug": "untagged"}
        assert replace_permalink("/:primary_tag/:primary_author/:slug/", post) == (
            "/all/all/untagged/"
        )

    def test_missing_value_is_empty(self):
        assert replace_permalink("/:author/:slug/", {"slug": "x"}) == "//x/"

    def test_unknown_token_kept(self):
        assert replace_permalink("/:category/:slug/", POST) == "/:category/short-and-sweet/"


class TestTimezones:
    def test_date_moves_forward(self):
        post = {**POST, "published_at": "2016-05-18T23:30:00Z"}
        assert replace_permalink("/:year/:month/:day/", post, "Europe/Berlin") == "/2016/05/19/"

    def test_date_moves_back(self):
        post = {**POST, "published_at": "2016-01-01T02:00:00Z"}
        assert replace_permalink("/:year/:month/:day/", post, "America/New_York") == (
            "/2015/12/31/"
        )

    def test_datetime_value(self):
        post = {**POST, "published_at": datetime(2020, 2, 29, 12, tzinfo=UTC)}
        assert replace_permalink("/:year/:month/:day/", post) == "/2020/02/29/"

    def test_naive_datetime_is_utc(self):
        post = {**POST, "published_at": datetime(2020, 2, 29, 23, 30)}
        assert replace_permalink("/:day/", post, "Asia/Tokyo") == "/01/"

    @freeze_time("2026-03-04 10:00:00")
    def test_unpublished_uses_now(self):
        assert replace_permalink("/:year/:month/:day/:slug/", {"slug": "draft"}) == (
            "/2026/03/04/draft/"
        )


class TestFacade:
    def test_bound_helper(self, urls):
        assert urls.replace_permalink("/:slug/", POST) == "/short-and-sweet/"
