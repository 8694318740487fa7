"""Tests for roost.routing.redirects — trie-matched server-side redirects."""

import logging

import pytest

from roost.config import RedirectConfig, SiteConfig
from roost.errors import InvalidRouteError, MissingParameterError
from roost.routing.redirects import Redirects


def _redirects(*configs: RedirectConfig) -> Redirects:
    return Redirects(configs)


class TestResolve:
    def test_static_redirect(self) -> None:
        redirects = _redirects(RedirectConfig(source="/old", destination="/new", type=301))
        assert redirects.resolve("/old") == ("/new", 301)
        assert redirects.resolve("/old/") == ("/new", 301)

    def test_default_status(self) -> None:
        redirects = _redirects(RedirectConfig(source="/old", destination="/new"))
        assert redirects.resolve("/old") == ("/new", 302)

    def test_no_match(self) -> None:
        redirects = _redirects(RedirectConfig(source="/old", destination="/new"))
        assert redirects.resolve("/other") is None

    def test_param_substitution(self) -> None:
        redirects = _redirects(RedirectConfig(source="/blog/[slug]", destination="/posts/[slug]"))
        assert redirects.resolve("/blog/hello") == ("/posts/hello", 302)

    def test_param_reordering(self) -> None:
        redirects = _redirects(
            RedirectConfig(source="/[year]/[slug]", destination="/posts/[slug]?year=[year]")
        )
        assert redirects.resolve("/2024/hello") == ("/posts/hello?year=2024", 302)

    def test_wildcard_substitution(self) -> None:
        redirects = _redirects(RedirectConfig(source="/docs/[...path]", destination="/guide/[...path]"))
        assert redirects.resolve("/docs/a/b/c") == ("/guide/a/b/c", 302)

    def test_external_destination(self) -> None:
        redirects = _redirects(
            RedirectConfig(source="/gh/[...path]", destination="https://github.com/[...path]", type=308)
        )
        assert redirects.resolve("/gh/org/repo") == ("https://github.com/org/repo", 308)

    def test_literal_source_beats_param_source(self) -> None:
        redirects = _redirects(
            RedirectConfig(source="/blog/[slug]", destination="/posts/[slug]"),
            RedirectConfig(source="/blog/feed", destination="/rss.xml", type=301),
        )
        assert redirects.resolve("/blog/feed") == ("/rss.xml", 301)

    def test_missing_destination_param_raises(self) -> None:
        redirects = _redirects(RedirectConfig(source="/blog/[slug]", destination="/posts/[id]"))
        with pytest.raises(MissingParameterError) as exc_info:
            redirects.resolve("/blog/hello")
        assert exc_info.value.placeholder == "[id]"
        assert exc_info.value.template == "/posts/[id]"


class TestConstruction:
    def test_invalid_entries_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="roost.routing"):
            redirects = _redirects(
                RedirectConfig(source="", destination="/new"),
                RedirectConfig(source="/old", destination=""),
                RedirectConfig(source="/ok", destination="/fine"),
            )
        assert len(redirects) == 1
        assert redirects.resolve("/old") is None
        assert caplog.text.count("Ignoring invalid redirect config") == 2

    def test_invalid_source_template(self) -> None:
        with pytest.raises(InvalidRouteError):
            _redirects(RedirectConfig(source="/[...rest]/edit", destination="/x"))

    def test_from_config(self) -> None:
        config = SiteConfig(redirects=(RedirectConfig(source="/a", destination="/b", type=307),))
        assert Redirects.from_config(config).resolve("/a") == ("/b", 307)

    def test_empty(self) -> None:
        redirects = Redirects.from_config(SiteConfig())
        assert len(redirects) == 0
        assert redirects.resolve("/") is None
