"""Tests for roost.errors — exception hierarchy and error messages."""

import pytest

from roost.errors import ConfigurationError, InvalidRouteError, MissingParameterError, RoostError
from roost.routing.trie import PathTrie


class TestHierarchy:
    def test_configuration_error_is_roost_error(self) -> None:
        assert issubclass(ConfigurationError, RoostError)

    def test_invalid_route_is_configuration_error(self) -> None:
        assert issubclass(InvalidRouteError, ConfigurationError)

    def test_missing_parameter_is_roost_error(self) -> None:
        assert issubclass(MissingParameterError, RoostError)
        assert not issubclass(MissingParameterError, ConfigurationError)


class TestMessages:
    def test_invalid_route(self) -> None:
        err = InvalidRouteError("/a/[...b]/c", "catch-all must be the last segment")
        assert err.template == "/a/[...b]/c"
        assert str(err) == "Invalid route '/a/[...b]/c': catch-all must be the last segment"

    def test_missing_parameter(self) -> None:
        err = MissingParameterError("[slug]", "/blog/[slug]")
        assert str(err) == "unreplaced param [slug] in url: /blog/[slug]"


class TestTrieRaises:
    def test_segment_after_wildcard(self) -> None:
        trie = PathTrie[str]()
        with pytest.raises(InvalidRouteError, match="last segment"):
            trie.add("/docs/[...path]/edit", "x")

    def test_caught_as_configuration_error(self) -> None:
        trie = PathTrie[str]()
        with pytest.raises(ConfigurationError):
            trie.add("/[[...slug]]/more", "x")
