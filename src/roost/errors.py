"""Roost exception hierarchy.

Shared across the trie, route table, static expander, and CLI so every
module raises and catches the same types.  A path that matches no route
is not an error: lookups return ``None`` and the caller decides what a
404 looks like.
"""


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when site configuration is invalid.

    Typically surfaced while loading ``roost.toml`` or building the
    route table at startup.
    """


class InvalidRouteError(ConfigurationError):
    """A route template cannot be registered.

    Raised by ``PathTrie.add`` when a segment follows a ``[...name]``
    catch-all, which always consumes the rest of the path.
    """

    def __init__(self, template: str, detail: str) -> None:
        self.template = template
        self.detail = detail
        super().__init__(f"Invalid route {template!r}: {detail}")


class MissingParameterError(RoostError):
    """A ``[param]`` placeholder has no value to substitute.

    Signals a programming or configuration error (for example a redirect
    format referencing a param the route never declares), not bad user
    input.
    """

    def __init__(self, placeholder: str, template: str) -> None:
        self.placeholder = placeholder
        self.template = template
        super().__init__(f"unreplaced param {placeholder} in url: {template}")
