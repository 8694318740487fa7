"""Route, RouteMatch, and handler variants as frozen dataclasses.

A route module's shape is classified once, when the route table is
built, into one of three handler variants::

    SSRRoute            module exposes ``handle(request, ...)``
    StaticRoute         module exposes ``get_static_props`` and/or
                        ``get_static_paths`` (pre-rendered at build time)
    PureComponentRoute  module exposes neither; rendered as-is
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class SSRRoute:
    """Rendered per request by ``handler``."""

    handler: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class StaticRoute:
    """Pre-rendered at build time.

    ``paths_fn`` enumerates the param sets to render for parameterized
    templates.  It may be sync or async and may take no arguments or a
    :class:`~roost.static.expander.StaticPathsContext`.
    """

    props_fn: Callable[..., Any] | None = None
    paths_fn: Callable[..., Any] | None = None


@dataclass(frozen=True, slots=True)
class PureComponentRoute:
    """No data hooks; rendered with empty props."""


type RouteHandler = SSRRoute | StaticRoute | PureComponentRoute


@dataclass(frozen=True, slots=True)
class RouteSource:
    """A discovered route definition file.

    ``source_id`` identifies the file and is never interpreted by the
    router.  ``relative_path`` is the file path relative to the project,
    e.g. ``"routes/blog/[slug].py"``.
    """

    source_id: str
    relative_path: str
    handler: RouteHandler = field(default_factory=PureComponentRoute)


@dataclass(frozen=True, slots=True)
class Route:
    """One locale variant of a route file, as stored in the trie.

    Attributes:
        source_id: Originating route definition.
        template: Path this variant is registered at, e.g. ``"/fr/blog/[slug]"``.
        locale: Locale this variant serves.
        is_default_locale: True for the unprefixed variant.
        route_path: The base template, e.g. ``"/blog/[slug]"``.
        locale_route_path: Template with ``[locale]`` left live,
            e.g. ``"/[locale]/blog/[slug]"``.  Empty when i18n is off.
        handler: Classified handler variant.
    """

    source_id: str
    template: str
    locale: str
    is_default_locale: bool
    route_path: str = ""
    locale_route_path: str = ""
    handler: RouteHandler = field(default_factory=PureComponentRoute)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route lookup."""

    route: Route
    params: dict[str, str]
