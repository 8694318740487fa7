"""Static path expansion for build-time pre-rendering.

Walks the route table and turns every registered template into the
concrete URL paths to render::

    /blog                   -> /blog                        (no placeholders)
    /blog/[slug]            -> /blog/hello, /blog/world     (from get_static_paths)
    /fr/blog/[slug]         -> /fr/blog/hello, ...

Parameterized templates need a ``get_static_paths`` hook on the route
module.  Paths that still contain placeholders after substitution are
dropped with a warning; the rest of the build continues.  A param set
that leaves a required placeholder without a value raises
:class:`~roost.errors.MissingParameterError` and stops the build.

Routes are expanded concurrently in an anyio task group.  Expansion only
reads the route table.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import anyio

from roost._internal.invoke import invoke_with_optional_context
from roost.config import SiteConfig
from roost.routing.params import path_has_placeholders, replace_params
from roost.routing.route import Route, StaticRoute
from roost.routing.table import RouteTable
from roost.routing.urls import normalize_url_path

logger = logging.getLogger("roost.static")


@dataclass(frozen=True, slots=True)
class StaticPathsContext:
    """Passed to ``get_static_paths(ctx)`` hooks that take an argument."""

    route: Route
    config: SiteConfig


@dataclass(frozen=True, slots=True)
class StaticPath:
    """One concrete path to pre-render."""

    url_path: str
    route: Route
    params: dict[str, str]


@dataclass(slots=True)
class ExpandedRoute:
    """Expansion output for a single template."""

    paths: list[StaticPath] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ExpansionResult:
    """Expansion output for a whole route table.

    ``paths`` maps each concrete URL path to what renders it.  When two
    templates expand to the same URL the later one wins, as in the trie.
    """

    paths: dict[str, StaticPath] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


def normalize_param_sets(value: Any) -> list[dict[str, str]]:
    """Coerce a ``get_static_paths`` return value into a list of param maps.

    Accepts a list of param maps, a list of ``{"params": {...}}`` entries,
    or ``{"paths": [...]}`` wrapping either.
    """
    if value is None:
        return []
    if isinstance(value, Mapping):
        value = value.get("paths") or []
    param_sets: list[dict[str, str]] = []
    for entry in value:
        if not isinstance(entry, Mapping):
            raise TypeError(f"get_static_paths() entries must be mappings, got {type(entry).__name__}")
        inner = entry.get("params")
        if isinstance(inner, Mapping):
            entry = inner
        param_sets.append({str(k): v for k, v in entry.items()})
    return param_sets


class StaticPathExpander:
    """Expands route templates into concrete URL paths.

    Usage::

        expander = StaticPathExpander(config)
        result = await expander.expand(table)
        for url_path, static_path in result.paths.items():
            render(static_path.route, static_path.params)
    """

    __slots__ = ("config",)

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config = config or SiteConfig()

    async def expand(self, table: RouteTable) -> ExpansionResult:
        """Expand every route in *table* concurrently."""
        return await self.expand_routes(table.routes())

    async def expand_routes(self, routes: Iterable[tuple[str, Route]]) -> ExpansionResult:
        """Expand ``(template, route)`` pairs concurrently."""
        entries = list(routes)
        expanded: list[ExpandedRoute | None] = [None] * len(entries)

        async def _expand(index: int, template: str, route: Route) -> None:
            expanded[index] = await self.expand_route(template, route)

        try:
            async with anyio.create_task_group() as tg:
                for index, (template, route) in enumerate(entries):
                    tg.start_soon(_expand, index, template, route)
        except ExceptionGroup as group:
            # Surface a lone failure as itself
            if len(group.exceptions) == 1:
                raise group.exceptions[0] from None
            raise

        # Merge in table order so results are deterministic
        result = ExpansionResult()
        for item in expanded:
            if item is None:
                continue
            for static_path in item.paths:
                result.paths[static_path.url_path] = static_path
            result.warnings.extend(item.warnings)
        return result

    async def expand_route(self, template: str, route: Route) -> ExpandedRoute:
        """Expand a single template into concrete paths.

        Raises ``MissingParameterError`` when a param set lacks a value
        for a required placeholder.
        """
        out = ExpandedRoute()

        if not path_has_placeholders(template):
            out.paths.append(StaticPath(url_path=self._normalize(template), route=route, params={}))
            return out

        paths_fn = route.handler.paths_fn if isinstance(route.handler, StaticRoute) else None
        if paths_fn is None:
            self._warn(
                out,
                f"path contains placeholders: {template}, "
                "did you forget to define get_static_paths()?",
            )
            return out

        ctx = StaticPathsContext(route=route, config=self.config)
        param_sets = normalize_param_sets(await invoke_with_optional_context(paths_fn, ctx))

        for params in param_sets:
            url_path = replace_params(template, params)
            if path_has_placeholders(url_path):
                self._warn(
                    out,
                    f"path contains placeholders: {template} -> {url_path}, "
                    "double check get_static_paths() and ensure all params are returned",
                )
                continue
            out.paths.append(
                StaticPath(
                    url_path=self._normalize(url_path),
                    route=route,
                    params={k: str(v) for k, v in params.items() if v is not None and v != ""},
                )
            )
        return out

    def _normalize(self, url_path: str) -> str:
        return normalize_url_path(url_path, self.config.trailing_slash)

    @staticmethod
    def _warn(out: ExpandedRoute, message: str) -> None:
        logger.warning("%s", message)
        out.warnings.append(message)
