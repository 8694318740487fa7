"""Route table built from discovered route files.

Each route file is registered once per locale variant::

    routes/blog/[slug].py
        -> /blog/[slug]         Route(locale="en", is_default_locale=True)
        -> /fr/blog/[slug]      Route(locale="fr", is_default_locale=False)
        -> /de/blog/[slug]      Route(locale="de", is_default_locale=False)

The table is built once at startup (and again on every route file
add/remove/rename in development) and is read-only afterwards.
:class:`RouteTableRef` rebuilds into a fresh table and swaps the
reference, so readers never see a half-built trie.
"""

from __future__ import annotations

import logging
import posixpath
import threading
from collections.abc import Iterable, Iterator

from roost.config import SiteConfig
from roost.routing.route import Route, RouteMatch, RouteSource
from roost.routing.trie import PathTrie
from roost.routing.urls import format_url_path

logger = logging.getLogger("roost.routing")


def route_file_path(relative_path: str, routes_dir: str = "routes") -> str | None:
    """Map a route file path to its URL path (before URL formatting).

    Strips the routes-root prefix and the extension; ``index`` maps to
    its parent directory.  Returns ``None`` for private files whose name
    starts with ``_``.

    Examples::

        "routes/index.py"         -> ""
        "routes/blog/index.py"    -> "blog"
        "routes/blog/[slug].py"   -> "blog/[slug]"
        "routes/_helpers.py"      -> None
    """
    path = relative_path.replace("\\", "/").lstrip("/")
    prefix = routes_dir.strip("/") + "/"
    if routes_dir and path.startswith(prefix):
        path = path[len(prefix) :]

    directory, filename = posixpath.split(path)
    stem = filename if filename.endswith("]") else posixpath.splitext(filename)[0]
    if stem.startswith("_"):
        return None
    if stem == "index":
        return directory
    return posixpath.join(directory, stem)


class RouteTable:
    """Routes from every route file, keyed by instantiated path.

    Usage::

        table = RouteTable.build(sources, config)
        match = table.get("/fr/blog/hello")
        match.route.locale      # "fr"
        match.params            # {"slug": "hello"}
    """

    __slots__ = ("_trie", "config")

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config = config or SiteConfig()
        self._trie: PathTrie[Route] = PathTrie()

    @classmethod
    def build(cls, sources: Iterable[RouteSource], config: SiteConfig | None = None) -> RouteTable:
        """Build a table from discovered route sources."""
        table = cls(config)
        for source in sources:
            table.add_source(source)
        return table

    def add_source(self, source: RouteSource) -> None:
        """Register every locale variant of one route file."""
        config = self.config
        url_path = route_file_path(source.relative_path, config.routes_dir)
        if url_path is None:
            logger.debug("Skipping private route file %s", source.relative_path)
            return

        route_path = format_url_path(
            config.url_format,
            base=config.base_path,
            path=url_path,
            trailing_slash=config.trailing_slash,
        )

        i18n = config.i18n
        locale_route_path = ""
        if i18n is not None:
            locale_route_path = format_url_path(
                i18n.url_format,
                base=config.base_path,
                path=url_path,
                trailing_slash=config.trailing_slash,
            )

        self._add(
            Route(
                source_id=source.source_id,
                template=route_path,
                locale=config.default_locale,
                is_default_locale=True,
                route_path=route_path,
                locale_route_path=locale_route_path,
                handler=source.handler,
            )
        )

        if i18n is None:
            return

        for locale in i18n.intl_locales:
            locale_path = locale_route_path.replace("[locale]", locale)
            if locale_path == route_path:
                continue
            self._add(
                Route(
                    source_id=source.source_id,
                    template=locale_path,
                    locale=locale,
                    is_default_locale=False,
                    route_path=route_path,
                    locale_route_path=locale_route_path,
                    handler=source.handler,
                )
            )

    def _add(self, route: Route) -> None:
        logger.debug("Registered %s -> %s (%s)", route.template, route.source_id, route.locale)
        self._trie.add(route.template, route)

    def get(self, url_path: str) -> RouteMatch | None:
        """Match a URL path. Returns ``None`` if no route matches."""
        route, params = self._trie.get(url_path)
        if route is None:
            return None
        return RouteMatch(route=route, params=params)

    def routes(self) -> Iterator[tuple[str, Route]]:
        """Yield ``(template, route)`` for every registered path."""
        return self._trie.items()

    def __len__(self) -> int:
        return len(self._trie)


class RouteTableRef:
    """Holds the live route table and swaps it on rebuild.

    Readers call :meth:`get` (or read :attr:`table`) without locking.
    Rebuilds build a complete new table first, then replace the
    reference in a single assignment.  A lock serializes writers only.
    """

    __slots__ = ("_lock", "_table")

    def __init__(self, table: RouteTable) -> None:
        self._table = table
        self._lock = threading.Lock()

    @property
    def table(self) -> RouteTable:
        return self._table

    def get(self, url_path: str) -> RouteMatch | None:
        return self._table.get(url_path)

    def rebuild(self, sources: Iterable[RouteSource], config: SiteConfig | None = None) -> RouteTable:
        """Build a fresh table and swap it in.

        *config* defaults to the current table's config; passing a new
        one applies a reloaded configuration.
        """
        with self._lock:
            fresh = RouteTable.build(sources, config or self._table.config)
            self._table = fresh
        logger.info("Route table rebuilt with %d paths", len(fresh))
        return fresh
