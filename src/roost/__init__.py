"""Roost — filesystem routing with locale negotiation.

Resolves URL paths against routes discovered in a ``routes/`` directory
and decides which localized variant of a document to serve.

Basic usage::

    from roost import I18nConfig, RouteTable, SiteConfig, discover_routes

    config = SiteConfig(i18n=I18nConfig(locales=("en", "fr")))
    table = RouteTable.build(discover_routes("routes"), config)
    match = table.get("/fr/blog/hello")

Static generation::

    from roost.static import StaticPathExpander
    result = await StaticPathExpander(config).expand(table)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "I18nConfig",
    "InvalidRouteError",
    "MissingParameterError",
    "PathTrie",
    "RedirectConfig",
    "Redirects",
    "RequestSignals",
    "RoostError",
    "Route",
    "RouteMatch",
    "RouteSource",
    "RouteTable",
    "RouteTableRef",
    "SiteConfig",
    "discover_routes",
    "load_config",
    "replace_params",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name in ("SiteConfig", "I18nConfig", "RedirectConfig", "load_config"):
        from roost import config as _config

        return getattr(_config, name)

    if name == "PathTrie":
        from roost.routing.trie import PathTrie

        return PathTrie

    if name in ("Route", "RouteMatch", "RouteSource"):
        from roost.routing import route as _route

        return getattr(_route, name)

    if name in ("RouteTable", "RouteTableRef"):
        from roost.routing import table as _table

        return getattr(_table, name)

    if name == "Redirects":
        from roost.routing.redirects import Redirects

        return Redirects

    if name == "discover_routes":
        from roost.routing.discovery import discover_routes

        return discover_routes

    if name == "replace_params":
        from roost.routing.params import replace_params

        return replace_params

    if name == "RequestSignals":
        from roost.i18n.signals import RequestSignals

        return RequestSignals

    if name in ("RoostError", "ConfigurationError", "InvalidRouteError", "MissingParameterError"):
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
