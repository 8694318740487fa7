"""Site configuration.

SiteConfig and I18nConfig are frozen dataclasses: immutable after
creation, loaded once per process and threaded read-only into the route
table, the static path expander, and locale negotiation.  Reloading
means building a new config object, never mutating the old one.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from roost.errors import ConfigurationError
from roost.routing.urls import bracket_placeholders

DEFAULT_URL_FORMAT = "/[base]/[path]"
DEFAULT_LOCALE_URL_FORMAT = "/[locale]/[base]/[path]"
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


@dataclass(frozen=True, slots=True)
class RedirectConfig:
    """One server-side redirect.

    ``source`` is a route template matched like any route;
    ``destination`` may reuse its params::

        RedirectConfig(source="/old/[...path]", destination="/new/[...path]", type=301)

    Entries with an empty ``source`` or ``destination`` are kept here and
    skipped with a warning when the redirect trie is built.
    """

    source: str = ""
    destination: str = ""
    type: int = 302

    def __post_init__(self) -> None:
        if self.type not in REDIRECT_STATUSES:
            raise ConfigurationError(
                f"redirect type {self.type!r} for {self.source!r} must be one of "
                f"{', '.join(str(s) for s in sorted(REDIRECT_STATUSES))}."
            )


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Localization settings.

    ``url_format`` controls where localized variants of every route live.
    ``[locale]``, ``[base]`` and ``[path]`` are substituted; the curly
    spelling (``/{locale}/{path}``) is accepted too::

        I18nConfig(locales=("en", "fr", "de"), url_format="/intl/[locale]/[path]")
    """

    locales: tuple[str, ...] = ("en",)
    default_locale: str = "en"
    url_format: str = DEFAULT_LOCALE_URL_FORMAT

    # Never register "/intl/<default>/..." since "/..." already serves it
    exclude_default_locale_from_intl_paths: bool = False

    def __post_init__(self) -> None:
        if not self.default_locale:
            raise ConfigurationError("i18n.default_locale must not be empty.")
        if "[locale]" not in bracket_placeholders(self.url_format):
            raise ConfigurationError(
                f"i18n.url_format {self.url_format!r} must contain a [locale] placeholder."
            )

    @property
    def intl_locales(self) -> tuple[str, ...]:
        """Locales that get a prefixed URL variant."""
        if self.exclude_default_locale_from_intl_paths:
            return tuple(loc for loc in self.locales if loc != self.default_locale)
        return self.locales


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(base_path="/docs", trailing_slash=True)
    """

    # URLs
    base_path: str = "/"
    url_format: str = DEFAULT_URL_FORMAT
    # True = force trailing slash, False = strip it, None = leave paths alone
    trailing_slash: bool | None = None

    # Route discovery
    routes_dir: str = "routes"

    # Localization (None = single-locale site)
    i18n: I18nConfig | None = None

    # Server-side redirects, matched before routes
    redirects: tuple[RedirectConfig, ...] = ()

    # Sitemap (requires domain, e.g. "https://example.com"); `roost paths`
    # prints sitemap.xml instead of the path list when enabled
    sitemap: bool = False
    domain: str | None = None

    def __post_init__(self) -> None:
        if "[path]" not in bracket_placeholders(self.url_format):
            raise ConfigurationError(
                f"url_format {self.url_format!r} must contain a [path] placeholder."
            )
        if self.sitemap and not self.domain:
            raise ConfigurationError('missing "domain", required when sitemap is enabled')

    @property
    def default_locale(self) -> str:
        if self.i18n is None:
            return "en"
        return self.i18n.default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        if self.i18n is None:
            return (self.default_locale,)
        return self.i18n.locales

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SiteConfig:
        """Build a config from plain data (e.g. a parsed TOML document).

        Unknown keys raise ``ConfigurationError`` so typos surface at
        startup instead of silently falling back to defaults.
        """
        data = dict(data)
        i18n_data = data.pop("i18n", None)
        redirects_data = data.pop("redirects", None)
        _reject_unknown(cls, data, "")

        i18n: I18nConfig | None = None
        if i18n_data is not None:
            if not isinstance(i18n_data, Mapping):
                raise ConfigurationError("[i18n] must be a table.")
            i18n_data = dict(i18n_data)
            _reject_unknown(I18nConfig, i18n_data, "i18n.")
            if "locales" in i18n_data:
                i18n_data["locales"] = tuple(i18n_data["locales"])
            i18n = I18nConfig(**i18n_data)

        redirects: tuple[RedirectConfig, ...] = ()
        if redirects_data is not None:
            if not isinstance(redirects_data, (list, tuple)):
                raise ConfigurationError("redirects must be an array of tables.")
            redirects = tuple(_redirect_from_mapping(entry) for entry in redirects_data)

        return cls(i18n=i18n, redirects=redirects, **data)


def load_config(path: str | Path) -> SiteConfig:
    """Load a ``roost.toml`` file.

    Top-level keys map onto :class:`SiteConfig`; an ``[i18n]`` table maps
    onto :class:`I18nConfig` and each ``[[redirects]]`` table onto
    :class:`RedirectConfig`::

        base_path = "/"
        trailing_slash = true

        [i18n]
        locales = ["en", "fr", "de"]
        default_locale = "en"
        url_format = "/intl/[locale]/[path]"

        [[redirects]]
        source = "/old/[...path]"
        destination = "/new/[...path]"
        type = 301
    """
    config_path = Path(path)
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Could not parse {config_path}: {exc}") from exc
    return SiteConfig.from_mapping(data)


def _reject_unknown(cls: type, data: Mapping[str, Any], prefix: str) -> None:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        names = ", ".join(prefix + name for name in unknown)
        raise ConfigurationError(f"Unknown config option(s): {names}")


def _redirect_from_mapping(entry: Any) -> RedirectConfig:
    if not isinstance(entry, Mapping):
        raise ConfigurationError("Each [[redirects]] entry must be a table.")
    _reject_unknown(RedirectConfig, entry, "redirects.")
    return RedirectConfig(**entry)
