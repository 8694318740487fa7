"""sitemap.xml generation from expanded static paths.

Every locale variant of the same route file and params is one page in
several languages, so each ``<url>`` entry lists the others as
``xhtml:link rel="alternate"`` rows::

    <url>
      <loc>https://example.com/blog/hello</loc>
      <xhtml:link rel="alternate" hreflang="en" href="https://example.com/blog/hello" />
      <xhtml:link rel="alternate" hreflang="fr" href="https://example.com/fr/blog/hello" />
    </url>
"""

from dataclasses import dataclass, field
from xml.sax.saxutils import escape, quoteattr

from roost.config import SiteConfig
from roost.errors import ConfigurationError
from roost.static.expander import ExpansionResult

_URLSET_OPEN = (
    '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9" '
    'xmlns:xhtml="http://www.w3.org/1999/xhtml">'
)


@dataclass(frozen=True, slots=True)
class SitemapAlternate:
    locale: str
    hreflang: str
    url: str


@dataclass(slots=True)
class SitemapEntry:
    url: str
    locale: str
    alternates: list[SitemapAlternate] = field(default_factory=list)


def hreflang_for(locale: str) -> str:
    """Map a locale code to an hreflang value (``en_GB`` -> ``en-GB``)."""
    return locale.replace("_", "-")


def build_sitemap_entries(result: ExpansionResult, config: SiteConfig) -> list[SitemapEntry]:
    """Group expanded paths into sitemap entries with hreflang alternates.

    Raises ``ConfigurationError`` if ``config.domain`` is not set.
    """
    if not config.domain:
        raise ConfigurationError('missing "domain", required when generating a sitemap')
    domain = config.domain.rstrip("/")

    groups: dict[tuple[str, tuple[tuple[str, str], ...]], dict[str, SitemapAlternate]] = {}
    entries: list[tuple[SitemapEntry, tuple[str, tuple[tuple[str, str], ...]]]] = []

    for url_path, static_path in result.paths.items():
        route = static_path.route
        key = (route.source_id, tuple(sorted(static_path.params.items())))
        url = domain + url_path
        alternates = groups.setdefault(key, {})
        hreflang = hreflang_for(route.locale)
        # The unprefixed URL wins when a locale is also served under a prefix
        if hreflang not in alternates or route.is_default_locale:
            alternates[hreflang] = SitemapAlternate(locale=route.locale, hreflang=hreflang, url=url)
        entries.append((SitemapEntry(url=url, locale=route.locale), key))

    sitemap: list[SitemapEntry] = []
    for entry, key in entries:
        alts = list(groups[key].values())
        # A page with a single locale variant has nothing to point at
        if len(alts) > 1:
            entry.alternates = sorted(alts, key=lambda alt: alt.hreflang)
        sitemap.append(entry)
    sitemap.sort(key=lambda entry: entry.url)
    return sitemap


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    """Render sitemap entries as a sitemaps.org ``urlset`` document."""
    lines = ['<?xml version="1.0" encoding="UTF-8"?>', _URLSET_OPEN]
    for entry in entries:
        lines.append("<url>")
        lines.append(f"  <loc>{escape(entry.url)}</loc>")
        for alt in entry.alternates:
            lines.append(
                f"  <xhtml:link rel=\"alternate\" hreflang={quoteattr(alt.hreflang)} "
                f"href={quoteattr(alt.url)} />"
            )
        lines.append("</url>")
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
