"""Per-document locale negotiation.

Once a route handler knows which locales a document actually exists in,
these functions pick the one to render.  Everything here is a pure
function of its arguments.

Priority for the unprefixed (default-locale) URL of a document:

1. ``?hl=fr`` / ``?hl=pt`` regional overrides (``fr-ca`` in Canada,
   ``pt-br`` in Brazil, ...) when the document has that locale
2. the visitor's preferred locale, in the document's own casing, with
   ``en`` readers in AU/CA/IN/MY preferring ``en-{country}`` then
   ``en-gb``
3. the site default locale, if the document has it
4. the document's first locale
"""

import logging
from collections.abc import Sequence

from roost.config import SiteConfig
from roost.i18n.accept_language import parse_accept_language
from roost.i18n.countries import EN_GB_COUNTRIES, REGIONAL_OVERRIDES
from roost.i18n.fallbacks import resolve_country
from roost.i18n.signals import RequestSignals
from roost.routing.route import Route

logger = logging.getLogger("roost.i18n")


def preferred_locale(accept_language: str | None, supported: Sequence[str]) -> str | None:
    """Negotiate an Accept-Language header against *supported* locales.

    Each header candidate is tried as-is (``fr-CA``) and then by language
    alone (``fr``), best candidate first.  Returns the lower-cased match
    or ``None``.
    """
    available = {locale.lower() for locale in supported}
    for candidate in parse_accept_language(accept_language):
        code = candidate.code.lower()
        if code in available:
            return code
        if candidate.language in available:
            return candidate.language
    return None


def best_document_locale(
    doc_locales: Sequence[str],
    *,
    preferred: str | None = None,
    hl: str | None = None,
    country: str | None = None,
    default_locale: str = "en",
) -> str | None:
    """Pick the locale to render a document in.

    Args:
        doc_locales: Locales the document exists in.  Order matters: the
            first one is the last resort.
        preferred: Visitor's preferred locale from header negotiation.
        hl: Explicit ``?hl=`` override.
        country: Resolved country code (any case).
        default_locale: Site default locale.

    Returns:
        A locale from *doc_locales* (in the document's casing), or ``None``
        when *doc_locales* is empty.
    """
    # lower-case -> document casing
    locales_map = {locale.lower(): locale for locale in doc_locales}
    country = (country or "").upper()
    hl = (hl or "").lower()

    regional = REGIONAL_OVERRIDES.get((hl, country))
    if regional is not None and regional in locales_map:
        return locales_map[regional]

    if preferred:
        preferred = preferred.lower()
        if preferred == "en" and country in EN_GB_COUNTRIES:
            for candidate in (f"en-{country.lower()}", "en-gb"):
                if candidate in locales_map:
                    return locales_map[candidate]
        return locales_map.get(preferred, preferred)

    if default_locale in doc_locales:
        return default_locale
    if doc_locales:
        return doc_locales[0]
    return None


def resolve_document_locale(
    route: Route,
    doc_locales: Sequence[str],
    signals: RequestSignals,
    config: SiteConfig,
    *,
    supported: Sequence[str] | None = None,
) -> str | None:
    """Decide the locale to render *route* in for one request.

    Prefixed routes (``/fr/...``) serve their own locale, or ``None``
    when the document has no such translation (the caller renders a
    404).  The unprefixed route negotiates with
    :func:`best_document_locale`; the visitor's preference is negotiated
    against *supported*, defaulting to the document's locales.
    """
    if not route.is_default_locale:
        if route.locale in doc_locales:
            return route.locale
        logger.debug("%s has no %s translation", route.source_id, route.locale)
        return None

    preferred = preferred_locale(
        signals.accept_language,
        supported if supported is not None else doc_locales,
    )
    return best_document_locale(
        doc_locales,
        preferred=preferred,
        hl=signals.hl,
        country=resolve_country(signals),
        default_locale=config.default_locale,
    )
