"""Fallback locale candidates for a request.

Mirrors the Firebase Hosting i18n rewrite order: the returned list is
the order in which a caller should try its own locale -> content index,
before any document-specific locale list is known.

For ``?hl=fr`` from Mexico with ``Accept-Language: es-MX,es;q=0.9``::

    fr_mx, fr_ALL, fr,
    es-MX_mx, es-419_mx, es_mx, en_mx,
    ALL_mx,
    es-MX_ALL, es-MX, es-419_ALL, es-419, es_ALL, es, en_ALL, en

Web crawlers always get the default locale (after an explicit ``hl``),
so indexed content is stable.
"""

import logging

from roost.i18n.accept_language import parse_accept_language
from roost.i18n.countries import UNKNOWN_COUNTRY, is_es_419_country
from roost.i18n.signals import RequestSignals

logger = logging.getLogger("roost.i18n")

CRAWLER_USER_AGENTS = ("googlebot", "bingbot", "twitterbot")
ULTIMATE_FALLBACK_LANGUAGE = "en"


def is_crawler(user_agent: str | None) -> bool:
    """Case-insensitive user-agent substring test for known crawlers."""
    if not user_agent:
        return False
    ua = user_agent.lower()
    return any(bot in ua for bot in CRAWLER_USER_AGENTS)


def resolve_country(signals: RequestSignals) -> str:
    """Return the lower-cased country for a request.

    ``?gl=`` wins over the geography header; ``"zz"`` means unknown.
    """
    country = signals.gl or signals.country_header
    if country:
        return country.strip().lower()
    return UNKNOWN_COUNTRY


def fallback_languages(accept_language: str | None) -> list[str]:
    """Languages from an Accept-Language header, best first, plus ``en``.

    ``en-US`` contributes both ``en-US`` and ``en``; ``es`` with a Latin
    American region also contributes ``es-419``.
    """
    langs: dict[str, None] = {}
    for candidate in parse_accept_language(accept_language):
        region = candidate.region
        if region:
            langs[candidate.code] = None
            if candidate.language == "es" and is_es_419_country(region):
                langs["es-419"] = None
        langs[candidate.language] = None
    langs[ULTIMATE_FALLBACK_LANGUAGE] = None
    return list(langs)


def fallback_locales(signals: RequestSignals, default_locale: str = "en") -> list[str]:
    """Return the ordered, de-duplicated fallback locale candidates.

    Candidates use the ``{lang}_{country}`` / ``{lang}_ALL`` /
    ``ALL_{country}`` / ``{lang}`` spelling of a locale -> content index.
    """
    hl = signals.hl

    if is_crawler(signals.user_agent):
        if hl and hl != default_locale:
            return [hl, default_locale]
        return [default_locale]

    country = resolve_country(signals)
    # dict keys keep first-insertion order and drop duplicates
    locales: dict[str, None] = {}

    if hl:
        locales[f"{hl}_{country}"] = None
        locales[f"{hl}_ALL"] = None
        locales[hl] = None

    langs = fallback_languages(signals.accept_language)

    for lang in langs:
        locales[f"{lang}_{country}"] = None

    locales[f"ALL_{country}"] = None

    es_419_country = is_es_419_country(country)
    for lang in langs:
        if lang == "es" and es_419_country:
            locales["es-419_ALL"] = None
            locales["es-419"] = None
        locales[f"{lang}_ALL"] = None
        locales[lang] = None

    result = list(locales)
    logger.debug("Fallback locales for hl=%s country=%s: %s", hl, country, result)
    return result
