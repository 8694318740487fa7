"""Locale negotiation — pure functions of request signals.

fallback_locales -- ordered candidates before a document is known
best_document_locale -- pick a locale from a document's locale list
resolve_document_locale -- the same, for a matched route and request
"""

from roost.i18n.accept_language import LocaleCandidate, parse_accept_language
from roost.i18n.fallbacks import fallback_locales, is_crawler, resolve_country
from roost.i18n.negotiation import best_document_locale, preferred_locale, resolve_document_locale
from roost.i18n.signals import RequestSignals

__all__ = [
    "LocaleCandidate",
    "RequestSignals",
    "best_document_locale",
    "fallback_locales",
    "is_crawler",
    "parse_accept_language",
    "preferred_locale",
    "resolve_country",
    "resolve_document_locale",
]
