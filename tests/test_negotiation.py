"""Tests for roost.i18n.negotiation — per-document locale choice."""

from roost.config import I18nConfig, SiteConfig
from roost.i18n.negotiation import best_document_locale, preferred_locale, resolve_document_locale
from roost.i18n.signals import RequestSignals
from roost.routing.route import Route

CONFIG = SiteConfig(i18n=I18nConfig(locales=("en", "fr", "de")))


def _route(locale: str = "en", default: bool = True) -> Route:
    return Route(
        source_id="routes/about.py",
        template="/about" if default else f"/{locale}/about",
        locale=locale,
        is_default_locale=default,
    )


class TestPreferredLocale:
    def test_exact_match(self) -> None:
        assert preferred_locale("en-GB", ["en-GB", "en"]) == "en-gb"

    def test_language_fallback(self) -> None:
        assert preferred_locale("fr-CA,fr;q=0.8", ["en", "fr"]) == "fr"

    def test_quality_order(self) -> None:
        assert preferred_locale("de;q=0.5,fr", ["de", "fr"]) == "fr"

    def test_no_match(self) -> None:
        assert preferred_locale("de", ["en", "fr"]) is None

    def test_empty_header(self) -> None:
        assert preferred_locale("", ["en"]) is None
        assert preferred_locale(None, ["en"]) is None


class TestBestDocumentLocale:
    def test_regional_override(self) -> None:
        result = best_document_locale(["en", "fr", "fr-CA"], hl="fr", country="ca")
        assert result == "fr-CA"

    def test_regional_override_beats_preference(self) -> None:
        result = best_document_locale(["en", "pt-BR"], preferred="en", hl="pt", country="BR")
        assert result == "pt-BR"

    def test_regional_override_missing_translation(self) -> None:
        assert best_document_locale(["en", "fr"], hl="fr", country="ca") == "en"

    def test_preferred(self) -> None:
        assert best_document_locale(["en", "fr"], preferred="fr") == "fr"

    def test_preferred_keeps_document_casing(self) -> None:
        assert best_document_locale(["en", "en-GB"], preferred="en-gb") == "en-GB"

    def test_en_gb_countries(self) -> None:
        assert best_document_locale(["en", "en-GB"], preferred="en", country="au") == "en-GB"
        assert best_document_locale(["en", "en-GB", "en-AU"], preferred="en", country="AU") == "en-AU"

    def test_en_outside_en_gb_countries(self) -> None:
        assert best_document_locale(["en", "en-GB"], preferred="en", country="us") == "en"

    def test_default_locale(self) -> None:
        assert best_document_locale(["fr", "en"]) == "en"
        assert best_document_locale(["fr", "de"], default_locale="de") == "de"

    def test_first_locale(self) -> None:
        assert best_document_locale(["fr", "de"]) == "fr"

    def test_no_locales(self) -> None:
        assert best_document_locale([]) is None


class TestResolveDocumentLocale:
    def test_prefixed_route_serves_own_locale(self) -> None:
        signals = RequestSignals(accept_language="de")
        assert resolve_document_locale(_route("fr", False), ["en", "fr"], signals, CONFIG) == "fr"

    def test_prefixed_route_without_translation(self) -> None:
        assert resolve_document_locale(_route("fr", False), ["en"], RequestSignals(), CONFIG) is None

    def test_unprefixed_uses_header(self) -> None:
        signals = RequestSignals(accept_language="fr-FR,fr;q=0.9")
        assert resolve_document_locale(_route(), ["en", "fr"], signals, CONFIG) == "fr"

    def test_unprefixed_regional_override(self) -> None:
        signals = RequestSignals(hl="fr", gl="CA", accept_language="en")
        assert resolve_document_locale(_route(), ["en", "fr-CA"], signals, CONFIG) == "fr-CA"

    def test_unprefixed_en_gb_from_header_country(self) -> None:
        signals = RequestSignals(accept_language="en", country_header="AU")
        assert resolve_document_locale(_route(), ["en", "en-GB"], signals, CONFIG) == "en-GB"

    def test_unprefixed_defaults(self) -> None:
        signals = RequestSignals(accept_language="ja")
        assert resolve_document_locale(_route(), ["fr", "en"], signals, CONFIG) == "en"

    def test_supported_locales(self) -> None:
        signals = RequestSignals(accept_language="de,fr;q=0.5")
        result = resolve_document_locale(_route(), ["en", "fr"], signals, CONFIG, supported=["en", "fr"])
        assert result == "fr"
