"""Tests for roost.i18n.accept_language — Accept-Language parsing."""

from roost.i18n.accept_language import LocaleCandidate, parse_accept_language


def _codes(header: str | None) -> list[str]:
    return [c.code for c in parse_accept_language(header)]


class TestParseAcceptLanguage:
    def test_weighted(self) -> None:
        assert parse_accept_language("fr-CA,fr;q=0.8,en;q=0.5") == [
            LocaleCandidate("fr-CA", 1.0),
            LocaleCandidate("fr", 0.8),
            LocaleCandidate("en", 0.5),
        ]

    def test_sorted_by_quality(self) -> None:
        assert _codes("en;q=0.5,de") == ["de", "en"]

    def test_ties_keep_header_order(self) -> None:
        assert _codes("da, en-gb;q=0.8, en;q=0.8") == ["da", "en-GB", "en"]

    def test_empty(self) -> None:
        assert parse_accept_language("") == []
        assert parse_accept_language(None) == []

    def test_wildcard_skipped(self) -> None:
        assert _codes("fr,*;q=0.5") == ["fr"]

    def test_zero_quality_skipped(self) -> None:
        assert _codes("fr,de;q=0") == ["fr"]

    def test_invalid_quality_skipped(self) -> None:
        assert _codes("fr;q=1.5,de") == ["de"]

    def test_garbage_entries_skipped(self) -> None:
        assert _codes("!!!,en,;q=") == ["en"]

    def test_canonical_case(self) -> None:
        assert _codes("EN-us") == ["en-US"]

    def test_numeric_region(self) -> None:
        assert _codes("es-419") == ["es-419"]

    def test_script_subtag(self) -> None:
        assert _codes("zh-Hant-TW") == ["zh-Hant-TW"]


class TestLocaleCandidate:
    def test_language_and_region(self) -> None:
        candidate = LocaleCandidate("en-US")
        assert candidate.language == "en"
        assert candidate.region == "US"

    def test_no_region(self) -> None:
        assert LocaleCandidate("fr").region is None

    def test_default_quality(self) -> None:
        assert LocaleCandidate("fr").quality == 1.0
