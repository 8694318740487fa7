"""Tests for roost.config — SiteConfig, I18nConfig, and roost.toml loading."""

from pathlib import Path

import pytest

from roost.config import I18nConfig, RedirectConfig, SiteConfig, load_config
from roost.errors import ConfigurationError


class TestSiteConfig:
    def test_defaults(self) -> None:
        cfg = SiteConfig()

        assert cfg.base_path == "/"
        assert cfg.url_format == "/[base]/[path]"
        assert cfg.trailing_slash is None
        assert cfg.routes_dir == "routes"
        assert cfg.i18n is None
        assert cfg.sitemap is False
        assert cfg.domain is None
        assert cfg.redirects == ()
        assert cfg.default_locale == "en"
        assert cfg.locales == ("en",)

    def test_override(self) -> None:
        cfg = SiteConfig(base_path="/docs", trailing_slash=True)

        assert cfg.base_path == "/docs"
        assert cfg.trailing_slash is True

    def test_frozen(self) -> None:
        cfg = SiteConfig()

        with pytest.raises(AttributeError):
            cfg.base_path = "/x"  # type: ignore[misc]

    def test_url_format_requires_path(self) -> None:
        with pytest.raises(ConfigurationError, match=r"\[path\]"):
            SiteConfig(url_format="/[base]")

    def test_curly_url_format(self) -> None:
        assert SiteConfig(url_format="/{base}/{path}").url_format == "/{base}/{path}"

    def test_sitemap_requires_domain(self) -> None:
        with pytest.raises(ConfigurationError, match="domain"):
            SiteConfig(sitemap=True)

    def test_i18n_locales(self) -> None:
        cfg = SiteConfig(i18n=I18nConfig(locales=("de", "fr"), default_locale="de"))
        assert cfg.default_locale == "de"
        assert cfg.locales == ("de", "fr")


class TestI18nConfig:
    def test_defaults(self) -> None:
        cfg = I18nConfig()

        assert cfg.locales == ("en",)
        assert cfg.default_locale == "en"
        assert cfg.url_format == "/[locale]/[base]/[path]"
        assert cfg.exclude_default_locale_from_intl_paths is False

    def test_url_format_requires_locale(self) -> None:
        with pytest.raises(ConfigurationError, match=r"\[locale\]"):
            I18nConfig(url_format="/intl/[path]")

    def test_empty_default_locale(self) -> None:
        with pytest.raises(ConfigurationError):
            I18nConfig(default_locale="")

    def test_intl_locales(self) -> None:
        cfg = I18nConfig(locales=("en", "fr"))
        assert cfg.intl_locales == ("en", "fr")

    def test_intl_locales_exclude_default(self) -> None:
        cfg = I18nConfig(locales=("en", "fr"), exclude_default_locale_from_intl_paths=True)
        assert cfg.intl_locales == ("fr",)


class TestFromMapping:
    def test_empty(self) -> None:
        assert SiteConfig.from_mapping({}) == SiteConfig()

    def test_with_i18n(self) -> None:
        cfg = SiteConfig.from_mapping(
            {
                "base_path": "/docs",
                "i18n": {"locales": ["en", "fr"], "url_format": "/intl/[locale]/[path]"},
            }
        )
        assert cfg.base_path == "/docs"
        assert cfg.i18n == I18nConfig(locales=("en", "fr"), url_format="/intl/[locale]/[path]")

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="base_pth"):
            SiteConfig.from_mapping({"base_pth": "/"})

    def test_unknown_i18n_key(self) -> None:
        with pytest.raises(ConfigurationError, match="i18n.locale"):
            SiteConfig.from_mapping({"i18n": {"locale": ["en"]}})

    def test_i18n_not_a_table(self) -> None:
        with pytest.raises(ConfigurationError, match="table"):
            SiteConfig.from_mapping({"i18n": "en"})


class TestLoadConfig:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "roost.toml"
        path.write_text(
            'base_path = "/"\n'
            "trailing_slash = true\n"
            "sitemap = true\n"
            'domain = "https://example.com"\n'
            "\n"
            "[i18n]\n"
            'locales = ["en", "fr", "de"]\n'
            'default_locale = "en"\n'
        )
        cfg = load_config(path)

        assert cfg.trailing_slash is True
        assert cfg.domain == "https://example.com"
        assert cfg.i18n is not None
        assert cfg.i18n.locales == ("en", "fr", "de")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "roost.toml"
        path.write_text("base_path = \n")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "roost.toml"
        path.write_text('url_format = "/[base]"\n')
        with pytest.raises(ConfigurationError):
            load_config(str(path))


class TestRedirectConfig:
    def test_defaults(self) -> None:
        cfg = RedirectConfig(source="/a", destination="/b")
        assert cfg.type == 302

    def test_invalid_status(self) -> None:
        with pytest.raises(ConfigurationError, match="redirect type 200"):
            RedirectConfig(source="/a", destination="/b", type=200)

    def test_from_mapping(self) -> None:
        cfg = SiteConfig.from_mapping(
            {"redirects": [{"source": "/old/[...path]", "destination": "/new/[...path]", "type": 301}]}
        )
        assert cfg.redirects == (
            RedirectConfig(source="/old/[...path]", destination="/new/[...path]", type=301),
        )

    def test_from_mapping_keeps_incomplete_entries(self) -> None:
        cfg = SiteConfig.from_mapping({"redirects": [{"source": "/old"}]})
        assert cfg.redirects == (RedirectConfig(source="/old"),)

    def test_unknown_redirect_key(self) -> None:
        with pytest.raises(ConfigurationError, match="redirects.dest"):
            SiteConfig.from_mapping({"redirects": [{"source": "/a", "dest": "/b"}]})

    def test_redirects_not_an_array(self) -> None:
        with pytest.raises(ConfigurationError, match="array of tables"):
            SiteConfig.from_mapping({"redirects": {"source": "/a"}})

    def test_redirect_entry_not_a_table(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a table"):
            SiteConfig.from_mapping({"redirects": ["/a"]})

    def test_load_from_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "roost.toml"
        path.write_text(
            "[[redirects]]\n"
            'source = "/blog/[slug]"\n'
            'destination = "/posts/[slug]"\n'
            "type = 301\n"
            "\n"
            "[[redirects]]\n"
            'source = "/feed"\n'
            'destination = "/rss.xml"\n'
        )
        cfg = load_config(path)
        assert [r.source for r in cfg.redirects] == ["/blog/[slug]", "/feed"]
        assert cfg.redirects[1].type == 302
