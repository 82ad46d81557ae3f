"""Tests for regional configuration loading from the environment."""

from __future__ import annotations

import os

import pytest

from liturgical_calendar import ConfigError, RegionalConfig, load_config

_ENV_VARS = (
    "LITCAL_ASCENSION_ON_SUNDAY",
    "LITCAL_CORPUS_CHRISTI_ON_SUNDAY",
    "LITCAL_EPIPHANY_ON_SUNDAY",
    "LITCAL_OPTIONAL_MEMORIALS",
    "LITCAL_LOCALE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:

    def test_defaults(self):
        assert load_config() == RegionalConfig()

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy_values(self, monkeypatch, raw):
        monkeypatch.setenv("LITCAL_ASCENSION_ON_SUNDAY", raw)
        assert load_config().ascension_on_sunday is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off"])
    def test_falsy_values(self, monkeypatch, raw):
        monkeypatch.setenv("LITCAL_OPTIONAL_MEMORIALS", raw)
        assert load_config().include_optional_memorials is False

    def test_bad_boolean(self, monkeypatch):
        monkeypatch.setenv("LITCAL_CORPUS_CHRISTI_ON_SUNDAY", "maybe")
        with pytest.raises(ConfigError, match="LITCAL_CORPUS_CHRISTI_ON_SUNDAY"):
            load_config()

    def test_locale_normalized(self, monkeypatch):
        monkeypatch.setenv("LITCAL_LOCALE", " EN ")
        assert load_config().locale == "en"

    def test_bad_locale(self, monkeypatch):
        monkeypatch.setenv("LITCAL_LOCALE", "english")
        with pytest.raises(ConfigError, match="Invalid locale"):
            load_config()

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("LITCAL_EPIPHANY_ON_SUNDAY", "true")
        config = load_config(epiphany_on_sunday=False, locale="de")
        assert config.epiphany_on_sunday is False
        assert config.locale == "de"

    def test_bad_locale_override(self):
        with pytest.raises(ConfigError):
            load_config(locale="LATIN")

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LITCAL_EPIPHANY_ON_SUNDAY=1\n", encoding="utf-8")
        try:
            assert load_config().epiphany_on_sunday is True
        finally:
            os.environ.pop("LITCAL_EPIPHANY_ON_SUNDAY", None)

    def test_environment_beats_dotenv(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("LITCAL_LOCALE=de\n", encoding="utf-8")
        monkeypatch.setenv("LITCAL_LOCALE", "en")
        assert load_config().locale == "en"


class TestRegionalConfig:

    def test_frozen(self):
        config = RegionalConfig()
        with pytest.raises(AttributeError):
            config.locale = "en"

    def test_hashable(self):
        assert hash(RegionalConfig()) == hash(RegionalConfig())
