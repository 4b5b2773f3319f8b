"""Tests for Settings."""

from pathlib import Path

import pytest

from pydantic import ValidationError

from ridingtally.infrastructure.config.settings import (
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings.data_root == Path("data")
        assert settings.default_year is None
        assert settings.workers == 1
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.csv_encoding == "utf-8-sig"
        assert settings.fallback_encoding == "cp1252"

    def test_from_env(self) -> None:
        settings = Settings.from_env(
            {
                "RIDINGTALLY_DATA_ROOT": "/srv/elections",
                "RIDINGTALLY_DEFAULT_YEAR": "2021",
                "RIDINGTALLY_WORKERS": "4",
                "RIDINGTALLY_LOG_LEVEL": "debug",
                "RIDINGTALLY_LOG_JSON": "true",
                "RIDINGTALLY_FALLBACK_ENCODING": "",
                "UNRELATED": "x",
            }
        )
        assert settings.data_root == Path("/srv/elections")
        assert settings.default_year == 2021
        assert settings.workers == 4
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.fallback_encoding is None

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings.from_env({"RIDINGTALLY_LOG_LEVEL": "LOUD"})

    def test_invalid_workers(self) -> None:
        with pytest.raises(ValidationError):
            Settings.from_env({"RIDINGTALLY_WORKERS": "0"})

    def test_year_directory(self) -> None:
        settings = Settings(data_root=Path("data"))
        assert settings.year_directory(2019) == Path("data") / "2019"


class TestGetSettings:
    def test_cached_until_reload(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RIDINGTALLY_DEFAULT_YEAR", "2019")
        first = reload_settings()
        assert get_settings() is first
        assert first.default_year == 2019

        monkeypatch.setenv("RIDINGTALLY_DEFAULT_YEAR", "2021")
        assert get_settings().default_year == 2019
        assert reload_settings().default_year == 2021

        monkeypatch.delenv("RIDINGTALLY_DEFAULT_YEAR")
        reload_settings()


class TestFindEnvFile:
    def test_finds_parent_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("RIDINGTALLY_WORKERS=2\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_env_file(nested) == env_file.resolve()
