"""Application settings.

Values come from environment variables prefixed with ``RIDINGTALLY_``,
after the nearest ``.env`` file has been loaded. Command line options take
precedence over these values.
"""

import os

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


ENV_PREFIX = "RIDINGTALLY_"
ENV_FILE_NAME = ".env"


def find_env_file(start: Path | None = None) -> Path | None:
    """Find the nearest .env file from ``start`` (default: cwd) upwards."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ENV_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseModel):
    """Runtime configuration."""

    data_root: Path = Field(
        default=Path("data"),
        description="Directory holding one sub-directory of result files per year",
    )
    default_year: int | None = Field(
        default=None, description="Election year loaded when none is given"
    )
    workers: int = Field(default=1, ge=1, description="File parsing threads")
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=False, description="Emit logs as JSON lines")
    csv_encoding: str = Field(default="utf-8-sig")
    fallback_encoding: str | None = Field(default="cp1252")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("fallback_encoding", mode="before")
    @classmethod
    def _empty_means_none(cls, value: object) -> object:
        return None if value == "" else value

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from ``RIDINGTALLY_*`` environment variables."""
        env = os.environ if environ is None else environ
        values = {
            name: env[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in env
        }
        return cls.model_validate(values)

    def year_directory(self, year: int) -> Path:
        """Directory of the result files for ``year``."""
        return self.data_root / str(year)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    if ENV_FILE_PATH is not None:
        load_dotenv(ENV_FILE_PATH, override=False)
    return Settings.from_env()


def reload_settings() -> Settings:
    """Discard cached settings and load them again."""
    get_settings.cache_clear()
    return get_settings()
