"""Application configuration using pydantic-settings."""

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Optional file of setting overrides, looked up at the project root.
CONFIG_PATH = Path(__file__).resolve().parents[3] / "config.toml"


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from a flat TOML table, e.g. ``log_format = "console"``."""

    def __init__(
        self, settings_cls: type[BaseSettings], path: Path | None = None
    ) -> None:
        super().__init__(settings_cls)
        path = path or CONFIG_PATH
        if not path.exists():
            self._data: dict[str, object] = {}
        else:
            with path.open("rb") as handle:
                self._data = tomllib.load(handle)

    def get_field_value(
        self, field: object, field_name: str
    ) -> tuple[object, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, object]:
        return {
            name: self._data[name]
            for name in self.settings_cls.model_fields
            if name in self._data
        }


class Settings(BaseSettings):
    """Settings loaded from environment variables, `.env` and `config.toml`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # VEuPathDB
    veupathdb_default_site: str = "PlasmoDB"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            TomlConfigSettingsSource(settings_cls),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
