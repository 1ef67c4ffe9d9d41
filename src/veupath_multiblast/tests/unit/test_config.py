from pathlib import Path

import pytest

from veupath_multiblast.platform import config
from veupath_multiblast.platform.config import (
    Settings,
    TomlConfigSettingsSource,
    get_settings,
)


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEUPATHDB_DEFAULT_SITE", "ToxoDB")
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = get_settings()

    assert settings.veupathdb_default_site == "ToxoDB"
    assert settings.log_format == "json"
    assert get_settings() is settings


def test_init_values_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert Settings(log_level="DEBUG").log_level == "DEBUG"


def test_toml_source_reads_known_settings_only(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        'veupathdb_default_site = "VectorBase"\nunrelated = 1\n', encoding="utf-8"
    )

    assert TomlConfigSettingsSource(Settings, path=path)() == {
        "veupathdb_default_site": "VectorBase"
    }


def test_missing_toml_file_contributes_nothing(tmp_path: Path) -> None:
    assert TomlConfigSettingsSource(Settings, path=tmp_path / "absent.toml")() == {}


def test_toml_file_ranks_below_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        'veupathdb_default_site = "VectorBase"\nlog_level = "DEBUG"\n',
        encoding="utf-8",
    )
    monkeypatch.setattr(config, "CONFIG_PATH", path)
    monkeypatch.delenv("VEUPATHDB_DEFAULT_SITE", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    settings = get_settings()

    assert settings.veupathdb_default_site == "VectorBase"
    assert settings.log_level == "ERROR"
