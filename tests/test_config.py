"""Tests for QSettings-backed startup configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from PySide6.QtCore import QSettings

from chromalingo.config.settings import AppConfig
from chromalingo.runtime_paths import builtin_translations_root
from chromalingo.ui.themes.constants import DEFAULT_THEME_ID
from chromalingo.ui.themes.models import ThemeMode


@pytest.fixture
def config(tmp_path: Path, monkeypatch) -> AppConfig:
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    return AppConfig(QSettings(str(tmp_path / "config.ini"), QSettings.Format.IniFormat))


def test_defaults(config: AppConfig) -> None:
    assert config.default_locale == "en"
    assert config.fallback_locale == "en"
    assert config.default_theme_mode is ThemeMode.SYSTEM
    assert config.theme_id == DEFAULT_THEME_ID
    assert config.strict_translations is False
    assert config.translations_dir == builtin_translations_root()


def test_invalid_theme_mode_normalized(config: AppConfig) -> None:
    config.default_theme_mode = "sepia"
    assert config.default_theme_mode is ThemeMode.SYSTEM


def test_locale_setters_normalize(config: AppConfig) -> None:
    config.default_locale = "AR-eg"
    config.fallback_locale = ""
    assert config.default_locale == "ar_EG"
    assert config.fallback_locale == "en"


def test_blank_theme_id_resets_to_default(config: AppConfig) -> None:
    config.theme_id = "  "
    assert config.theme_id == DEFAULT_THEME_ID


def test_custom_dirs(config: AppConfig, tmp_path: Path) -> None:
    config.translations_custom_dir = str(tmp_path / "i18n")
    config.themes_custom_dir = str(tmp_path / "themes")
    assert config.translations_dir == tmp_path / "i18n"
    assert config.themes_dir == tmp_path / "themes"
    assert config.themes_dir.is_dir()


def test_app_data_dir_uses_appdata(config: AppConfig, tmp_path: Path) -> None:
    assert config.app_data_dir == tmp_path / "appdata" / "chromalingo"
    assert config.app_data_dir.is_dir()
