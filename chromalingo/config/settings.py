"""Application configuration via QSettings.

Only startup configuration lives here. The live theme mode and locale are
held by :class:`chromalingo.config.controller.SettingsController` and are
not written back.
"""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from chromalingo.core.translations import DEFAULT_LOCALE, normalize_locale
from chromalingo.runtime_paths import builtin_translations_root
from chromalingo.ui.themes.constants import DEFAULT_THEME_ID
from chromalingo.ui.themes.models import DEFAULT_THEME_MODE, ThemeMode, normalize_theme_mode


class AppConfig:
    """Wraps QSettings for persistent app configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("ChromaLingo", "ChromaLingo")

    # -- locale --

    @property
    def default_locale(self) -> str:
        return normalize_locale(self._qs.value("i18n/default_locale", DEFAULT_LOCALE, type=str))

    @default_locale.setter
    def default_locale(self, value: str) -> None:
        self._qs.setValue("i18n/default_locale", normalize_locale(value))

    @property
    def fallback_locale(self) -> str:
        return normalize_locale(self._qs.value("i18n/fallback_locale", DEFAULT_LOCALE, type=str))

    @fallback_locale.setter
    def fallback_locale(self, value: str) -> None:
        self._qs.setValue("i18n/fallback_locale", normalize_locale(value))

    @property
    def strict_translations(self) -> bool:
        return bool(self._qs.value("i18n/strict", False, type=bool))

    @strict_translations.setter
    def strict_translations(self, value: bool) -> None:
        self._qs.setValue("i18n/strict", bool(value))

    @property
    def translations_custom_dir(self) -> str:
        return self._qs.value("i18n/translations_dir", "", type=str)

    @translations_custom_dir.setter
    def translations_custom_dir(self, value: str) -> None:
        self._qs.setValue("i18n/translations_dir", (value or "").strip())

    # -- theme --

    @property
    def default_theme_mode(self) -> ThemeMode:
        raw = self._qs.value("ui/default_theme_mode", DEFAULT_THEME_MODE.value, type=str)
        return normalize_theme_mode(raw)

    @default_theme_mode.setter
    def default_theme_mode(self, value: ThemeMode | str) -> None:
        self._qs.setValue("ui/default_theme_mode", normalize_theme_mode(value).value)

    @property
    def theme_id(self) -> str:
        raw = self._qs.value("ui/theme_id", DEFAULT_THEME_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_THEME_ID

    @theme_id.setter
    def theme_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_THEME_ID
        self._qs.setValue("ui/theme_id", cleaned)

    @property
    def theme_last_known_good_id(self) -> str:
        raw = self._qs.value("ui/theme_last_known_good_id", DEFAULT_THEME_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_THEME_ID

    @theme_last_known_good_id.setter
    def theme_last_known_good_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_THEME_ID
        self._qs.setValue("ui/theme_last_known_good_id", cleaned)

    @property
    def themes_custom_dir(self) -> str:
        return self._qs.value("ui/themes_dir", "", type=str)

    @themes_custom_dir.setter
    def themes_custom_dir(self, value: str) -> None:
        self._qs.setValue("ui/themes_dir", (value or "").strip())

    # -- window geometry --

    @property
    def window_geometry(self) -> bytes | None:
        return self._qs.value("ui/window_geometry")

    @window_geometry.setter
    def window_geometry(self, value: bytes) -> None:
        self._qs.setValue("ui/window_geometry", value)

    # -- helpers --

    def sync(self) -> None:
        self._qs.sync()

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def default_themes_dir(self) -> Path:
        return self._app_data_dir() / "themes"

    @property
    def themes_dir(self) -> Path:
        custom = self.themes_custom_dir
        path = Path(custom).expanduser() if custom else self.default_themes_dir
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def translations_dir(self) -> Path:
        custom = self.translations_custom_dir
        if custom:
            return Path(custom).expanduser()
        return builtin_translations_root()

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "chromalingo"
