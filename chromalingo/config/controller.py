"""Live theme mode and locale, with change notification."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from chromalingo.core.translations import DEFAULT_LOCALE, normalize_locale
from chromalingo.ui.themes.models import DEFAULT_THEME_MODE, ThemeMode

log = logging.getLogger(__name__)


class SettingsController(QObject):
    """Holds the theme mode and locale the UI renders with.

    Both values change only through :meth:`set_theme_mode` and
    :meth:`set_locale`. Every call emits its signal once, then ``changed``,
    even when the value is unchanged. Slots run synchronously in the order
    they were connected.
    """

    theme_mode_changed = Signal(str)
    locale_changed = Signal(str)
    changed = Signal()

    def __init__(
        self,
        theme_mode: ThemeMode | str = DEFAULT_THEME_MODE,
        locale: str = DEFAULT_LOCALE,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme_mode = ThemeMode.parse(theme_mode)
        self._locale = normalize_locale(locale)

    @classmethod
    def from_config(cls, config, parent: QObject | None = None) -> SettingsController:
        return cls(
            theme_mode=config.default_theme_mode,
            locale=config.default_locale,
            parent=parent,
        )

    @property
    def theme_mode(self) -> ThemeMode:
        return self._theme_mode

    @property
    def locale(self) -> str:
        return self._locale

    def set_theme_mode(self, mode: ThemeMode | str) -> None:
        self._theme_mode = ThemeMode.parse(mode)
        log.debug("theme mode set to %s", self._theme_mode.value)
        self.theme_mode_changed.emit(self._theme_mode.value)
        self.changed.emit()

    def set_locale(self, locale: str) -> None:
        cleaned = normalize_locale(locale, default="")
        if not cleaned:
            raise ValueError("Locale must be a non-empty string")
        self._locale = cleaned
        log.debug("locale set to %s", cleaned)
        self.locale_changed.emit(cleaned)
        self.changed.emit()
