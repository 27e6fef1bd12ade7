"""Active-locale front end over a TranslationCatalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from PySide6.QtCore import QObject, Signal

from chromalingo.core.translations import TranslationCatalog, is_rtl, normalize_locale

if TYPE_CHECKING:
    from chromalingo.config.controller import SettingsController

log = logging.getLogger(__name__)

LANGUAGE_NAME_KEY = "meta.language_name"


class Translator(QObject):
    """Translate against whichever locale the settings controller selects."""

    locale_changed = Signal(str)

    def __init__(
        self,
        catalog: TranslationCatalog,
        locale: str | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._catalog = catalog
        self._requested = locale or catalog.fallback_locale
        self._effective = catalog.resolve_locale(self._requested)

    @property
    def catalog(self) -> TranslationCatalog:
        return self._catalog

    @property
    def requested_locale(self) -> str:
        return self._requested

    @property
    def effective_locale(self) -> str:
        return self._effective

    @property
    def is_rtl(self) -> bool:
        return is_rtl(self._effective)

    def bind(self, controller: SettingsController) -> None:
        """Follow ``controller.locale`` from now on."""
        self.set_locale(controller.locale)
        controller.locale_changed.connect(self.set_locale)

    def set_locale(self, locale: str) -> str:
        effective = self._catalog.resolve_locale(locale)
        if effective != normalize_locale(locale):
            log.warning("locale %s not available; using %s", locale, effective)
        self._requested = locale
        self._effective = effective
        self.locale_changed.emit(effective)
        return effective

    def tr(self, key: str, *args: Any, **named: Any) -> str:
        return self._catalog.translate(key, self._effective, *args, **named)

    def plural(self, key: str, count: int | float, *args: Any, **named: Any) -> str:
        return self._catalog.plural(key, count, self._effective, *args, **named)

    def language_name(self, locale: str) -> str:
        """Native display name of ``locale``, from its own catalog."""
        if LANGUAGE_NAME_KEY not in self._catalog.keys(locale):
            return locale
        return self._catalog.translate(LANGUAGE_NAME_KEY, locale)

    def available_locales(self) -> list[str]:
        return self._catalog.locales()
