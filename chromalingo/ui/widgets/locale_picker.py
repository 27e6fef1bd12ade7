"""Locale dropdown bound to the settings controller."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QComboBox, QWidget

if TYPE_CHECKING:
    from chromalingo.config.controller import SettingsController
    from chromalingo.core.translator import Translator


class LocalePicker(QComboBox):
    """Lists every loaded locale by its native name and writes through on pick."""

    def __init__(
        self,
        controller: SettingsController,
        translator: Translator,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("LocalePicker")
        self._controller = controller
        self._translator = translator

        for locale in translator.available_locales():
            self.addItem(translator.language_name(locale), locale)
        self._sync(controller.locale)

        self.currentIndexChanged.connect(self._on_index_changed)
        controller.locale_changed.connect(self._sync)

    def selected_locale(self) -> str:
        value = self.currentData()
        return value if isinstance(value, str) else ""

    def _on_index_changed(self, _index: int) -> None:
        locale = self.selected_locale()
        if locale and locale != self._controller.locale:
            self._controller.set_locale(locale)

    def _sync(self, locale: str) -> None:
        index = self.findData(self._translator.catalog.resolve_locale(locale))
        if index < 0 or index == self.currentIndex():
            return
        self.blockSignals(True)
        self.setCurrentIndex(index)
        self.blockSignals(False)
