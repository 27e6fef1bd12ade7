"""Theme mode dropdown plus dark-mode switch."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QCheckBox, QComboBox, QHBoxLayout, QWidget

from chromalingo.ui.themes.models import ThemeMode

if TYPE_CHECKING:
    from chromalingo.config.controller import SettingsController
    from chromalingo.core.translator import Translator


class ThemeModePicker(QWidget):
    """Two views of the same setting: a light/dark/system combo and a switch.

    The switch is on only for an explicit dark mode; toggling it picks
    light or dark and leaves system behind.
    """

    _MODE_ORDER: tuple[ThemeMode, ...] = (ThemeMode.LIGHT, ThemeMode.DARK, ThemeMode.SYSTEM)

    def __init__(
        self,
        controller: SettingsController,
        translator: Translator,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._translator = translator

        self._mode_combo = QComboBox()
        self._mode_combo.setObjectName("ThemeModeCombo")
        for mode in self._MODE_ORDER:
            self._mode_combo.addItem(mode.value, mode.value)
        self._dark_switch = QCheckBox()
        self._dark_switch.setObjectName("DarkModeSwitch")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._mode_combo, 1)
        layout.addWidget(self._dark_switch)

        self.retranslate()
        self._sync(controller.theme_mode.value)

        self._mode_combo.currentIndexChanged.connect(self._on_combo_changed)
        self._dark_switch.toggled.connect(self._on_switch_toggled)
        controller.theme_mode_changed.connect(self._sync)

    @property
    def mode_combo(self) -> QComboBox:
        return self._mode_combo

    @property
    def dark_switch(self) -> QCheckBox:
        return self._dark_switch

    def retranslate(self) -> None:
        for index, mode in enumerate(self._MODE_ORDER):
            self._mode_combo.setItemText(index, self._translator.tr(f"settings.modes.{mode.value}"))
        self._dark_switch.setText(self._translator.tr("settings.dark_mode"))

    def _on_combo_changed(self, _index: int) -> None:
        value = self._mode_combo.currentData()
        if isinstance(value, str) and value != self._controller.theme_mode.value:
            self._controller.set_theme_mode(value)

    def _on_switch_toggled(self, checked: bool) -> None:
        target = ThemeMode.DARK if checked else ThemeMode.LIGHT
        if target is not self._controller.theme_mode:
            self._controller.set_theme_mode(target)

    def _sync(self, mode: str) -> None:
        index = self._mode_combo.findData(mode)
        self._mode_combo.blockSignals(True)
        self._mode_combo.setCurrentIndex(max(0, index))
        self._mode_combo.blockSignals(False)
        self._dark_switch.blockSignals(True)
        self._dark_switch.setChecked(mode == ThemeMode.DARK.value)
        self._dark_switch.blockSignals(False)
