"""Main application window: the settings controls and a translated preview."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFormLayout,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from chromalingo.ui.themes.constants import STATUS_COLOR_KEYS, STATUS_EXTENSION
from chromalingo.ui.widgets import LocalePicker, ThemeModePicker

if TYPE_CHECKING:
    from chromalingo.config.controller import SettingsController
    from chromalingo.config.settings import AppConfig
    from chromalingo.core.translator import Translator
    from chromalingo.ui.themes.models import ThemeDescriptor
    from chromalingo.ui.themes.service import ThemeService


class MainWindow(QMainWindow):
    """Re-renders its text on locale changes and its swatches on theme changes."""

    def __init__(
        self,
        config: AppConfig,
        controller: SettingsController,
        translator: Translator,
        theme_service: ThemeService | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config
        self._controller = controller
        self._translator = translator
        self._theme_service = theme_service
        self._user_name = os.environ.get("USER") or os.environ.get("USERNAME") or "there"
        self.setMinimumSize(520, 420)
        self._setup_ui()

        translator.locale_changed.connect(self._retranslate)
        if theme_service is not None:
            theme_service.theme_changed.connect(self._on_theme_changed)
            self._on_theme_changed(theme_service.current_descriptor())
        self._retranslate()

        geometry = config.window_geometry
        if geometry:
            self.restoreGeometry(geometry)

    def _setup_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(14)

        self._title_label = QLabel()
        self._title_label.setObjectName("Title")
        self._greeting_label = QLabel()
        layout.addWidget(self._title_label)
        layout.addWidget(self._greeting_label)

        settings_card = QFrame()
        settings_card.setObjectName("Card")
        form = QFormLayout(settings_card)
        form.setContentsMargins(16, 14, 16, 14)
        self._locale_picker = LocalePicker(self._controller, self._translator)
        self._theme_picker = ThemeModePicker(self._controller, self._translator)
        self._language_label = QLabel()
        self._theme_label = QLabel()
        form.addRow(self._language_label, self._locale_picker)
        form.addRow(self._theme_label, self._theme_picker)
        layout.addWidget(settings_card)

        preview_card = QFrame()
        preview_card.setObjectName("Card")
        preview = QVBoxLayout(preview_card)
        preview.setContentsMargins(16, 14, 16, 14)

        count_row = QHBoxLayout()
        self._count_label = QLabel()
        self._count_spin = QSpinBox()
        self._count_spin.setRange(0, 1000)
        self._count_spin.setValue(1)
        self._count_spin.valueChanged.connect(self._update_counts)
        count_row.addWidget(self._count_label)
        count_row.addWidget(self._count_spin)
        count_row.addStretch(1)
        preview.addLayout(count_row)

        self._messages_label = QLabel()
        self._items_label = QLabel()
        self._items_label.setObjectName("Muted")
        preview.addWidget(self._messages_label)
        preview.addWidget(self._items_label)

        self._status_title = QLabel()
        self._status_title.setObjectName("Muted")
        preview.addWidget(self._status_title)
        self._status_labels: dict[str, QLabel] = {}
        for key in STATUS_COLOR_KEYS:
            label = QLabel()
            # Colored by the "#Ext_status_<key>" rule of the compiled stylesheet.
            label.setObjectName(f"Ext_{STATUS_EXTENSION}_{key}")
            self._status_labels[key] = label
            preview.addWidget(label)
        layout.addWidget(preview_card)
        layout.addStretch(1)

        self.setCentralWidget(central)

    @property
    def locale_picker(self) -> LocalePicker:
        return self._locale_picker

    @property
    def theme_picker(self) -> ThemeModePicker:
        return self._theme_picker

    @property
    def count_spin(self) -> QSpinBox:
        return self._count_spin

    def title_text(self) -> str:
        return self._title_label.text()

    def messages_text(self) -> str:
        return self._messages_label.text()

    def status_text(self, key: str) -> str:
        return self._status_labels[key].text()

    def _retranslate(self, _locale: str = "") -> None:
        tr = self._translator.tr
        self.setLayoutDirection(
            Qt.LayoutDirection.RightToLeft if self._translator.is_rtl else Qt.LayoutDirection.LeftToRight
        )
        self.setWindowTitle(tr("app.title"))
        self._title_label.setText(tr("settings.title"))
        self._greeting_label.setText(tr("home.greeting", name=self._user_name))
        self._language_label.setText(tr("settings.language"))
        self._theme_label.setText(tr("settings.theme_mode"))
        self._count_label.setText(tr("home.message_count"))
        self._status_title.setText(tr("home.status.title"))
        for key, label in self._status_labels.items():
            label.setText(tr(f"home.status.{key}"))
        self._theme_picker.retranslate()
        self._update_counts()

    def _update_counts(self, _value: int | None = None) -> None:
        count = self._count_spin.value()
        self._messages_label.setText(self._translator.plural("home.messages", count))
        self._items_label.setText(self._translator.plural("home.items", count))

    def _on_theme_changed(self, descriptor: ThemeDescriptor) -> None:
        try:
            status = descriptor.extension(STATUS_EXTENSION)
        except KeyError:
            return
        for key, label in self._status_labels.items():
            label.setToolTip(status.colors.get(key, ""))

    def closeEvent(self, event) -> None:
        self._config.window_geometry = self.saveGeometry()
        super().closeEvent(event)
