"""Smoke tests for the main window wiring."""

from __future__ import annotations

from pathlib import Path

import pytest
from PySide6.QtCore import QSettings, Qt

from chromalingo.config.controller import SettingsController
from chromalingo.config.settings import AppConfig
from chromalingo.core.translation_loader import load_catalog
from chromalingo.core.translator import Translator
from chromalingo.runtime_paths import builtin_themes_root, builtin_translations_root
from chromalingo.ui.main_window import MainWindow
from chromalingo.ui.themes.models import ThemeMode
from chromalingo.ui.themes.registry import ThemeRegistry
from chromalingo.ui.themes.service import ThemeService


@pytest.fixture
def window(qapp, tmp_path: Path):
    config = AppConfig(QSettings(str(tmp_path / "config.ini"), QSettings.Format.IniFormat))
    controller = SettingsController(theme_mode="light", locale="en")
    translator = Translator(load_catalog(builtin_translations_root(), "en"))
    translator.bind(controller)
    registry = ThemeRegistry(builtin_root=builtin_themes_root(), user_root=tmp_path / "themes")
    service = ThemeService(qapp, config, controller, registry, host_brightness=lambda: "light")
    service.reload_themes()
    service.apply_startup_theme()
    win = MainWindow(config, controller, translator, theme_service=service)
    yield win, controller
    win.deleteLater()


def test_initial_texts(window) -> None:
    win, _controller = window
    assert win.windowTitle() == "ChromaLingo"
    assert win.messages_text() == "You have 1 new message"
    assert win.status_text("success") == "Saved"


def test_locale_change_retranslates_and_flips_direction(window) -> None:
    win, controller = window

    controller.set_locale("ar")

    assert win.title_text() == "الإعدادات"
    assert win.layoutDirection() == Qt.LayoutDirection.RightToLeft
    assert win.locale_picker.selected_locale() == "ar"

    controller.set_locale("en")
    assert win.title_text() == "Settings"
    assert win.layoutDirection() == Qt.LayoutDirection.LeftToRight


def test_count_spin_updates_plural(window) -> None:
    win, _controller = window
    win.count_spin.setValue(5)
    assert win.messages_text() == "You have 5 new messages"


def test_picker_writes_through_controller(window) -> None:
    win, controller = window
    index = win.locale_picker.findData("fr")
    win.locale_picker.setCurrentIndex(index)
    assert controller.locale == "fr"

    win.theme_picker.dark_switch.setChecked(True)
    assert controller.theme_mode is ThemeMode.DARK
    assert win.theme_picker.mode_combo.currentData() == "dark"


def test_controller_updates_pickers(window) -> None:
    win, controller = window
    controller.set_theme_mode("system")
    assert win.theme_picker.mode_combo.currentData() == "system"
    assert not win.theme_picker.dark_switch.isChecked()
