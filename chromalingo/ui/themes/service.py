"""Runtime theme resolve and apply service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtWidgets import QApplication

from chromalingo.errors import ChromaLingoError, ErrorCode, format_error_for_user
from chromalingo.ui.theme import builtin_descriptors
from chromalingo.ui.themes.compiler import compile_theme_stylesheet
from chromalingo.ui.themes.constants import DEFAULT_THEME_ID
from chromalingo.ui.themes.models import Brightness, ThemeDescriptor, ThemeMode, ThemeSummary
from chromalingo.ui.themes.registry import ThemeRegistry
from chromalingo.ui.themes.resolver import ThemeResolver

if TYPE_CHECKING:
    from chromalingo.config.controller import SettingsController
    from chromalingo.config.settings import AppConfig

log = logging.getLogger(__name__)


def qt_host_brightness() -> Brightness:
    """Ask Qt for the OS color scheme; unknown counts as light."""
    app = QApplication.instance()
    if app is None:
        return "light"
    scheme = app.styleHints().colorScheme()
    return "dark" if scheme == Qt.ColorScheme.Dark else "light"


class ThemeService(QObject):
    """Resolve the active descriptor and apply it to QApplication."""

    theme_changed = Signal(object)

    def __init__(
        self,
        app: QApplication,
        config: AppConfig,
        controller: SettingsController,
        registry: ThemeRegistry,
        host_brightness: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._app = app
        self._config = config
        self._controller = controller
        self._registry = registry
        light, dark = builtin_descriptors()
        self._resolver = ThemeResolver(light, dark, host_brightness or qt_host_brightness)
        self._active_theme_id = ""

        controller.theme_mode_changed.connect(self._on_theme_mode_changed)
        if host_brightness is None:
            app.styleHints().colorSchemeChanged.connect(self._on_host_scheme_changed)

    @property
    def active_theme_id(self) -> str:
        return self._active_theme_id

    @property
    def user_themes_dir(self) -> Path:
        return self._registry.user_root

    def reload_themes(self) -> list[str]:
        self._registry.reload()
        return self._registry.load_errors()

    def available_themes(self) -> list[ThemeSummary]:
        return self._registry.list_themes()

    def current_descriptor(self) -> ThemeDescriptor:
        return self._resolver.resolve(self._controller.theme_mode)

    def apply_current(self) -> ThemeDescriptor:
        descriptor = self.current_descriptor()
        self._app.setStyleSheet(compile_theme_stylesheet(descriptor))
        log.debug(
            "applied %s variant of %s (mode=%s)",
            descriptor.brightness,
            self._active_theme_id or "builtin",
            self._controller.theme_mode.value,
        )
        self.theme_changed.emit(descriptor)
        return descriptor

    def apply_theme(self, theme_id: str, *, persist: bool = True) -> tuple[bool, str]:
        package = self._registry.get_theme(theme_id)
        if package is None:
            error = ChromaLingoError(
                ErrorCode.THEME_NOT_FOUND,
                message=f"Theme not found: {theme_id}",
                details={"theme_id": theme_id},
            )
            log.warning("theme lookup failed: %s", error.to_dict())
            return False, format_error_for_user(error)

        self._resolver.set_pair(package.light, package.dark)
        self._active_theme_id = theme_id
        if persist:
            self._config.theme_id = theme_id
        self._config.theme_last_known_good_id = theme_id
        self.apply_current()
        return True, f"Applied theme: {package.manifest.name}"

    def apply_startup_theme(self) -> tuple[bool, str]:
        requested = self._config.theme_id
        fallback = self._config.theme_last_known_good_id
        candidates = [requested, fallback, DEFAULT_THEME_ID]
        seen: set[str] = set()

        for candidate in candidates:
            if not candidate or candidate in seen:
                continue
            seen.add(candidate)
            ok, message = self.apply_theme(candidate, persist=True)
            if ok:
                return True, message
            log.warning("startup theme candidate rejected: %s", message)

        light, dark = builtin_descriptors()
        self._resolver.set_pair(light, dark)
        self._active_theme_id = DEFAULT_THEME_ID
        self._config.theme_id = DEFAULT_THEME_ID
        self._config.theme_last_known_good_id = DEFAULT_THEME_ID
        self.apply_current()
        return False, "No valid theme package found; reverted to built-in default stylesheet."

    def refresh_from_host(self) -> None:
        """Re-apply after an externally detected host change."""
        self._on_host_scheme_changed(None)

    def _on_theme_mode_changed(self, _mode: str) -> None:
        self.apply_current()

    def _on_host_scheme_changed(self, _scheme) -> None:
        if self._controller.theme_mode is ThemeMode.SYSTEM:
            self.apply_current()
