"""QApplication bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from chromalingo import __version__
from chromalingo.config.controller import SettingsController
from chromalingo.config.settings import AppConfig
from chromalingo.core.translation_loader import load_catalog
from chromalingo.core.translations import TranslationCatalog
from chromalingo.core.translator import Translator
from chromalingo.errors import ChromaLingoError, classify_exception, format_error_for_user
from chromalingo.runtime_paths import builtin_themes_root, is_frozen, package_root
from chromalingo.ui.main_window import MainWindow
from chromalingo.ui.themes.registry import ThemeRegistry
from chromalingo.ui.themes.service import ThemeService


def _configure_startup_logger(config: AppConfig) -> logging.Logger:
    logger = logging.getLogger("chromalingo.startup")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = config.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "startup.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def report_coverage(catalog: TranslationCatalog, logger: logging.Logger) -> dict[str, list[str]]:
    """Log keys each locale is missing relative to the fallback locale."""
    gaps: dict[str, list[str]] = {}
    for locale in catalog.locales():
        if locale == catalog.fallback_locale:
            continue
        missing = catalog.missing_keys(locale)
        if missing:
            gaps[locale] = missing
            logger.warning(
                "locale %s is missing %d key(s), falling back to %s: %s",
                locale,
                len(missing),
                catalog.fallback_locale,
                ", ".join(missing[:8]),
            )
    return gaps


def load_startup_catalog(config: AppConfig) -> TranslationCatalog:
    """Load the configured catalog; every failure surfaces as a ChromaLingoError."""
    translations_dir = config.translations_dir
    try:
        return load_catalog(
            translations_dir,
            config.fallback_locale,
            strict=config.strict_translations,
        )
    except ChromaLingoError:
        raise
    except Exception as exc:
        raise classify_exception(exc, translations_dir) from exc


def run_app() -> int:
    """Initialize and run the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("ChromaLingo")
    app.setOrganizationName("ChromaLingo")
    app.setApplicationVersion(__version__)
    config = AppConfig()
    logger = _configure_startup_logger(config)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    try:
        catalog = load_startup_catalog(config)
    except ChromaLingoError as exc:
        logger.error("translation load failed: %s", exc.to_dict())
        QMessageBox.critical(None, "ChromaLingo", format_error_for_user(exc))
        return 1
    report_coverage(catalog, logger)

    controller = SettingsController.from_config(config)
    translator = Translator(catalog)
    translator.bind(controller)

    builtin_themes = builtin_themes_root()
    if not builtin_themes.exists():
        logger.warning("builtin theme root missing at %s", builtin_themes)

    theme_registry = ThemeRegistry(builtin_root=builtin_themes, user_root=config.themes_dir)
    theme_service = ThemeService(app, config, controller, theme_registry)
    theme_service.reload_themes()
    errors = theme_registry.load_errors()
    if errors:
        logger.warning("theme load warnings: %s", " | ".join(errors[:6]))
    ok, message = theme_service.apply_startup_theme()
    if not ok:
        logger.warning(message)

    window = MainWindow(config, controller, translator, theme_service=theme_service)
    window.show()

    exit_code = app.exec()
    config.sync()
    return exit_code
