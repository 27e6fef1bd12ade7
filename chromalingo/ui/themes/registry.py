"""Discovers theme packages in the built-in and user theme folders."""

from __future__ import annotations

import logging
from pathlib import Path

from chromalingo.ui.themes.loader import load_theme_package
from chromalingo.ui.themes.models import ThemePackage, ThemeSummary, ThemeValidationError

log = logging.getLogger(__name__)

_MAX_THEME_DIRS = 512


class ThemeRegistry:
    """Theme packages by id.

    Built-in packages load first. A user package with the same id replaces
    the built-in one; a second built-in with a taken id is skipped. Problems
    are collected in :meth:`load_errors` rather than raised.
    """

    def __init__(self, builtin_root: Path, user_root: Path) -> None:
        self._builtin_root = builtin_root
        self._user_root = user_root
        self._themes: dict[str, ThemePackage] = {}
        self._errors: list[str] = []

    @property
    def builtin_root(self) -> Path:
        return self._builtin_root

    @property
    def user_root(self) -> Path:
        return self._user_root

    def reload(self) -> None:
        self._themes = {}
        self._errors = []
        for theme_dir in self._theme_dirs(self._builtin_root):
            self._register(theme_dir, is_builtin=True)
        for theme_dir in self._theme_dirs(self._user_root):
            self._register(theme_dir, is_builtin=False)
        log.info("theme registry loaded %d package(s), %d problem(s)", len(self._themes), len(self._errors))

    def theme_ids(self) -> list[str]:
        return [row.theme_id for row in self.list_themes()]

    def list_themes(self) -> list[ThemeSummary]:
        """Summaries with built-in themes first, then by name."""
        rows = [_summarize(package) for package in self._themes.values()]
        rows.sort(key=lambda row: (not row.is_builtin, row.name.lower()))
        return rows

    def get_theme(self, theme_id: str) -> ThemePackage | None:
        return self._themes.get(theme_id)

    def load_errors(self) -> list[str]:
        return list(self._errors)

    def _error(self, message: str) -> None:
        log.warning(message)
        self._errors.append(message)

    def _theme_dirs(self, root: Path) -> list[Path]:
        if not root.is_dir():
            return []
        try:
            entries = sorted(root.iterdir())
        except OSError as exc:
            self._error(f"Failed to list themes in {root}: {exc}")
            return []

        dirs: list[Path] = []
        for entry in entries:
            if not entry.is_dir():
                continue
            if entry.is_symlink():
                self._error(f"Skipping symlink theme directory: {entry}")
                continue
            dirs.append(entry)
        if len(dirs) > _MAX_THEME_DIRS:
            self._error(f"Only the first {_MAX_THEME_DIRS} theme folders in {root} were scanned.")
            dirs = dirs[:_MAX_THEME_DIRS]
        return dirs

    def _register(self, theme_dir: Path, *, is_builtin: bool) -> None:
        try:
            package = load_theme_package(theme_dir, is_builtin=is_builtin)
        except ThemeValidationError as exc:
            self._error(str(exc))
            return

        theme_id = package.manifest.theme_id
        existing = self._themes.get(theme_id)
        if existing is not None:
            if is_builtin:
                self._error(f"Duplicate builtin theme id {theme_id!r} at {theme_dir}; skipping.")
                return
            if existing.is_builtin:
                self._error(f"User theme {theme_id!r} overrides built-in theme.")
        self._themes[theme_id] = package


def _summarize(package: ThemePackage) -> ThemeSummary:
    manifest = package.manifest
    return ThemeSummary(
        theme_id=manifest.theme_id,
        name=manifest.name,
        version=manifest.version,
        author=manifest.author,
        description=manifest.description,
        is_builtin=package.is_builtin,
        source_dir=package.source_dir,
        extensions=tuple(sorted(package.light.extensions)),
    )
