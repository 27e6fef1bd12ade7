"""Theme plugin framework exports."""

from chromalingo.ui.themes.constants import DEFAULT_THEME_ID
from chromalingo.ui.themes.models import (
    ThemeDescriptor,
    ThemeExtension,
    ThemeMode,
    ThemePackage,
    ThemeSummary,
    ThemeValidationError,
)
from chromalingo.ui.themes.registry import ThemeRegistry
from chromalingo.ui.themes.resolver import ThemeResolver, resolve_brightness, resolve_theme

__all__ = [
    "DEFAULT_THEME_ID",
    "ThemeDescriptor",
    "ThemeExtension",
    "ThemeMode",
    "ThemePackage",
    "ThemeSummary",
    "ThemeValidationError",
    "ThemeRegistry",
    "ThemeResolver",
    "resolve_brightness",
    "resolve_theme",
]
