"""Theme compilation helpers."""

from __future__ import annotations

from chromalingo.ui.theme import build_stylesheet
from chromalingo.ui.themes.models import ThemeDescriptor


def compile_theme_stylesheet(descriptor: ThemeDescriptor) -> str:
    """Compile a resolved descriptor into an application stylesheet."""
    return build_stylesheet(
        tokens=descriptor.tokens,
        fonts=descriptor.fonts,
        extensions=descriptor.extensions,
    )
