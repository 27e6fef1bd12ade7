"""Application-wide visual theme styling."""

from __future__ import annotations

from typing import Mapping

from chromalingo.ui.themes.constants import STATUS_EXTENSION
from chromalingo.ui.themes.models import ThemeDescriptor, ThemeExtension

# Built-in palettes, used when no theme package can be loaded.
LIGHT_TOKENS = {
    "primary": "#2f6fde",
    "primary_hover": "#2a62c4",
    "on_primary": "#ffffff",
    "background": "#f4f6fa",
    "card": "#ffffff",
    "surface": "#eef1f7",
    "line": "#d5dbe7",
    "text_primary": "#1b2230",
    "text_muted": "#5d687d",
    "danger": "#c84646",
    "focus_ring": "#6f9cf0",
}

DARK_TOKENS = {
    "primary": "#7aa7ff",
    "primary_hover": "#93b8ff",
    "on_primary": "#0e1015",
    "background": "#0e1015",
    "card": "#171b24",
    "surface": "#1d2230",
    "line": "#2a3143",
    "text_primary": "#e6ebf5",
    "text_muted": "#93a0b8",
    "danger": "#d76868",
    "focus_ring": "#8cb6ff",
}

LIGHT_STATUS = {"success": "#2e8b57", "warning": "#c98a16", "info": "#2f6fde"}
DARK_STATUS = {"success": "#5fb484", "warning": "#e0b050", "info": "#8cb6ff"}

FONTS = {
    "body": '"Noto Sans", "Noto Sans Arabic", "Segoe UI", sans-serif',
    "display": '"Noto Sans", "Segoe UI Semibold", "Segoe UI", sans-serif',
}


def builtin_descriptors() -> tuple[ThemeDescriptor, ThemeDescriptor]:
    """Return the built-in (light, dark) pair."""
    light = ThemeDescriptor(
        brightness="light",
        tokens=dict(LIGHT_TOKENS),
        fonts=dict(FONTS),
        extensions={STATUS_EXTENSION: ThemeExtension(STATUS_EXTENSION, dict(LIGHT_STATUS))},
    )
    dark = ThemeDescriptor(
        brightness="dark",
        tokens=dict(DARK_TOKENS),
        fonts=dict(FONTS),
        extensions={STATUS_EXTENSION: ThemeExtension(STATUS_EXTENSION, dict(DARK_STATUS))},
    )
    return light, dark


def _base_styles(t: Mapping[str, str], f: Mapping[str, str]) -> str:
    return f"""
QWidget {{
    background-color: {t["background"]};
    color: {t["text_primary"]};
    font-family: {f["body"]};
    font-size: 10pt;
}}

QLabel {{
    background-color: transparent;
    color: {t["text_primary"]};
}}

#Title {{
    font-family: {f["display"]};
    font-size: 16pt;
    font-weight: 700;
}}

#Muted {{
    color: {t["text_muted"]};
    font-size: 9pt;
}}

#Card {{
    background-color: {t["card"]};
    border: 1px solid {t["line"]};
    border-radius: 10px;
}}
"""


def _form_styles(t: Mapping[str, str]) -> str:
    return f"""
QComboBox, QSpinBox {{
    background-color: {t["card"]};
    border: 1px solid {t["line"]};
    border-radius: 7px;
    padding: 5px 8px;
    color: {t["text_primary"]};
}}

QComboBox:focus, QSpinBox:focus {{
    border: 1px solid {t["focus_ring"]};
}}

QComboBox QAbstractItemView {{
    background-color: {t["card"]};
    border: 1px solid {t["line"]};
    selection-background-color: {t["surface"]};
}}

QCheckBox {{
    background-color: transparent;
    spacing: 6px;
}}

QCheckBox::indicator {{
    width: 28px;
    height: 14px;
    border: 1px solid {t["line"]};
    border-radius: 7px;
    background-color: {t["surface"]};
}}

QCheckBox::indicator:checked {{
    background-color: {t["primary"]};
    border-color: {t["primary"]};
}}

QPushButton {{
    background-color: {t["primary"]};
    color: {t["on_primary"]};
    border: none;
    border-radius: 7px;
    padding: 5px 11px;
}}

QPushButton:hover {{
    background-color: {t["primary_hover"]};
}}
"""


def _extension_styles(extensions: Mapping[str, ThemeExtension]) -> str:
    # One selector per extension color: #Ext_status_success etc.
    blocks = []
    for name, extension in sorted(extensions.items()):
        for key, color in sorted(extension.colors.items()):
            blocks.append(f"#Ext_{name}_{key} {{\n    color: {color};\n}}\n")
    return "\n".join(blocks)


def build_stylesheet(
    *,
    tokens: Mapping[str, str] | None = None,
    fonts: Mapping[str, str] | None = None,
    extensions: Mapping[str, ThemeExtension] | None = None,
) -> str:
    """Build the application stylesheet with token/font overrides."""
    resolved_tokens = dict(LIGHT_TOKENS)
    for key, value in (tokens or {}).items():
        if key in resolved_tokens and isinstance(value, str) and value:
            resolved_tokens[key] = value

    resolved_fonts = dict(FONTS)
    for key, value in (fonts or {}).items():
        if key in resolved_fonts and isinstance(value, str) and value:
            resolved_fonts[key] = value

    return "\n".join(
        [
            _base_styles(resolved_tokens, resolved_fonts),
            _form_styles(resolved_tokens),
            _extension_styles(extensions or {}),
        ]
    )
