"""Theme framework constants."""

from __future__ import annotations

DEFAULT_THEME_ID = "chromalingo-default"
THEME_SCHEMA_VERSION = "1"

VARIANT_FILES: tuple[tuple[str, str], ...] = (
    ("light", "light.json"),
    ("dark", "dark.json"),
)

REQUIRED_TOKEN_KEYS: tuple[str, ...] = (
    "primary",
    "primary_hover",
    "on_primary",
    "background",
    "card",
    "surface",
    "line",
    "text_primary",
    "text_muted",
    "danger",
    "focus_ring",
)

FONT_KEYS: tuple[str, ...] = (
    "body",
    "display",
)

# Extension groups every descriptor is expected to carry.
STATUS_EXTENSION = "status"
STATUS_COLOR_KEYS: tuple[str, ...] = (
    "success",
    "warning",
    "info",
)
