"""Theme package parsing and validation."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Mapping

from chromalingo.ui.themes.constants import (
    FONT_KEYS,
    REQUIRED_TOKEN_KEYS,
    THEME_SCHEMA_VERSION,
    VARIANT_FILES,
)
from chromalingo.ui.themes.models import (
    Brightness,
    ThemeDescriptor,
    ThemeExtension,
    ThemeManifest,
    ThemePackage,
    ThemeValidationError,
)

_THEME_ID_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")
_NAME_RE = re.compile(r"^[a-z][a-z0-9_]*$")
_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_COLOR_RE = re.compile(r"^(?:rgb|rgba|hsl|hsla)\([^)]+\)$", re.IGNORECASE)
_SEMVER_RE = re.compile(r"^\d+\.\d+\.\d+(?:[-+][A-Za-z0-9.-]+)?$")

_MAX_MANIFEST_BYTES = 32 * 1024
_MAX_VARIANT_BYTES = 64 * 1024
_MAX_THEME_ID_LEN = 64
_MAX_SHORT_FIELD_LEN = 120
_MAX_DESC_LEN = 240
_MAX_FONT_VALUE_LEN = 256
_MAX_COLOR_VALUE_LEN = 64
_MAX_EXTENSIONS = 32
_MAX_EXTENSION_COLORS = 64


def load_theme_package(theme_dir: Path, *, is_builtin: bool = False) -> ThemePackage:
    """Load and validate a single theme package directory."""
    if not theme_dir.exists() or not theme_dir.is_dir():
        raise ThemeValidationError(f"Theme path is not a directory: {theme_dir}")
    if theme_dir.is_symlink():
        raise ThemeValidationError(f"Theme directory cannot be a symlink: {theme_dir}")

    manifest_data = _load_json(theme_dir / "manifest.json", max_bytes=_MAX_MANIFEST_BYTES)
    manifest = _parse_manifest(manifest_data, theme_dir)

    variants: dict[str, ThemeDescriptor] = {}
    for brightness, filename in VARIANT_FILES:
        data = _load_json(theme_dir / filename, max_bytes=_MAX_VARIANT_BYTES)
        variants[brightness] = parse_descriptor(data, brightness, context=f"{theme_dir}/{filename}")

    _check_matching_extensions(variants["light"], variants["dark"], theme_dir)

    return ThemePackage(
        manifest=manifest,
        light=variants["light"],
        dark=variants["dark"],
        source_dir=theme_dir,
        is_builtin=is_builtin,
    )


def parse_descriptor(data: Mapping[str, object], brightness: Brightness, *, context: str) -> ThemeDescriptor:
    """Build a descriptor from one variant document (``light.json``/``dark.json``)."""
    _reject_unknown_keys(data, allowed={"tokens", "fonts", "extensions"}, context=context)

    tokens_data = data.get("tokens")
    if not isinstance(tokens_data, dict):
        raise ThemeValidationError(f"{context}: 'tokens' must be an object")
    tokens = _parse_tokens(tokens_data, context)

    fonts: dict[str, str] = {}
    fonts_data = data.get("fonts")
    if fonts_data is not None:
        if not isinstance(fonts_data, dict):
            raise ThemeValidationError(f"{context}: 'fonts' must be an object")
        fonts = _parse_fonts(fonts_data, context)

    extensions: dict[str, ThemeExtension] = {}
    extensions_data = data.get("extensions")
    if extensions_data is not None:
        if not isinstance(extensions_data, dict):
            raise ThemeValidationError(f"{context}: 'extensions' must be an object")
        extensions = _parse_extensions(extensions_data, context)

    return ThemeDescriptor(
        brightness=brightness,
        tokens=tokens,
        fonts=fonts,
        extensions=extensions,
    )


def is_valid_color(value: str) -> bool:
    if _HEX_COLOR_RE.match(value):
        return True
    if _FUNC_COLOR_RE.match(value):
        return True
    return False


def _load_json(path: Path, *, max_bytes: int) -> Mapping[str, object]:
    content = _read_text_limited(path, max_bytes=max_bytes)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ThemeValidationError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ThemeValidationError(f"Expected JSON object in {path}")
    return data


def _parse_manifest(data: Mapping[str, object], theme_dir: Path) -> ThemeManifest:
    _reject_unknown_keys(
        data,
        allowed={
            "schema_version",
            "theme_id",
            "name",
            "version",
            "author",
            "description",
        },
        context=f"{theme_dir}/manifest.json",
    )

    schema_version = _required_str(data, "schema_version", theme_dir, max_len=8)
    if schema_version != THEME_SCHEMA_VERSION:
        raise ThemeValidationError(
            f"{theme_dir}: unsupported schema_version {schema_version!r}; "
            f"expected {THEME_SCHEMA_VERSION!r}"
        )

    theme_id = _required_str(data, "theme_id", theme_dir, max_len=_MAX_THEME_ID_LEN)
    if not _THEME_ID_RE.match(theme_id):
        raise ThemeValidationError(
            f"{theme_dir}: theme_id must match pattern [a-z0-9-], got {theme_id!r}"
        )

    version = _required_str(data, "version", theme_dir, max_len=40)
    if not _SEMVER_RE.match(version):
        raise ThemeValidationError(f"{theme_dir}: manifest version must be semver-like, got {version!r}")

    return ThemeManifest(
        schema_version=schema_version,
        theme_id=theme_id,
        name=_required_str(data, "name", theme_dir, max_len=_MAX_SHORT_FIELD_LEN),
        version=version,
        author=_required_str(data, "author", theme_dir, max_len=_MAX_SHORT_FIELD_LEN),
        description=_required_str(data, "description", theme_dir, max_len=_MAX_DESC_LEN),
    )


def _parse_tokens(data: Mapping[str, object], context: str) -> dict[str, str]:
    _reject_unknown_keys(data, allowed=set(REQUIRED_TOKEN_KEYS), context=f"{context} tokens")
    missing = [key for key in REQUIRED_TOKEN_KEYS if key not in data]
    if missing:
        joined = ", ".join(sorted(missing))
        raise ThemeValidationError(f"{context}: missing required token keys: {joined}")

    return {key: _parse_color(data.get(key), f"token {key!r}", context) for key in REQUIRED_TOKEN_KEYS}


def _parse_fonts(data: Mapping[str, object], context: str) -> dict[str, str]:
    _reject_unknown_keys(data, allowed=set(FONT_KEYS), context=f"{context} fonts")
    fonts: dict[str, str] = {}
    for key in FONT_KEYS:
        raw = data.get(key)
        if raw is None:
            continue
        if not isinstance(raw, str) or not raw.strip():
            raise ThemeValidationError(f"{context}: font {key!r} must be a non-empty string")
        cleaned = raw.strip()
        if len(cleaned) > _MAX_FONT_VALUE_LEN:
            raise ThemeValidationError(f"{context}: font {key!r} value is too long")
        fonts[key] = cleaned
    return fonts


def _parse_extensions(data: Mapping[str, object], context: str) -> dict[str, ThemeExtension]:
    if len(data) > _MAX_EXTENSIONS:
        raise ThemeValidationError(f"{context}: too many extensions (max {_MAX_EXTENSIONS})")
    extensions: dict[str, ThemeExtension] = {}
    for name, group in data.items():
        if not _NAME_RE.match(name):
            raise ThemeValidationError(f"{context}: invalid extension name {name!r}")
        if not isinstance(group, dict) or not group:
            raise ThemeValidationError(f"{context}: extension {name!r} must be a non-empty object")
        if len(group) > _MAX_EXTENSION_COLORS:
            raise ThemeValidationError(f"{context}: extension {name!r} has too many colors")
        colors: dict[str, str] = {}
        for key, value in group.items():
            if not _NAME_RE.match(key):
                raise ThemeValidationError(f"{context}: invalid color name {name}.{key}")
            colors[key] = _parse_color(value, f"extension color {name}.{key}", context)
        extensions[name] = ThemeExtension(name=name, colors=colors)
    return extensions


def _parse_color(value: object, label: str, context: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ThemeValidationError(f"{context}: {label} must be a non-empty string")
    cleaned = value.strip()
    if len(cleaned) > _MAX_COLOR_VALUE_LEN:
        raise ThemeValidationError(f"{context}: {label} value is too long")
    if not is_valid_color(cleaned):
        raise ThemeValidationError(f"{context}: {label} has invalid color {cleaned!r}")
    return cleaned


def _check_matching_extensions(light: ThemeDescriptor, dark: ThemeDescriptor, theme_dir: Path) -> None:
    light_shape = {name: set(ext.colors) for name, ext in light.extensions.items()}
    dark_shape = {name: set(ext.colors) for name, ext in dark.extensions.items()}
    if light_shape != dark_shape:
        raise ThemeValidationError(
            f"{theme_dir}: light and dark variants must declare the same extension colors"
        )


def _required_str(data: Mapping[str, object], key: str, theme_dir: Path, *, max_len: int) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ThemeValidationError(f"{theme_dir}: field {key!r} must be a non-empty string")
    cleaned = value.strip()
    if len(cleaned) > max_len:
        raise ThemeValidationError(f"{theme_dir}: field {key!r} exceeds max length {max_len}")
    if any(ch in cleaned for ch in ("\n", "\r", "\t")):
        raise ThemeValidationError(f"{theme_dir}: field {key!r} must be a single line string")
    return cleaned


def _reject_unknown_keys(
    data: Mapping[str, object],
    *,
    allowed: set[str],
    context: str,
) -> None:
    unknown = sorted(key for key in data.keys() if key not in allowed)
    if unknown:
        joined = ", ".join(unknown)
        raise ThemeValidationError(f"{context}: unsupported keys found: {joined}")


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ThemeValidationError(f"Unable to stat {path}: {exc}") from exc
    if size > max_bytes:
        raise ThemeValidationError(f"{path}: file exceeds max size ({max_bytes} bytes)")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeValidationError(f"Unable to read {path}: {exc}") from exc
