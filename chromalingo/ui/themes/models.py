"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal, Mapping

Brightness = Literal["light", "dark"]


class ThemeValidationError(ValueError):
    """Raised when a theme package fails validation."""


class ThemeMode(str, Enum):
    """Which descriptor the UI renders with."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    @classmethod
    def parse(cls, value: object) -> ThemeMode:
        if isinstance(value, ThemeMode):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            for mode in cls:
                if mode.value == lowered:
                    return mode
        raise ValueError(f"Unknown theme mode: {value!r}")


DEFAULT_THEME_MODE = ThemeMode.SYSTEM


def normalize_theme_mode(value: object, default: ThemeMode = DEFAULT_THEME_MODE) -> ThemeMode:
    try:
        return ThemeMode.parse(value)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class ThemeExtension:
    """A named bundle of auxiliary colors attached to a descriptor."""

    name: str
    colors: Mapping[str, str]

    def color(self, key: str) -> str:
        try:
            return self.colors[key]
        except KeyError:
            raise KeyError(f"Extension {self.name!r} has no color {key!r}") from None


@dataclass(frozen=True, slots=True)
class ThemeDescriptor:
    """Colors and fonts for one brightness of a theme."""

    brightness: Brightness
    tokens: Mapping[str, str]
    fonts: Mapping[str, str] = field(default_factory=dict)
    extensions: Mapping[str, ThemeExtension] = field(default_factory=dict)

    @property
    def primary(self) -> str:
        return self.tokens["primary"]

    @property
    def card(self) -> str:
        return self.tokens["card"]

    @property
    def background(self) -> str:
        return self.tokens["background"]

    @property
    def is_dark(self) -> bool:
        return self.brightness == "dark"

    def extension(self, name: str) -> ThemeExtension:
        try:
            return self.extensions[name]
        except KeyError:
            raise KeyError(f"Theme has no extension {name!r}") from None


@dataclass(frozen=True, slots=True)
class ThemeManifest:
    """Theme metadata parsed from manifest.json."""

    schema_version: str
    theme_id: str
    name: str
    version: str
    author: str
    description: str


@dataclass(frozen=True, slots=True)
class ThemePackage:
    """A fully loaded theme package with both brightness variants."""

    manifest: ThemeManifest
    light: ThemeDescriptor
    dark: ThemeDescriptor
    source_dir: Path
    is_builtin: bool

    def variant(self, brightness: Brightness) -> ThemeDescriptor:
        return self.dark if brightness == "dark" else self.light


@dataclass(frozen=True, slots=True)
class ThemeSummary:
    """Display-ready theme metadata."""

    theme_id: str
    name: str
    version: str
    author: str
    description: str
    is_builtin: bool
    source_dir: Path
    extensions: tuple[str, ...] = ()
