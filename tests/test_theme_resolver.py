"""Tests for theme mode parsing and light/dark resolution."""

from __future__ import annotations

import pytest

from chromalingo.ui.theme import build_stylesheet, builtin_descriptors
from chromalingo.ui.themes.compiler import compile_theme_stylesheet
from chromalingo.ui.themes.models import ThemeMode, normalize_theme_mode
from chromalingo.ui.themes.resolver import ThemeResolver, resolve_brightness, resolve_theme


class _Host:
    """Stand-in for the OS color-scheme preference."""

    def __init__(self, value: str) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.value


class TestThemeMode:
    def test_parse_accepts_case_and_whitespace(self):
        assert ThemeMode.parse(" Dark ") is ThemeMode.DARK
        assert ThemeMode.parse("SYSTEM") is ThemeMode.SYSTEM
        assert ThemeMode.parse(ThemeMode.LIGHT) is ThemeMode.LIGHT

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError):
            ThemeMode.parse("sepia")
        with pytest.raises(ValueError):
            ThemeMode.parse(None)

    def test_normalize_falls_back_to_default(self):
        assert normalize_theme_mode("sepia") is ThemeMode.SYSTEM
        assert normalize_theme_mode(42, ThemeMode.LIGHT) is ThemeMode.LIGHT
        assert normalize_theme_mode("dark") is ThemeMode.DARK


class TestResolve:
    def test_explicit_modes_ignore_host(self):
        light, dark = builtin_descriptors()
        host = _Host("dark")
        assert resolve_theme(ThemeMode.LIGHT, light, dark, host) is light
        assert resolve_theme("dark", light, dark, host) is dark
        assert host.calls == 0

    def test_system_defers_to_host(self):
        light, dark = builtin_descriptors()
        assert resolve_theme(ThemeMode.SYSTEM, light, dark, "dark") is dark
        assert resolve_theme(ThemeMode.SYSTEM, light, dark, "light") is light

    def test_unknown_host_value_is_light(self):
        assert resolve_brightness(ThemeMode.SYSTEM, "no-preference") == "light"

    def test_system_requeries_host_every_time(self):
        light, dark = builtin_descriptors()
        host = _Host("light")
        resolver = ThemeResolver(light, dark, host)

        assert resolver.resolve(ThemeMode.SYSTEM) is light
        host.value = "dark"
        assert resolver.resolve(ThemeMode.SYSTEM) is dark
        assert host.calls == 2

    def test_set_pair_replaces_descriptors(self):
        light, dark = builtin_descriptors()
        resolver = ThemeResolver(light, dark, lambda: "light")
        other_light, other_dark = builtin_descriptors()
        resolver.set_pair(other_light, other_dark)
        assert resolver.resolve("light") is other_light
        assert resolver.resolve("dark") is other_dark


class TestDescriptor:
    def test_accessors(self):
        light, dark = builtin_descriptors()
        assert light.primary.startswith("#")
        assert dark.is_dark
        assert not light.is_dark
        assert light.card != dark.card

    def test_unknown_extension_raises_key_error(self):
        light, _dark = builtin_descriptors()
        with pytest.raises(KeyError):
            light.extension("brand")
        with pytest.raises(KeyError):
            light.extension("status").color("purple")


class TestStylesheet:
    def test_compiled_stylesheet_uses_descriptor_colors(self):
        _light, dark = builtin_descriptors()
        css = compile_theme_stylesheet(dark)
        assert dark.background in css
        assert "#Ext_status_success" in css
        assert dark.extension("status").color("success") in css

    def test_build_stylesheet_ignores_unknown_tokens(self):
        css = build_stylesheet(tokens={"not_a_token": "#123456"})
        assert "#123456" not in css
