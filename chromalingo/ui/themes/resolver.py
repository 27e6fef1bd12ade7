"""Pick the descriptor to render for a theme mode.

``system`` is never cached: the host preference is asked again on every
call, so a change in the OS setting shows up on the next resolve without
touching the settings controller.
"""

from __future__ import annotations

from typing import Callable, Union

from chromalingo.ui.themes.models import Brightness, ThemeDescriptor, ThemeMode

HostBrightness = Union[str, Callable[[], str]]


def resolve_brightness(mode: ThemeMode | str, host_brightness: HostBrightness) -> Brightness:
    mode = ThemeMode.parse(mode)
    if mode is ThemeMode.LIGHT:
        return "light"
    if mode is ThemeMode.DARK:
        return "dark"
    value = host_brightness() if callable(host_brightness) else host_brightness
    return "dark" if value == "dark" else "light"


def resolve_theme(
    mode: ThemeMode | str,
    light: ThemeDescriptor,
    dark: ThemeDescriptor,
    host_brightness: HostBrightness,
) -> ThemeDescriptor:
    if resolve_brightness(mode, host_brightness) == "dark":
        return dark
    return light


class ThemeResolver:
    """Light/dark pair bound to a host brightness provider."""

    def __init__(
        self,
        light: ThemeDescriptor,
        dark: ThemeDescriptor,
        host_brightness: Callable[[], str],
    ) -> None:
        self._light = light
        self._dark = dark
        self._host_brightness = host_brightness

    @property
    def light(self) -> ThemeDescriptor:
        return self._light

    @property
    def dark(self) -> ThemeDescriptor:
        return self._dark

    def set_pair(self, light: ThemeDescriptor, dark: ThemeDescriptor) -> None:
        self._light = light
        self._dark = dark

    def host_brightness(self) -> Brightness:
        return "dark" if self._host_brightness() == "dark" else "light"

    def resolve(self, mode: ThemeMode | str) -> ThemeDescriptor:
        return resolve_theme(mode, self._light, self._dark, self._host_brightness)
