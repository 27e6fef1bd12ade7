"""Plural category selection per language (simplified CLDR cardinal rules)."""

from __future__ import annotations

from typing import Callable

PLURAL_ZERO = "zero"
PLURAL_ONE = "one"
PLURAL_TWO = "two"
PLURAL_FEW = "few"
PLURAL_MANY = "many"
PLURAL_OTHER = "other"

PLURAL_CATEGORIES: tuple[str, ...] = (
    PLURAL_ZERO,
    PLURAL_ONE,
    PLURAL_TWO,
    PLURAL_FEW,
    PLURAL_MANY,
    PLURAL_OTHER,
)


def _one_other(n: int) -> str:
    return PLURAL_ONE if n == 1 else PLURAL_OTHER


def _zero_one_other_fr(n: int) -> str:
    # French treats 0 like 1.
    return PLURAL_ONE if n in (0, 1) else PLURAL_OTHER


def _east_slavic(n: int) -> str:
    if n % 10 == 1 and n % 100 != 11:
        return PLURAL_ONE
    if n % 10 in (2, 3, 4) and n % 100 not in (12, 13, 14):
        return PLURAL_FEW
    return PLURAL_MANY


def _polish(n: int) -> str:
    if n == 1:
        return PLURAL_ONE
    if n % 10 in (2, 3, 4) and n % 100 not in (12, 13, 14):
        return PLURAL_FEW
    return PLURAL_MANY


def _czech(n: int) -> str:
    if n == 1:
        return PLURAL_ONE
    if n in (2, 3, 4):
        return PLURAL_FEW
    return PLURAL_OTHER


def _arabic(n: int) -> str:
    if n == 0:
        return PLURAL_ZERO
    if n == 1:
        return PLURAL_ONE
    if n == 2:
        return PLURAL_TWO
    if 3 <= n % 100 <= 10:
        return PLURAL_FEW
    if 11 <= n % 100 <= 99:
        return PLURAL_MANY
    return PLURAL_OTHER


def _hebrew(n: int) -> str:
    if n == 1:
        return PLURAL_ONE
    if n == 2:
        return PLURAL_TWO
    return PLURAL_OTHER


def _no_plural(_n: int) -> str:
    return PLURAL_OTHER


PLURAL_RULES: dict[str, Callable[[int], str]] = {
    "en": _one_other,
    "de": _one_other,
    "nl": _one_other,
    "sv": _one_other,
    "it": _one_other,
    "es": _one_other,
    "pt": _one_other,
    "tr": _one_other,
    "fr": _zero_one_other_fr,
    "ru": _east_slavic,
    "uk": _east_slavic,
    "pl": _polish,
    "cs": _czech,
    "ar": _arabic,
    "he": _hebrew,
    "ja": _no_plural,
    "zh": _no_plural,
    "ko": _no_plural,
}


def language_of(locale: str) -> str:
    """``"ar_EG"`` / ``"ar-EG"`` -> ``"ar"``."""
    return locale.replace("-", "_").split("_", 1)[0].lower()


def plural_category(locale: str, count: int | float) -> str:
    """Return the CLDR category for ``count`` in ``locale``.

    Non-integral counts always select ``other``. Languages without a rule
    use the English one/other split.
    """
    if isinstance(count, float) and not count.is_integer():
        return PLURAL_OTHER
    n = abs(int(count))
    rule = PLURAL_RULES.get(language_of(locale), _one_other)
    return rule(n)
