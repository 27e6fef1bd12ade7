"""Nested translation catalog with fallback and plural selection."""

from __future__ import annotations

import logging
import re
from typing import Any, Iterator, Mapping

from chromalingo.core.plurals import (
    PLURAL_CATEGORIES,
    PLURAL_ONE,
    PLURAL_OTHER,
    PLURAL_ZERO,
    language_of,
    plural_category,
)
from chromalingo.errors import ChromaLingoError, ErrorCode

log = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
RTL_LANGUAGES = frozenset({"ar", "he", "fa", "ur"})

_PLACEHOLDER_RE = re.compile(r"\{(\w*)\}")

Node = Any


def normalize_locale(value: object, default: str = DEFAULT_LOCALE) -> str:
    """Canonical ``ll`` / ``ll_RR`` form; ``default`` for empty input."""
    if not isinstance(value, str):
        return default
    cleaned = value.strip().replace("-", "_")
    if not cleaned:
        return default
    language, _, region = cleaned.partition("_")
    if region:
        return f"{language.lower()}_{region.upper()}"
    return language.lower()


def is_rtl(locale: str) -> bool:
    return language_of(locale) in RTL_LANGUAGES


def is_plural_mapping(node: Node) -> bool:
    """True for ``{"one": "...", "other": "..."}`` style entries."""
    return (
        isinstance(node, Mapping)
        and bool(node)
        and all(key in PLURAL_CATEGORIES and isinstance(value, str) for key, value in node.items())
    )


def is_leaf(node: Node) -> bool:
    return isinstance(node, str) or is_plural_mapping(node)


def iter_keys(tree: Mapping[str, Node], prefix: str = "") -> Iterator[str]:
    """Yield the dotted path of every leaf in ``tree``."""
    for name, node in tree.items():
        path = f"{prefix}.{name}" if prefix else name
        if is_leaf(node):
            yield path
        elif isinstance(node, Mapping):
            yield from iter_keys(node, path)


def format_message(text: str, args: tuple[Any, ...] = (), named: Mapping[str, Any] | None = None) -> str:
    """Fill ``{name}`` from ``named`` and bare ``{}`` from ``args`` in order.

    Placeholders without a matching argument are left as written.
    """
    named = named or {}
    positional = iter(args)

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name:
            if name in named:
                return str(named[name])
            return match.group(0)
        try:
            return str(next(positional))
        except StopIteration:
            return match.group(0)

    return _PLACEHOLDER_RE.sub(_replace, text)


class TranslationCatalog:
    """Translations for every loaded locale, looked up by dotted key."""

    def __init__(
        self,
        messages: Mapping[str, Mapping[str, Node]],
        fallback_locale: str = DEFAULT_LOCALE,
        *,
        strict: bool = False,
    ) -> None:
        self._messages = {normalize_locale(locale): tree for locale, tree in messages.items()}
        self._fallback = normalize_locale(fallback_locale)
        if self._fallback not in self._messages:
            raise ChromaLingoError(
                ErrorCode.LOCALE_UNSUPPORTED,
                message=f"Fallback locale {self._fallback!r} has no translations",
                details={"locale": self._fallback, "available": ", ".join(sorted(self._messages))},
            )
        self._strict = strict
        self._warned: set[tuple[str, str]] = set()

    @property
    def fallback_locale(self) -> str:
        return self._fallback

    @property
    def strict(self) -> bool:
        return self._strict

    def locales(self) -> list[str]:
        return sorted(self._messages)

    def supports(self, locale: str) -> bool:
        return normalize_locale(locale) in self._messages

    def resolve_locale(self, locale: str) -> str:
        """Map a requested locale onto one with translations."""
        requested = normalize_locale(locale, default=self._fallback)
        if requested in self._messages:
            return requested
        language = language_of(requested)
        if language in self._messages:
            return language
        return self._fallback

    def keys(self, locale: str) -> set[str]:
        return set(iter_keys(self._messages.get(normalize_locale(locale), {})))

    def missing_keys(self, locale: str) -> list[str]:
        """Keys the fallback locale defines but ``locale`` does not."""
        return sorted(self.keys(self._fallback) - self.keys(locale))

    def lookup(self, key: str, locale: str) -> Node | None:
        """Return the raw leaf for ``key``, or None when no locale has it."""
        node, _source = self._find(key, locale)
        return node

    def translate(self, key: str, locale: str, *args: Any, **named: Any) -> str:
        node, _source = self._find(key, locale)
        if node is None:
            return self._missing(key, locale)
        if is_plural_mapping(node):
            text = node.get(PLURAL_OTHER) or next(iter(node.values()))
        elif "|" in node:
            # pipe forms read as their "other" form, the last segment
            text = node.rpartition("|")[2].strip()
        else:
            text = node
        return format_message(text, args, named)

    def plural(self, key: str, count: int | float, locale: str, *args: Any, **named: Any) -> str:
        node, source = self._find(key, locale)
        if node is None:
            return self._missing(key, locale)
        form = self._select_form(node, count, source)
        named.setdefault("count", count)
        return format_message(form, args, named)

    def _find(self, key: str, locale: str) -> tuple[Node | None, str]:
        resolved = self.resolve_locale(locale)
        node = self._walk(self._messages[resolved], key)
        if node is not None:
            return node, resolved
        if resolved != self._fallback:
            node = self._walk(self._messages[self._fallback], key)
            if node is not None:
                return node, self._fallback
        return None, resolved

    @staticmethod
    def _walk(tree: Mapping[str, Node], key: str) -> Node | None:
        node: Node = tree
        for segment in key.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return None
            node = node[segment]
        return node if is_leaf(node) else None

    @staticmethod
    def _select_form(node: Node, count: int | float, locale: str) -> str:
        if is_plural_mapping(node):
            # An explicit "zero" form wins even where CLDR has no zero category.
            if count == 0 and PLURAL_ZERO in node:
                return node[PLURAL_ZERO]
            category = plural_category(locale, count)
            if category in node:
                return node[category]
            if count == 1 and PLURAL_ONE in node:
                return node[PLURAL_ONE]
            return node.get(PLURAL_OTHER) or next(iter(node.values()))

        forms = [part.strip() for part in node.split("|")]
        if len(forms) == 1:
            return forms[0]
        if len(forms) == 2:
            return forms[0] if count == 1 else forms[1]
        # zero | one | other; extra segments are ignored
        if count == 0:
            return forms[0]
        return forms[1] if count == 1 else forms[2]

    def _missing(self, key: str, locale: str) -> str:
        if self._strict:
            raise ChromaLingoError(
                ErrorCode.TRANSLATION_KEY_MISSING,
                message=f"Missing translation {key!r} for locale {locale!r}",
                details={"key": key, "locale": locale},
            )
        marker = (locale, key)
        if marker not in self._warned:
            self._warned.add(marker)
            log.warning(
                "missing translation key=%s locale=%s fallback=%s",
                key,
                locale,
                self._fallback,
            )
        return key
