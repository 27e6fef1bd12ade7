"""Translation file discovery and parsing.

Layout::

    <root>/en.json              -> top level of the "en" tree
    <root>/ar.yaml              -> top level of the "ar" tree
    <root>/settings/en.json     -> mounted at "settings" in the "en" tree

Any malformed file aborts loading with a ChromaLingoError naming the file
and its locale.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping

import yaml
from yaml.composer import ComposerError

from chromalingo.core.translations import TranslationCatalog, normalize_locale
from chromalingo.errors import ChromaLingoError, ErrorCode

log = logging.getLogger(__name__)

_LOCALE_STEM_RE = re.compile(r"^[A-Za-z]{2,3}(?:[_-][A-Za-z0-9]{2,8})?$")
_FEATURE_RE = re.compile(r"^[a-z][a-z0-9_]*$")
_SUFFIXES = (".json", ".yaml", ".yml")

_MAX_FILE_BYTES = 512 * 1024
_MAX_DEPTH = 16
_MAX_KEYS = 50_000


class _NoAliasLoader(yaml.SafeLoader):
    """SafeLoader that rejects aliases; every key must be written out."""

    def compose_node(self, parent, index):
        if self.check_event(yaml.AliasEvent):
            event = self.peek_event()
            raise ComposerError(
                None,
                None,
                "aliases are not allowed in translation files",
                event.start_mark,
            )
        return super().compose_node(parent, index)


def load_translations(root: Path) -> dict[str, dict[str, Any]]:
    """Read every locale file under ``root`` into one tree per locale."""
    if not root.exists() or not root.is_dir():
        raise ChromaLingoError(
            ErrorCode.TRANSLATION_FILE_NOT_FOUND,
            message=f"Translation folder not found: {root}",
            path=root,
        )

    messages: dict[str, dict[str, Any]] = {}
    for locale, path in _locale_files(root):
        messages.setdefault(locale, {}).update(_read_tree(path, locale))

    for feature_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        if not _FEATURE_RE.match(feature_dir.name):
            log.debug("skipping non-feature directory %s", feature_dir)
            continue
        for locale, path in _locale_files(feature_dir):
            tree = messages.setdefault(locale, {})
            if feature_dir.name in tree:
                raise _invalid(
                    path,
                    locale,
                    f"feature folder {feature_dir.name!r} collides with a top-level key",
                )
            tree[feature_dir.name] = _read_tree(path, locale)

    log.info("loaded translations for %s from %s", ", ".join(sorted(messages)) or "-", root)
    return messages


def load_catalog(root: Path, fallback_locale: str = "en", *, strict: bool = False) -> TranslationCatalog:
    return TranslationCatalog(load_translations(root), fallback_locale, strict=strict)


def _locale_files(directory: Path) -> list[tuple[str, Path]]:
    found: dict[str, Path] = {}
    for path in sorted(directory.iterdir()):
        if not path.is_file() or path.suffix.lower() not in _SUFFIXES:
            continue
        if not _LOCALE_STEM_RE.match(path.stem):
            log.warning("ignoring %s: file name is not a locale identifier", path)
            continue
        locale = normalize_locale(path.stem)
        if locale in found:
            raise _invalid(path, locale, f"duplicates {found[locale].name}")
        found[locale] = path
    return sorted(found.items())


def _read_tree(path: Path, locale: str) -> dict[str, Any]:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise _invalid(path, locale, f"unable to stat file: {exc}") from exc
    if size > _MAX_FILE_BYTES:
        raise _invalid(path, locale, f"file exceeds max size ({_MAX_FILE_BYTES} bytes)")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise _invalid(path, locale, f"unable to read file: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.load(content, Loader=_NoAliasLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise _invalid(path, locale, f"parse error: {exc}") from exc
    except RecursionError as exc:
        raise _invalid(path, locale, "parse error: nesting too deep") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise _invalid(path, locale, "top level must be an object")
    _validate_node(data, path, locale, prefix="", depth=0)
    return data


def _validate_node(node: Mapping[Any, Any], path: Path, locale: str, *, prefix: str, depth: int) -> int:
    """Check keys and leaf types; return the number of keys below ``node``."""
    if depth > _MAX_DEPTH:
        raise _invalid(path, locale, f"nesting deeper than {_MAX_DEPTH} levels at {prefix!r}")
    count = 0
    for key, value in node.items():
        count += 1
        if not isinstance(key, str) or not key or "." in key:
            raise _invalid(path, locale, f"invalid key {key!r} under {prefix or '<root>'!r}")
        dotted = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            count += _validate_node(value, path, locale, prefix=dotted, depth=depth + 1)
        elif not isinstance(value, str):
            raise _invalid(
                path,
                locale,
                f"value at {dotted!r} must be a string or object, got {type(value).__name__}",
            )
        if count > _MAX_KEYS:
            raise _invalid(path, locale, f"too many keys (max {_MAX_KEYS})")
    return count


def _invalid(path: Path, locale: str, reason: str) -> ChromaLingoError:
    return ChromaLingoError(
        ErrorCode.TRANSLATION_FILE_INVALID,
        message=f"Invalid translation file {path} (locale {locale!r}): {reason}",
        path=path,
        details={"locale": locale},
    )
