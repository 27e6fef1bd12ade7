"""Tests for catalog lookup, fallback and plural selection."""

from __future__ import annotations

import logging

import pytest

from chromalingo.core.translations import (
    TranslationCatalog,
    format_message,
    is_rtl,
    iter_keys,
    normalize_locale,
)
from chromalingo.errors import ChromaLingoError, ErrorCode


class TestLookup:
    def test_dotted_path(self, catalog):
        assert catalog.translate("app.title", "en") == "Inbox"
        assert catalog.translate("app.title", "ar") == "صندوق الوارد"

    def test_missing_segment_falls_back(self, catalog):
        assert catalog.translate("home.only_en", "ar") == "English only"

    def test_namespace_is_not_a_leaf(self, catalog):
        assert catalog.lookup("home", "en") is None

    def test_every_fallback_key_resolves_in_every_locale(self, catalog):
        for locale in catalog.locales():
            for key in catalog.keys(catalog.fallback_locale):
                assert isinstance(catalog.translate(key, locale), str)

    def test_unsupported_locale_uses_fallback(self, catalog):
        assert catalog.resolve_locale("de") == "en"
        assert catalog.translate("app.title", "de") == "Inbox"

    def test_region_resolves_to_language(self, catalog):
        assert catalog.resolve_locale("ar-EG") == "ar"
        assert catalog.translate("app.title", "ar_EG") == "صندوق الوارد"

    def test_locale_switch_round_trip(self, catalog):
        before = catalog.translate("app.title", "en")
        catalog.translate("app.title", "ar")
        assert catalog.translate("app.title", "en") == before


class TestMissingKeys:
    def test_missing_key_returns_key_and_warns_once(self, catalog, caplog):
        with caplog.at_level(logging.WARNING, logger="chromalingo.core.translations"):
            assert catalog.translate("nope.nothing", "ar") == "nope.nothing"
            assert catalog.translate("nope.nothing", "ar") == "nope.nothing"
        warnings = [r for r in caplog.records if "nope.nothing" in r.getMessage()]
        assert len(warnings) == 1

    def test_strict_mode_raises(self, sample_messages):
        strict = TranslationCatalog(sample_messages, "en", strict=True)
        with pytest.raises(ChromaLingoError) as info:
            strict.translate("nope", "en")
        assert info.value.code is ErrorCode.TRANSLATION_KEY_MISSING
        assert info.value.details["key"] == "nope"

    def test_missing_keys_report(self, catalog):
        assert catalog.missing_keys("ar") == ["home.only_en"]
        assert catalog.missing_keys("en") == []

    def test_unknown_fallback_rejected(self, sample_messages):
        with pytest.raises(ChromaLingoError) as info:
            TranslationCatalog(sample_messages, "fr")
        assert info.value.code is ErrorCode.LOCALE_UNSUPPORTED


class TestPlural:
    def test_pipe_pair(self, catalog):
        assert catalog.plural("home.messages", 1, "en") == "You have 1 new message"
        assert catalog.plural("home.messages", 5, "en") == "You have 5 new messages"
        assert catalog.plural("home.messages", 0, "en") == "You have 0 new messages"

    def test_pipe_triple(self):
        catalog = TranslationCatalog({"en": {"files": "No files | One file | {count} files"}})
        assert catalog.plural("files", 0, "en") == "No files"
        assert catalog.plural("files", 1, "en") == "One file"
        assert catalog.plural("files", 7, "en") == "7 files"

    def test_category_mapping_uses_locale_rules(self, catalog):
        assert catalog.plural("home.messages", 0, "ar") == "لا رسائل"
        assert catalog.plural("home.messages", 2, "ar") == "رسالتان"
        assert catalog.plural("home.messages", 4, "ar") == "4 رسائل"
        assert catalog.plural("home.messages", 11, "ar") == "11 رسالة"

    def test_explicit_zero_beats_cldr(self, catalog):
        assert catalog.plural("home.items", 0, "en") == "No items"
        assert catalog.plural("home.items", 1, "en") == "One item"
        assert catalog.plural("home.items", 3, "en") == "3 items"

    def test_fallback_entry_uses_fallback_rules(self):
        catalog = TranslationCatalog(
            {"en": {"apples": {"one": "an apple", "few": "a few apples", "other": "{count} apples"}}, "ar": {}},
        )
        # Arabic would pick "few" for 3; the English entry is chosen with English rules.
        assert catalog.plural("apples", 3, "ar") == "3 apples"

    def test_translate_on_plural_entry_returns_other(self, catalog):
        assert catalog.translate("home.items", "en", count=4) == "4 items"

    def test_translate_on_pipe_entry_returns_last_form(self, catalog):
        assert catalog.translate("home.messages", "en", count=3) == "You have 3 new messages"


class TestFormatting:
    def test_named_and_positional(self):
        assert format_message("{} and {}", ("a", "b")) == "a and b"
        assert format_message("Hi {name}", named={"name": "Sam"}) == "Hi Sam"

    def test_unfilled_placeholders_are_kept(self):
        assert format_message("{} {name} {}", ("x",)) == "x {name} {}"

    def test_translate_with_arguments(self, catalog):
        assert catalog.translate("home.greeting", "en", name="Dana") == "Hello, Dana!"


def test_normalize_locale():
    assert normalize_locale("EN") == "en"
    assert normalize_locale("pt-br") == "pt_BR"
    assert normalize_locale("  ") == "en"
    assert normalize_locale(None, default="fr") == "fr"


def test_is_rtl():
    assert is_rtl("ar")
    assert is_rtl("he_IL")
    assert not is_rtl("en")


def test_iter_keys_treats_plural_mapping_as_leaf(sample_messages):
    keys = set(iter_keys(sample_messages["en"]))
    assert "home.items" in keys
    assert "home.items.one" not in keys
