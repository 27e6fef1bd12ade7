"""Shared fixtures: an offscreen QApplication and sample catalogs."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from chromalingo.core.translations import TranslationCatalog


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


SAMPLE_MESSAGES = {
    "en": {
        "app": {"title": "Inbox"},
        "home": {
            "greeting": "Hello, {name}!",
            "messages": "You have {count} new message | You have {count} new messages",
            "items": {"zero": "No items", "one": "One item", "other": "{count} items"},
            "only_en": "English only",
        },
        "meta": {"language_name": "English"},
    },
    "ar": {
        "app": {"title": "صندوق الوارد"},
        "home": {
            "greeting": "مرحبًا، {name}!",
            "messages": {
                "zero": "لا رسائل",
                "one": "رسالة واحدة",
                "two": "رسالتان",
                "few": "{count} رسائل",
                "many": "{count} رسالة",
                "other": "{count} رسالة",
            },
            "items": "عنصر | عناصر",
        },
        "meta": {"language_name": "العربية"},
    },
}


@pytest.fixture
def sample_messages():
    return SAMPLE_MESSAGES


@pytest.fixture
def catalog():
    return TranslationCatalog(SAMPLE_MESSAGES, fallback_locale="en")
