"""Tests for error classification and user-facing formatting."""

from __future__ import annotations

import json
from pathlib import Path

from chromalingo.errors import (
    ChromaLingoError,
    ErrorCode,
    classify_exception,
    format_error_for_user,
)


def test_default_message_and_suggestion() -> None:
    error = ChromaLingoError(ErrorCode.TRANSLATION_KEY_MISSING, details={"key": "a.b"})
    assert error.message
    assert error.suggestion
    assert "key=a.b" in str(error)
    assert error.to_dict()["code"] == "TRANSLATION_KEY_MISSING"


def test_classify_builtin_exceptions(tmp_path: Path) -> None:
    path = tmp_path / "fr.json"
    assert classify_exception(FileNotFoundError("gone"), path).code is ErrorCode.FILE_NOT_FOUND
    assert classify_exception(PermissionError("nope"), path).code is ErrorCode.FILE_ACCESS_DENIED
    try:
        json.loads("{")
    except json.JSONDecodeError as exc:
        assert classify_exception(exc, path).code is ErrorCode.TRANSLATION_FILE_INVALID
    other = classify_exception(RuntimeError("boom"))
    assert other.code is ErrorCode.OPERATION_FAILED
    assert "RuntimeError" in other.message


def test_classify_passes_through_own_errors() -> None:
    error = ChromaLingoError(ErrorCode.THEME_NOT_FOUND)
    assert classify_exception(error) is error


def test_format_for_user_names_file_and_locale(tmp_path: Path) -> None:
    error = ChromaLingoError(
        ErrorCode.TRANSLATION_FILE_INVALID,
        message="Invalid translation file",
        path=tmp_path / "ar.json",
        details={"locale": "ar"},
    )
    text = format_error_for_user(error)
    assert "File: ar.json" in text
    assert "Locale: ar" in text


def test_format_for_user_classifies_plain_exceptions() -> None:
    assert format_error_for_user(ValueError("odd value")).startswith("ValueError")
