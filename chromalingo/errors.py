"""Error codes and error handling utilities for ChromaLingo."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for ChromaLingo operations."""

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()

    # Translation errors
    TRANSLATION_FILE_NOT_FOUND = auto()
    TRANSLATION_FILE_INVALID = auto()
    TRANSLATION_KEY_MISSING = auto()
    LOCALE_UNSUPPORTED = auto()

    # Theme errors
    THEME_NOT_FOUND = auto()

    # Operation errors
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions.",

    ErrorCode.TRANSLATION_FILE_NOT_FOUND: "Translation folder not found. Check the translations path.",
    ErrorCode.TRANSLATION_FILE_INVALID: "A translation file could not be parsed. Fix the file and restart.",
    ErrorCode.TRANSLATION_KEY_MISSING: "A translation key is missing from every loaded locale.",
    ErrorCode.LOCALE_UNSUPPORTED: "The requested locale has no translation file.",

    ErrorCode.THEME_NOT_FOUND: "The selected theme is not installed.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class ChromaLingoError(Exception):
    """Base exception for ChromaLingo with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> ChromaLingoError:
    """Classify a generic exception into a ChromaLingoError with appropriate code."""
    if isinstance(exc, ChromaLingoError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, FileNotFoundError) or "no such file" in exc_str:
        return ChromaLingoError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError) or "permission denied" in exc_str:
        return ChromaLingoError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})

    # Decoding problems in locale files
    if "JSONDecodeError" in exc_name or "YAMLError" in exc_name or isinstance(exc, UnicodeDecodeError):
        return ChromaLingoError(
            ErrorCode.TRANSLATION_FILE_INVALID,
            path=path,
            details={"original": exc_str},
        )

    return ChromaLingoError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: ChromaLingoError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, ChromaLingoError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        locale = error.details.get("locale")
        if locale:
            parts.append(f"\nLocale: {locale}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
