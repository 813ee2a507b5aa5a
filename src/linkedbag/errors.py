# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    NONE = "NONE"


class LinkedBagError(Exception):
    """Base class for errors raised by LinkedBag operations."""

    category: ErrorCategory = ErrorCategory.NONE


class InvalidArgumentError(LinkedBagError, ValueError):
    """Copy destination is missing or too small."""

    category = ErrorCategory.INVALID_ARGUMENT


class IndexOutOfRangeError(LinkedBagError, IndexError):
    """Copy start index is negative."""

    category = ErrorCategory.INDEX_OUT_OF_RANGE


class HashNotSupportedError(LinkedBagError, NotImplementedError):
    category = ErrorCategory.NOT_IMPLEMENTED


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map an exception to ErrorCategory.

    Exceptions raised outside this package map to ``ErrorCategory.NONE``.
    """
    if isinstance(exc, LinkedBagError):
        return exc.category
    return ErrorCategory.NONE


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.INVALID_ARGUMENT: "Destination is missing or has insufficient space",
        ErrorCategory.INDEX_OUT_OF_RANGE: "Start index is out of range",
        ErrorCategory.NOT_IMPLEMENTED: "Operation is not supported",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Unexpected bag error")


__all__ = [
    "ErrorCategory",
    "HashNotSupportedError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "LinkedBagError",
    "categorize_exception",
    "error_category_to_reason",
]
