# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
LinkedBag package entrypoint.

This package provides a generic bag (multiset) container backed by a singly
linked list. Elements keep their insertion order, duplicates are stored as
separate entries, and membership is decided by value equality, which can be
replaced by an injected comparison function.
"""

from .bag import LinkedBag
from .config import BagSettings, load_bag_settings
from .errors import (
    ErrorCategory,
    HashNotSupportedError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    LinkedBagError,
    categorize_exception,
    error_category_to_reason,
)
from .log import PACKAGE_LOGGER, setup_logging
from .version import __version__

__all__ = [
    "BagSettings",
    "ErrorCategory",
    "HashNotSupportedError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "LinkedBag",
    "LinkedBagError",
    "PACKAGE_LOGGER",
    "categorize_exception",
    "error_category_to_reason",
    "load_bag_settings",
    "setup_logging",
    "__version__",
]
