# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for LinkedBag."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("LINKEDBAG_LOG_LEVEL", "WARNING").upper()
PACKAGE_LOGGER = "linkedbag"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure standard logging and return the package logger.

    The level is applied to the ``linkedbag`` logger as well, so bag diagnostics
    (clears, rejected copies) follow it even when the root logger was configured
    elsewhere.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    numeric_level = getattr(logging, effective_level, logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    return package_logger


__all__ = ["PACKAGE_LOGGER", "setup_logging"]
