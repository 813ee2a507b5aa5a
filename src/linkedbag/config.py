# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for LinkedBag."""

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


@dataclass
class BagSettings:
    """Presentation defaults for LinkedBag."""

    repr_limit: int = 10

    @classmethod
    def from_env(cls) -> "BagSettings":
        """Create settings from environment variables (evaluated at call time)."""
        repr_limit = _int_env("LINKEDBAG_REPR_LIMIT", cls.repr_limit)
        if repr_limit <= 0:
            repr_limit = cls.repr_limit
        return cls(repr_limit=repr_limit)


def load_bag_settings() -> BagSettings:
    """Load bag settings from environment with sensible defaults."""
    return BagSettings.from_env()
