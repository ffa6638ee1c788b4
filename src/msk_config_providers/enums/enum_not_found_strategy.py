# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Not-Found Strategy Enumeration.

Defines how a provider reacts when a requested value does not exist in its
backend. The strategy is configured once per provider instance through the
``NotFoundStrategy`` parameter and is immutable afterwards.
"""

from __future__ import annotations

from enum import Enum


class EnumNotFoundStrategy(str, Enum):
    """Policy applied to a lookup miss.

    Attributes:
        FAIL: Raise ConfigNotFoundError and abort the whole batch (default)
        EMPTY: Substitute an empty string for the missed key
        IGNORE: Omit the missed key; the host leaves its token unexpanded
    """

    FAIL = "fail"
    EMPTY = "empty"
    IGNORE = "ignore"

    @classmethod
    def parse(cls, value: object) -> EnumNotFoundStrategy:
        """Parse a free-form configuration value.

        ``None`` means the parameter was not supplied and yields FAIL.
        Matching is case-insensitive. Any unrecognized value yields IGNORE:
        a misspelled strategy leaves tokens untouched instead of failing
        configuration.

        Example:
            >>> EnumNotFoundStrategy.parse("Empty")
            <EnumNotFoundStrategy.EMPTY: 'empty'>
            >>> EnumNotFoundStrategy.parse("null")
            <EnumNotFoundStrategy.IGNORE: 'ignore'>
        """
        if value is None:
            return cls.FAIL
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.IGNORE


__all__ = ["EnumNotFoundStrategy"]
