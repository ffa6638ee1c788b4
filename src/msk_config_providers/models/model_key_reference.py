# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Key Reference Model.

A key reference is one requested key as the host hands it over, split into
the bare lookup key and its ``?name=value&...`` option suffix.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

OPTION_TTL: str = "ttl"


class ModelKeyReference(BaseModel):
    """A parsed key with its options.

    Attributes:
        raw: The key exactly as requested, option suffix included. Results
            are always keyed by this value.
        key: The bare key used for the backend lookup.
        options: Every well-formed ``name=value`` pair from the suffix.

    Example:
        >>> ref = parse_key_reference("password?ttl=60000")
        >>> ref.key, ref.ttl_ms
        ('password', 60000)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    raw: str = Field(description="Key as requested, including any option suffix")
    key: str = Field(description="Bare key without the option suffix")
    options: dict[str, str] = Field(
        default_factory=dict,
        description="Options parsed from the suffix",
    )

    @property
    def ttl_ms(self) -> int | None:
        """Requested expiry hint in milliseconds, or None.

        A ``ttl`` that is not a non-negative integer is treated as absent.
        """
        value = self.options.get(OPTION_TTL)
        if value is None:
            return None
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            return None
        return int(value)


__all__: list[str] = ["OPTION_TTL", "ModelKeyReference"]
