# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Config Data Model - the result of one provider ``get`` call."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelConfigData(BaseModel):
    """Resolved values for one ``get`` call.

    Attributes:
        data: Requested key (verbatim, option suffix included) to value.
        ttl_ms: Expiry hint for the whole batch in milliseconds. When
            several keys request a TTL the smallest one wins.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    data: dict[str, str] = Field(default_factory=dict)
    ttl_ms: int | None = Field(default=None, ge=0)


__all__: list[str] = ["ModelConfigData"]
