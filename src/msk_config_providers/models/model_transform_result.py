# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transform Result Model - output of ConfigTransformer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelTransformResult(BaseModel):
    """Configuration with tokens substituted.

    Attributes:
        data: Configuration name to (possibly substituted) value
        ttls: Provider path to the expiry hint reported for it, in milliseconds
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    data: dict[str, str] = Field(default_factory=dict)
    ttls: dict[str, int] = Field(default_factory=dict)


__all__: list[str] = ["ModelTransformResult"]
