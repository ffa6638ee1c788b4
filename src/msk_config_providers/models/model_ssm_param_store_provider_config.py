# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SSM Parameter Store Provider Configuration Model."""

from __future__ import annotations

from pydantic import Field, field_validator

from msk_config_providers.models.model_lookup_provider_config import (
    ModelLookupProviderConfig,
)

DEFAULT_DELIMITER: str = "/"


class ModelSsmParamStoreProviderConfig(ModelLookupProviderConfig):
    """Configuration for SsmParamStoreConfigProvider.

    Attributes:
        delimiter: Joins ``path`` and ``key`` into a parameter name.
            An empty value falls back to ``/``.
    """

    delimiter: str = Field(
        default=DEFAULT_DELIMITER,
        description="Delimiter between path and key",
    )

    @field_validator("delimiter", mode="before")
    @classmethod
    def _default_delimiter(cls, value: object) -> str:
        if value is None or str(value) == "":
            return DEFAULT_DELIMITER
        return str(value)


__all__: list[str] = ["DEFAULT_DELIMITER", "ModelSsmParamStoreProviderConfig"]
