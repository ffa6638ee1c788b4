# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Lookup Provider Configuration Model."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator

from msk_config_providers.enums import EnumNotFoundStrategy
from msk_config_providers.models.model_aws_service_config import (
    ModelAwsServiceConfig,
)


class ModelLookupProviderConfig(ModelAwsServiceConfig):
    """Configuration shared by providers that support a not-found policy.

    ``NotFoundStrategy`` is read with EnumNotFoundStrategy.parse, so an
    unrecognized value configures IGNORE instead of failing validation.
    """

    not_found_strategy: EnumNotFoundStrategy = Field(
        default=EnumNotFoundStrategy.FAIL,
        validation_alias=AliasChoices(
            "NotFoundStrategy", "ParameterNotFoundStrategy", "not_found_strategy"
        ),
        description="Policy for missing secrets, fields or parameters",
    )

    @field_validator("not_found_strategy", mode="before")
    @classmethod
    def _parse_strategy(cls, value: object) -> EnumNotFoundStrategy:
        return EnumNotFoundStrategy.parse(value)


__all__: list[str] = ["ModelLookupProviderConfig"]
