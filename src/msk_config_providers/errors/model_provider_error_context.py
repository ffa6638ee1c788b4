# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Error Context Configuration Model.

This module defines the model that bundles the structured fields attached
to every provider error, keeping error constructors short while the fields
stay strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from msk_config_providers.enums import EnumProviderTransportType


class ModelProviderErrorContext(BaseModel):
    """Structured context for provider errors.

    Attributes:
        transport_type: Backend involved (secretsmanager, ssm, s3, filesystem)
        operation: Operation being performed (get_secret_value, get_object, ...)
        target_name: Provider or resource name
        correlation_id: Correlation ID shared by all errors of one ``get`` call

    Example:
        >>> context = ModelProviderErrorContext.with_correlation(
        ...     transport_type=EnumProviderTransportType.SSM,
        ...     operation="get_parameter",
        ...     target_name="ssm",
        ... )
        >>> raise ConfigNotFoundError("Parameter not found", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: EnumProviderTransportType | None = Field(
        default=None,
        description="Backend transport type",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Provider or resource name",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing a single resolution call",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelProviderErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelProviderErrorContext"]
