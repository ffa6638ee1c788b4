# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Error Classes.

Error Hierarchy:
    ConfigProviderError (base provider error)
    ├── ProtocolConfigurationError
    ├── ConfigNotFoundError
    ├── ObjectImportError
    ├── MaterializationError
    └── ProviderConnectionError

All errors:
    - Carry an EnumProviderErrorCode for classification
    - Support proper error chaining with ``raise ... from e``
    - Accept ModelProviderErrorContext for bundled context parameters
    - Never include secret values in messages or context

Every error in this hierarchy is fatal for the ``get`` call that raised it:
no partial result is returned once one is raised.
"""

from __future__ import annotations

from uuid import UUID

from msk_config_providers.enums import EnumProviderErrorCode
from msk_config_providers.errors.model_provider_error_context import (
    ModelProviderErrorContext,
)


class ConfigProviderError(Exception):
    """Base error class for configuration provider errors.

    Structured Fields (via ModelProviderErrorContext):
        transport_type: Backend transport (secretsmanager, ssm, s3, ...)
        operation: Operation being performed
        correlation_id: Correlation ID of the resolution call
        target_name: Provider or resource name

    Example:
        >>> context = ModelProviderErrorContext(
        ...     transport_type=EnumProviderTransportType.S3,
        ...     operation="get_object",
        ... )
        >>> raise ConfigProviderError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumProviderErrorCode | None = None,
        context: ModelProviderErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ConfigProviderError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled provider context
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: UUID | None = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumProviderErrorCode.OPERATION_FAILED
        self.correlation_id = correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message


class ProtocolConfigurationError(ConfigProviderError):
    """Raised when configuration or fetched configuration data is unusable.

    Used for malformed secret documents, invalid object references and
    invalid provider registry entries. A malformed secret body is never
    treated as a lookup miss.
    """

    def __init__(
        self,
        message: str,
        context: ModelProviderErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumProviderErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class ConfigNotFoundError(ConfigProviderError):
    """Raised when a lookup misses under the FAIL not-found strategy.

    Example:
        >>> raise ConfigNotFoundError(
        ...     "Parameter not found",
        ...     context=context,
        ...     identifier="/test/notFound",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelProviderErrorContext | None = None,
        identifier: str | None = None,
        **extra_context: object,
    ) -> None:
        if identifier is not None:
            extra_context["identifier"] = identifier
        super().__init__(
            message=message,
            error_code=EnumProviderErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )
        self.identifier = identifier


class ObjectImportError(ConfigProviderError):
    """Raised when an S3 object to import does not exist.

    Object imports have no not-found policy: a missing certificate or
    keystore is always fatal.
    """

    def __init__(
        self,
        message: str,
        context: ModelProviderErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumProviderErrorCode.RESOURCE_NOT_FOUND,
            context=context,
            **extra_context,
        )


class MaterializationError(ConfigProviderError):
    """Raised when an imported object cannot be written to local storage.

    Kept distinct from ObjectImportError so a host retry mechanism can tell
    an unusable destination apart from a missing object.
    """

    def __init__(
        self,
        message: str,
        context: ModelProviderErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumProviderErrorCode.FILESYSTEM_ERROR,
            context=context,
            **extra_context,
        )


class ProviderConnectionError(ConfigProviderError):
    """Raised when a backend call fails for a reason other than a miss.

    Used for access-denied responses, throttling, unreachable endpoints and
    client construction failures (for example no region in the ambient
    environment).
    """

    def __init__(
        self,
        message: str,
        context: ModelProviderErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumProviderErrorCode.SERVICE_UNAVAILABLE,
            context=context,
            **extra_context,
        )


__all__: list[str] = [
    "ConfigNotFoundError",
    "ConfigProviderError",
    "MaterializationError",
    "ObjectImportError",
    "ProtocolConfigurationError",
    "ProviderConnectionError",
]
