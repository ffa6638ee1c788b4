# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Errors Module.

Exports:
    ModelProviderErrorContext: Bundled structured error context
    ConfigProviderError: Base provider error class
    ProtocolConfigurationError: Unusable configuration or secret document
    ConfigNotFoundError: Lookup miss under the FAIL strategy
    ObjectImportError: Missing S3 object (always fatal)
    MaterializationError: Local filesystem failure (always fatal)
    ProviderConnectionError: Any other backend failure

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - Secret or parameter values
        - Credentials of any kind

    SAFE to include:
        - Provider names, secret ids, parameter names, bucket and object keys
        - Operation names and AWS error codes
        - Correlation IDs
"""

from msk_config_providers.errors.model_provider_error_context import (
    ModelProviderErrorContext,
)
from msk_config_providers.errors.provider_errors import (
    ConfigNotFoundError,
    ConfigProviderError,
    MaterializationError,
    ObjectImportError,
    ProtocolConfigurationError,
    ProviderConnectionError,
)

__all__: list[str] = [
    "ConfigNotFoundError",
    "ConfigProviderError",
    "MaterializationError",
    "ModelProviderErrorContext",
    "ObjectImportError",
    "ProtocolConfigurationError",
    "ProviderConnectionError",
]
