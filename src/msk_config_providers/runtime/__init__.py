# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host-side runtime: provider registry and token transformer."""

from msk_config_providers.runtime.config_provider_registry import (
    BUILTIN_PROVIDERS,
    CONFIG_PROVIDERS,
    ConfigProviderRegistry,
)
from msk_config_providers.runtime.config_transformer import (
    DEFAULT_PATTERN,
    ConfigTransformer,
    ConfigVariable,
    find_variables,
)

__all__: list[str] = [
    "BUILTIN_PROVIDERS",
    "CONFIG_PROVIDERS",
    "DEFAULT_PATTERN",
    "ConfigProviderRegistry",
    "ConfigTransformer",
    "ConfigVariable",
    "find_variables",
]
