# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Enumerations Module.

Exports:
    EnumNotFoundStrategy: Policy for lookup misses (FAIL, EMPTY, IGNORE)
    EnumProviderErrorCode: Error classification codes
    EnumProviderTransportType: Backend transport identification
"""

from msk_config_providers.enums.enum_not_found_strategy import EnumNotFoundStrategy
from msk_config_providers.enums.enum_provider_error_code import EnumProviderErrorCode
from msk_config_providers.enums.enum_provider_transport_type import (
    EnumProviderTransportType,
)

__all__: list[str] = [
    "EnumNotFoundStrategy",
    "EnumProviderErrorCode",
    "EnumProviderTransportType",
]
