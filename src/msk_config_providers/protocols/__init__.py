# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider protocols."""

from msk_config_providers.protocols.protocol_config_provider import (
    ConfigChangeCallback,
    ProtocolConfigProvider,
)

__all__: list[str] = ["ConfigChangeCallback", "ProtocolConfigProvider"]
