# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Secrets Manager Provider Configuration Model."""

from __future__ import annotations

from msk_config_providers.models.model_lookup_provider_config import (
    ModelLookupProviderConfig,
)


class ModelSecretsManagerProviderConfig(ModelLookupProviderConfig):
    """Configuration for SecretsManagerConfigProvider.

    Recognized parameters: ``region``, ``endpoint``, ``separator.replacement``
    and ``NotFoundStrategy``.
    """


__all__: list[str] = ["ModelSecretsManagerProviderConfig"]
