# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider mixins."""

from msk_config_providers.mixins.mixin_provider_lifecycle import MixinProviderLifecycle

__all__: list[str] = ["MixinProviderLifecycle"]
