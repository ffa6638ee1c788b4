# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for Configuration Providers.

This module defines the interface the host (ConfigTransformer, or any
other token-expanding framework) uses to talk to a provider. The three
AWS providers implement it by composition over shared helpers, not by
inheriting from a common base class.

Lifecycle:
    ``configure`` once, ``get`` any number of times, ``close`` once.
    ``close`` is idempotent and never raises.

Example:
    >>> provider: ProtocolConfigProvider = SsmParamStoreConfigProvider()
    >>> provider.configure({"region": "us-west-2", "NotFoundStrategy": "empty"})
    >>> provider.get("/msk/prod", {"username", "password?ttl=60000"}).data
    {'username': '...', 'password?ttl=60000': '...'}
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from msk_config_providers.models import ModelConfigData

ConfigChangeCallback = Callable[[str, "ModelConfigData"], None]


@runtime_checkable
class ProtocolConfigProvider(Protocol):
    """Interface of a token-resolving configuration provider.

    Methods:
        configure: Apply the flat parameter map, once
        get: Resolve keys under a path into a ModelConfigData
        subscribe: Register for change notification (unsupported, logged)
        unsubscribe: Remove a registration (unsupported, logged)
        close: Release the backend connection
    """

    def configure(self, configs: Mapping[str, object]) -> None:
        """Apply provider parameters. Unknown parameters are ignored."""
        ...

    def get(
        self,
        path: str | None,
        keys: Iterable[str] | None = None,
    ) -> ModelConfigData:
        """Resolve ``keys`` under ``path``.

        Raises:
            ConfigProviderError: On any fatal condition; no partial data
                is returned
        """
        ...

    def subscribe(
        self,
        path: str,
        keys: Iterable[str],
        callback: ConfigChangeCallback,
    ) -> None:
        """Register a change callback."""
        ...

    def unsubscribe(
        self,
        path: str,
        keys: Iterable[str],
        callback: ConfigChangeCallback,
    ) -> None:
        """Remove a change callback."""
        ...

    def close(self) -> None:
        """Release resources. Idempotent, never raises."""
        ...


__all__: list[str] = ["ConfigChangeCallback", "ProtocolConfigProvider"]
