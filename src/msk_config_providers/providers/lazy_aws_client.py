# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Lazily constructed, lock-guarded AWS client holder.

Thread Safety:
    ``get`` uses double-checked locking on a ``threading.Lock`` so that
    concurrent first use builds the client exactly once. Once built, the
    client is shared read-only by every caller (boto3 clients are safe for
    concurrent use).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import (
    ModelProviderErrorContext,
    ProviderConnectionError,
)

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)


class LazyAwsClient:
    """Holds one backend client, built on first use.

    Args:
        factory: Zero-argument callable building the client
        transport_type: Backend, for error context
        target_name: Provider name, for error context and logs
    """

    def __init__(
        self,
        factory: Callable[[], BaseClient],
        transport_type: EnumProviderTransportType,
        target_name: str,
    ) -> None:
        self._factory = factory
        self._transport_type = transport_type
        self._target_name = target_name
        self._client: BaseClient | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def get(self) -> BaseClient:
        """Return the client, building it on first call.

        Raises:
            ProviderConnectionError: If the client cannot be constructed
        """
        client = self._client
        if client is not None:
            return client

        with self._lock:
            if self._client is None:
                try:
                    self._client = self._factory()
                except BotoCoreError as e:
                    context = ModelProviderErrorContext.with_correlation(
                        transport_type=self._transport_type,
                        operation="create_client",
                        target_name=self._target_name,
                    )
                    raise ProviderConnectionError(
                        f"Failed to create {self._transport_type.value} client: {e}",
                        context=context,
                    ) from e
                logger.debug(
                    "Initialized backend client",
                    extra={"provider": self._target_name},
                )
            return self._client

    def close(self) -> None:
        """Close and drop the client. Idempotent, never raises."""
        with self._lock:
            client, self._client = self._client, None
        if client is None:
            return
        close = getattr(client, "close", None)
        if not callable(close):
            return
        try:
            close()
        except Exception as e:
            logger.warning(
                "Error closing backend client: %s",
                type(e).__name__,
                extra={"provider": self._target_name, "error_type": type(e).__name__},
            )


__all__: list[str] = ["LazyAwsClient"]
