# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider lifecycle mixin.

Supplies the parts of ProtocolConfigProvider that are identical for every
provider: change subscriptions (not supported, logged and ignored) and
context-manager support around ``close``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from msk_config_providers.protocols import ConfigChangeCallback

logger = logging.getLogger(__name__)


class MixinProviderLifecycle:
    """Subscription no-ops and ``with`` support.

    Classes using this mixin must define ``PROVIDER_NAME`` and ``close()``.
    """

    PROVIDER_NAME: str = "provider"

    def subscribe(
        self,
        path: str,
        keys: Iterable[str],
        callback: ConfigChangeCallback,
    ) -> None:
        logger.info(
            "Subscription is not implemented and will be ignored",
            extra={"provider": self.PROVIDER_NAME, "path": path},
        )

    def unsubscribe(
        self,
        path: str,
        keys: Iterable[str],
        callback: ConfigChangeCallback,
    ) -> None:
        logger.info(
            "Subscription is not implemented and will be ignored",
            extra={"provider": self.PROVIDER_NAME, "path": path},
        )

    def close(self) -> None:
        raise NotImplementedError

    def __enter__(self) -> MixinProviderLifecycle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


__all__: list[str] = ["MixinProviderLifecycle"]
