# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Not-found policy.

Pure decision logic for a lookup miss. The caller owns the result map; this
module only decides what happens to one missed key:

- FAIL: raise ConfigNotFoundError (the whole batch is aborted)
- EMPTY: substitute ``""``
- IGNORE: substitute nothing, the key stays absent

A miss under EMPTY or IGNORE never affects sibling keys of the same batch.
"""

from __future__ import annotations

from msk_config_providers.enums import EnumNotFoundStrategy
from msk_config_providers.errors import ConfigNotFoundError, ModelProviderErrorContext


def resolve_not_found(
    strategy: EnumNotFoundStrategy,
    identifier: str,
    context: ModelProviderErrorContext | None = None,
    cause: BaseException | None = None,
) -> str | None:
    """Decide the substitute for one missed key.

    Args:
        strategy: Strategy configured on the provider
        identifier: The backend identifier that missed
        context: Error context used when the strategy is FAIL
        cause: Backend exception to chain when raising

    Returns:
        ``""`` under EMPTY, None under IGNORE

    Raises:
        ConfigNotFoundError: Under FAIL
    """
    if strategy is EnumNotFoundStrategy.FAIL:
        raise ConfigNotFoundError(
            f"Value not found: {identifier}",
            context=context,
            identifier=identifier,
        ) from cause
    if strategy is EnumNotFoundStrategy.EMPTY:
        return ""
    return None


def apply_not_found_policy(
    strategy: EnumNotFoundStrategy,
    data: dict[str, str],
    requested_key: str,
    identifier: str,
    context: ModelProviderErrorContext | None = None,
    cause: BaseException | None = None,
) -> None:
    """Apply the strategy for one missed key to the caller's result map.

    ``data[requested_key]`` is set to ``""`` under EMPTY and left untouched
    under IGNORE.

    Raises:
        ConfigNotFoundError: Under FAIL
    """
    substitute = resolve_not_found(strategy, identifier, context, cause)
    if substitute is not None:
        data[requested_key] = substitute


__all__: list[str] = ["apply_not_found_policy", "resolve_not_found"]
