# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Key reference parsing.

Splits a requested key into its bare key and ``?name=value&...`` options.
Parsing never fails: malformed option pairs are dropped and a ``ttl`` that
is not a non-negative integer is treated as absent.

Example:
    >>> ref = parse_key_reference("/msk/password?ttl=30000&refresh=yes")
    >>> ref.key, ref.ttl_ms, ref.options["refresh"]
    ('/msk/password', 30000, 'yes')
"""

from __future__ import annotations

from collections.abc import Iterable

from msk_config_providers.models import ModelKeyReference

OPTION_SEPARATOR: str = "?"
OPTION_PAIR_SEPARATOR: str = "&"
OPTION_VALUE_SEPARATOR: str = "="


def parse_key_reference(raw_key: str) -> ModelKeyReference:
    """Parse one requested key.

    Args:
        raw_key: Key as handed over by the host, possibly with options

    Returns:
        ModelKeyReference whose ``raw`` is ``raw_key`` unchanged
    """
    key, separator, suffix = raw_key.partition(OPTION_SEPARATOR)
    if not separator:
        return ModelKeyReference(raw=raw_key, key=raw_key)

    options: dict[str, str] = {}
    for pair in suffix.split(OPTION_PAIR_SEPARATOR):
        name, has_value, value = pair.partition(OPTION_VALUE_SEPARATOR)
        if not has_value:
            continue
        options[name] = value
    return ModelKeyReference(raw=raw_key, key=key, options=options)


def min_ttl(references: Iterable[ModelKeyReference]) -> int | None:
    """Return the smallest TTL requested by any reference, or None."""
    ttls = [ref.ttl_ms for ref in references if ref.ttl_ms is not None]
    return min(ttls) if ttls else None


__all__: list[str] = ["min_ttl", "parse_key_reference"]
