# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration transformer.

Replaces ``${provider:[path:]key}`` tokens in a flat configuration map with
values fetched from configuration providers, following the Kafka client
``ConfigTransformer`` rules:

- keys are grouped per provider and path, each provider is called once per
  path with all of that path's keys
- a token whose provider is not registered, or whose key is absent from the
  provider's result, is left in the value verbatim
- substitution is not recursive: a resolved value containing a token is
  returned as-is

Example:
    >>> transformer = ConfigTransformer({"ssm": provider})
    >>> transformer.transform({"sasl.password": "${ssm:/msk/prod:password}"}).data
    {'sasl.password': '...'}
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import NamedTuple

from msk_config_providers.models import ModelTransformResult
from msk_config_providers.protocols import ProtocolConfigProvider

logger = logging.getLogger(__name__)

DEFAULT_PATTERN: re.Pattern[str] = re.compile(r"\$\{([^}]*?):(([^}]*?):)?([^}]*?)\}")
EMPTY_PATH: str = ""


class ConfigVariable(NamedTuple):
    """One ``${provider:path:key}`` occurrence."""

    provider: str
    path: str
    key: str


def find_variables(
    value: str, pattern: re.Pattern[str] = DEFAULT_PATTERN
) -> list[ConfigVariable]:
    """Return every token in ``value``, in order of appearance."""
    return [_variable(match) for match in pattern.finditer(value)]


def _variable(match: re.Match[str]) -> ConfigVariable:
    path = match.group(3)
    return ConfigVariable(
        provider=match.group(1),
        path=path if path is not None else EMPTY_PATH,
        key=match.group(4),
    )


class ConfigTransformer:
    """Substitutes provider tokens in configuration values.

    Args:
        providers: Provider name to configured provider. A
            ConfigProviderRegistry can be passed directly.
        pattern: Token pattern; groups 1, 3 and 4 are provider, path, key
    """

    def __init__(
        self,
        providers: Mapping[str, ProtocolConfigProvider],
        pattern: re.Pattern[str] = DEFAULT_PATTERN,
    ) -> None:
        self._providers = providers
        self._pattern = pattern

    def transform(self, configs: Mapping[str, str]) -> ModelTransformResult:
        """Resolve every token in ``configs``.

        Raises:
            ConfigProviderError: Propagated from the first failing provider
        """
        keys_by_provider: dict[str, dict[str, set[str]]] = {}
        for value in configs.values():
            for variable in find_variables(value, self._pattern):
                paths = keys_by_provider.setdefault(variable.provider, {})
                paths.setdefault(variable.path, set()).add(variable.key)

        lookups: dict[str, dict[str, dict[str, str]]] = {}
        ttls: dict[str, int] = {}
        for provider_name, paths in keys_by_provider.items():
            provider = self._providers.get(provider_name)
            if provider is None:
                logger.debug(
                    "No config provider registered, tokens left unresolved",
                    extra={"provider": provider_name},
                )
                continue
            for path, keys in paths.items():
                result = provider.get(path, keys)
                lookups.setdefault(provider_name, {})[path] = result.data
                if result.ttl_ms is not None:
                    ttls[path] = result.ttl_ms

        data = {name: self._replace(lookups, value) for name, value in configs.items()}
        return ModelTransformResult(data=data, ttls=ttls)

    def _replace(
        self,
        lookups: Mapping[str, Mapping[str, Mapping[str, str]]],
        value: str,
    ) -> str:
        def substitute(match: re.Match[str]) -> str:
            variable = _variable(match)
            resolved = lookups.get(variable.provider, {}).get(variable.path, {})
            return resolved.get(variable.key, match.group(0))

        return self._pattern.sub(substitute, value)


__all__: list[str] = [
    "DEFAULT_PATTERN",
    "ConfigTransformer",
    "ConfigVariable",
    "find_variables",
]
