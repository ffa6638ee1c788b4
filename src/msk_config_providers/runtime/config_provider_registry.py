# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration provider registry.

Builds provider instances from the ``config.providers`` entries of a client
configuration, the same entries a Kafka client reads::

    config.providers=secretsmanager,ssm
    config.providers.secretsmanager.class=msk_config_providers.SecretsManagerConfigProvider
    config.providers.secretsmanager.param.region=us-west-2
    config.providers.ssm.param.NotFoundStrategy=empty

``.class`` may be a dotted Python class path, one of the builtin aliases
(``secretsmanager``, ``ssm``, ``s3import``), or the Java class name of the
equivalent Kafka provider, so existing ``client.properties`` files work
unchanged. When ``.class`` is omitted the provider name itself is tried as
a builtin alias.

Security Considerations:
    Class paths are imported with ``importlib``; module side effects run on
    import. Only load configuration files from trusted sources.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator, Mapping
from types import TracebackType

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import (
    ModelProviderErrorContext,
    ProtocolConfigurationError,
)
from msk_config_providers.protocols import ProtocolConfigProvider

logger = logging.getLogger(__name__)

CONFIG_PROVIDERS: str = "config.providers"

BUILTIN_PROVIDERS: dict[str, str] = {
    "secretsmanager": (
        "msk_config_providers.providers.provider_secrets_manager."
        "SecretsManagerConfigProvider"
    ),
    "ssm": (
        "msk_config_providers.providers.provider_ssm_param_store."
        "SsmParamStoreConfigProvider"
    ),
    "s3import": (
        "msk_config_providers.providers.provider_s3_import.S3ImportConfigProvider"
    ),
}

JAVA_PROVIDER_CLASSES: dict[str, str] = {
    "com.amazonaws.kafka.config.providers.SecretsManagerConfigProvider": "secretsmanager",
    "com.amazonaws.kafka.config.providers.SsmParamStoreConfigProvider": "ssm",
    "com.amazonaws.kafka.config.providers.S3ImportConfigProvider": "s3import",
}


class ConfigProviderRegistry(Mapping[str, ProtocolConfigProvider]):
    """Named, configured provider instances.

    The registry owns its providers: ``close`` closes every one of them.

    Example:
        >>> with ConfigProviderRegistry.from_config(config) as registry:
        ...     result = ConfigTransformer(registry).transform(config)
    """

    def __init__(self) -> None:
        self._providers: dict[str, ProtocolConfigProvider] = {}

    @classmethod
    def from_config(cls, config: Mapping[str, str]) -> ConfigProviderRegistry:
        """Instantiate and configure every provider listed in ``config``.

        Raises:
            ProtocolConfigurationError: If a provider class cannot be
                resolved, imported or instantiated
        """
        registry = cls()
        names = [
            name.strip()
            for name in config.get(CONFIG_PROVIDERS, "").split(",")
            if name.strip()
        ]
        try:
            for name in names:
                class_ref = config.get(f"{CONFIG_PROVIDERS}.{name}.class", "").strip()
                param_prefix = f"{CONFIG_PROVIDERS}.{name}.param."
                params = {
                    key[len(param_prefix) :]: value
                    for key, value in config.items()
                    if key.startswith(param_prefix)
                }
                provider = cls._instantiate(name, class_ref or name)
                provider.configure(params)
                registry.register(name, provider)
        except Exception:
            registry.close()
            raise
        return registry

    def register(self, name: str, provider: ProtocolConfigProvider) -> None:
        """Add a configured provider under ``name``."""
        if name in self._providers:
            context = ModelProviderErrorContext(
                transport_type=EnumProviderTransportType.RUNTIME,
                operation="register",
                target_name=name,
            )
            raise ProtocolConfigurationError(
                f"Config provider '{name}' is already registered",
                context=context,
            )
        self._providers[name] = provider
        logger.debug(
            "Registered config provider",
            extra={"provider": name, "class": type(provider).__name__},
        )

    def close(self) -> None:
        """Close every provider. Never raises."""
        providers = list(self._providers.items())
        self._providers.clear()
        for name, provider in providers:
            try:
                provider.close()
            except Exception as e:
                logger.warning(
                    "Error closing config provider %s: %s",
                    name,
                    type(e).__name__,
                    extra={"provider": name, "error_type": type(e).__name__},
                )

    def __getitem__(self, name: str) -> ProtocolConfigProvider:
        return self._providers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __enter__(self) -> ConfigProviderRegistry:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    @staticmethod
    def _instantiate(name: str, class_ref: str) -> ProtocolConfigProvider:
        context = ModelProviderErrorContext(
            transport_type=EnumProviderTransportType.RUNTIME,
            operation="load_provider",
            target_name=name,
        )
        alias = JAVA_PROVIDER_CLASSES.get(class_ref, class_ref)
        class_path = BUILTIN_PROVIDERS.get(alias, alias)
        if "." not in class_path:
            raise ProtocolConfigurationError(
                f"No class configured for config provider '{name}'",
                context=context,
                class_path=class_path,
            )

        module_path, class_name = class_path.rsplit(".", 1)
        try:
            module = importlib.import_module(module_path)
            provider_class = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise ProtocolConfigurationError(
                f"Cannot load config provider class '{class_path}': {e}",
                context=context,
                class_path=class_path,
            ) from e

        try:
            provider = provider_class()
        except TypeError as e:
            raise ProtocolConfigurationError(
                f"Cannot instantiate config provider class '{class_path}': {e}",
                context=context,
                class_path=class_path,
            ) from e

        if not isinstance(provider, ProtocolConfigProvider):
            raise ProtocolConfigurationError(
                f"Class '{class_path}' does not implement ProtocolConfigProvider",
                context=context,
                class_path=class_path,
            )
        return provider


__all__: list[str] = [
    "BUILTIN_PROVIDERS",
    "CONFIG_PROVIDERS",
    "JAVA_PROVIDER_CLASSES",
    "ConfigProviderRegistry",
]
