# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AWS Systems Manager Parameter Store configuration provider.

Usage in a client configuration file::

    config.providers=ssm
    config.providers.ssm.class=msk_config_providers.SsmParamStoreConfigProvider
    # optional
    config.providers.ssm.param.region=us-west-2
    config.providers.ssm.param.NotFoundStrategy=fail

    sasl.username=${ssm::/msk/TestKafkaConfig/username}
    sasl.password=${ssm:/msk/TestKafkaConfig:password?ttl=3600000}

The parameter name is ``path`` + ``delimiter`` + ``key`` (or just ``key``
when the path is blank). Values are always requested decrypted, so
SecureString parameters resolve to their plaintext.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from botocore.exceptions import BotoCoreError, ClientError

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import (
    ModelProviderErrorContext,
    ProviderConnectionError,
)
from msk_config_providers.mixins import MixinProviderLifecycle
from msk_config_providers.models import (
    ModelConfigData,
    ModelSsmParamStoreProviderConfig,
)
from msk_config_providers.providers.aws_client_factory import (
    client_error_code,
    create_aws_client,
)
from msk_config_providers.providers.lazy_aws_client import LazyAwsClient
from msk_config_providers.providers.policy_not_found import apply_not_found_policy
from msk_config_providers.utils import (
    decode_component,
    min_ttl,
    parse_key_reference,
    resolve_lookup_identifier,
)

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)

SERVICE_NAME: str = "ssm"
PARAMETER_NOT_FOUND_CODE: str = "ParameterNotFound"


def _default_client_factory(config: ModelSsmParamStoreProviderConfig) -> BaseClient:
    return create_aws_client(SERVICE_NAME, config.region, config.endpoint)


class SsmParamStoreConfigProvider(MixinProviderLifecycle):
    """Resolves parameters stored in AWS Systems Manager Parameter Store.

    One ``GetParameter`` call is made per requested key; each miss is
    handled independently by the ``NotFoundStrategy``:

        - ``fail`` (default): raise ConfigNotFoundError
        - ``empty``: the key resolves to ``""``
        - ``ignore`` (and any unrecognized value): the key is left out

    Args:
        client_factory: Builds the SSM client from the provider
            configuration. Defaults to a boto3 client using the ambient
            credential chain.
    """

    PROVIDER_NAME: str = "ssm"

    def __init__(
        self,
        client_factory: Callable[[ModelSsmParamStoreProviderConfig], BaseClient]
        | None = None,
    ) -> None:
        self._client_factory = client_factory or _default_client_factory
        self._config = ModelSsmParamStoreProviderConfig()
        self._client = self._new_client_holder()

    @property
    def config(self) -> ModelSsmParamStoreProviderConfig:
        return self._config

    def configure(self, configs: Mapping[str, object]) -> None:
        """Apply ``region``, ``endpoint``, ``separator.replacement``,
        ``delimiter`` and ``NotFoundStrategy``."""
        self._client.close()
        self._config = ModelSsmParamStoreProviderConfig.model_validate(dict(configs))
        self._client = self._new_client_holder()
        logger.info(
            "Configured %s",
            self.__class__.__name__,
            extra={
                "provider": self.PROVIDER_NAME,
                "region": self._config.region,
                "endpoint": self._config.endpoint,
                "delimiter": self._config.delimiter,
                "not_found_strategy": self._config.not_found_strategy.value,
            },
        )

    def get(
        self,
        path: str | None,
        keys: Iterable[str] | None = None,
    ) -> ModelConfigData:
        """Resolve ``keys`` under ``path``.

        With a path and no keys, every parameter directly under the path is
        returned, keyed by its name relative to the path.

        Raises:
            ConfigNotFoundError: A parameter is missing under FAIL
            ProviderConnectionError: Any other Parameter Store failure
        """
        references = [parse_key_reference(key) for key in keys or ()]
        if not path and not references:
            return ModelConfigData()

        correlation_id = uuid4()
        base_path = decode_component(path or "", self._config.separator_replacement)
        if not references:
            return ModelConfigData(data=self._get_by_path(base_path, correlation_id))

        client = self._client.get()
        data: dict[str, str] = {}
        for reference in references:
            name = resolve_lookup_identifier(
                base_path,
                decode_component(reference.key, self._config.separator_replacement),
                self._config.delimiter,
            )
            context = ModelProviderErrorContext.with_correlation(
                correlation_id=correlation_id,
                transport_type=EnumProviderTransportType.SSM,
                operation="get_parameter",
                target_name=self.PROVIDER_NAME,
            )
            try:
                response = client.get_parameter(Name=name, WithDecryption=True)
            except ClientError as e:
                code = client_error_code(e)
                if code != PARAMETER_NOT_FOUND_CODE:
                    raise ProviderConnectionError(
                        f"Failed to read parameter '{name}': {code}",
                        context=context,
                        aws_error_code=code,
                    ) from e
                logger.info(
                    "Parameter '%s' not found. Value will be handled according "
                    "to the 'NotFoundStrategy' parameter",
                    name,
                    extra={
                        "parameter": name,
                        "not_found_strategy": self._config.not_found_strategy.value,
                        "correlation_id": str(correlation_id),
                    },
                )
                apply_not_found_policy(
                    self._config.not_found_strategy,
                    data,
                    reference.raw,
                    name,
                    context,
                    cause=e,
                )
                continue
            except BotoCoreError as e:
                raise ProviderConnectionError(
                    f"Failed to read parameter '{name}': {e}",
                    context=context,
                ) from e
            data[reference.raw] = response["Parameter"]["Value"]

        return ModelConfigData(data=data, ttl_ms=min_ttl(references))

    def close(self) -> None:
        self._client.close()

    def _new_client_holder(self) -> LazyAwsClient:
        config = self._config
        return LazyAwsClient(
            factory=lambda: self._client_factory(config),
            transport_type=EnumProviderTransportType.SSM,
            target_name=self.PROVIDER_NAME,
        )

    def _get_by_path(self, base_path: str, correlation_id: UUID) -> dict[str, str]:
        """Return every parameter directly under ``base_path``."""
        delimiter = self._config.delimiter
        prefix = base_path if base_path.endswith(delimiter) else base_path + delimiter
        context = ModelProviderErrorContext.with_correlation(
            correlation_id=correlation_id,
            transport_type=EnumProviderTransportType.SSM,
            operation="get_parameters_by_path",
            target_name=self.PROVIDER_NAME,
        )

        data: dict[str, str] = {}
        try:
            paginator = self._client.get().get_paginator("get_parameters_by_path")
            for page in paginator.paginate(
                Path=base_path,
                Recursive=False,
                WithDecryption=True,
            ):
                for parameter in page.get("Parameters", []):
                    name: str = parameter["Name"]
                    relative = name[len(prefix) :] if name.startswith(prefix) else name
                    data[relative] = parameter["Value"]
        except ClientError as e:
            code = client_error_code(e)
            raise ProviderConnectionError(
                f"Failed to list parameters under '{base_path}': {code}",
                context=context,
                aws_error_code=code,
            ) from e
        except BotoCoreError as e:
            raise ProviderConnectionError(
                f"Failed to list parameters under '{base_path}': {e}",
                context=context,
            ) from e

        logger.debug(
            "Resolved parameters by path",
            extra={
                "path": base_path,
                "resolved": len(data),
                "correlation_id": str(correlation_id),
            },
        )
        return data


__all__: list[str] = ["SsmParamStoreConfigProvider"]
