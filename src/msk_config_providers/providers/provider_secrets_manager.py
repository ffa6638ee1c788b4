# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AWS Secrets Manager configuration provider.

Usage in a client configuration file::

    config.providers=secretsmanager
    config.providers.secretsmanager.class=msk_config_providers.SecretsManagerConfigProvider
    # optional
    config.providers.secretsmanager.param.region=us-west-2
    config.providers.secretsmanager.param.NotFoundStrategy=fail

    sasl.username=${secretsmanager:AmazonMSK_TestKafkaConfig:username}
    sasl.password=${secretsmanager:AmazonMSK_TestKafkaConfig:password}

The token path is the secret id; every key is a field of the secret. The
secret value must be a flat JSON object. One ``GetSecretValue`` call is made
per ``get`` regardless of how many fields are requested.

Security:
    Secret values are never logged and never included in error messages.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING
from uuid import uuid4

from botocore.exceptions import BotoCoreError, ClientError

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import (
    ModelProviderErrorContext,
    ProtocolConfigurationError,
    ProviderConnectionError,
)
from msk_config_providers.mixins import MixinProviderLifecycle
from msk_config_providers.models import (
    ModelConfigData,
    ModelSecretsManagerProviderConfig,
)
from msk_config_providers.providers.aws_client_factory import (
    client_error_code,
    create_aws_client,
)
from msk_config_providers.providers.lazy_aws_client import LazyAwsClient
from msk_config_providers.providers.policy_not_found import (
    apply_not_found_policy,
    resolve_not_found,
)
from msk_config_providers.utils import decode_component, min_ttl, parse_key_reference

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)

SERVICE_NAME: str = "secretsmanager"
SECRET_NOT_FOUND_CODE: str = "ResourceNotFoundException"


def _default_client_factory(config: ModelSecretsManagerProviderConfig) -> BaseClient:
    return create_aws_client(SERVICE_NAME, config.region, config.endpoint)


class SecretsManagerConfigProvider(MixinProviderLifecycle):
    """Resolves fields of JSON secrets stored in AWS Secrets Manager.

    Not-found handling (``NotFoundStrategy``):
        - ``fail`` (default): raise ConfigNotFoundError
        - ``empty``: missing secret or field resolves to ``""``
        - ``ignore`` (and any unrecognized value): the key is left out

    A missing secret counts as a miss for every requested field. A secret
    whose value is not a flat JSON object is always an error.

    Args:
        client_factory: Builds the Secrets Manager client from the provider
            configuration. Defaults to a boto3 client using the ambient
            credential chain.
    """

    PROVIDER_NAME: str = "secretsmanager"

    def __init__(
        self,
        client_factory: Callable[[ModelSecretsManagerProviderConfig], BaseClient]
        | None = None,
    ) -> None:
        self._client_factory = client_factory or _default_client_factory
        self._config = ModelSecretsManagerProviderConfig()
        self._client = self._new_client_holder()

    @property
    def config(self) -> ModelSecretsManagerProviderConfig:
        return self._config

    def configure(self, configs: Mapping[str, object]) -> None:
        """Apply ``region``, ``endpoint``, ``separator.replacement`` and
        ``NotFoundStrategy``."""
        self._client.close()
        self._config = ModelSecretsManagerProviderConfig.model_validate(dict(configs))
        self._client = self._new_client_holder()
        logger.info(
            "Configured %s",
            self.__class__.__name__,
            extra={
                "provider": self.PROVIDER_NAME,
                "region": self._config.region,
                "endpoint": self._config.endpoint,
                "not_found_strategy": self._config.not_found_strategy.value,
            },
        )

    def get(
        self,
        path: str | None,
        keys: Iterable[str] | None = None,
    ) -> ModelConfigData:
        """Resolve fields of the secret ``path``.

        With no keys the whole secret document is returned.

        Raises:
            ConfigNotFoundError: Secret or field missing under FAIL
            ProtocolConfigurationError: Secret value is not a flat JSON object
            ProviderConnectionError: Any other Secrets Manager failure
        """
        references = [parse_key_reference(key) for key in keys or ()]
        if not path and not references:
            return ModelConfigData()

        correlation_id = uuid4()
        secret_id = decode_component(path or "", self._config.separator_replacement)
        context = ModelProviderErrorContext.with_correlation(
            correlation_id=correlation_id,
            transport_type=EnumProviderTransportType.SECRETS_MANAGER,
            operation="get_secret_value",
            target_name=self.PROVIDER_NAME,
        )
        if not secret_id:
            raise ProtocolConfigurationError(
                "A secret id is required to resolve secret fields",
                context=context,
            )
        ttl_ms = min_ttl(references)

        try:
            response = self._client.get().get_secret_value(SecretId=secret_id)
        except ClientError as e:
            code = client_error_code(e)
            if code != SECRET_NOT_FOUND_CODE:
                raise ProviderConnectionError(
                    f"Failed to read secret '{secret_id}': {code}",
                    context=context,
                    aws_error_code=code,
                ) from e
            logger.info(
                "Secret '%s' not found. Value will be handled according to "
                "the 'NotFoundStrategy' parameter",
                secret_id,
                extra={
                    "secret_id": secret_id,
                    "not_found_strategy": self._config.not_found_strategy.value,
                    "correlation_id": str(correlation_id),
                },
            )
            missed: dict[str, str] = {}
            if not references:
                resolve_not_found(
                    self._config.not_found_strategy, secret_id, context, cause=e
                )
            for reference in references:
                apply_not_found_policy(
                    self._config.not_found_strategy,
                    missed,
                    reference.raw,
                    secret_id,
                    context,
                    cause=e,
                )
            return ModelConfigData(data=missed, ttl_ms=ttl_ms)
        except BotoCoreError as e:
            raise ProviderConnectionError(
                f"Failed to read secret '{secret_id}': {e}",
                context=context,
            ) from e

        document = self._parse_secret_document(response, secret_id, context)
        if not references:
            return ModelConfigData(data=document)

        data: dict[str, str] = {}
        for reference in references:
            field = decode_component(reference.key, self._config.separator_replacement)
            if field in document:
                data[reference.raw] = document[field]
                continue
            apply_not_found_policy(
                self._config.not_found_strategy,
                data,
                reference.raw,
                f"{secret_id}:{field}",
                context,
            )

        logger.debug(
            "Resolved secret fields",
            extra={
                "secret_id": secret_id,
                "requested": len(references),
                "resolved": len(data),
                "correlation_id": str(correlation_id),
            },
        )
        return ModelConfigData(data=data, ttl_ms=ttl_ms)

    def close(self) -> None:
        self._client.close()

    def _new_client_holder(self) -> LazyAwsClient:
        config = self._config
        return LazyAwsClient(
            factory=lambda: self._client_factory(config),
            transport_type=EnumProviderTransportType.SECRETS_MANAGER,
            target_name=self.PROVIDER_NAME,
        )

    def _parse_secret_document(
        self,
        response: Mapping[str, object],
        secret_id: str,
        context: ModelProviderErrorContext,
    ) -> dict[str, str]:
        """Parse the secret value into a flat ``field -> value`` map.

        Strings are kept as-is; numbers and booleans are rendered as JSON
        text. Anything else makes the whole secret unusable.
        """
        raw = response.get("SecretString")
        if raw is None:
            binary = response.get("SecretBinary")
            if isinstance(binary, bytes | bytearray):
                try:
                    raw = bytes(binary).decode("utf-8")
                except UnicodeDecodeError:
                    raw = None

        document: object = None
        if isinstance(raw, str):
            try:
                document = json.loads(raw)
            except json.JSONDecodeError:
                document = None

        if not isinstance(document, dict):
            logger.error(
                "Unexpected structure of secret value",
                extra={"secret_id": secret_id},
            )
            raise ProtocolConfigurationError(
                f"Secret '{secret_id}' is not a flat JSON object",
                context=context,
                secret_id=secret_id,
            )

        flat: dict[str, str] = {}
        for name, value in document.items():
            if isinstance(value, str):
                flat[name] = value
            elif isinstance(value, bool | int | float):
                flat[name] = json.dumps(value)
            else:
                logger.error(
                    "Unexpected structure of secret value",
                    extra={"secret_id": secret_id, "field": name},
                )
                raise ProtocolConfigurationError(
                    f"Secret '{secret_id}' field '{name}' is not a scalar value",
                    context=context,
                    secret_id=secret_id,
                )
        return flat


__all__: list[str] = ["SecretsManagerConfigProvider"]
