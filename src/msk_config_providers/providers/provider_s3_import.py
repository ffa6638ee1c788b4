# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Amazon S3 file import configuration provider.

Usage in a client configuration file::

    config.providers=s3import
    config.providers.s3import.class=msk_config_providers.S3ImportConfigProvider
    # optional
    config.providers.s3import.param.region=us-west-2
    config.providers.s3import.param.local_dir=/var/lib/kafka/certs

    # explicit region
    ssl.truststore.location=${s3import:us-west-2:my-bucket/full/path/kafka.truststore.jks}
    # configured or ambient region
    ssl.keystore.location=${s3import::my-bucket/full/path/kafka.keystore.jks}

Each key is ``bucket/path/to/object``. The object is downloaded once to
``local_dir/<object file name>`` and the value resolves to that local path.
A missing object is always fatal: there is no not-found strategy here.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING
from uuid import uuid4

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.mixins import MixinProviderLifecycle
from msk_config_providers.models import ModelConfigData, ModelS3ImportProviderConfig
from msk_config_providers.providers.aws_client_factory import create_aws_client
from msk_config_providers.providers.lazy_aws_client import LazyAwsClient
from msk_config_providers.providers.object_materializer import ObjectMaterializer
from msk_config_providers.utils import min_ttl, parse_key_reference, parse_object_location

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)

SERVICE_NAME: str = "s3"

S3ClientFactory = Callable[[ModelS3ImportProviderConfig, str | None], "BaseClient"]


def _default_client_factory(
    config: ModelS3ImportProviderConfig,
    region: str | None,
) -> BaseClient:
    return create_aws_client(SERVICE_NAME, region, config.endpoint)


class S3ImportConfigProvider(MixinProviderLifecycle):
    """Imports S3 objects to local files and resolves keys to their paths.

    The token path selects the region for that call; a blank path uses the
    configured ``region`` (or the ambient default). One client is built per
    effective region on first use and kept until ``close``.

    Args:
        client_factory: Builds an S3 client from the provider configuration
            and an effective region. Defaults to a boto3 client using the
            ambient credential chain.
        materializer: Object materializer, replaceable for testing
    """

    PROVIDER_NAME: str = "s3import"

    def __init__(
        self,
        client_factory: S3ClientFactory | None = None,
        materializer: ObjectMaterializer | None = None,
    ) -> None:
        self._client_factory = client_factory or _default_client_factory
        self._materializer = materializer or ObjectMaterializer()
        self._config = ModelS3ImportProviderConfig()
        self._clients: dict[str | None, LazyAwsClient] = {}
        self._clients_lock = threading.Lock()

    @property
    def config(self) -> ModelS3ImportProviderConfig:
        return self._config

    def configure(self, configs: Mapping[str, object]) -> None:
        """Apply ``region``, ``endpoint`` and ``local_dir``."""
        self.close()
        self._config = ModelS3ImportProviderConfig.model_validate(dict(configs))
        logger.info(
            "Configured %s",
            self.__class__.__name__,
            extra={
                "provider": self.PROVIDER_NAME,
                "region": self._config.region,
                "endpoint": self._config.endpoint,
                "local_dir": str(self._config.effective_local_dir),
            },
        )

    def get(
        self,
        path: str | None,
        keys: Iterable[str] | None = None,
    ) -> ModelConfigData:
        """Import every key's object and map the key to its local path.

        Raises:
            ProtocolConfigurationError: A key is not ``bucket/object``
            ObjectImportError: An object does not exist
            MaterializationError: A local file cannot be written
            ProviderConnectionError: Any other S3 failure
        """
        references = [parse_key_reference(key) for key in keys or ()]
        if not path and not references:
            return ModelConfigData()

        region = path.strip() if path and path.strip() else self._config.region
        client = self._client_for(region)
        local_dir = self._config.effective_local_dir
        correlation_id = uuid4()

        data: dict[str, str] = {}
        for reference in references:
            location = parse_object_location(reference.key)
            destination = self._materializer.materialize(
                client.get,
                location,
                local_dir,
                correlation_id=correlation_id,
            )
            logger.debug(
                "Local destination for imported file: %s",
                destination,
                extra={"key": reference.raw, "correlation_id": str(correlation_id)},
            )
            data[reference.raw] = str(destination)

        return ModelConfigData(data=data, ttl_ms=min_ttl(references))

    def close(self) -> None:
        with self._clients_lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            client.close()

    def _client_for(self, region: str | None) -> LazyAwsClient:
        with self._clients_lock:
            holder = self._clients.get(region)
            if holder is None:
                config = self._config
                holder = LazyAwsClient(
                    factory=lambda: self._client_factory(config, region),
                    transport_type=EnumProviderTransportType.S3,
                    target_name=self.PROVIDER_NAME,
                )
                self._clients[region] = holder
            return holder


__all__: list[str] = ["S3ImportConfigProvider"]
