# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AWS configuration providers for Kafka client configuration files.

This package resolves ``${qualifier:path:key}`` indirection tokens in client
configuration files into values fetched from AWS backends:

- ``secretsmanager``: fields of a JSON secret in AWS Secrets Manager
- ``ssm``: parameters in AWS Systems Manager Parameter Store
- ``s3import``: objects in Amazon S3, materialized to a local file

Key Components:
    - SecretsManagerConfigProvider, SsmParamStoreConfigProvider,
      S3ImportConfigProvider: one provider per backend
    - ConfigProviderRegistry: builds providers from ``config.providers.*``
    - ConfigTransformer: substitutes tokens in a flat configuration map
    - Transport-aware error handling with ModelProviderErrorContext
"""

__version__ = "0.3.0"

from msk_config_providers.providers import (
    S3ImportConfigProvider,
    SecretsManagerConfigProvider,
    SsmParamStoreConfigProvider,
)
from msk_config_providers.runtime import ConfigProviderRegistry, ConfigTransformer

__all__: list[str] = [
    "ConfigProviderRegistry",
    "ConfigTransformer",
    "S3ImportConfigProvider",
    "SecretsManagerConfigProvider",
    "SsmParamStoreConfigProvider",
    "__version__",
]
