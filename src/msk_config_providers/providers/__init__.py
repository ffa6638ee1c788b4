# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AWS configuration providers.

Exports:
    SecretsManagerConfigProvider: Fields of JSON secrets in Secrets Manager
    SsmParamStoreConfigProvider: Parameters in SSM Parameter Store
    S3ImportConfigProvider: S3 objects materialized to local files
    ObjectMaterializer: Idempotent S3 object to local file import
    LazyAwsClient: Lock-guarded, build-once client holder
"""

from msk_config_providers.providers.aws_client_factory import (
    client_error_code,
    create_aws_client,
    resolve_client_options,
)
from msk_config_providers.providers.lazy_aws_client import LazyAwsClient
from msk_config_providers.providers.object_materializer import ObjectMaterializer
from msk_config_providers.providers.policy_not_found import (
    apply_not_found_policy,
    resolve_not_found,
)
from msk_config_providers.providers.provider_s3_import import S3ImportConfigProvider
from msk_config_providers.providers.provider_secrets_manager import (
    SecretsManagerConfigProvider,
)
from msk_config_providers.providers.provider_ssm_param_store import (
    SsmParamStoreConfigProvider,
)

__all__: list[str] = [
    "LazyAwsClient",
    "ObjectMaterializer",
    "S3ImportConfigProvider",
    "SecretsManagerConfigProvider",
    "SsmParamStoreConfigProvider",
    "apply_not_found_policy",
    "client_error_code",
    "create_aws_client",
    "resolve_client_options",
    "resolve_not_found",
]
