# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider data and configuration models."""

from msk_config_providers.models.model_aws_service_config import (
    ModelAwsServiceConfig,
)
from msk_config_providers.models.model_config_data import ModelConfigData
from msk_config_providers.models.model_key_reference import (
    OPTION_TTL,
    ModelKeyReference,
)
from msk_config_providers.models.model_lookup_provider_config import (
    ModelLookupProviderConfig,
)
from msk_config_providers.models.model_s3_import_provider_config import (
    ModelS3ImportProviderConfig,
)
from msk_config_providers.models.model_s3_object_location import ModelS3ObjectLocation
from msk_config_providers.models.model_secrets_manager_provider_config import (
    ModelSecretsManagerProviderConfig,
)
from msk_config_providers.models.model_ssm_param_store_provider_config import (
    DEFAULT_DELIMITER,
    ModelSsmParamStoreProviderConfig,
)
from msk_config_providers.models.model_transform_result import ModelTransformResult

__all__: list[str] = [
    "DEFAULT_DELIMITER",
    "OPTION_TTL",
    "ModelAwsServiceConfig",
    "ModelConfigData",
    "ModelKeyReference",
    "ModelLookupProviderConfig",
    "ModelS3ImportProviderConfig",
    "ModelS3ObjectLocation",
    "ModelSecretsManagerProviderConfig",
    "ModelSsmParamStoreProviderConfig",
    "ModelTransformResult",
]
