# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Transport Type Enumeration.

Identifies the backend a provider talks to. Used for error context and
structured log fields.
"""

from enum import Enum


class EnumProviderTransportType(str, Enum):
    """Backend transport types.

    Attributes:
        SECRETS_MANAGER: AWS Secrets Manager
        SSM: AWS Systems Manager Parameter Store
        S3: Amazon S3
        FILESYSTEM: Local filesystem (object materialization)
        RUNTIME: Registry and transformer internals
    """

    SECRETS_MANAGER = "secretsmanager"
    SSM = "ssm"
    S3 = "s3"
    FILESYSTEM = "filesystem"
    RUNTIME = "runtime"


__all__ = ["EnumProviderTransportType"]
