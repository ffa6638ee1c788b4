# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider Error Code Enumeration."""

from enum import Enum


class EnumProviderErrorCode(str, Enum):
    """Classification codes carried by every ConfigProviderError."""

    OPERATION_FAILED = "OPERATION_FAILED"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    FILESYSTEM_ERROR = "FILESYSTEM_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


__all__ = ["EnumProviderErrorCode"]
