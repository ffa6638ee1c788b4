# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AWS client construction shared by all providers.

Applies the optional ``region`` and ``endpoint`` parameters to a boto3
client. Both are optional tuning: an invalid value is logged and dropped so
the client falls back to the ambient resolution chain (``AWS_REGION``,
profile, instance metadata) instead of blocking lookups.

Each client is built from its own ``boto3.session.Session`` because the
default session is not safe to share across threads during construction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import ClientError, InvalidRegionError
from botocore.utils import (
    is_valid_endpoint_url,
    is_valid_ipv6_endpoint_url,
    validate_region_name,
)

if TYPE_CHECKING:
    from botocore.client import BaseClient

logger = logging.getLogger(__name__)


def resolve_client_options(
    service_name: str,
    region: str | None = None,
    endpoint: str | None = None,
) -> dict[str, str]:
    """Build client keyword arguments from optional region and endpoint.

    Args:
        service_name: boto3 service name, used for log context only
        region: Configured region, or None
        endpoint: Configured endpoint URL, or None

    Returns:
        ``region_name`` and/or ``endpoint_url`` for the values that are valid
    """
    options: dict[str, str] = {}

    if region:
        try:
            validate_region_name(region)
        except InvalidRegionError:
            logger.error(
                "Failed to set region '%s' for %s. Using default region from "
                "the environment instead",
                region,
                service_name,
                extra={"service_name": service_name, "region": region},
            )
        else:
            options["region_name"] = region

    if endpoint:
        if is_valid_endpoint_url(endpoint) or is_valid_ipv6_endpoint_url(endpoint):
            options["endpoint_url"] = endpoint
        else:
            logger.error(
                "Invalid endpoint '%s' for %s. Using default endpoint instead",
                endpoint,
                service_name,
                extra={"service_name": service_name, "endpoint": endpoint},
            )

    return options


def create_aws_client(
    service_name: str,
    region: str | None = None,
    endpoint: str | None = None,
) -> BaseClient:
    """Create a boto3 client with the common configuration applied.

    Raises:
        botocore.exceptions.BotoCoreError: If the ambient environment cannot
            supply what is missing (for example no region at all)
    """
    options = resolve_client_options(service_name, region, endpoint)
    session = boto3.session.Session()
    client = session.client(service_name, **options)
    logger.debug(
        "Created %s client",
        service_name,
        extra={
            "service_name": service_name,
            "region": client.meta.region_name,
            "endpoint_override": "endpoint_url" in options,
        },
    )
    return client


def client_error_code(error: ClientError) -> str:
    """Return the AWS error code carried by a ClientError."""
    return str(error.response.get("Error", {}).get("Code", "Unknown"))


__all__: list[str] = [
    "client_error_code",
    "create_aws_client",
    "resolve_client_options",
]
