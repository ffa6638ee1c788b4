# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for msk_config_providers tests.

Backend clients are ``MagicMock`` instances; AWS failures are raised as real
``botocore.exceptions.ClientError`` objects so error-code handling is
exercised exactly as boto3 reports it.
"""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

# =============================================================================
# AWS Error Helpers
# =============================================================================


def make_client_error(code: str, operation: str = "Operation") -> ClientError:
    """Build a ClientError carrying ``code``, as botocore raises it.

    Example:
        >>> client.get_parameter.side_effect = make_client_error("ParameterNotFound")
    """
    return ClientError(
        {"Error": {"Code": code, "Message": f"{code} raised in test"}},
        operation,
    )


def secret_response(document: dict[str, object]) -> dict[str, object]:
    """Return a GetSecretValue response whose SecretString is ``document``."""
    return {"Name": "test-secret", "SecretString": json.dumps(document)}


def object_response(content: bytes) -> dict[str, object]:
    """Return a GetObject response with a readable streaming body."""
    return {"Body": io.BytesIO(content), "ContentLength": len(content)}


# =============================================================================
# Mock Client Fixtures
# =============================================================================


@pytest.fixture
def client_error() -> Callable[..., ClientError]:
    """Factory fixture for ClientError instances."""
    return make_client_error


@pytest.fixture
def mock_secrets_client() -> MagicMock:
    """Secrets Manager client returning the AmazonMSK_TestKafkaConfig secret."""
    client = MagicMock()
    client.get_secret_value.return_value = secret_response(
        {"username": "John", "password": "Password123"}
    )
    return client


@pytest.fixture
def mock_ssm_client() -> MagicMock:
    """SSM client holding a small parameter tree under ``/test``."""
    parameters = {
        "/test/stringParam": "string value",
        "/test/intParam": "1234",
        "/test/listParam": "el1,el2,el3",
    }

    def get_parameter(Name: str, WithDecryption: bool = False) -> dict[str, object]:
        if Name not in parameters:
            raise make_client_error("ParameterNotFound", "GetParameter")
        return {"Parameter": {"Name": Name, "Value": parameters[Name]}}

    client = MagicMock()
    client.get_parameter.side_effect = get_parameter
    return client


@pytest.fixture
def mock_s3_client() -> MagicMock:
    """S3 client whose every GetObject returns a small keystore body."""
    client = MagicMock()
    client.get_object.side_effect = lambda **kwargs: object_response(
        b"keystore-bytes"
    )
    return client
