# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Lookup identifier construction.

Turns the ``path`` and bare ``key`` of a token into the identifier a
backend is queried with:

- Secrets Manager and Parameter Store: ``path`` + delimiter + ``key``
- S3: ``bucket/object/key`` split into bucket, object key and file name

Token parts cannot contain ``:`` because the host uses it to split tokens.
Such values arrive percent-encoded (``%3A``) or with a configured
``separator.replacement`` and are decoded here before use.
"""

from __future__ import annotations

from urllib.parse import unquote

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import (
    ModelProviderErrorContext,
    ProtocolConfigurationError,
)
from msk_config_providers.models import DEFAULT_DELIMITER, ModelS3ObjectLocation

TOKEN_SEPARATOR: str = ":"
OBJECT_PATH_SEPARATOR: str = "/"


def decode_component(value: str, separator_replacement: str | None = None) -> str:
    """Decode a path or key received from the host.

    Args:
        value: Raw path or key
        separator_replacement: Configured stand-in for ``:``; restored first

    Returns:
        The value with the replacement restored and percent-encoding decoded
    """
    if separator_replacement:
        value = value.replace(separator_replacement, TOKEN_SEPARATOR)
    return unquote(value)


def resolve_lookup_identifier(
    path: str | None,
    key: str,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Join ``path`` and ``key`` into a lookup identifier.

    A blank path yields the key itself. A path already ending with the
    delimiter is not given a second one.

    Example:
        >>> resolve_lookup_identifier("/test", "stringParam")
        '/test/stringParam'
        >>> resolve_lookup_identifier("/test/", "stringParam")
        '/test/stringParam'
        >>> resolve_lookup_identifier("", "/test/stringParam")
        '/test/stringParam'
    """
    if path is None or not path.strip():
        return key
    if path.endswith(delimiter):
        return f"{path}{key}"
    return f"{path}{delimiter}{key}"


def parse_object_location(key: str) -> ModelS3ObjectLocation:
    """Split a ``bucket/path/to/object`` key.

    Empty segments (leading, trailing or doubled ``/``) are ignored.

    Raises:
        ProtocolConfigurationError: If the key has no object part
    """
    segments = [segment for segment in key.split(OBJECT_PATH_SEPARATOR) if segment]
    if len(segments) < 2:
        context = ModelProviderErrorContext(
            transport_type=EnumProviderTransportType.S3,
            operation="parse_object_location",
        )
        raise ProtocolConfigurationError(
            f"Invalid object reference '{key}': expected 'bucket/path/to/object'",
            context=context,
            key=key,
        )
    return ModelS3ObjectLocation(
        bucket=segments[0],
        object_key=OBJECT_PATH_SEPARATOR.join(segments[1:]),
        file_name=segments[-1],
    )


__all__: list[str] = [
    "decode_component",
    "parse_object_location",
    "resolve_lookup_identifier",
]
