# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for lookup identifier and object location helpers."""

from pathlib import Path

import pytest

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import ProtocolConfigurationError
from msk_config_providers.utils import (
    decode_component,
    parse_object_location,
    resolve_lookup_identifier,
)


class TestDecodeComponent:
    """Test decode_component."""

    def test_percent_decoding(self) -> None:
        """Percent-encoded characters are decoded."""
        assert decode_component("my%20secret%3Aprod") == "my secret:prod"

    def test_plain_value_unchanged(self) -> None:
        """A value without escapes is returned as-is."""
        assert decode_component("/test/stringParam") == "/test/stringParam"

    def test_separator_replacement_restored(self) -> None:
        """The configured replacement string is turned back into ':'."""
        assert (
            decode_component("arn__aws__secretsmanager", separator_replacement="__")
            == "arn:aws:secretsmanager"
        )

    def test_replacement_applied_before_decoding(self) -> None:
        """An encoded replacement string is not treated as a separator."""
        assert decode_component("a%7Eb~c", separator_replacement="~") == "a~b:c"


class TestResolveLookupIdentifier:
    """Test resolve_lookup_identifier joining rules."""

    def test_path_and_key_joined(self) -> None:
        """Path and key are joined with the delimiter."""
        assert resolve_lookup_identifier("/test", "stringParam") == "/test/stringParam"

    def test_trailing_delimiter_not_doubled(self) -> None:
        """A path ending with the delimiter gets no second one."""
        assert resolve_lookup_identifier("/test/", "stringParam") == "/test/stringParam"

    @pytest.mark.parametrize("path", ["", None, "   "])
    def test_blank_path_gives_key(self, path: str | None) -> None:
        """No path means the key is the whole identifier."""
        identifier = resolve_lookup_identifier(path, "/test/stringParam")

        assert identifier == "/test/stringParam"

    def test_custom_delimiter(self) -> None:
        """A configured delimiter replaces '/'."""
        assert resolve_lookup_identifier("app.prod", "user", delimiter=".") == (
            "app.prod.user"
        )


class TestParseObjectLocation:
    """Test parse_object_location."""

    def test_bucket_key_and_file_name(self) -> None:
        """The first segment is the bucket, the rest is the object key."""
        location = parse_object_location("my-bucket/full/path/file.jks")

        assert location.bucket == "my-bucket"
        assert location.object_key == "full/path/file.jks"
        assert location.file_name == "file.jks"

    def test_empty_segments_ignored(self) -> None:
        """Leading and doubled slashes do not produce empty segments."""
        location = parse_object_location("/my-bucket//dir/file.pem/")

        assert location.bucket == "my-bucket"
        assert location.object_key == "dir/file.pem"
        assert location.file_name == "file.pem"

    def test_object_at_bucket_root(self) -> None:
        """Two segments is the minimum."""
        location = parse_object_location("bucket/truststore.jks")

        assert location.object_key == "truststore.jks"
        assert location.file_name == "truststore.jks"

    @pytest.mark.parametrize("key", ["", "bucket", "/bucket/", "//"])
    def test_missing_object_part_raises(self, key: str) -> None:
        """A reference without an object part is a configuration error."""
        with pytest.raises(ProtocolConfigurationError) as exc_info:
            parse_object_location(key)

        assert exc_info.value.context["transport_type"] == EnumProviderTransportType.S3

    def test_destination(self) -> None:
        """The destination is the file name inside the local directory."""
        location = parse_object_location("my-bucket/full/path/file.jks")

        assert location.destination("/tmp") == Path("/tmp/file.jks")
