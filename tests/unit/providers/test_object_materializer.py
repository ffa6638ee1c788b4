# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ObjectMaterializer."""

import io
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest
from botocore.exceptions import ClientError, ReadTimeoutError

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import (
    MaterializationError,
    ObjectImportError,
    ProviderConnectionError,
)
from msk_config_providers.models import ModelS3ObjectLocation
from msk_config_providers.providers import ObjectMaterializer

LOCATION = ModelS3ObjectLocation(
    bucket="my-bucket",
    object_key="full/path/file.jks",
    file_name="file.jks",
)


class TestObjectMaterializer:
    """Test materialization and idempotency."""

    def test_writes_object(self, tmp_path: Path, mock_s3_client: MagicMock) -> None:
        """The object body is written to local_dir/file_name."""
        destination = ObjectMaterializer().materialize(
            lambda: mock_s3_client, LOCATION, tmp_path
        )

        assert destination == tmp_path / "file.jks"
        assert destination.read_bytes() == b"keystore-bytes"

    def test_existing_file_not_fetched(self, tmp_path: Path) -> None:
        """An existing destination is returned as-is; no client is requested."""
        existing = tmp_path / "file.jks"
        existing.write_bytes(b"old content")
        supplier = MagicMock()

        destination = ObjectMaterializer().materialize(supplier, LOCATION, tmp_path)

        assert destination == existing
        assert existing.read_bytes() == b"old content"
        supplier.assert_not_called()

    def test_creates_missing_directories(
        self, tmp_path: Path, mock_s3_client: MagicMock
    ) -> None:
        """The destination directory is created recursively."""
        local_dir = tmp_path / "certs" / "kafka"

        destination = ObjectMaterializer().materialize(
            lambda: mock_s3_client, LOCATION, local_dir
        )

        assert destination.parent == local_dir
        assert destination.exists()

    def test_no_temp_files_left(
        self, tmp_path: Path, mock_s3_client: MagicMock
    ) -> None:
        """Only the final file remains after a successful import."""
        ObjectMaterializer().materialize(lambda: mock_s3_client, LOCATION, tmp_path)

        assert [p.name for p in tmp_path.iterdir()] == ["file.jks"]

    def test_large_body_streamed(self, tmp_path: Path) -> None:
        """Bodies larger than one chunk are copied completely."""
        content = b"x" * (ObjectMaterializer.CHUNK_SIZE * 2 + 17)
        client = MagicMock()
        client.get_object.return_value = {"Body": io.BytesIO(content)}

        destination = ObjectMaterializer().materialize(
            lambda: client, LOCATION, tmp_path
        )

        assert destination.read_bytes() == content

    def test_body_closed(self, tmp_path: Path) -> None:
        """The streaming body is closed after the copy."""
        body = io.BytesIO(b"data")
        client = MagicMock()
        client.get_object.return_value = {"Body": body}

        ObjectMaterializer().materialize(lambda: client, LOCATION, tmp_path)

        assert body.closed


class TestObjectMaterializerErrors:
    """Test fatal error mapping."""

    @pytest.mark.parametrize("code", ["NoSuchKey", "NoSuchBucket", "404"])
    def test_missing_object(
        self,
        tmp_path: Path,
        client_error: Callable[..., ClientError],
        code: str,
    ) -> None:
        """Not-found codes raise ObjectImportError and write nothing."""
        client = MagicMock()
        client.get_object.side_effect = client_error(code, "GetObject")
        correlation_id = uuid4()

        with pytest.raises(ObjectImportError) as exc_info:
            ObjectMaterializer().materialize(
                lambda: client, LOCATION, tmp_path, correlation_id=correlation_id
            )

        assert exc_info.value.correlation_id == correlation_id
        assert exc_info.value.context["bucket"] == "my-bucket"
        assert list(tmp_path.iterdir()) == []

    def test_access_denied(
        self, tmp_path: Path, client_error: Callable[..., ClientError]
    ) -> None:
        """Other client errors raise ProviderConnectionError."""
        client = MagicMock()
        client.get_object.side_effect = client_error("AccessDenied", "GetObject")

        with pytest.raises(ProviderConnectionError):
            ObjectMaterializer().materialize(lambda: client, LOCATION, tmp_path)

    def test_stream_failure_leaves_no_file(self, tmp_path: Path) -> None:
        """A body read failure removes the partial temp file."""
        body = MagicMock()
        body.read.side_effect = ReadTimeoutError(endpoint_url="https://s3.invalid")
        client = MagicMock()
        client.get_object.return_value = {"Body": body}

        with pytest.raises(ProviderConnectionError):
            ObjectMaterializer().materialize(lambda: client, LOCATION, tmp_path)

        assert list(tmp_path.iterdir()) == []
        body.close.assert_called_once()

    def test_directory_creation_failure(
        self, tmp_path: Path, mock_s3_client: MagicMock
    ) -> None:
        """A local_dir that cannot be created raises MaterializationError."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file", encoding="utf-8")

        with pytest.raises(MaterializationError) as exc_info:
            ObjectMaterializer().materialize(
                lambda: mock_s3_client, LOCATION, blocker / "sub"
            )

        assert (
            exc_info.value.context["transport_type"]
            == EnumProviderTransportType.FILESYSTEM
        )
        mock_s3_client.get_object.assert_not_called()

    def test_write_failure(self, tmp_path: Path, mock_s3_client: MagicMock) -> None:
        """A failing rename raises MaterializationError and cleans up."""
        with patch.object(Path, "replace", side_effect=OSError("disk full")):
            with pytest.raises(MaterializationError):
                ObjectMaterializer().materialize(
                    lambda: mock_s3_client, LOCATION, tmp_path
                )

        assert list(tmp_path.iterdir()) == []
