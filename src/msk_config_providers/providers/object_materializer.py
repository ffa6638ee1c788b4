# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Object materializer - idempotent S3 object import to local storage.

Steps for one object:
    1. Compute the destination (``local_dir / file_name``)
    2. Destination exists: success, return it without fetching. Existence
       is the only idempotency marker; content is never compared.
    3. Create the parent directory (recursively)
    4. ``GetObject`` and stream the body into a temp file next to the
       destination, then atomically rename it onto the destination
    5. Missing object: ObjectImportError (always fatal)
    6. Filesystem failure: MaterializationError (always fatal)

Concurrency:
    Restarting tasks or several tasks on one worker may import the same
    object at the same time. The existence check is not a lock; racing
    writers each write their own temp file and the last rename wins. Readers
    never observe a partially written destination.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO
from uuid import UUID

from botocore.exceptions import BotoCoreError, ClientError

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import (
    MaterializationError,
    ModelProviderErrorContext,
    ObjectImportError,
    ProviderConnectionError,
)
from msk_config_providers.providers.aws_client_factory import client_error_code

if TYPE_CHECKING:
    from botocore.client import BaseClient

    from msk_config_providers.models import ModelS3ObjectLocation

logger = logging.getLogger(__name__)

OBJECT_NOT_FOUND_CODES: frozenset[str] = frozenset({"NoSuchKey", "NoSuchBucket", "404"})


class ObjectMaterializer:
    """Copies S3 objects to local files, at most once per destination."""

    CHUNK_SIZE: int = 1024 * 1024

    def materialize(
        self,
        client_supplier: Callable[[], BaseClient],
        location: ModelS3ObjectLocation,
        local_dir: str | Path,
        correlation_id: UUID | None = None,
    ) -> Path:
        """Ensure the object exists locally and return its path.

        Args:
            client_supplier: Returns the S3 client; only called when a fetch
                is needed
            location: Bucket and object key to import
            local_dir: Destination directory
            correlation_id: Correlation ID of the enclosing ``get`` call

        Raises:
            ObjectImportError: If the object does not exist
            MaterializationError: If the destination cannot be written
            ProviderConnectionError: On any other S3 failure
        """
        destination = location.destination(local_dir)
        context = ModelProviderErrorContext.with_correlation(
            correlation_id=correlation_id,
            transport_type=EnumProviderTransportType.S3,
            operation="get_object",
            target_name=location.bucket,
        )

        if destination.exists():
            logger.debug(
                "Imported file already exists, skipping fetch (idempotent)",
                extra={
                    "path": str(destination),
                    "correlation_id": str(context.correlation_id),
                },
            )
            return destination

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(
                "Couldn't create parent directory",
                extra={"directory": str(destination.parent)},
            )
            raise MaterializationError(
                f"Failed to create directory for imported file: {e}",
                context=context.model_copy(
                    update={
                        "transport_type": EnumProviderTransportType.FILESYSTEM,
                        "operation": "create_directory",
                    }
                ),
                path=str(destination.parent),
            ) from e

        client = client_supplier()
        try:
            response = client.get_object(
                Bucket=location.bucket,
                Key=location.object_key,
            )
        except ClientError as e:
            code = client_error_code(e)
            if code in OBJECT_NOT_FOUND_CODES:
                raise ObjectImportError(
                    f"No object found at {location.bucket}/{location.object_key}",
                    context=context,
                    bucket=location.bucket,
                    object_key=location.object_key,
                ) from e
            raise ProviderConnectionError(
                f"Failed to fetch {location.bucket}/{location.object_key}: {code}",
                context=context,
                aws_error_code=code,
            ) from e
        except BotoCoreError as e:
            raise ProviderConnectionError(
                f"Failed to fetch {location.bucket}/{location.object_key}: {e}",
                context=context,
            ) from e

        body: BinaryIO = response["Body"]
        try:
            bytes_written = self._write_atomically(body, destination)
        except BotoCoreError as e:
            raise ProviderConnectionError(
                f"Failed to stream {location.bucket}/{location.object_key}: {e}",
                context=context,
            ) from e
        except OSError as e:
            logger.error(
                "Failed to import a file from S3",
                extra={
                    "path": str(destination),
                    "correlation_id": str(context.correlation_id),
                },
            )
            raise MaterializationError(
                f"Failed to write imported file: {e}",
                context=context.model_copy(
                    update={
                        "transport_type": EnumProviderTransportType.FILESYSTEM,
                        "operation": "write_file",
                    }
                ),
                path=str(destination),
            ) from e
        finally:
            body.close()

        logger.info(
            "Imported file from S3",
            extra={
                "bucket": location.bucket,
                "object_key": location.object_key,
                "path": str(destination),
                "bytes_written": bytes_written,
                "correlation_id": str(context.correlation_id),
            },
        )
        return destination

    def _write_atomically(self, body: BinaryIO, destination: Path) -> int:
        """Stream ``body`` to a temp file and rename it onto ``destination``."""
        temp_fd, temp_path = tempfile.mkstemp(
            prefix=f".{destination.name}.",
            suffix=".tmp",
            dir=destination.parent,
        )
        temp_path_obj = Path(temp_path)
        try:
            with os.fdopen(temp_fd, "wb") as f:
                shutil.copyfileobj(body, f, self.CHUNK_SIZE)
                bytes_written = f.tell()
            temp_path_obj.replace(destination)
        except Exception:
            if temp_path_obj.exists():
                temp_path_obj.unlink()
            raise
        return bytes_written


__all__: list[str] = ["OBJECT_NOT_FOUND_CODES", "ObjectMaterializer"]
