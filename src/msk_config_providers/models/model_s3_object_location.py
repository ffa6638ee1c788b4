# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""S3 Object Location Model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ModelS3ObjectLocation(BaseModel):
    """Bucket and object key parsed from a ``bucket/path/to/object`` key.

    Attributes:
        bucket: First path segment of the requested key
        object_key: Remaining segments joined by ``/``
        file_name: Last segment of the object key, used as the local file name
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bucket: str = Field(min_length=1)
    object_key: str = Field(min_length=1)
    file_name: str = Field(min_length=1)

    def destination(self, local_dir: str | Path) -> Path:
        """Return the local path the object is materialized to."""
        return Path(local_dir) / self.file_name


__all__: list[str] = ["ModelS3ObjectLocation"]
