# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""S3 Import Provider Configuration Model."""

from __future__ import annotations

import tempfile
from pathlib import Path

from pydantic import Field, field_validator

from msk_config_providers.models.model_aws_service_config import (
    ModelAwsServiceConfig,
)


class ModelS3ImportProviderConfig(ModelAwsServiceConfig):
    """Configuration for S3ImportConfigProvider.

    ``region`` is only the default: a non-blank token path overrides it
    per call.

    Attributes:
        local_dir: Directory imported objects are written to
    """

    local_dir: str | None = Field(
        default=None,
        description="Local directory for imported files; system temp dir when unset",
    )

    @field_validator("local_dir", mode="before")
    @classmethod
    def _blank_dir_to_none(cls, value: object) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @property
    def effective_local_dir(self) -> Path:
        """Configured directory, or the platform temporary directory."""
        if self.local_dir is None:
            return Path(tempfile.gettempdir())
        return Path(self.local_dir)


__all__: list[str] = ["ModelS3ImportProviderConfig"]
