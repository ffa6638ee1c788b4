# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AWS Service Configuration Model.

Every provider is configured once from the flat parameter map the host
passes to ``configure``. Parameter names follow the host's conventions
(``separator.replacement``, ``NotFoundStrategy``); unknown parameters are
ignored.

Security Note:
    No credentials are accepted here. Credentials always come from the
    ambient AWS resolution chain (environment, profile, instance role).
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ModelAwsServiceConfig(BaseModel):
    """Configuration shared by every AWS-backed provider.

    Attributes:
        region: Region for the client; ambient default when None
        endpoint: Endpoint override (VPC endpoint, LocalStack); default when None
        separator_replacement: Stand-in for ``:`` inside paths, since ``:``
            separates the parts of a token

    Example:
        >>> config = ModelAwsServiceConfig.model_validate(
        ...     {"region": "us-west-2", "endpoint": "", "unrelated": "x"}
        ... )
        >>> config.region, config.endpoint
        ('us-west-2', None)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    region: str | None = Field(default=None, description="AWS region")
    endpoint: str | None = Field(default=None, description="Endpoint override URL")
    separator_replacement: str | None = Field(
        default=None,
        validation_alias=AliasChoices("separator.replacement", "separator_replacement"),
        description="String replaced back to ':' in paths before lookup",
    )

    @field_validator("region", "endpoint", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("separator_replacement", mode="before")
    @classmethod
    def _empty_to_none(cls, value: object) -> str | None:
        if value is None or str(value) == "":
            return None
        return str(value)


__all__: list[str] = ["ModelAwsServiceConfig"]
