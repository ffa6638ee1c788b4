# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for provider configuration models."""

import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from msk_config_providers.enums import EnumNotFoundStrategy
from msk_config_providers.models import (
    DEFAULT_DELIMITER,
    ModelAwsServiceConfig,
    ModelConfigData,
    ModelS3ImportProviderConfig,
    ModelSecretsManagerProviderConfig,
    ModelSsmParamStoreProviderConfig,
)


class TestModelAwsServiceConfig:
    """Test the shared AWS client settings."""

    def test_defaults(self) -> None:
        """Everything is optional."""
        config = ModelAwsServiceConfig()

        assert config.region is None
        assert config.endpoint is None
        assert config.separator_replacement is None

    def test_host_parameter_names(self) -> None:
        """Parameters are read under the host's names; unknown ones ignored."""
        config = ModelAwsServiceConfig.model_validate(
            {
                "region": "us-west-2",
                "endpoint": "https://localhost:4566",
                "separator.replacement": "__",
                "unrelated": "value",
            }
        )

        assert config.region == "us-west-2"
        assert config.endpoint == "https://localhost:4566"
        assert config.separator_replacement == "__"

    def test_blank_values_are_unset(self) -> None:
        """Blank region and endpoint mean 'use the ambient default'."""
        config = ModelAwsServiceConfig.model_validate(
            {"region": "  ", "endpoint": "", "separator.replacement": ""}
        )

        assert config.region is None
        assert config.endpoint is None
        assert config.separator_replacement is None


class TestLookupProviderConfig:
    """Test NotFoundStrategy handling on lookup providers."""

    def test_default_is_fail(self) -> None:
        """FAIL when the parameter is not supplied."""
        config = ModelSecretsManagerProviderConfig()

        assert config.not_found_strategy is EnumNotFoundStrategy.FAIL

    @pytest.mark.parametrize(
        "alias", ["NotFoundStrategy", "ParameterNotFoundStrategy", "not_found_strategy"]
    )
    def test_aliases(self, alias: str) -> None:
        """Every accepted parameter name configures the strategy."""
        config = ModelSecretsManagerProviderConfig.model_validate({alias: "empty"})

        assert config.not_found_strategy is EnumNotFoundStrategy.EMPTY

    def test_unrecognized_strategy_does_not_fail(self) -> None:
        """An unknown strategy configures IGNORE instead of raising."""
        config = ModelSsmParamStoreProviderConfig.model_validate(
            {"NotFoundStrategy": "sometimes"}
        )

        assert config.not_found_strategy is EnumNotFoundStrategy.IGNORE


class TestModelSsmParamStoreProviderConfig:
    """Test the SSM delimiter setting."""

    def test_default_delimiter(self) -> None:
        """'/' is the default delimiter."""
        assert ModelSsmParamStoreProviderConfig().delimiter == DEFAULT_DELIMITER

    def test_empty_delimiter_falls_back(self) -> None:
        """An empty delimiter falls back to '/'."""
        config = ModelSsmParamStoreProviderConfig.model_validate({"delimiter": ""})

        assert config.delimiter == "/"

    def test_custom_delimiter(self) -> None:
        """A configured delimiter is kept."""
        config = ModelSsmParamStoreProviderConfig.model_validate({"delimiter": "."})

        assert config.delimiter == "."


class TestModelS3ImportProviderConfig:
    """Test the S3 import local directory."""

    def test_local_dir(self, tmp_path: Path) -> None:
        """A configured local_dir is used as-is."""
        config = ModelS3ImportProviderConfig.model_validate(
            {"local_dir": str(tmp_path)}
        )

        assert config.effective_local_dir == tmp_path

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_local_dir_uses_temp_dir(self, value: str | None) -> None:
        """An unset or blank local_dir falls back to the temp directory."""
        config = ModelS3ImportProviderConfig.model_validate({"local_dir": value})

        assert config.effective_local_dir == Path(tempfile.gettempdir())


class TestModelConfigData:
    """Test ModelConfigData validation."""

    def test_defaults(self) -> None:
        """Empty data and no TTL by default."""
        result = ModelConfigData()

        assert result.data == {}
        assert result.ttl_ms is None

    def test_negative_ttl_rejected(self) -> None:
        """TTLs are non-negative."""
        with pytest.raises(ValidationError):
            ModelConfigData(ttl_ms=-1)
