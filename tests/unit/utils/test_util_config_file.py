# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for client configuration file loading."""

from pathlib import Path

import pytest

from msk_config_providers.errors import ProtocolConfigurationError
from msk_config_providers.utils import (
    flatten_mapping,
    load_client_config,
    parse_properties,
)


class TestParseProperties:
    """Test Java properties parsing."""

    def test_separators(self) -> None:
        """'=', ':' and whitespace all separate key and value."""
        parsed = parse_properties("a=1\nb: 2\nc 3\nd   =   4\n")

        assert parsed == {"a": "1", "b": "2", "c": "3", "d": "4"}

    def test_comments_and_blank_lines_skipped(self) -> None:
        """'#' and '!' lines are comments."""
        parsed = parse_properties("# comment\n! other\n\n  \nkey=value\n")

        assert parsed == {"key": "value"}

    def test_token_value_kept_verbatim(self) -> None:
        """Colons inside the value are not separators."""
        parsed = parse_properties(
            "sasl.password=${secretsmanager:AmazonMSK_TestKafkaConfig:password}"
        )

        assert parsed == {
            "sasl.password": "${secretsmanager:AmazonMSK_TestKafkaConfig:password}"
        }

    def test_line_continuation(self) -> None:
        """A trailing backslash joins the next line, minus its indentation."""
        parsed = parse_properties("bootstrap.servers=b-1:9096,\\\n    b-2:9096\n")

        assert parsed == {"bootstrap.servers": "b-1:9096,b-2:9096"}

    def test_escaped_backslash_is_not_continuation(self) -> None:
        """An even number of trailing backslashes ends the line."""
        parsed = parse_properties("path=C:\\\\\nnext=1\n")

        assert parsed == {"path": "C:\\", "next": "1"}

    def test_escapes(self) -> None:
        """Standard escapes and unicode escapes are decoded."""
        parsed = parse_properties("key\\=with\\:sep=tab\\there\\u0041\n")

        assert parsed == {"key=with:sep": "tab\there" + "A"}

    def test_empty_value(self) -> None:
        """A key with no value maps to the empty string."""
        assert parse_properties("empty=\nbare\n") == {"empty": "", "bare": ""}


class TestFlattenMapping:
    """Test YAML document flattening."""

    def test_nested_keys_joined_with_dots(self) -> None:
        """Nested mappings become dotted names; scalars become text."""
        flat = flatten_mapping(
            {
                "sasl": {"mechanism": "SCRAM-SHA-512", "enabled": True},
                "retries": 3,
                "servers": ["b-1:9096", "b-2:9096"],
                "unset": None,
            }
        )

        assert flat == {
            "sasl.mechanism": "SCRAM-SHA-512",
            "sasl.enabled": "true",
            "retries": "3",
            "servers": "b-1:9096,b-2:9096",
            "unset": "",
        }


class TestLoadClientConfig:
    """Test load_client_config file dispatch."""

    def test_properties_file(self, tmp_path: Path) -> None:
        """Non-YAML files are read as properties."""
        config_file = tmp_path / "client.properties"
        config_file.write_text("security.protocol=SASL_SSL\n", encoding="utf-8")

        assert load_client_config(config_file) == {"security.protocol": "SASL_SSL"}

    def test_yaml_file(self, tmp_path: Path) -> None:
        """YAML files are loaded with safe_load and flattened."""
        config_file = tmp_path / "client.yaml"
        config_file.write_text(
            "config:\n  providers: ssm\nsasl:\n  password: ${ssm::/msk/password}\n",
            encoding="utf-8",
        )

        assert load_client_config(config_file) == {
            "config.providers": "ssm",
            "sasl.password": "${ssm::/msk/password}",
        }

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        """An empty YAML document is an empty configuration."""
        config_file = tmp_path / "client.yml"
        config_file.write_text("", encoding="utf-8")

        assert load_client_config(config_file) == {}

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        """A top-level YAML list is rejected."""
        config_file = tmp_path / "client.yaml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ProtocolConfigurationError, match="mapping"):
            load_client_config(config_file)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """A YAML syntax error becomes a configuration error."""
        config_file = tmp_path / "client.yaml"
        config_file.write_text("a: [unclosed\n", encoding="utf-8")

        with pytest.raises(ProtocolConfigurationError, match="Invalid YAML"):
            load_client_config(config_file)

    def test_missing_file(self, tmp_path: Path) -> None:
        """An unreadable file becomes a configuration error."""
        with pytest.raises(ProtocolConfigurationError, match="Cannot read"):
            load_client_config(tmp_path / "missing.properties")
