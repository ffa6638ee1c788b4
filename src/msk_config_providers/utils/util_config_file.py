# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client configuration file loading.

Reads a client configuration file into a flat ``name -> value`` map:

- ``.properties`` (and any unknown suffix): Java properties syntax, as used
  by Kafka ``client.properties`` files
- ``.yaml`` / ``.yml``: nested mappings flattened with ``.``; lists are
  joined with ``,`` the way Kafka list settings are written

Values are returned verbatim; tokens are substituted by ConfigTransformer.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from msk_config_providers.enums import EnumProviderTransportType
from msk_config_providers.errors import (
    ModelProviderErrorContext,
    ProtocolConfigurationError,
)

logger = logging.getLogger(__name__)

YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})

_ESCAPES: dict[str, str] = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_KEY_TERMINATORS: frozenset[str] = frozenset({"=", ":", " ", "\t", "\f"})


def load_client_config(path: str | Path) -> dict[str, str]:
    """Load a configuration file into a flat string map.

    Raises:
        ProtocolConfigurationError: If the file cannot be read or parsed
    """
    file_path = Path(path)
    context = ModelProviderErrorContext(
        transport_type=EnumProviderTransportType.FILESYSTEM,
        operation="load_client_config",
        target_name=file_path.name,
    )
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProtocolConfigurationError(
            f"Cannot read configuration file: {e}",
            context=context,
        ) from e

    if file_path.suffix.lower() in YAML_SUFFIXES:
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ProtocolConfigurationError(
                f"Invalid YAML configuration: {e}",
                context=context,
            ) from e
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ProtocolConfigurationError(
                "YAML configuration must be a mapping",
                context=context,
            )
        config = flatten_mapping(document)
    else:
        config = parse_properties(text)

    logger.debug(
        "Loaded client configuration",
        extra={"file": str(file_path), "entries": len(config)},
    )
    return config


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java properties text.

    Supports ``#``/``!`` comments, ``=``, ``:`` and whitespace separators,
    backslash line continuations and the standard escapes including
    ``\\uXXXX``.
    """
    result: dict[str, str] = {}
    for logical_line in _logical_lines(text):
        key, value = _split_entry(logical_line)
        result[_unescape(key)] = _unescape(value)
    return result


def flatten_mapping(document: dict[object, object], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into dotted names."""
    result: dict[str, str] = {}
    for raw_key, value in document.items():
        name = f"{prefix}{raw_key}"
        if isinstance(value, dict):
            result.update(flatten_mapping(value, prefix=f"{name}."))
        elif isinstance(value, list):
            result[name] = ",".join(_scalar_text(item) for item in value)
        else:
            result[name] = _scalar_text(value)
    return result


def _scalar_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _logical_lines(text: str) -> list[str]:
    lines: list[str] = []
    pending = ""
    continuing = False
    for raw_line in text.splitlines():
        line = raw_line.lstrip(" \t\f")
        if not continuing and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continuing = True
            continue
        lines.append(pending + line)
        pending = ""
        continuing = False
    if pending:
        lines.append(pending)
    return lines


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _KEY_TERMINATORS:
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return key, rest


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text
    out: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "\\" or index + 1 >= length:
            out.append(char)
            index += 1
            continue
        nxt = text[index + 1]
        if nxt == "u" and index + 6 <= length:
            try:
                out.append(chr(int(text[index + 2 : index + 6], 16)))
                index += 6
                continue
            except ValueError:
                pass
        out.append(_ESCAPES.get(nxt, nxt))
        index += 2
    return "".join(out)


__all__: list[str] = ["flatten_mapping", "load_client_config", "parse_properties"]
