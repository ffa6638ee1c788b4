# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Provider utilities: key parsing, lookup paths and config file loading."""

from msk_config_providers.utils.util_config_file import (
    flatten_mapping,
    load_client_config,
    parse_properties,
)
from msk_config_providers.utils.util_key_reference import min_ttl, parse_key_reference
from msk_config_providers.utils.util_lookup_path import (
    decode_component,
    parse_object_location,
    resolve_lookup_identifier,
)

__all__: list[str] = [
    "decode_component",
    "flatten_mapping",
    "load_client_config",
    "min_ttl",
    "parse_key_reference",
    "parse_object_location",
    "parse_properties",
    "resolve_lookup_identifier",
]
