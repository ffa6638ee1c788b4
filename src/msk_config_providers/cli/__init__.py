# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command-line interface."""

from msk_config_providers.cli.commands import cli

__all__: list[str] = ["cli"]
