# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
MSK config providers CLI commands.

Resolves the provider tokens of a client configuration file and prints the
result, so a ``client.properties`` file can be checked (or rendered for a
non-JVM client) without starting a Kafka client.
"""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from msk_config_providers import __version__
from msk_config_providers.errors import ConfigProviderError
from msk_config_providers.runtime import (
    CONFIG_PROVIDERS,
    ConfigProviderRegistry,
    ConfigTransformer,
)
from msk_config_providers.utils import load_client_config

console = Console()

MASK: str = "********"


@click.group()
@click.version_option(__version__, prog_name="msk-config-providers")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """MSK config providers CLI."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command("resolve")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "properties", "json"]),
    default="table",
    help="Output format",
)
@click.option(
    "--reveal",
    is_flag=True,
    help="Print resolved values instead of masking them",
)
def resolve_cmd(config_file: str, output_format: str, reveal: bool) -> None:
    """Resolve provider tokens in CONFIG_FILE.

    CONFIG_FILE is a Java properties file, or a YAML file (.yaml/.yml) whose
    nested keys are joined with dots. The ``config.providers*`` entries
    themselves are not printed.
    """
    try:
        config = load_client_config(config_file)
        with ConfigProviderRegistry.from_config(config) as registry:
            result = ConfigTransformer(registry).transform(config)
    except ConfigProviderError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if e.correlation_id is not None:
            console.print(f"[dim]correlation_id: {e.correlation_id}[/dim]")
        raise SystemExit(1) from e

    rows: list[tuple[str, str, bool]] = []
    for name, value in result.data.items():
        if name == CONFIG_PROVIDERS or name.startswith(f"{CONFIG_PROVIDERS}."):
            continue
        resolved = value != config[name]
        rows.append((name, MASK if resolved and not reveal else value, resolved))

    if output_format == "json":
        click.echo(json.dumps({name: value for name, value, _ in rows}, indent=2))
        return
    if output_format == "properties":
        for name, value, _ in rows:
            click.echo(f"{name}={value}")
        return

    table = Table(title=f"Resolved configuration: {config_file}")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    table.add_column("Source")
    for name, value, resolved in rows:
        table.add_row(
            escape(name),
            escape(value),
            "[green]provider[/green]" if resolved else "[dim]literal[/dim]",
        )
    console.print(table)
    if result.ttls:
        console.print("[bold]TTLs (ms):[/bold]")
        for path, ttl in sorted(result.ttls.items()):
            console.print(f"  {path or '<default>'}: {ttl}")


__all__: list[str] = ["cli"]
