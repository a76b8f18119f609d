# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
ONEX Binding CLI Commands.

Provides a CLI interface for binding YAML/JSON input files to Python types
and inspecting the problems recorded along the way.
"""

from __future__ import annotations

import importlib
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty
from rich.table import Table

from omnibase_binding.errors import BindingError
from omnibase_binding.models import ModelBindingConfig, ModelBindResult
from omnibase_binding.runtime import bind_model, load_input_source

console = Console()

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_LOAD_ERROR = 2


@click.group()
def cli() -> None:
    """ONEX Binding CLI."""


@cli.command("bind")
@click.argument("target")
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for bind diagnostics",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Exit with status 1 when any problem was recorded",
)
@click.option(
    "--env-prefix",
    default="BINDING",
    help="Prefix for configuration environment variables",
)
def bind_cmd(
    target: str, input_file: str, log_level: str, strict: bool, env_prefix: str
) -> None:
    """Bind INPUT_FILE to TARGET (``package.module:ClassName``)."""
    logging.basicConfig(level=log_level.upper())

    try:
        target_type = _import_target(target)
        config = ModelBindingConfig.from_env(prefix=env_prefix)
        source = load_input_source(input_file, separator=config.prefix_separator)
    except (BindingError, click.BadParameter) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(EXIT_LOAD_ERROR) from e

    console.print(
        f"[bold blue]Binding {escape(input_file)} to {target_type.__name__}...[/bold blue]"
    )
    result = bind_model(target_type, source, config=config)
    _print_result(target_type.__name__, result)

    raise SystemExit(EXIT_PROBLEMS if strict and not result.succeeded else EXIT_OK)


def _import_target(target: str) -> type:
    """Import ``package.module:ClassName``."""
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise click.BadParameter(
            f"Target must look like 'package.module:ClassName', got {target!r}"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"Cannot import module {module_name!r}: {e}") from e

    target_type = getattr(module, attribute, None)
    if not isinstance(target_type, type):
        raise click.BadParameter(f"{target!r} does not name a class")
    return target_type


def _print_result(name: str, result: ModelBindResult) -> None:
    """Print bind result with rich formatting."""
    console.print(Pretty(result.value))

    if result.succeeded:
        console.print(f"[bold green]{name}: PASS[/bold green]")
        return

    console.print(f"[bold red]{name}: {len(result.problems)} problem(s)[/bold red]")
    table = Table(title="Binding Problems")
    table.add_column("Owner", style="cyan")
    table.add_column("Property", style="bold")
    table.add_column("Raw Key", style="dim")
    table.add_column("Raw Value", style="dim")
    table.add_column("Error", style="red")

    for problem in result.problems:
        owner = type(problem.item).__name__ if problem.item is not None else "-"
        raw_key = problem.value.raw_key if problem.value is not None else "-"
        raw_value = repr(problem.value.raw_value) if problem.value is not None else "-"
        table.add_row(
            owner,
            escape(problem.property_name or "-"),
            escape(raw_key),
            escape(raw_value),
            escape(problem.summary) or "-",
        )

    console.print(table)


if __name__ == "__main__":
    cli()
