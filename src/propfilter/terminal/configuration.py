# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from propfilter import configuration
from propfilter.repository.configuration import CONFIGURATION_REPO
from propfilter.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table(title=str(configuration.APP_CONFIG_PATH))
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("filter_prefix", config["filter_prefix"])
    table.add_row(
        "ignore_empty_value",
        "✓ Enabled" if config["ignore_empty_value"] else "✗ Disabled",
    )
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s")
def set_config(
    filter_prefix: Annotated[
        Optional[str],
        typer.Option("--filter-prefix", help="Prefix marking filter parameters"),
    ] = None,
    ignore_empty_value: Annotated[
        Optional[bool],
        typer.Option(
            "--ignore-empty/--keep-empty",
            help="Skip filter parameters whose value is empty",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Show the report header"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if log_level is not None and not isinstance(
        logging.getLevelName(log_level.upper()), int
    ):
        raise typer.BadParameter(f"Unknown log level: {log_level}")

    CONFIGURATION_REPO.update_config(
        filter_prefix=filter_prefix,
        ignore_empty_value=ignore_empty_value,
        show_header=show_header,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()
    view()
