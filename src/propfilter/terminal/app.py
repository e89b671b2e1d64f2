# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from propfilter import configuration as app_configuration
from propfilter.log import configure_logging
from propfilter.repository.configuration import CONFIGURATION_REPO
from propfilter.terminal import configuration
from propfilter.terminal.custom_typer import AliasedTyperGroup
from propfilter.terminal.expression import parse
from propfilter.terminal.filter import filter_records
from propfilter.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="propfilter - compact property filter expressions",
    no_args_is_help=True,
)
app.command(name="parse, p")(parse)
app.command(name="filter, f")(filter_records)
app.add_typer(configuration.app, name="config, c", help="View or change settings")


@app.callback()
def main_callback(
    config_file: Annotated[
        Optional[Path],
        typer.Option("--config", help="Use this config file instead of the default"),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", "-nh", help="Suppress header output"),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Override the configured log level"),
    ] = None,
) -> None:
    """
    propfilter - compact property filter expressions

    Global options that apply to all commands.
    """
    if config_file is not None:
        app_configuration.set_config_path(config_file)
        CONFIGURATION_REPO.reload()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"] and not no_header)

    try:
        configure_logging(log_level or config["log_level"])
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


def run() -> None:
    app()
