# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from propfilter.exceptions import FilterError
from propfilter.query.builder import build_filter_entries_from_parameters
from propfilter.query.memory import MemoryQueryContext
from propfilter.query.translate import compose_all
from propfilter.repository.configuration import CONFIGURATION_REPO
from propfilter.repository.records import load_records
from propfilter.terminal.parse import parse_parameters
from propfilter.view import state as view_state
from propfilter.view.views.records import records_view

logger = logging.getLogger(__name__)


def filter_records(
    data_file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="YAML or JSON file holding a list of records",
        ),
    ],
    parameters: Annotated[
        Optional[list[str]],
        typer.Option(
            "--param",
            "-p",
            help="Request style parameter, e.g. -p filter_EQS_name=vincent",
        ),
    ] = None,
    prefix: Annotated[
        Optional[str],
        typer.Option("--prefix", help="Parameter prefix, defaults to the configured one"),
    ] = None,
    ignore_empty_value: Annotated[
        Optional[bool],
        typer.Option(
            "--ignore-empty/--keep-empty",
            help="Skip parameters with empty values, defaults to the configured policy",
        ),
    ] = None,
    no_wrap: Annotated[
        bool,
        typer.Option("--no-wrap", help="Disable text wrapping in table columns"),
    ] = False,
) -> None:
    """Filter records with filter parameters and show the matches."""
    config = CONFIGURATION_REPO.get_config()
    if prefix is None:
        prefix = config["filter_prefix"]
    if ignore_empty_value is None:
        ignore_empty_value = config["ignore_empty_value"]
    view_state.set_no_wrap(no_wrap)

    try:
        records = load_records(data_file)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="DATA_FILE") from e

    try:
        entries = build_filter_entries_from_parameters(
            parse_parameters(parameters), prefix, ignore_empty_value
        )
        predicate = compose_all(entries, MemoryQueryContext())
        matches = predicate.filter(records)
    except FilterError as e:
        raise typer.BadParameter(str(e), param_hint="--param") from e

    logger.info("%d of %d records matched", len(matches), len(records))
    records_view(entries, matches, len(records))
