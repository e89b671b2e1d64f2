# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from propfilter.exceptions import FilterError
from propfilter.model.criterion import FilterCriterion
from propfilter.query.parse import parse_expression
from propfilter.view.views.criterion import criteria_view


def parse(
    expressions: Annotated[
        list[str],
        typer.Argument(help="Filter expressions, e.g. EQS_name NEI_age_OR_score"),
    ],
) -> None:
    """Parse filter expressions and show their restriction, type and properties."""
    criteria: list[tuple[str, FilterCriterion]] = []
    for expression in expressions:
        try:
            criteria.append((expression, parse_expression(expression)))
        except FilterError as e:
            raise typer.BadParameter(str(e), param_hint="EXPRESSIONS") from e

    criteria_view(criteria)
