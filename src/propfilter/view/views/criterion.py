# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from propfilter.model.criterion import FilterCriterion
from propfilter.view.views.header import header


def criteria_view(criteria: list[tuple[str, FilterCriterion]]) -> None:
    """
    Display parsed expressions.

    Args:
        criteria: (expression, parsed criterion) pairs
    """
    header("parse")

    table = Table(box=box.SIMPLE)
    table.add_column("expression", style="cyan")
    table.add_column("restriction")
    table.add_column("type")
    table.add_column("properties", style="magenta")

    for expression, criterion in criteria:
        table.add_row(
            expression,
            criterion.restriction_kind,
            f"{criterion.property_type.name} ({criterion.property_type.code})",
            " OR ".join(criterion.property_names),
        )

    console = Console()
    console.print(table)
