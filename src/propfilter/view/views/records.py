# SPDX-License-Identifier: MIT

from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from propfilter.model.criterion import FilterEntry
from propfilter.view.state import get_no_wrap
from propfilter.view.util import format_value, record_columns
from propfilter.view.views.header import header


def records_view(
    entries: list[FilterEntry],
    records: list[dict[str, Any]],
    total: int,
) -> None:
    header(f"filter ({len(records)} of {total} records)")

    console = Console()

    if entries:
        filters_table = Table(box=box.SIMPLE, title="filters")
        filters_table.add_column("restriction")
        filters_table.add_column("properties", style="magenta")
        filters_table.add_column("value", style="cyan")
        for entry in entries:
            filters_table.add_row(
                f"{entry.criterion.restriction_kind}{entry.criterion.property_type.code}",
                " OR ".join(entry.criterion.property_names),
                entry.match_value,
            )
        console.print(filters_table)

    if not records:
        console.print("No matching records.")
        return

    no_wrap = get_no_wrap()
    table = Table(box=box.SIMPLE)
    columns = record_columns(records)
    for column in columns:
        if no_wrap:
            table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            table.add_column(column)

    for record in records:
        table.add_row(*(format_value(record.get(column)) for column in columns))

    console.print(table)
