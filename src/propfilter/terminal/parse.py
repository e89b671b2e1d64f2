# SPDX-License-Identifier: MIT

from typing import Optional

import typer


def parse_parameters(parameters: Optional[list[str]]) -> dict[str, list[str]]:
    """
    Turn repeated `KEY=VALUE` options into a query-string style mapping.

    A key given several times collects every value, in order. The value may
    be empty (`filter_EQS_age=`) but the `=` is required.
    """
    parsed: dict[str, list[str]] = {}
    for parameter in parameters or []:
        key, separator, value = parameter.partition("=")
        key = key.strip()
        if not separator or not key:
            raise typer.BadParameter(
                f"Parameters must look like KEY=VALUE, got {parameter!r}"
            )
        parsed.setdefault(key, []).append(value)
    return parsed
