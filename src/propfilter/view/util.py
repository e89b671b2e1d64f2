# SPDX-License-Identifier: MIT

import datetime
from typing import Any

import pendulum

from propfilter.time import to_pendulum_utc


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (pendulum.DateTime, datetime.datetime, datetime.date)):
        return to_pendulum_utc(value).format("YYYY-MM-DD HH:mm")
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(item) for item in value)
    if isinstance(value, dict):
        return ", ".join(f"{key}={format_value(item)}" for key, item in value.items())
    return str(value)


def record_columns(records: list[dict[str, Any]]) -> list[str]:
    """Union of record keys, in order of first appearance."""
    columns: list[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)
    return columns
