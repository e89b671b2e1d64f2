# SPDX-License-Identifier: MIT

import datetime

import pendulum


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="UTC")
    return pendulum_value.in_tz("UTC")


def date_to_pendulum_utc(python_value: datetime.date) -> pendulum.DateTime:
    """Midnight UTC of a plain date (YAML loads `2024-01-31` as a date)."""
    return pendulum.datetime(
        python_value.year, python_value.month, python_value.day, tz="UTC"
    )


def datetime_from_str_utc(datetime_str: str) -> pendulum.DateTime:
    """
    Parse an ISO 8601 date or datetime string.

    Values without an offset are read as UTC. Raises ValueError (or a subclass)
    when the string is not a date, and for durations or bare times, which
    pendulum also accepts.
    """
    parsed = pendulum.parse(datetime_str.strip(), tz="UTC", exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_tz("UTC")
    if isinstance(parsed, pendulum.Date):
        return date_to_pendulum_utc(parsed)
    raise ValueError(f"Not a date: {datetime_str!r}")


def to_pendulum_utc(value: object) -> pendulum.DateTime:
    if isinstance(value, pendulum.DateTime):
        return value.in_tz("UTC")
    if isinstance(value, datetime.datetime):
        return python_to_pendulum_utc(value)
    if isinstance(value, datetime.date):
        return date_to_pendulum_utc(value)
    return datetime_from_str_utc(str(value))

