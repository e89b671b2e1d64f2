# SPDX-License-Identifier: MIT

import logging
from typing import Any, Mapping

from propfilter.model.criterion import FilterEntry
from propfilter.query.parse import PREFIX_SEPARATOR, parse_expression
from propfilter.query.registry import DEFAULT_TYPE_REGISTRY, TypeRegistry

logger = logging.getLogger(__name__)

DEFAULT_FILTER_PREFIX = "filter"
MULTI_VALUE_SEPARATOR = ","


def build_filter_entries(
    params: Mapping[str, Any],
    ignore_empty_value: bool = False,
    registry: TypeRegistry = DEFAULT_TYPE_REGISTRY,
) -> list[FilterEntry]:
    """
    Build filter entries from expression keys and raw values.

    Entries come out in the mapping's iteration order. With
    `ignore_empty_value`, keys whose value is None or "" produce no entry.
    Any key that fails to parse aborts the whole build.
    """
    entries: list[FilterEntry] = []
    for expression, value in params.items():
        if ignore_empty_value and __is_empty(value):
            logger.debug("Skipping %s, empty match value", expression)
            continue
        criterion = parse_expression(expression, registry)
        entries.append(FilterEntry(criterion, "" if value is None else str(value)))
    return entries


def __is_empty(value: Any) -> bool:
    return value is None or str(value) == ""


def parameters_starting_with(
    params: Mapping[str, Any], prefix: str = DEFAULT_FILTER_PREFIX
) -> dict[str, Any]:
    """
    Select `<prefix>_...` parameters and strip the prefix from their keys.

    `{"filter_EQS_name": "vincent", "page": "2"}` gives `{"EQS_name": "vincent"}`.
    Multi-valued parameters (lists or tuples, as query string parsers
    return them) keep a single value as-is and join several with commas.
    """
    full_prefix = f"{prefix}{PREFIX_SEPARATOR}" if prefix else ""
    selected: dict[str, Any] = {}
    for key, value in params.items():
        if not key.startswith(full_prefix):
            continue
        expression = key[len(full_prefix) :]
        if not expression:
            continue
        selected[expression] = __flatten_value(value)
    return selected


def __flatten_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            return None
        if len(value) == 1:
            return value[0]
        return MULTI_VALUE_SEPARATOR.join(str(item) for item in value)
    return value


def build_filter_entries_from_parameters(
    params: Mapping[str, Any],
    prefix: str = DEFAULT_FILTER_PREFIX,
    ignore_empty_value: bool = False,
    registry: TypeRegistry = DEFAULT_TYPE_REGISTRY,
) -> list[FilterEntry]:
    return build_filter_entries(
        parameters_starting_with(params, prefix), ignore_empty_value, registry
    )
