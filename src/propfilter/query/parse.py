# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Sequence

from propfilter.exceptions import (
    EmptyExpressionError,
    LengthMismatchError,
    MalformedExpressionError,
    UnknownTypeCodeError,
)
from propfilter.model.criterion import FilterCriterion, FilterEntry
from propfilter.query.registry import DEFAULT_TYPE_REGISTRY, TypeRegistry

logger = logging.getLogger(__name__)

PREFIX_SEPARATOR = "_"
OR_SEPARATOR = "_OR_"


def parse_expression(
    expression: Optional[str], registry: TypeRegistry = DEFAULT_TYPE_REGISTRY
) -> FilterCriterion:
    """
    Parse `<restriction><type code>_<property>[_OR_<property>]*`.

    Examples:
        EQS_name             -> EQ, STRING, ("name",)
        NEI_age_OR_score     -> NE, INTEGER, ("age", "score")
        LIKES_address_city   -> LIKE, STRING, ("city",)

    Without `_OR_` only the text after the last underscore is the property
    name, so underscores cannot appear in a single property name. Use a
    dotted path (`EQS_address.city`) for nested properties.
    """
    if expression is None or not expression.strip():
        raise EmptyExpressionError(expression)

    prefix, separator, remainder = expression.partition(PREFIX_SEPARATOR)
    if not separator:
        raise MalformedExpressionError(expression, "no property name")
    if len(prefix) < 2:
        raise MalformedExpressionError(expression, "no restriction kind in prefix")

    restriction_kind, type_code = prefix[:-1], prefix[-1]

    try:
        property_type = registry.resolve(type_code)
    except UnknownTypeCodeError:
        raise UnknownTypeCodeError(type_code, expression) from None

    if OR_SEPARATOR in remainder:
        property_names = _split_or_property_names(expression, remainder)
    else:
        property_names = (_last_segment_property_name(expression),)

    criterion = FilterCriterion(restriction_kind, property_type, property_names)
    logger.debug("Parsed %s into %s", expression, criterion)
    return criterion


def _split_or_property_names(expression: str, remainder: str) -> tuple[str, ...]:
    property_names = tuple(remainder.split(OR_SEPARATOR))
    if any(not name for name in property_names):
        raise MalformedExpressionError(expression, "empty property name around _OR_")
    return property_names


def _last_segment_property_name(expression: str) -> str:
    # "EQS_address_city" targets "city": everything before the last
    # underscore is dropped
    property_name = expression.rpartition(PREFIX_SEPARATOR)[2]
    if not property_name:
        raise MalformedExpressionError(expression, "no property name")
    return property_name


def parse_expressions(
    expressions: Optional[Sequence[str]],
    match_values: Optional[Sequence[str]],
    registry: TypeRegistry = DEFAULT_TYPE_REGISTRY,
) -> list[FilterEntry]:
    """Pair expressions with match values by position."""
    expressions = expressions or []
    match_values = match_values or []
    if len(expressions) != len(match_values):
        raise LengthMismatchError(len(expressions), len(match_values))

    return [
        FilterEntry(parse_expression(expression, registry), match_value)
        for expression, match_value in zip(expressions, match_values)
    ]
