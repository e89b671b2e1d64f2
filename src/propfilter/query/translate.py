# SPDX-License-Identifier: MIT

import logging
from typing import Any, Sequence, TypeVar

from propfilter.exceptions import TypeCoercionError, UnsupportedRestrictionError
from propfilter.model.criterion import FilterEntry
from propfilter.model.property_type import PropertyType
from propfilter.model.restriction import (
    DEFAULT_RESTRICTION_TABLE,
    Operator,
    RestrictionTable,
)
from propfilter.query.builder import MULTI_VALUE_SEPARATOR
from propfilter.query.context import QueryContext, query_session
from propfilter.query.registry import DEFAULT_TYPE_REGISTRY, TypeRegistry

logger = logging.getLogger(__name__)

P = TypeVar("P")


def translate_entry(
    entry: FilterEntry,
    context: QueryContext[P],
    restrictions: RestrictionTable = DEFAULT_RESTRICTION_TABLE,
    registry: TypeRegistry = DEFAULT_TYPE_REGISTRY,
) -> P:
    """
    Translate one entry into a predicate.

    Every property name gets its own predicate on the coerced match value;
    several property names are OR-combined.
    """
    criterion = entry.criterion
    predicates: list[P] = []
    operator = resolve_operator(criterion.restriction_kind, context, restrictions)
    for property_name in criterion.property_names:
        value = coerce_match_value(
            criterion.property_type, entry.match_value, property_name, operator, registry
        )
        predicates.append(context.predicate(operator, property_name, value))

    if len(predicates) == 1:
        return predicates[0]
    return context.or_(predicates)


def resolve_operator(
    restriction_kind: str,
    context: QueryContext[Any],
    restrictions: RestrictionTable = DEFAULT_RESTRICTION_TABLE,
) -> Operator:
    operator = restrictions.resolve(restriction_kind)
    if operator not in context.operators:
        raise UnsupportedRestrictionError(restriction_kind)
    return operator


def coerce_match_value(
    property_type: PropertyType,
    match_value: str,
    property_name: str,
    operator: Operator,
    registry: TypeRegistry = DEFAULT_TYPE_REGISTRY,
) -> Any:
    """Coerce the raw value; set operators get a list, one element per comma."""
    try:
        if operator.is_set_operator:
            return [
                registry.coerce(property_type, item)
                for item in match_value.split(MULTI_VALUE_SEPARATOR)
            ]
        return registry.coerce(property_type, match_value)
    except TypeCoercionError as e:
        raise e.for_property(property_name) from e


def translate_restriction(
    property_name: str,
    value: Any,
    restriction_kind: str,
    context: QueryContext[P],
    restrictions: RestrictionTable = DEFAULT_RESTRICTION_TABLE,
) -> P:
    """
    Build a single predicate from an already typed value, bypassing the grammar.

    Set operators take a list, tuple or set; any other value, strings
    included, becomes a one element list.
    """
    operator = resolve_operator(restriction_kind, context, restrictions)
    if operator.is_set_operator and not isinstance(
        value, (list, tuple, set, frozenset)
    ):
        value = [value]
    return context.predicate(operator, property_name, value)


def compose_all(
    entries: Sequence[FilterEntry],
    context: QueryContext[P],
    restrictions: RestrictionTable = DEFAULT_RESTRICTION_TABLE,
    registry: TypeRegistry = DEFAULT_TYPE_REGISTRY,
) -> P:
    """AND together the predicates of every entry, within one query session."""
    with query_session(context):
        if not entries:
            return context.always_true()
        predicates = [
            translate_entry(entry, context, restrictions, registry) for entry in entries
        ]
        logger.debug("Composed %d filter entries", len(predicates))
        if len(predicates) == 1:
            return predicates[0]
        return context.and_(predicates)
