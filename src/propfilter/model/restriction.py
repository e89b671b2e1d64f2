# SPDX-License-Identifier: MIT

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from propfilter.exceptions import UnsupportedRestrictionError


class Operator(StrEnum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    ENDS_WITH = "ends_with"
    STARTS_WITH = "starts_with"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS_OR_EQUAL = "less_or_equal"
    IN = "in"
    NOT_IN = "not_in"

    @property
    def is_set_operator(self) -> bool:
        return self in (Operator.IN, Operator.NOT_IN)


class RestrictionTable:
    """
    Immutable mapping of restriction kinds (the `EQ` in `EQS_name`) to operators.

    Lookups are case sensitive, matching the expression grammar.
    """

    def __init__(self, restrictions: Mapping[str, Operator]) -> None:
        for kind in restrictions:
            if not kind:
                raise ValueError("Restriction kind must not be empty")
        self._restrictions: Mapping[str, Operator] = MappingProxyType(
            dict(restrictions)
        )

    def resolve(self, restriction_kind: str) -> Operator:
        try:
            return self._restrictions[restriction_kind]
        except KeyError:
            raise UnsupportedRestrictionError(restriction_kind) from None

    def __contains__(self, restriction_kind: object) -> bool:
        return restriction_kind in self._restrictions


DEFAULT_RESTRICTION_TABLE = RestrictionTable(
    {
        "EQ": Operator.EQUALS,
        "NE": Operator.NOT_EQUALS,
        "LIKE": Operator.CONTAINS,
        # wildcard on the left: "%value"
        "LLIKE": Operator.ENDS_WITH,
        # wildcard on the right: "value%"
        "RLIKE": Operator.STARTS_WITH,
        "GT": Operator.GREATER_THAN,
        "LT": Operator.LESS_THAN,
        "GE": Operator.GREATER_OR_EQUAL,
        "LE": Operator.LESS_OR_EQUAL,
        "GTE": Operator.GREATER_OR_EQUAL,
        "LTE": Operator.LESS_OR_EQUAL,
        "IN": Operator.IN,
        "NIN": Operator.NOT_IN,
    }
)
