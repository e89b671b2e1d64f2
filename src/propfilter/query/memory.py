# SPDX-License-Identifier: MIT

import datetime
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

import pendulum

from propfilter.model.restriction import Operator
from propfilter.query.context import QueryContext
from propfilter.time import to_pendulum_utc

PATH_SEPARATOR = "."
_MISSING = object()


class Predicate(ABC):
    @abstractmethod
    def matches(self, item: dict[str, Any]) -> bool: ...

    def filter(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [item for item in items if self.matches(item)]


class AlwaysTrue(Predicate):
    def matches(self, item: dict[str, Any]) -> bool:
        return True

    def __repr__(self) -> str:
        return "AlwaysTrue()"


class And(Predicate):
    def __init__(self, predicates: Sequence[Predicate]) -> None:
        self.predicates: list[Predicate] = list(predicates)

    def matches(self, item: dict[str, Any]) -> bool:
        return all(predicate.matches(item) for predicate in self.predicates)

    def __repr__(self) -> str:
        return f"And({self.predicates!r})"


class Or(Predicate):
    def __init__(self, predicates: Sequence[Predicate]) -> None:
        self.predicates: list[Predicate] = list(predicates)

    def matches(self, item: dict[str, Any]) -> bool:
        return any(predicate.matches(item) for predicate in self.predicates)

    def __repr__(self) -> str:
        return f"Or({self.predicates!r})"


class Comparison(Predicate):
    def __init__(self, operator: Operator, property_name: str, value: Any) -> None:
        self.operator = operator
        self.property_name = property_name
        self.value = value

    def __repr__(self) -> str:
        return f"Comparison({self.operator.name}, {self.property_name!r}, {self.value!r})"

    def matches(self, item: dict[str, Any]) -> bool:
        actual = resolve_path(item, self.property_name)
        if actual is _MISSING or actual is None:
            return False

        match self.operator:
            case Operator.IN:
                return any(self.__equals(actual, expected) for expected in self.value)
            case Operator.NOT_IN:
                return not any(
                    self.__equals(actual, expected) for expected in self.value
                )
            case Operator.CONTAINS:
                return str(self.value) in str(actual)
            case Operator.STARTS_WITH:
                return str(actual).startswith(str(self.value))
            case Operator.ENDS_WITH:
                return str(actual).endswith(str(self.value))

        left = normalize(actual, self.value)
        if left is None:
            return False
        right = self.value
        try:
            match self.operator:
                case Operator.EQUALS:
                    return bool(left == right)
                case Operator.NOT_EQUALS:
                    return bool(left != right)
                case Operator.GREATER_THAN:
                    return bool(left > right)
                case Operator.LESS_THAN:
                    return bool(left < right)
                case Operator.GREATER_OR_EQUAL:
                    return bool(left >= right)
                case Operator.LESS_OR_EQUAL:
                    return bool(left <= right)
        except TypeError:
            return False
        raise ValueError(f"Unhandled operator: {self.operator}")

    def __equals(self, actual: Any, expected: Any) -> bool:
        left = normalize(actual, expected)
        return left is not None and bool(left == expected)


def resolve_path(item: dict[str, Any], property_name: str) -> Any:
    """Look up `property_name`, following dotted paths into nested dicts."""
    if property_name in item:
        return item[property_name]
    current: Any = item
    for segment in property_name.split(PATH_SEPARATOR):
        if not isinstance(current, dict) or segment not in current:
            return _MISSING
        current = current[segment]
    return current


def normalize(actual: Any, expected: Any) -> Optional[Any]:
    """
    Convert a record value to the type of the coerced match value.

    Returns None when the record value cannot be read as that type; such
    values never match.
    """
    try:
        if isinstance(expected, bool):
            if isinstance(actual, bool):
                return actual
            literal = str(actual).strip().lower()
            if literal in ("true", "1", "yes", "on"):
                return True
            if literal in ("false", "0", "no", "off"):
                return False
            return None
        if isinstance(expected, int):
            if isinstance(actual, bool):
                return None
            if isinstance(actual, float):
                return actual
            return int(actual)
        if isinstance(expected, float):
            if isinstance(actual, bool):
                return None
            return float(actual)
        if isinstance(expected, (pendulum.DateTime, datetime.datetime)):
            return to_pendulum_utc(actual)
        if isinstance(expected, str):
            return str(actual)
    except (TypeError, ValueError):
        return None
    return actual


class MemoryQueryContext(QueryContext[Predicate]):
    """
    Query context evaluating predicates against lists of dicts.

    Missing and None values never match, whatever the operator, the same
    way SQL treats NULL.
    """

    @property
    def operators(self) -> frozenset[Operator]:
        return frozenset(Operator)

    def predicate(
        self, operator: Operator, property_name: str, value: Any
    ) -> Predicate:
        return Comparison(operator, property_name, value)

    def and_(self, predicates: Sequence[Predicate]) -> Predicate:
        return And(predicates)

    def or_(self, predicates: Sequence[Predicate]) -> Predicate:
        return Or(predicates)

    def always_true(self) -> Predicate:
        return AlwaysTrue()
