# SPDX-License-Identifier: MIT

import math
import re
from enum import StrEnum
from typing import Any

from propfilter.exceptions import TypeCoercionError
from propfilter.time import datetime_from_str_utc

INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_TRUE_LITERALS = {"true", "1", "yes", "on"}
_FALSE_LITERALS = {"false", "0", "no", "off"}
_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class PropertyType(StrEnum):
    """Value types an expression can declare, keyed by their one character code."""

    STRING = "S"
    INTEGER = "I"
    LONG = "L"
    DOUBLE = "N"
    DATE = "D"
    BOOLEAN = "B"

    @property
    def code(self) -> str:
        return self.value

    def coerce(self, raw: str) -> Any:
        return coerce(self, raw)


def coerce(property_type: PropertyType, raw: str) -> Any:
    match property_type:
        case PropertyType.STRING:
            return raw
        case PropertyType.INTEGER:
            return __to_int(property_type, raw, INTEGER_MIN, INTEGER_MAX)
        case PropertyType.LONG:
            return __to_int(property_type, raw, LONG_MIN, LONG_MAX)
        case PropertyType.DOUBLE:
            return __to_float(property_type, raw)
        case PropertyType.DATE:
            return __to_date(property_type, raw)
        case PropertyType.BOOLEAN:
            return __to_bool(property_type, raw)
    raise TypeCoercionError(property_type.name, raw)


def __to_int(property_type: PropertyType, raw: str, minimum: int, maximum: int) -> int:
    literal = raw.strip()
    # int() also takes "1_000" and non-ASCII digits
    if not _INTEGER_LITERAL.fullmatch(literal):
        raise TypeCoercionError(property_type.name, raw)
    value = int(literal)
    if not (minimum <= value <= maximum):
        raise TypeCoercionError(property_type.name, raw)
    return value


def __to_float(property_type: PropertyType, raw: str) -> float:
    try:
        value = float(raw.strip())
    except ValueError as e:
        raise TypeCoercionError(property_type.name, raw) from e
    # float() accepts "nan" and "inf", neither is a usable match value
    if not math.isfinite(value):
        raise TypeCoercionError(property_type.name, raw)
    return value


def __to_date(property_type: PropertyType, raw: str) -> Any:
    if not raw.strip():
        raise TypeCoercionError(property_type.name, raw)
    try:
        return datetime_from_str_utc(raw)
    except ValueError as e:
        raise TypeCoercionError(property_type.name, raw) from e


def __to_bool(property_type: PropertyType, raw: str) -> bool:
    literal = raw.strip().lower()
    if literal in _TRUE_LITERALS:
        return True
    if literal in _FALSE_LITERALS:
        return False
    raise TypeCoercionError(property_type.name, raw)
