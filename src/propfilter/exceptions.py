# SPDX-License-Identifier: MIT

from typing import Optional


class FilterError(ValueError):
    """Base class for every error raised while parsing or translating filters."""


class EmptyExpressionError(FilterError):
    def __init__(self, expression: Optional[str]) -> None:
        self.expression = expression
        super().__init__("Filter expression must not be empty")


class MalformedExpressionError(FilterError):
    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"[{expression}] is not a valid filter expression: {reason}")


class UnknownTypeCodeError(FilterError):
    def __init__(self, code: str, expression: Optional[str] = None) -> None:
        self.code = code
        self.expression = expression
        if expression is None:
            message = f"Unknown property type code: {code!r}"
        else:
            message = (
                f"[{expression}] has no matching property type, type code was {code!r}"
            )
        super().__init__(message)


class LengthMismatchError(FilterError):
    def __init__(self, expressions_length: int, values_length: int) -> None:
        self.expressions_length = expressions_length
        self.values_length = values_length
        super().__init__(
            "Expressions and match values differ in length: "
            f"{expressions_length} expressions, {values_length} values"
        )


class TypeCoercionError(FilterError):
    def __init__(
        self,
        property_type: str,
        raw_value: str,
        property_name: Optional[str] = None,
    ) -> None:
        self.property_type = property_type
        self.raw_value = raw_value
        self.property_name = property_name
        target = f" for property {property_name!r}" if property_name else ""
        super().__init__(
            f"Cannot coerce {raw_value!r} to {property_type}{target}"
        )

    def for_property(self, property_name: str) -> "TypeCoercionError":
        return TypeCoercionError(self.property_type, self.raw_value, property_name)


class UnsupportedRestrictionError(FilterError):
    def __init__(self, restriction_kind: str) -> None:
        self.restriction_kind = restriction_kind
        super().__init__(f"Unsupported restriction: {restriction_kind!r}")


class ContextInUseError(FilterError):
    def __init__(self) -> None:
        super().__init__(
            "Query context is already bound to a translation pass; "
            "use a new context or wait for the current pass to finish"
        )
