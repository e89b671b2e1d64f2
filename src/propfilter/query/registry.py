# SPDX-License-Identifier: MIT

from types import MappingProxyType
from typing import Any, Iterable, Mapping

from propfilter.exceptions import UnknownTypeCodeError
from propfilter.model.property_type import PropertyType, coerce


class TypeRegistry:
    """Immutable lookup of property types by their single character code."""

    def __init__(self, property_types: Iterable[PropertyType]) -> None:
        types_by_code: dict[str, PropertyType] = {}
        for property_type in property_types:
            code = property_type.code
            if len(code) != 1:
                raise ValueError(f"Type code must be one character: {code!r}")
            if code in types_by_code and types_by_code[code] is not property_type:
                raise ValueError(
                    f"Type code {code!r} registered for both "
                    f"{types_by_code[code].name} and {property_type.name}"
                )
            types_by_code[code] = property_type
        self._types_by_code: Mapping[str, PropertyType] = MappingProxyType(
            types_by_code
        )

    def resolve(self, code: str) -> PropertyType:
        try:
            return self._types_by_code[code]
        except KeyError:
            raise UnknownTypeCodeError(code) from None

    def coerce(self, property_type: PropertyType, raw: str) -> Any:
        if property_type.code not in self._types_by_code:
            raise UnknownTypeCodeError(property_type.code)
        return coerce(property_type, raw)

    def __contains__(self, code: object) -> bool:
        return code in self._types_by_code

    def __len__(self) -> int:
        return len(self._types_by_code)


DEFAULT_TYPE_REGISTRY = TypeRegistry(PropertyType)
