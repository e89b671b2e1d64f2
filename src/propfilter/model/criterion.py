# SPDX-License-Identifier: MIT

from dataclasses import dataclass

from propfilter.model.property_type import PropertyType


@dataclass(frozen=True)
class FilterCriterion:
    """
    Parsed form of one filter expression.

    `EQS_name_OR_nickname` becomes restriction kind `EQ`, property type
    STRING and property names `("name", "nickname")`. The property names
    are OR-combined at translation time.
    """

    restriction_kind: str
    property_type: PropertyType
    property_names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.restriction_kind:
            raise ValueError("restriction_kind must not be empty")
        if not isinstance(self.property_type, PropertyType):
            raise ValueError(f"Invalid property type: {self.property_type!r}")
        # accept any sequence but always store a tuple
        object.__setattr__(self, "property_names", tuple(self.property_names))
        if not self.property_names:
            raise ValueError("property_names must not be empty")
        if any(not name for name in self.property_names):
            raise ValueError("property_names must not contain empty names")

    @property
    def has_multiple_property_names(self) -> bool:
        return len(self.property_names) > 1


@dataclass(frozen=True)
class FilterEntry:
    """A criterion paired with its raw, not yet coerced, match value."""

    criterion: FilterCriterion
    match_value: str
