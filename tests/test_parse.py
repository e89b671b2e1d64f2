# SPDX-License-Identifier: MIT

import pytest

from propfilter.exceptions import (
    EmptyExpressionError,
    LengthMismatchError,
    MalformedExpressionError,
    UnknownTypeCodeError,
)
from propfilter.model.criterion import FilterCriterion, FilterEntry
from propfilter.model.property_type import PropertyType
from propfilter.query.parse import parse_expression, parse_expressions
from propfilter.query.registry import TypeRegistry


def test_single_property():
    criterion = parse_expression("EQS_name")
    assert criterion.restriction_kind == "EQ"
    assert criterion.property_type is PropertyType.STRING
    assert criterion.property_names == ("name",)
    assert not criterion.has_multiple_property_names


def test_or_combined_properties():
    criterion = parse_expression("NEI_age_OR_score")
    assert criterion == FilterCriterion("NE", PropertyType.INTEGER, ("age", "score"))
    assert criterion.has_multiple_property_names


def test_multi_character_restriction_kind():
    criterion = parse_expression("LIKES_name_OR_nickname_OR_email")
    assert criterion.restriction_kind == "LIKE"
    assert criterion.property_names == ("name", "nickname", "email")


def test_without_or_only_the_last_segment_is_kept():
    criterion = parse_expression("EQS_address_city")
    assert criterion.property_names == ("city",)


def test_with_or_underscored_names_are_kept_whole():
    criterion = parse_expression("EQS_home_city_OR_work_city")
    assert criterion.property_names == ("home_city", "work_city")


def test_dotted_paths_pass_through():
    criterion = parse_expression("EQS_address.city")
    assert criterion.property_names == ("address.city",)


@pytest.mark.parametrize("expression", ["", "   ", None])
def test_blank_expressions_are_rejected(expression):
    with pytest.raises(EmptyExpressionError):
        parse_expression(expression)


def test_single_character_prefix_has_no_restriction_kind():
    with pytest.raises(MalformedExpressionError):
        parse_expression("S_x")


@pytest.mark.parametrize(
    "expression", ["EQS", "EQS_", "EQS_name_OR_", "EQS__OR_name", "EQS_a_OR__OR_b"]
)
def test_missing_property_names_are_rejected(expression):
    with pytest.raises(MalformedExpressionError) as excinfo:
        parse_expression(expression)
    assert excinfo.value.expression == expression


def test_unknown_type_code_reports_expression_and_code():
    with pytest.raises(UnknownTypeCodeError) as excinfo:
        parse_expression("EQX_name")
    assert excinfo.value.code == "X"
    assert excinfo.value.expression == "EQX_name"
    assert "EQX_name" in str(excinfo.value)


def test_custom_registry_is_used():
    registry = TypeRegistry([PropertyType.STRING])
    assert parse_expression("EQS_name", registry).property_type is PropertyType.STRING
    with pytest.raises(UnknownTypeCodeError):
        parse_expression("EQI_age", registry)


def test_parsing_is_pure():
    first = parse_expression("GEN_height_OR_weight")
    second = parse_expression("GEN_height_OR_weight")
    assert first == second
    assert hash(first) == hash(second)
    assert first is not second


def test_criterion_is_immutable():
    criterion = parse_expression("EQS_name")
    with pytest.raises(AttributeError):
        criterion.restriction_kind = "NE"  # type: ignore[misc]


def test_criterion_requires_property_names():
    with pytest.raises(ValueError):
        FilterCriterion("EQ", PropertyType.STRING, ())
    with pytest.raises(ValueError):
        FilterCriterion("", PropertyType.STRING, ("name",))


def test_parse_expressions_pairs_by_position():
    entries = parse_expressions(["EQS_name", "NEI_age"], ["vincent", "31"])
    assert entries == [
        FilterEntry(FilterCriterion("EQ", PropertyType.STRING, ("name",)), "vincent"),
        FilterEntry(FilterCriterion("NE", PropertyType.INTEGER, ("age",)), "31"),
    ]


def test_parse_expressions_empty():
    assert parse_expressions([], []) == []
    assert parse_expressions(None, None) == []


def test_parse_expressions_length_mismatch():
    with pytest.raises(LengthMismatchError) as excinfo:
        parse_expressions(["EQS_a", "NEI_b"], ["1"])
    assert excinfo.value.expressions_length == 2
    assert excinfo.value.values_length == 1
