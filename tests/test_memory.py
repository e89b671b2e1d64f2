# SPDX-License-Identifier: MIT

import datetime

import pytest

from propfilter.query.builder import build_filter_entries
from propfilter.query.memory import resolve_path
from propfilter.query.translate import compose_all


def names(records):
    return [record["name"] for record in records]


def run(params, people, context, ignore_empty_value=False):
    entries = build_filter_entries(params, ignore_empty_value)
    return names(compose_all(entries, context).filter(people))


@pytest.mark.parametrize(
    "params, expected",
    [
        ({"EQS_name": "vincent"}, ["vincent"]),
        ({"NES_name": "vincent"}, ["admin", "maria"]),
        ({"LIKES_name": "in"}, ["vincent", "admin"]),
        ({"RLIKES_name": "ma"}, ["maria"]),
        ({"LLIKES_name": "nt"}, ["vincent"]),
        ({"GTI_age": "30"}, ["vincent", "admin"]),
        ({"LTI_age": "31"}, ["maria"]),
        ({"GEI_age": "31"}, ["vincent", "admin"]),
        ({"LEI_age": "31"}, ["vincent", "maria"]),
        ({"GTN_height": "1.7"}, ["vincent"]),
        ({"EQB_active": "false"}, ["admin"]),
        ({"INS_name": "maria,admin"}, ["admin", "maria"]),
        ({"NINI_age": "27,45"}, ["vincent"]),
        ({"GED_joined": "2021-01-01"}, ["vincent", "maria"]),
        ({"LTD_joined": "2020-01-01"}, ["admin"]),
        ({"EQS_address.city": "lyon"}, ["vincent", "maria"]),
    ],
)
def test_operators(params, expected, people, context):
    assert run(params, people, context) == expected


def test_criteria_are_and_combined(people, context):
    params = {"EQS_address.city": "lyon", "GTI_age": "30"}
    assert run(params, people, context) == ["vincent"]


def test_property_names_are_or_combined(people, context):
    assert run({"EQS_name_OR_nickname": "root"}, people, context) == ["admin"]


def test_no_criteria_matches_everything(people, context):
    assert run({}, people, context) == ["vincent", "admin", "maria"]


def test_ignored_empty_value_does_not_filter(people, context):
    params = {"EQS_name": "vincent", "EQS_nickname": ""}
    assert run(params, people, context, ignore_empty_value=True) == ["vincent"]
    assert run(params, people, context, ignore_empty_value=False) == []


def test_none_and_missing_values_never_match(people, context):
    assert run({"NES_nickname": "vin"}, people, context) == ["admin"]
    assert run({"NES_missing": "x"}, people, context) == []


def test_record_values_are_normalized(context):
    records = [
        {"name": "a", "age": "31", "joined": datetime.date(2022, 5, 1)},
        {"name": "b", "age": "n/a", "joined": datetime.datetime(2018, 5, 1, 12, 0)},
    ]
    assert run({"EQI_age": "31"}, records, context) == ["a"]
    assert run({"GTD_joined": "2020-01-01"}, records, context) == ["a"]


def test_resolve_path_prefers_flat_keys():
    item = {"address.city": "flat", "address": {"city": "nested"}}
    assert resolve_path(item, "address.city") == "flat"
    assert resolve_path({"address": {"city": "nested"}}, "address.city") == "nested"
