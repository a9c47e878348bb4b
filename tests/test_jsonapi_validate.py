"""Tests for regroup.jsonapi.validate."""

import pytest

from regroup.jsonapi.validate import validate_parameters, matches


class Serializer:
    def serialize(self, type, data, extra_data=None):
        return {}


def test_all_valid_returns_empty_list():
    errors = validate_parameters(
        {"config": {}, "serializer": Serializer(), "type": "article", "extra": None, "data": [{"id": 1}]},
        ["object", "object", "string", "*", "object|array"],
    )
    assert errors == []


def test_mismatch_reports_each_name():
    errors = validate_parameters(
        {"type": 5, "data": "text"},
        ["string", "object|array"],
    )
    assert len(errors) == 2
    assert "type" in errors[0]
    assert "data" in errors[1]


def test_object_excludes_primitives_lists_and_functions():
    assert matches({"a": 1}, "object")
    assert matches(Serializer(), "object")
    assert not matches([1], "object")
    assert not matches("s", "object")
    assert not matches(None, "object")
    assert not matches(len, "object")


def test_number_excludes_bool():
    assert matches(1.5, "number")
    assert not matches(True, "number")
    assert matches(True, "boolean")


def test_function_and_wildcard():
    assert matches(len, "function")
    assert matches(None, "*")


def test_unknown_spec_raises():
    with pytest.raises(ValueError):
        matches(1, "integer")


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        validate_parameters({"a": 1}, ["string", "string"])
