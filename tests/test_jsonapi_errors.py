"""Tests for regroup.jsonapi.errors and regroup.jsonapi.included."""

import pytest

from regroup.jsonapi.errors import GenericError, HttpError, get_error_type
from regroup.jsonapi.included import keep_included_if_request, parse_include


def test_generic_error():
    err = get_error_type(True, "notFound", "JSONAPI: No data provided")
    assert err == GenericError("notFound", "JSONAPI: No data provided")


def test_http_error_not_found():
    err = get_error_type(False, "notFound", "JSONAPI: No data provided")
    assert isinstance(err, HttpError)
    assert err.status_code == 404
    assert err.error == "Not Found"
    assert err.data is None


def test_http_error_bad_data_with_list():
    err = get_error_type(False, "badData", ["type must be string", "data must be object"])
    assert err.status_code == 400
    assert err.error == "Bad Request"
    assert err.message == "type must be string; data must be object"
    assert err.to_dict()["data"] == ["type must be string", "data must be object"]


def test_unknown_error_kind_raises():
    with pytest.raises(ValueError):
        get_error_type(True, "teapot", "x")


DOCUMENT = {
    "data": {"type": "article", "id": "1"},
    "included": [
        {"type": "people", "id": "9"},
        {"type": "comments", "id": "5"},
    ],
}


def test_parse_include():
    assert parse_include(None) == []
    assert parse_include("people, comments") == ["people", "comments"]
    assert parse_include(["people"]) == ["people"]


def test_keep_included_without_request_drops_included():
    result = keep_included_if_request(None, DOCUMENT)
    assert "included" not in result
    assert "included" in DOCUMENT


def test_keep_included_filters_by_type():
    result = keep_included_if_request("people", DOCUMENT)
    assert result["included"] == [{"type": "people", "id": "9"}]


def test_keep_included_nothing_matching():
    result = keep_included_if_request("tags", DOCUMENT)
    assert "included" not in result


def test_keep_included_non_document_passes_through():
    assert keep_included_if_request("people", None) is None
    doc = {"data": []}
    assert keep_included_if_request("people", doc) is doc


def test_keep_included_skips_non_mapping_entries():
    doc = {"data": {}, "included": ["x", {"type": "a", "id": "1"}]}
    assert keep_included_if_request("a", doc)["included"] == [{"type": "a", "id": "1"}]
    assert "included" not in keep_included_if_request("a", {"data": {}, "included": ["x"]})
