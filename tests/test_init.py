"""Tests for regroup public API surface."""

import regroup


def test_grouping_functions_are_callable():
    for name in (
        "group_object_props_by_structure",
        "group_objects_props",
        "group_objects_props_keep_only_value",
        "group_objects_props_and_head_if_single",
        "replace_nil_prop_group_with_none",
        "group_data_by",
    ):
        assert callable(getattr(regroup, name))


def test_log_output(capsys):
    regroup.log("hello")
    captured = capsys.readouterr()
    assert "[regroup]" in captured.out
    assert "hello" in captured.out


def test_exception_classes_accessible():
    assert issubclass(regroup.MalformedRecordError, regroup.RegroupError)
    assert issubclass(regroup.InvalidStructureError, regroup.RegroupError)


def test_jsonapi_package_exports():
    from regroup import jsonapi
    assert callable(jsonapi.serialize_to_json_api_generic_error)
    assert callable(jsonapi.deserialize_json_api_boom_error_async)


def test_result_accessible():
    assert regroup.Ok(1).is_ok
    assert regroup.Error(1).is_error
