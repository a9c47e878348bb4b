"""Tests for regroup exception hierarchy."""

from regroup.exceptions import (
    RegroupError,
    MalformedRecordError,
    InvalidStructureError,
    RegroupConfigError,
    RegroupFileError,
)


def test_regroup_error_is_exception():
    assert issubclass(RegroupError, Exception)


def test_subclasses_inherit_regroup_error():
    for cls in (MalformedRecordError, InvalidStructureError, RegroupConfigError, RegroupFileError):
        assert issubclass(cls, RegroupError)


def test_malformed_record_error_carries_record():
    err = MalformedRecordError("no key", {"a": 1})
    assert str(err) == "no key"
    assert err.record == {"a": 1}


def test_errors_are_catchable_as_regroup_error():
    try:
        raise InvalidStructureError("no groupName")
    except RegroupError as e:
        assert "groupName" in str(e)
