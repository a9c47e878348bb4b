"""Tests for regroup.data — reading records and saving output."""

import os
import json
import tempfile

import pytest

from regroup.data import read, save, dumps
from regroup.exceptions import RegroupFileError


def _write(suffix, content):
    with tempfile.NamedTemporaryFile(suffix=suffix, mode="w", delete=False) as f:
        f.write(content)
        return f.name


def test_read_json():
    path = _write(".json", json.dumps([{"id": 1}]))
    try:
        assert read(path) == [{"id": 1}]
    finally:
        os.unlink(path)


def test_read_csv():
    path = _write(".csv", "id,tag\n1,x\n1,y\n")
    try:
        result = read(path)
        assert len(result) == 2
        assert result[1] == {"id": "1", "tag": "y"}
    finally:
        os.unlink(path)


def test_read_yaml_structures():
    path = _write(".yaml", "- groupName: tags\n  groupProps: [tag]\n  uniqKey: tag\n")
    try:
        assert read(path) == [{"groupName": "tags", "groupProps": ["tag"], "uniqKey": "tag"}]
    finally:
        os.unlink(path)


def test_read_invalid_json_raises():
    path = _write(".json", "{not json")
    try:
        with pytest.raises(RegroupFileError):
            read(path)
    finally:
        os.unlink(path)


def test_read_unsupported_extension_raises():
    path = _write(".txt", "hello")
    try:
        with pytest.raises(RegroupFileError):
            read(path)
    finally:
        os.unlink(path)


def test_read_nonexistent_raises():
    with pytest.raises(FileNotFoundError):
        read("/nonexistent/path/records.json")


def test_save_creates_directories(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "nested", "out.json")
        save([{"id": 1, "tags": [{"tag": "x"}]}], path)
        with open(path) as f:
            assert json.load(f) == [{"id": 1, "tags": [{"tag": "x"}]}]
    assert "Saved:" in capsys.readouterr().out


def test_dumps_indents():
    assert dumps({"a": 1}) == '{\n  "a": 1\n}'


def test_read_records_rejects_non_list():
    from regroup.data import read_records
    path = _write(".json", "null")
    try:
        with pytest.raises(RegroupFileError):
            read_records(path)
    finally:
        os.unlink(path)


def test_read_records_returns_list():
    from regroup.data import read_records
    path = _write(".json", json.dumps([{"id": 1}]))
    try:
        assert read_records(path) == [{"id": 1}]
    finally:
        os.unlink(path)
