"""regroup — reshape flat records into grouped records, and wrap JSON:API serializers."""

from regroup.group import (
    group_object_props_by_structure,
    group_objects_props,
    group_objects_props_keep_only_value,
    group_objects_props_and_head_if_single,
    replace_nil_prop_group,
    replace_nil_prop_group_with_none,
    group_data_by,
)
from regroup.records import GroupStructure
from regroup.result import Ok, Error, Result
from regroup.config import get_config
from regroup.data import read, save
from regroup.exceptions import (
    RegroupError,
    MalformedRecordError,
    InvalidStructureError,
    RegroupConfigError,
    RegroupFileError,
)


def log(message):
    """Log a message with [regroup] prefix."""
    print(f"[regroup] {message}")


__all__ = [
    "group_object_props_by_structure", "group_objects_props",
    "group_objects_props_keep_only_value", "group_objects_props_and_head_if_single",
    "replace_nil_prop_group", "replace_nil_prop_group_with_none", "group_data_by",
    "GroupStructure", "Ok", "Error", "Result", "get_config", "read", "save", "log",
    "RegroupError", "MalformedRecordError", "InvalidStructureError",
    "RegroupConfigError", "RegroupFileError",
]
