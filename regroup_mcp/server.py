"""regroup MCP Server — exposes record grouping tools via MCP protocol."""

import json

from mcp.server.fastmcp import FastMCP

from regroup.data import dumps
from regroup.exceptions import RegroupError
from regroup.group import (
    group_data_by,
    group_objects_props,
    group_objects_props_and_head_if_single,
    group_objects_props_keep_only_value,
)

mcp = FastMCP("regroup")


def _load_records(records_json: str):
    records = json.loads(records_json)
    if not isinstance(records, list):
        raise RegroupError("records must be a JSON array of objects")
    return records


@mcp.tool()
def regroup_group(records_json: str, key: str, structures_json: str, mode: str = "list") -> str:
    """Group flat records by a key, collecting selected properties into nested lists.

    Args:
        records_json: JSON array of objects sharing the same properties
        key: property whose value identifies a group (e.g. "id")
        structures_json: JSON array of {"groupName", "groupProps", "uniqKey"} rules
        mode: "list" (default), "single" to unwrap one-item groups, "values" to collect bare values
    """
    return group_records(records_json, key, structures_json, mode)


def group_records(records_json: str, key: str, structures_json: str, mode: str = "list") -> str:
    """Core logic for grouping records — testable without MCP."""
    groupers = {
        "list": group_objects_props,
        "single": group_objects_props_and_head_if_single,
        "values": group_objects_props_keep_only_value,
    }
    if mode not in groupers:
        return f"Error: unknown mode '{mode}', expected one of {sorted(groupers)}"
    try:
        records = _load_records(records_json)
        structures = json.loads(structures_json)
        return dumps(groupers[mode](key, structures, records))
    except json.JSONDecodeError as e:
        return f"Error: invalid JSON: {e}"
    except RegroupError as e:
        return f"Error: {e}"


@mcp.tool()
def regroup_partition(records_json: str, key: str) -> str:
    """Split records into lists that share the same value of key.

    Args:
        records_json: JSON array of objects
        key: property to partition on
    """
    return partition_records(records_json, key)


def partition_records(records_json: str, key: str) -> str:
    """Core logic for partitioning records — testable without MCP."""
    try:
        return dumps(group_data_by(key, _load_records(records_json)))
    except json.JSONDecodeError as e:
        return f"Error: invalid JSON: {e}"
    except RegroupError as e:
        return f"Error: {e}"


if __name__ == "__main__":
    mcp.run(transport="stdio")
