"""regroup record types.

GroupStructure — one grouping rule (group_name, group_props, uniq_key).
pick / omit — field-set helpers used to split records into grouped and common parts.
"""

import dataclasses
from collections.abc import Mapping

from regroup.exceptions import InvalidStructureError, MalformedRecordError


@dataclasses.dataclass(frozen=True)
class GroupStructure:
    """A grouping rule: move group_props into a list named group_name."""
    group_name: str
    group_props: tuple
    uniq_key: str | None = None

    def __post_init__(self):
        if not isinstance(self.group_name, str) or not self.group_name:
            raise InvalidStructureError(f"groupName must be a non-empty string, got {self.group_name!r}")
        props = self.group_props
        if isinstance(props, str):
            props = (props,)
        if not props or not all(isinstance(p, str) for p in props):
            raise InvalidStructureError(
                f"groupProps of '{self.group_name}' must be a non-empty list of strings"
            )
        object.__setattr__(self, "group_props", tuple(props))

    @classmethod
    def from_dict(cls, d: Mapping) -> "GroupStructure":
        """Build a structure from {groupName, groupProps, uniqKey} or snake_case keys."""
        if not isinstance(d, Mapping):
            raise InvalidStructureError(f"Group structure must be a mapping, got {type(d).__name__}")
        group_name = d.get("groupName", d.get("group_name"))
        group_props = d.get("groupProps", d.get("group_props"))
        if group_name is None:
            raise InvalidStructureError(f"Group structure has no groupName: {dict(d)}")
        if group_props is None:
            raise InvalidStructureError(f"Group structure '{group_name}' has no groupProps")
        uniq_key = d.get("uniqKey", d.get("uniq_key"))
        return cls(group_name, group_props, uniq_key)

    def to_dict(self) -> dict:
        d = {"groupName": self.group_name, "groupProps": list(self.group_props)}
        if self.uniq_key:
            d["uniqKey"] = self.uniq_key
        return d


def to_structure(structure) -> GroupStructure:
    if isinstance(structure, GroupStructure):
        return structure
    return GroupStructure.from_dict(structure)


def to_structures(structures) -> list[GroupStructure]:
    """Coerce a structure, or a list of structures/dicts, into GroupStructures."""
    if isinstance(structures, (GroupStructure, Mapping)):
        structures = [structures]
    if not isinstance(structures, (list, tuple)):
        raise InvalidStructureError(
            f"Group structures must be a list of structures, got {type(structures).__name__}"
        )
    return [to_structure(s) for s in structures]


def group_props_of(structures) -> list[str]:
    """All group props across structures, in order."""
    return [p for s in structures for p in s.group_props]


def group_names_of(structures) -> list[str]:
    return [s.group_name for s in structures]


def pick(record: Mapping, fields) -> dict:
    """Return a new dict with only the named fields that the record has."""
    return {f: record[f] for f in fields if f in record}


def omit(record: Mapping, fields) -> dict:
    """Return a new dict without the named fields."""
    dropped = set(fields)
    return {k: v for k, v in record.items() if k not in dropped}


def key_of(record, key: str):
    """Return record[key], raising MalformedRecordError if it cannot be used to group."""
    if not isinstance(record, Mapping):
        raise MalformedRecordError(f"Expected a mapping record, got {type(record).__name__}", record)
    if key not in record:
        raise MalformedRecordError(f"Record has no grouping key '{key}': {dict(record)}", record)
    value = record[key]
    try:
        hash(value)
    except TypeError:
        raise MalformedRecordError(
            f"Grouping key '{key}' has unhashable value of type {type(value).__name__}", record
        ) from None
    return value


def typed_key(value):
    """Key used to match grouping values: 1, 1.0 and True stay apart."""
    return (type(value), value)


def group_key_of(record, key: str):
    return typed_key(key_of(record, key))


def carries_group(record: Mapping, structure: GroupStructure) -> bool:
    """True if the record holds all of the structure's group props, False if none.

    A record holding only some of them is malformed.
    """
    present = [p for p in structure.group_props if p in record]
    if not present:
        return False
    if len(present) != len(structure.group_props):
        missing = [p for p in structure.group_props if p not in record]
        raise MalformedRecordError(
            f"Record is missing {missing} of group '{structure.group_name}'", record
        )
    return True


def partition(records, key: str) -> list[list]:
    """Split records into lists sharing one key value, in first-appearance order."""
    groups = {}
    for record in records:
        groups.setdefault(group_key_of(record, key), []).append(record)
    return list(groups.values())
