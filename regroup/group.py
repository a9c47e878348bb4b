"""regroup grouping functions.

Reshape a list of flat records that share a key into one record per key value,
moving selected properties into nested lists ("groups") and keeping the rest
("common" properties) once per key.

    >>> group_objects_props("id", [{"groupName": "tags", "groupProps": ["tag"]}], [
    ...     {"id": 1, "name": "a", "tag": "x"},
    ...     {"id": 1, "name": "a", "tag": "y"},
    ... ])
    [{'id': 1, 'name': 'a', 'tags': [{'tag': 'x'}, {'tag': 'y'}]}]

Structures may be GroupStructure instances or dicts with groupName, groupProps
and an optional uniqKey.
"""

from collections.abc import Mapping

from regroup.config import get_config
from regroup.exceptions import InvalidStructureError, MalformedRecordError
from regroup.records import (
    carries_group,
    group_names_of,
    group_props_of,
    group_key_of,
    omit,
    partition,
    pick,
    to_structure,
    to_structures,
    typed_key,
)


def uniq_group_item(uniq_key, group_data: list) -> list:
    """Remove items sharing the same uniq_key value, keeping the first.

    Without a uniq_key the group data is returned as is.
    """
    if not uniq_key:
        return group_data
    seen = []
    result = []
    for item in group_data:
        value = typed_key(item.get(uniq_key) if isinstance(item, Mapping) else None)
        if value in seen:
            continue
        seen.append(value)
        result.append(item)
    return result


def _fold_partition(structure, records, project, finish=None) -> dict:
    """Collapse one partition into its first record's common props plus the group list."""
    common = None
    group = []
    carried = False
    for record in records:
        if not isinstance(record, Mapping):
            raise MalformedRecordError(f"Expected a mapping record, got {type(record).__name__}", record)
        if common is None:
            common = omit(record, structure.group_props)
        if not carries_group(record, structure):
            continue
        carried = True
        group.append(project(record))
    result = dict(common or {})
    if carried:
        result[structure.group_name] = finish(group) if finish else group
    else:
        # Nothing to collect: keep a value the record already holds under this name.
        result.setdefault(structure.group_name, [])
    return result


def group_object_props_by_structure(structure, records) -> dict:
    """Group one partition's group_props into structure.group_name.

    Common properties are not removed; they are taken from the first record.
    """
    structure = to_structure(structure)
    return _fold_partition(
        structure,
        records,
        lambda r: pick(r, structure.group_props),
        lambda group: uniq_group_item(structure.uniq_key, group),
    )


def group_object_props_by_structure_keep_only_value(structure, records) -> dict:
    """Like group_object_props_by_structure but collects only the property's value."""
    structure = to_structure(structure)
    if len(structure.group_props) != 1:
        raise InvalidStructureError(
            f"Group '{structure.group_name}' must name exactly one property to keep only values, "
            f"got {list(structure.group_props)}"
        )
    prop = structure.group_props[0]
    return _fold_partition(structure, records, lambda r: r[prop])


def _group_by_structures(key, structures, data, group_partition) -> list:
    data = list(data)
    result = []
    for structure in to_structures(structures):
        for records in partition(data, key):
            result.append(group_partition(structure, records))
    return result


def group_objects_props_by_structures(key: str, structures, data) -> list:
    """Group every partition of data by each structure, independently.

    Results are concatenated in structure order, then partition order.
    """
    return _group_by_structures(key, structures, data, group_object_props_by_structure)


def group_objects_props_by_structures_keep_only_value(key: str, structures, data) -> list:
    return _group_by_structures(key, structures, data, group_object_props_by_structure_keep_only_value)


def get_common_props(key: str, structures, objects) -> list:
    """Strip every structure's group props and keep one record per key value."""
    all_group_props = group_props_of(to_structures(structures))
    result = []
    seen = set()
    for obj in objects:
        value = group_key_of(obj, key)
        if value in seen:
            continue
        seen.add(value)
        result.append(omit(obj, all_group_props))
    return result


def combine_common_and_grouped_data(key: str, structures, common_data, grouped_data) -> list:
    """Overlay the group lists of grouped_data onto the matching common records.

    Grouped records sharing a key value are merged in order, so when two
    structures use the same group_name the later one wins.
    """
    group_names = group_names_of(to_structures(structures))
    merged = {}
    for item in grouped_data:
        merged.setdefault(group_key_of(item, key), {}).update(item)
    result = []
    for item in common_data:
        groups = pick(merged.get(group_key_of(item, key), {}), group_names)
        result.append({**item, **groups})
    return result


def _check_key_not_grouped(key, structures):
    for structure in structures:
        if key in structure.group_props:
            raise InvalidStructureError(
                f"Grouping key '{key}' cannot be one of the group props of '{structure.group_name}'"
            )


def group_objects_props(key: str, structures, objects):
    """Group records' properties by key according to structures.

    Assumes all records have the same properties. Each structure names the
    group_props to move, the group_name they are collected under and an
    optional uniq_key that deduplicates the collected items.
    Empty input is returned unchanged.
    """
    if not objects:
        return objects
    structures = to_structures(structures)
    _check_key_not_grouped(key, structures)
    objects = list(objects)
    common_data = get_common_props(key, structures, objects)
    grouped_data = group_objects_props_by_structures(key, structures, objects)
    return combine_common_and_grouped_data(key, structures, common_data, grouped_data)


def group_objects_props_keep_only_value(key: str, structures, objects):
    """Group records' properties by key, collecting bare values instead of sub-dicts."""
    if not objects:
        return objects
    structures = to_structures(structures)
    _check_key_not_grouped(key, structures)
    objects = list(objects)
    common_data = get_common_props(key, structures, objects)
    grouped_data = group_objects_props_by_structures_keep_only_value(key, structures, objects)
    return combine_common_and_grouped_data(key, structures, common_data, grouped_data)


def head_grouped_props_if_single(structures, grouped_object: Mapping) -> dict:
    """Replace every one-item group list with its only item."""
    result = dict(grouped_object)
    for name in group_names_of(to_structures(structures)):
        value = result.get(name)
        if isinstance(value, list) and len(value) == 1:
            result[name] = value[0]
    return result


def group_objects_props_and_head_if_single(key: str, structures, objects):
    """Same as group_objects_props, but a group with one item holds the item, not a list.

    Useful before JSON:API serialization of to-one relationships.
    """
    structures = to_structures(structures)
    grouped = group_objects_props(key, structures, objects)
    if not grouped:
        return grouped
    return [head_grouped_props_if_single(structures, item) for item in grouped]


def _pairs(group_names_and_keys):
    if isinstance(group_names_and_keys, Mapping):
        group_names_and_keys = [group_names_and_keys]
    for item in group_names_and_keys:
        yield from item.items()


def _replace_nil_prop_group_in_record(replace_value, pairs, item: Mapping) -> dict:
    result = dict(item)
    for group_key, lookup_key in pairs:
        group = result.get(group_key)
        if group is None:
            result[group_key] = {lookup_key: replace_value}
        elif isinstance(group, Mapping) and group.get(lookup_key) is None:
            result[group_key] = {**group, lookup_key: replace_value}
    return result


def create_replace_nil_prop_group(replace_value, group_names_and_keys, data):
    """Set data[group][key] to replace_value wherever it is missing or None.

    group_names_and_keys is a list of {group_name: lookup_key} dicts.
    Works on a single record or a list of records; anything else is returned unchanged.
    """
    pairs = list(_pairs(group_names_and_keys))
    if isinstance(data, (list, tuple)):
        return [
            _replace_nil_prop_group_in_record(replace_value, pairs, item)
            if isinstance(item, Mapping) else item
            for item in data
        ]
    if isinstance(data, Mapping):
        return _replace_nil_prop_group_in_record(replace_value, pairs, data)
    return data


def replace_nil_prop_group_with_none(group_names_and_keys, data):
    """Replace nil group properties with the string "none" (for json-api serializers)."""
    return create_replace_nil_prop_group("none", group_names_and_keys, data)


def replace_nil_prop_group(group_names_and_keys, data):
    """Replace nil group properties with the configured group.nil_replacement."""
    replace_value = get_config()["group"]["nil_replacement"]
    return create_replace_nil_prop_group(replace_value, group_names_and_keys, data)


def group_data_by(group_by_key: str, data) -> list[list]:
    """Split data into lists of records sharing group_by_key, dropping the key labels.

    Partitions come out in the order their key value first appears, including
    numeric keys (no ascending reordering of integer-like keys).
    """
    return partition(data, group_by_key)
