"""Keep a serialized document's "included" resources only when the request asked for them."""

from collections.abc import Mapping


def parse_include(include) -> list[str]:
    """Normalize an include request ("a,b", ["a", "b"], None) into a list of names."""
    if not include:
        return []
    if isinstance(include, str):
        include = include.split(",")
    return [name.strip() for name in include if name and name.strip()]


def keep_included_if_request(include, document):
    """Drop "included", or filter it down to the requested resource types.

    Entries that are not resource objects are dropped.
    """
    if not isinstance(document, Mapping) or "included" not in document:
        return document
    names = parse_include(include)
    result = {k: v for k, v in document.items() if k != "included"}
    if not names:
        return result
    kept = [
        item for item in document["included"] or []
        if isinstance(item, Mapping) and item.get("type") in names
    ]
    if kept:
        result["included"] = kept
    return result
