"""Parameter shape validation for the JSON:API wrappers.

Type specs are "|"-separated alternatives:
  object   ->  a mapping or any other non-primitive, non-list value
  array    ->  list or tuple
  string, number, boolean, function
  *        ->  anything, None included
"""

import types
from collections.abc import Mapping

_FUNCTION_TYPES = (types.FunctionType, types.BuiltinFunctionType, types.MethodType, type)


def _is_array(value) -> bool:
    return isinstance(value, (list, tuple))


def _is_object(value) -> bool:
    if value is None or _is_array(value) or isinstance(value, _FUNCTION_TYPES):
        return False
    if isinstance(value, Mapping):
        return True
    return not isinstance(value, (str, bytes, int, float, bool))


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_CHECKS = {
    "object": _is_object,
    "array": _is_array,
    "string": lambda v: isinstance(v, str),
    "number": _is_number,
    "boolean": lambda v: isinstance(v, bool),
    "function": callable,
    "*": lambda v: True,
}


def _type_name(value) -> str:
    if value is None:
        return "None"
    if _is_array(value):
        return "array"
    return type(value).__name__


def matches(value, type_spec: str) -> bool:
    """Return True if value matches any alternative of type_spec."""
    alternatives = [t.strip() for t in type_spec.split("|")]
    for alt in alternatives:
        if alt not in _CHECKS:
            raise ValueError(f"Unknown type spec '{alt}' in '{type_spec}'")
    return any(_CHECKS[alt](value) for alt in alternatives)


def validate_parameters(values: dict, type_specs: list[str]) -> list[str]:
    """Check each named value against its type spec. Returns a list of error messages."""
    if len(values) != len(type_specs):
        raise ValueError(
            f"Got {len(values)} values but {len(type_specs)} type specs"
        )
    errors = []
    for (name, value), type_spec in zip(values.items(), type_specs):
        if not matches(value, type_spec):
            errors.append(f"{name} must be of type {type_spec}, got {_type_name(value)}")
    return errors
