"""JSON:API serializer wrappers with Ok/Error results."""

from regroup.jsonapi.errors import GenericError, HttpError, get_error_type
from regroup.jsonapi.formatter import (
    JsonApiSerializer,
    create_serialize_to_json_api,
    handle_serialize_to_json_api,
    serialize_to_json_api,
    serialize_to_json_api_boom_error,
    serialize_to_json_api_generic_error,
    deserialize_json_api,
    deserialize_json_api_async,
    deserialize_json_api_boom_error,
    deserialize_json_api_boom_error_async,
    deserialize_json_api_generic_error,
    deserialize_json_api_generic_error_async,
)
from regroup.jsonapi.included import keep_included_if_request
from regroup.jsonapi.validate import validate_parameters

__all__ = [
    "JsonApiSerializer", "GenericError", "HttpError", "get_error_type",
    "create_serialize_to_json_api", "handle_serialize_to_json_api",
    "serialize_to_json_api", "serialize_to_json_api_boom_error",
    "serialize_to_json_api_generic_error", "deserialize_json_api",
    "deserialize_json_api_async", "deserialize_json_api_boom_error",
    "deserialize_json_api_boom_error_async", "deserialize_json_api_generic_error",
    "deserialize_json_api_generic_error_async", "keep_included_if_request",
    "validate_parameters",
]
