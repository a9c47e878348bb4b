"""JSON:API serialization wrappers.

The serializer itself is any object with serialize/deserialize/deserialize_async
(see JsonApiSerializer). These wrappers validate the arguments, wrap the outcome
in Ok/Error and pick the error flavour:

  use_generic_error: True   ->  Error(GenericError(...))
  use_generic_error: False  ->  Error(HttpError(...))
"""

import functools
import inspect
from collections.abc import Mapping
from typing import Any, Protocol

from regroup.config import get_config
from regroup.jsonapi.errors import get_error_type
from regroup.jsonapi.included import keep_included_if_request
from regroup.jsonapi.validate import validate_parameters
from regroup.result import Error, Ok, Result


class JsonApiSerializer(Protocol):
    def serialize(self, type: str, data: Any, extra_data: Any = None) -> dict:
        ...

    def deserialize(self, type: str, data: Any) -> Any:
        ...

    async def deserialize_async(self, type: str, data: Any) -> Any:
        ...


def _options(options) -> tuple:
    """Read (type, extra_data) from a {type, extra_data} mapping."""
    if not isinstance(options, Mapping):
        return None, None
    extra_data = options.get("extra_data", options.get("extraData"))
    return options.get("type"), extra_data


def _use_generic_error(config) -> bool:
    return bool(config.get("use_generic_error")) if isinstance(config, Mapping) else False


def handle_serialize_to_json_api(include, serializer: JsonApiSerializer, options, data):
    """Serialize data and keep "included" only if the request asked for it."""
    type_, extra_data = _options(options)
    serialized = serializer.serialize(type_, data, extra_data)
    return keep_included_if_request(include, serialized)


def create_serialize_to_json_api(config, include, serializer: JsonApiSerializer, options, data_result):
    """Serialize the value of data_result to JSON:API, returning Ok(document) or Error.

    Args:
        config: {"use_generic_error": bool}
        include: resource types to keep in "included" ("a,b" or a list)
        serializer: the JSON:API serializer
        options: {"type": str, "extra_data": any}
        data_result: an Ok/Error holding a dict or a list of dicts (plain data is wrapped in Ok)
    """
    if not Result.has_instance(data_result):
        data_result = Ok(data_result)
    type_, extra_data = _options(options)
    use_generic_error = _use_generic_error(config)

    def serialize(data):
        type_errors = validate_parameters(
            {
                "config": config,
                "serializer": serializer,
                "type": type_,
                "extra_data": extra_data,
                "data": data,
            },
            ["object", "object", "string", "*", "object|array"],
        )
        if type_errors:
            return Error(get_error_type(use_generic_error, "badData", type_errors))
        if not data:
            return Error(get_error_type(use_generic_error, "notFound", "JSONAPI: No data provided"))
        if not type_:
            return Error(get_error_type(
                use_generic_error,
                "badData",
                "type property not found in {type, extra_data}",
            ))
        return Ok(handle_serialize_to_json_api(include, serializer, options, data))

    return data_result.chain(serialize)


serialize_to_json_api_generic_error = functools.partial(
    create_serialize_to_json_api, {"use_generic_error": True}
)
serialize_to_json_api_boom_error = functools.partial(
    create_serialize_to_json_api, {"use_generic_error": False}
)


def serialize_to_json_api(include, serializer: JsonApiSerializer, options, data_result):
    """create_serialize_to_json_api using the jsonapi section of regroup.config."""
    return create_serialize_to_json_api(get_config()["jsonapi"], include, serializer, options, data_result)


def _validate_deserialize_args(config, serializer, type_, json_api_data) -> list[str]:
    return validate_parameters(
        {
            "config": config,
            "serializer": serializer,
            "type": type_,
            "json_api_data": json_api_data,
        },
        ["object", "object", "string", "object|array"],
    )


def handle_deserialize_json_api(serializer: JsonApiSerializer, type_: str, json_api_data):
    return Ok(serializer.deserialize(type_, json_api_data))


def deserialize_json_api(config, serializer: JsonApiSerializer, type_: str, json_api_data):
    """Deserialize a JSON:API document (or an Ok holding one) into Ok(data) or Error."""
    type_errors = _validate_deserialize_args(config, serializer, type_, json_api_data)
    if type_errors:
        return Error(get_error_type(_use_generic_error(config), "badData", type_errors))
    if not Result.has_instance(json_api_data):
        return handle_deserialize_json_api(serializer, type_, json_api_data)
    return json_api_data.chain(
        lambda data: handle_deserialize_json_api(serializer, type_, data)
    )


deserialize_json_api_generic_error = functools.partial(
    deserialize_json_api, {"use_generic_error": True}
)
deserialize_json_api_boom_error = functools.partial(
    deserialize_json_api, {"use_generic_error": False}
)


async def handle_deserialize_json_api_async(serializer: JsonApiSerializer, type_: str, json_api_data):
    return Ok(await serializer.deserialize_async(type_, json_api_data))


async def deserialize_json_api_async(config, serializer: JsonApiSerializer, type_: str, json_api_data):
    """Async deserialize_json_api, awaiting serializer.deserialize_async."""
    use_generic_error = _use_generic_error(config)
    type_errors = _validate_deserialize_args(config, serializer, type_, json_api_data)
    if type_errors:
        return Error(get_error_type(use_generic_error, "badData", type_errors))
    if not Result.has_instance(json_api_data):
        return await handle_deserialize_json_api_async(serializer, type_, json_api_data)

    async def deserialize(data):
        data_errors = validate_parameters({"data": data}, ["object|array"])
        if data_errors:
            return Error(get_error_type(use_generic_error, "badData", data_errors))
        return await handle_deserialize_json_api_async(serializer, type_, data)

    result = json_api_data.chain(deserialize)
    if inspect.isawaitable(result):
        result = await result
    return result


deserialize_json_api_generic_error_async = functools.partial(
    deserialize_json_api_async, {"use_generic_error": True}
)
deserialize_json_api_boom_error_async = functools.partial(
    deserialize_json_api_async, {"use_generic_error": False}
)
