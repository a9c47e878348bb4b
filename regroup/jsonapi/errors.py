"""Error values returned (not raised) by the JSON:API wrappers.

Two flavours, picked by the use_generic_error setting:
  GenericError  ->  kind + message, for callers that map errors themselves
  HttpError     ->  status code, reason phrase, message and data, ready for an HTTP response
"""

import dataclasses

import httpx

ERROR_STATUS = {
    "badData": httpx.codes.BAD_REQUEST,
    "notFound": httpx.codes.NOT_FOUND,
}


@dataclasses.dataclass(frozen=True)
class GenericError:
    kind: str
    message: object


@dataclasses.dataclass(frozen=True)
class HttpError:
    status_code: int
    error: str
    message: str
    data: object = None

    def to_dict(self) -> dict:
        payload = {"statusCode": self.status_code, "error": self.error, "message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


def _as_message(message) -> str:
    if isinstance(message, (list, tuple)):
        return "; ".join(str(m) for m in message)
    return str(message)


def get_error_type(use_generic_error: bool, error_kind: str, message):
    """Build a GenericError or an HttpError of the given kind (badData, notFound)."""
    if error_kind not in ERROR_STATUS:
        raise ValueError(f"Unknown error kind: {error_kind}")
    if use_generic_error:
        return GenericError(error_kind, message)
    status = ERROR_STATUS[error_kind]
    data = list(message) if isinstance(message, (list, tuple)) else None
    return HttpError(
        status_code=int(status),
        error=httpx.codes.get_reason_phrase(status),
        message=_as_message(message),
        data=data,
    )
