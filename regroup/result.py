"""Tagged Ok/Error result values.

Formatter functions return these instead of raising, so callers can chain
steps and only inspect the outcome at the end:

    result = Ok(data).chain(validate).map(serialize)
    if result.is_ok: ...
"""

import dataclasses


class Result:
    """Base class of Ok and Error."""

    is_ok = False
    is_error = False

    @staticmethod
    def has_instance(obj) -> bool:
        return isinstance(obj, Result)


@dataclasses.dataclass(frozen=True)
class Ok(Result):
    value: object

    is_ok = True

    def chain(self, fn):
        """Call fn with the value; fn must return a Result (or an awaitable of one)."""
        return fn(self.value)

    def map(self, fn):
        return Ok(fn(self.value))

    def map_error(self, fn):
        return self

    def get_or_else(self, default):
        return self.value

    def __repr__(self):
        return f"Ok({self.value!r})"


@dataclasses.dataclass(frozen=True)
class Error(Result):
    value: object

    is_error = True

    def chain(self, fn):
        return self

    def map(self, fn):
        return self

    def map_error(self, fn):
        return Error(fn(self.value))

    def get_or_else(self, default):
        return default

    def __repr__(self):
        return f"Error({self.value!r})"
