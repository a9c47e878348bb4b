"""regroup exception types.

Grouping functions raise these for input they cannot reshape:
  record without the grouping key     ->  MalformedRecordError
  structure without groupName/Props   ->  InvalidStructureError
"""


class RegroupError(Exception):
    """Base regroup error."""
    pass


class MalformedRecordError(RegroupError):
    """A record cannot be grouped (not a mapping, missing key, partial group props)."""

    def __init__(self, message: str, record=None):
        self.record = record
        super().__init__(message)


class InvalidStructureError(RegroupError):
    """A group structure is missing fields or is unusable for the operation."""
    pass


class RegroupConfigError(RegroupError):
    """Configuration error."""
    pass


class RegroupFileError(RegroupError):
    """Reading or writing a records file failed."""
    pass
