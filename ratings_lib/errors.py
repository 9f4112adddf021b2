"""Domain errors raised by the ratings services.

Routers translate these into HTTP responses; the store uses `StorageError`
internally and never lets it reach a client.
"""


class RatingsError(Exception):
    """Base class for all domain errors."""

    code = "error"


class ValidationError(RatingsError):
    """Missing or malformed input."""

    code = "validation_error"


class ConflictError(RatingsError):
    """The request collides with existing state (e.g. a duplicate name)."""

    code = "conflict"


class StorageError(RatingsError):
    """The persisted document could not be read or parsed."""

    code = "storage_error"
