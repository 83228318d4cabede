"""Exception types raised by the Mise record store."""


class MiseError(Exception):
    """Base class for all Mise errors."""


class BackendError(MiseError):
    """The persistence backend could not read or write a key."""


class InvalidRecordError(MiseError, ValueError):
    """A record is not a mapping or carries no usable ``id``."""


class DuplicateRecordError(MiseError, ValueError):
    """A record with the same ``id`` already exists in the collection."""

    def __init__(self, store_name: str, record_id: str):
        super().__init__(f"{store_name}: record with id {record_id!r} already exists")
        self.store_name = store_name
        self.record_id = record_id


class UnknownEntityError(MiseError, KeyError):
    """No entity type is registered under the requested key."""

    def __str__(self) -> str:
        return f"Unknown entity type: {self.args[0]!r}"


class UnknownProjectError(MiseError, LookupError):
    """No project with the requested id exists."""
