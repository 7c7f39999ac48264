"""Error taxonomy of the storage services.

The kinds are the same for every entity level; the level an error belongs
to is carried in ``entity_type`` so callers always see errors about the
entity they asked for. Failures wrapping an underlying I/O error keep it as
``cause`` (and as ``__cause__`` through ``raise ... from``).
"""

from typing import Literal

EntityType = Literal["coin", "collection", "group", "user"]


class StorageError(Exception):
    """Base class for all storage service errors."""

    action = "access"

    def __init__(
        self,
        entity_type: EntityType,
        entity_id: str | None = None,
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.cause = cause
        super().__init__(message or self._default_message())

    def _default_message(self) -> str:
        target = self.entity_type if self.entity_id is None else f"{self.entity_type} {self.entity_id}"
        message = f"Failed to {self.action} {target}"
        if self.cause is not None:
            message += f": {self.cause}"
        return message


class InvalidArgumentError(StorageError, ValueError):
    """A required argument was None or blank; raised before any I/O."""

    def _default_message(self) -> str:
        return f"Invalid {self.entity_type} argument"


class AlreadyExistsError(StorageError):
    """A row with the same id (or unique key) already exists."""

    def _default_message(self) -> str:
        return f"{self.entity_type.capitalize()} {self.entity_id} already exists"


class NotFoundError(StorageError):
    """No row was found, or the read needed to find it failed."""

    def _default_message(self) -> str:
        return f"{self.entity_type.capitalize()} {self.entity_id} not found"


class OperationFailedError(StorageError):
    """Base class for failures wrapping an underlying I/O error."""


class SaveFailedError(OperationFailedError):
    action = "save"


class UpdateFailedError(OperationFailedError):
    action = "update"


class DeleteFailedError(OperationFailedError):
    action = "delete"


class GetAllFailedError(OperationFailedError):
    action = "load all"

    def _default_message(self) -> str:
        message = f"Failed to load all {self.entity_type} entries"
        if self.cause is not None:
            message += f": {self.cause}"
        return message


class GetByIdFailedError(OperationFailedError):
    action = "load"


class CoinsLoadFailedError(OperationFailedError):
    """The collection row was read but its coins could not be loaded."""

    action = "load coins of"
