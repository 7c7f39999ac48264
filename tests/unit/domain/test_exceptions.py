"""Unit tests for the storage error taxonomy."""
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    CoinsLoadFailedError,
    GetAllFailedError,
    InvalidArgumentError,
    NotFoundError,
    OperationFailedError,
    SaveFailedError,
    StorageError,
    UpdateFailedError,
)


def test_failed_kinds_share_a_base():
    for error_type in (SaveFailedError, UpdateFailedError, GetAllFailedError, CoinsLoadFailedError):
        assert issubclass(error_type, OperationFailedError)
        assert issubclass(error_type, StorageError)


def test_invalid_argument_is_a_value_error():
    assert isinstance(InvalidArgumentError("coin"), ValueError)


def test_messages_name_the_entity():
    assert str(NotFoundError("group", "grp-1")) == "Group grp-1 not found"
    assert str(AlreadyExistsError("coin", "c-1")) == "Coin c-1 already exists"


def test_failure_keeps_cause():
    cause = RuntimeError("disk I/O error")
    error = SaveFailedError("collection", "col-1", cause=cause)

    assert error.cause is cause
    assert error.entity_type == "collection"
    assert error.entity_id == "col-1"
    assert str(error) == "Failed to save collection col-1: disk I/O error"


def test_get_all_message_without_id():
    error = GetAllFailedError("coin")

    assert error.entity_id is None
    assert str(error) == "Failed to load all coin entries"


def test_explicit_message_wins():
    assert str(UpdateFailedError("group", message="Group is required")) == "Group is required"
