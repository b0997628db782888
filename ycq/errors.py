"""Exceptions raised by dispatchers and repositories."""

from __future__ import annotations

from typing import Any


class CqrsError(Exception):
    """Base class for the package's domain and repository errors."""


class CommandExecutionError(CqrsError):
    """A command could not be carried out."""

    def __init__(self, command: Any, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(
            f"Invalid Operation. Command: {command.command_type()} Reason: {reason}"
        )


class ConcurrencyViolationError(CqrsError):
    """The stream version did not match the expected version on save."""

    def __init__(self, aggregate: Any, expected_version: int | None, stream_name: str) -> None:
        self.aggregate = aggregate
        self.expected_version = expected_version
        self.stream_name = stream_name
        super().__init__(
            f"ConcurrencyError: AggregateID: {aggregate.aggregate_id} "
            f"ExpectedVersion: {expected_version} StreamName: {stream_name}"
        )


class UnauthorizedError(CqrsError):
    """A request to the repository was not authorized."""

    def __init__(self) -> None:
        super().__init__("Not authorized.")


class UnexpectedError(CqrsError):
    """Any failure not otherwise represented; the cause is kept in ``err``."""

    def __init__(self, err: BaseException | Any) -> None:
        self.err = err
        super().__init__(f"An unepected error occurred. {err}")


class RepositoryUnavailableError(CqrsError):
    """The event store is temporarily unavailable."""

    def __init__(self) -> None:
        super().__init__("The repository is temporarily unavailable.")


class AggregateNotFoundError(CqrsError):
    """No aggregate of the given type and id exists in the repository."""

    def __init__(self, aggregate_id: str = "", aggregate_type: str = "") -> None:
        self.aggregate_id = aggregate_id
        self.aggregate_type = aggregate_type
        super().__init__(
            f"Could not find any aggregate of type {aggregate_type} with id {aggregate_id}"
        )