"""Error kinds and explicit result types for directory operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a rejected operation, each mapped to an HTTP status."""

    VALIDATION = "VALIDATION_ERROR"
    MALFORMED = "MALFORMED_INPUT"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    UNEXPECTED = "UNEXPECTED_ERROR"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.MALFORMED: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.UNEXPECTED: 500,
}


@dataclass(frozen=True)
class DirectoryError:
    """A business-rule rejection carrying its kind and a client-facing message."""

    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return self.kind.status_code


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: DirectoryError


def validation_error(message: str) -> Err:
    return Err(DirectoryError(ErrorKind.VALIDATION, message))


def malformed(message: str) -> Err:
    return Err(DirectoryError(ErrorKind.MALFORMED, message))


def conflict(message: str) -> Err:
    return Err(DirectoryError(ErrorKind.CONFLICT, message))


def not_found(message: str) -> Err:
    return Err(DirectoryError(ErrorKind.NOT_FOUND, message))


def forbidden(message: str) -> Err:
    return Err(DirectoryError(ErrorKind.FORBIDDEN, message))
