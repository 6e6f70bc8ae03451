# core/result.py
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar('T')


class ErrorKind(str, Enum):
    """Known reasons a repository operation can fail."""
    VALIDATION = "validation"           # Malformed or missing input
    NOT_FOUND = "not_found"             # Absent row or nothing affected
    CONFLICT = "conflict"               # Duplicate unique key
    RELATED_RECORDS = "related_records" # Delete blocked by dependent rows


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def not_found(message: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, message)


def conflict(message: str) -> Err:
    return Err(ErrorKind.CONFLICT, message)


def invalid(message: str) -> Err:
    return Err(ErrorKind.VALIDATION, message)


def related_records(message: str) -> Err:
    return Err(ErrorKind.RELATED_RECORDS, message)
