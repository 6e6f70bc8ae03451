# api/errors.py
from typing import TypeVar
from fastapi import HTTPException, status
from core.result import Result, ErrorKind

T = TypeVar('T')

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.RELATED_RECORDS: status.HTTP_400_BAD_REQUEST,
}


def unwrap(result: Result[T]) -> T:
    """Return the value of an Ok result or raise the matching HTTPException"""
    if result.ok:
        return result.value
    raise HTTPException(status_code=STATUS_BY_KIND[result.kind], detail=result.message)


def not_found_if_none(value: T, message: str) -> T:
    if value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)
    return value
