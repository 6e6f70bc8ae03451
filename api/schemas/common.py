# api/schemas/common.py
from typing import Annotated
from pydantic import BaseModel, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Message(BaseModel):
    message: str


class Total(BaseModel):
    total: int


def empty_to_none(value):
    """Treat an empty string from a form field as a missing value"""
    if value == '':
        return None
    return value


