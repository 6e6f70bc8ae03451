# api/schemas/book_user.py
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator
from api.schemas.book import BookSummary
from api.schemas.common import NonEmptyStr, empty_to_none
from core.sa.models import ReadingStatus

class BookUserUpdate(BaseModel):
    status: ReadingStatus = ReadingStatus.UNREAD
    current_page: Optional[int] = Field(None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator('current_page', 'start_date', 'end_date', mode='before')
    @classmethod
    def blank_is_missing(cls, value):
        return empty_to_none(value)

class BookUserCreate(BookUserUpdate):
    username: NonEmptyStr
    title: NonEmptyStr

class BookUserProgress(BookUserUpdate):
    user_id: PositiveInt
    book_id: PositiveInt

class BookUser(BaseModel):
    id: int
    user_id: int
    book_id: int
    title: Optional[str] = None
    status: str
    current_page: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    progress: float = 0.0

    model_config = ConfigDict(from_attributes=True)

class BookUserDetail(BookUser):
    book: BookSummary
