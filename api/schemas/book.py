# api/schemas/book.py
from datetime import date
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from api.schemas.author import Author
from api.schemas.common import NonEmptyStr, empty_to_none

class BookBase(BaseModel):
    title: NonEmptyStr
    isbn: NonEmptyStr
    language: NonEmptyStr
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    page_count: Optional[int] = Field(None, ge=1)
    description: Optional[str] = None
    date_published: Optional[date] = None
    genres: List[NonEmptyStr] = []
    image_id: Optional[int] = Field(None, ge=1)

    @field_validator('date_published', 'page_count', 'image_id', mode='before')
    @classmethod
    def blank_is_missing(cls, value):
        return empty_to_none(value)

class BookCreate(BookBase):
    pass

class BookUpdate(BookBase):
    pass

class BookSummary(BaseModel):
    id: int
    title: str
    isbn: str
    page_count: Optional[int] = None
    cover_image: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class Book(BaseModel):
    id: int
    title: str
    isbn: str
    language: Optional[str] = None
    page_count: Optional[int] = None
    description: Optional[str] = None
    date_published: Optional[date] = None
    image_id: Optional[int] = None
    author: Author
    genres: List[str] = Field([], validation_alias='genre_names')

    model_config = ConfigDict(from_attributes=True)
