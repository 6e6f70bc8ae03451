# api/schemas/review.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from api.schemas.common import NonEmptyStr

class ReviewUpdate(BaseModel):
    rating: int = Field(..., ge=1, le=5, strict=True)
    description: NonEmptyStr

class ReviewCreate(ReviewUpdate):
    title: NonEmptyStr
    user_id: Optional[int] = Field(None, ge=1)

class Review(BaseModel):
    id: int
    book_id: int
    user_id: Optional[int] = None
    title: Optional[str] = None
    rating: int
    description: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
