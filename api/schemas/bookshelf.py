# api/schemas/bookshelf.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from api.schemas.common import NonEmptyStr
from core.sa.models import BookshelfView

class BookshelfUpdate(BaseModel):
    name: NonEmptyStr
    view: BookshelfView

class BookshelfCreate(BookshelfUpdate):
    username: NonEmptyStr

class Bookshelf(BaseModel):
    id: int
    user_id: int
    username: Optional[str] = None
    name: str
    view: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
