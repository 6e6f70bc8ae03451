# api/schemas/genre.py
from pydantic import BaseModel, ConfigDict
from api.schemas.common import NonEmptyStr

class GenreCreate(BaseModel):
    name: NonEmptyStr

class GenreUpdate(GenreCreate):
    pass

class Genre(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
