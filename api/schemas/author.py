# api/schemas/author.py
from pydantic import BaseModel, ConfigDict
from api.schemas.common import NonEmptyStr

class AuthorBase(BaseModel):
    first_name: NonEmptyStr
    last_name: NonEmptyStr

class AuthorCreate(AuthorBase):
    pass

class AuthorUpdate(AuthorBase):
    pass

class Author(BaseModel):
    id: int
    first_name: str
    last_name: str

    model_config = ConfigDict(from_attributes=True)
