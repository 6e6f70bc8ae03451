# api/schemas/links.py
from pydantic import BaseModel, ConfigDict, PositiveInt

class BookGenreCreate(BaseModel):
    book_id: PositiveInt
    genre_id: PositiveInt

class BookGenreUpdate(BookGenreCreate):
    pass

class BookGenre(BaseModel):
    book_id: int
    genre_id: int

    model_config = ConfigDict(from_attributes=True)

class BookshelfBookCreate(BaseModel):
    book_id: PositiveInt
    bookshelf_id: PositiveInt

class BookshelfBookUpdate(BookshelfBookCreate):
    pass

class BookshelfBook(BaseModel):
    book_id: int
    bookshelf_id: int

    model_config = ConfigDict(from_attributes=True)
