# api/routes/book_genres.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap
from api.schemas.common import Message
from api.schemas.links import BookGenre, BookGenreCreate, BookGenreUpdate
from core.sa.repositories.book_genre import BookGenreRepository

router = APIRouter(prefix="/bookGenres", tags=["book genres"])

@router.get("", response_model=List[BookGenre])
def get_book_genres(db: Session = Depends(get_db)):
    return BookGenreRepository(db).get_all()

@router.get("/book/{book_id}", response_model=List[BookGenre])
def get_genres_of_book(book_id: int, db: Session = Depends(get_db)):
    return BookGenreRepository(db).get_by_book(book_id)

@router.get("/genre/{genre_id}", response_model=List[BookGenre])
def get_books_of_genre(genre_id: int, db: Session = Depends(get_db)):
    return BookGenreRepository(db).get_by_genre(genre_id)

@router.post("", response_model=BookGenre, status_code=status.HTTP_201_CREATED)
def create_book_genre(link: BookGenreCreate, db: Session = Depends(get_db)):
    return unwrap(BookGenreRepository(db).create(link.book_id, link.genre_id))

@router.put("/{book_id}/{genre_id}", response_model=BookGenre)
def update_book_genre(book_id: int, genre_id: int, link: BookGenreUpdate, db: Session = Depends(get_db)):
    """Move the link to the book and genre given in the body"""
    return unwrap(BookGenreRepository(db).update(book_id, genre_id, link.book_id, link.genre_id))

@router.delete("/{book_id}/{genre_id}", response_model=Message)
def delete_book_genre(book_id: int, genre_id: int, db: Session = Depends(get_db)):
    unwrap(BookGenreRepository(db).delete(book_id, genre_id))
    return {"message": "Book genre deleted successfully"}
