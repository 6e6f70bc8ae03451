# api/routes/bookshelf_books.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap
from api.schemas.common import Message
from api.schemas.links import BookshelfBook, BookshelfBookCreate, BookshelfBookUpdate
from core.sa.repositories.bookshelf_book import BookshelfBookRepository

router = APIRouter(prefix="/bookshelfBooks", tags=["bookshelf books"])

@router.get("", response_model=List[BookshelfBook])
def get_bookshelf_books(db: Session = Depends(get_db)):
    return BookshelfBookRepository(db).get_all()

@router.get("/bookshelf/{bookshelf_id}", response_model=List[BookshelfBook])
def get_books_on_shelf(bookshelf_id: int, db: Session = Depends(get_db)):
    return BookshelfBookRepository(db).get_by_bookshelf(bookshelf_id)

@router.get("/book/{book_id}", response_model=List[BookshelfBook])
def get_shelves_of_book(book_id: int, db: Session = Depends(get_db)):
    return BookshelfBookRepository(db).get_by_book(book_id)

@router.post("", response_model=BookshelfBook, status_code=status.HTTP_201_CREATED)
def add_book_to_shelf(entry: BookshelfBookCreate, db: Session = Depends(get_db)):
    return unwrap(BookshelfBookRepository(db).create(entry.book_id, entry.bookshelf_id))

@router.put("/{book_id}/{bookshelf_id}", response_model=BookshelfBook)
def move_bookshelf_book(book_id: int, bookshelf_id: int, entry: BookshelfBookUpdate, db: Session = Depends(get_db)):
    return unwrap(BookshelfBookRepository(db).update(
        book_id, bookshelf_id, entry.book_id, entry.bookshelf_id
    ))

@router.delete("/{book_id}/{bookshelf_id}", response_model=Message)
def remove_book_from_shelf(book_id: int, bookshelf_id: int, db: Session = Depends(get_db)):
    unwrap(BookshelfBookRepository(db).delete(book_id, bookshelf_id))
    return {"message": "Book removed from bookshelf"}
