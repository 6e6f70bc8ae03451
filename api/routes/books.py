# api/routes/books.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.book import Book, BookCreate, BookUpdate
from api.schemas.common import Message
from core.sa.repositories.book import BookRepository

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=List[Book])
def get_books(db: Session = Depends(get_db)):
    """
    Get every book with its author and genre names.

    Args:
        db: Database session

    Returns:
        List of books ordered by ID
    """
    return BookRepository(db).get_all()

@router.get("/id/{book_id}", response_model=Book)
def get_book(book_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(BookRepository(db).get_by_id(book_id), "Book not found")

@router.get("/title/{title}", response_model=Book)
def get_book_by_title(title: str, db: Session = Depends(get_db)):
    return not_found_if_none(BookRepository(db).get_by_title(title), "Book not found")

@router.get("/keyword/{keyword}", response_model=List[Book])
def search_books(keyword: str, db: Session = Depends(get_db)):
    """
    Search books by title, genre, or author name.

    Args:
        keyword: Text to look for; matching is partial and case-insensitive
        db: Database session

    Returns:
        Matching books, each listed once
    """
    return BookRepository(db).search_books(keyword)

@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(book: BookCreate, db: Session = Depends(get_db)):
    """
    Create a book. The author and genres are looked up by name and created
    when they don't exist yet.
    """
    repo = BookRepository(db)
    created = unwrap(repo.create_book(book.model_dump()))
    return repo.get_by_id(created.id)

@router.put("/{book_id}", response_model=Book)
def update_book(book_id: int, book: BookUpdate, db: Session = Depends(get_db)):
    """Replace a book; afterwards its genres are exactly the ones sent"""
    repo = BookRepository(db)
    unwrap(repo.update_book(book_id, book.model_dump()))
    return repo.get_by_id(book_id)

@router.delete("/{book_id}", response_model=Message)
def delete_book(book_id: int, db: Session = Depends(get_db)):
    unwrap(BookRepository(db).delete_book(book_id))
    return {"message": "Book deleted successfully"}
