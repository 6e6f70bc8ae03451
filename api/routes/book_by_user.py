# api/routes/book_by_user.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.book import Book
from api.schemas.book_user import (
    BookUser, BookUserCreate, BookUserDetail, BookUserProgress, BookUserUpdate
)
from api.schemas.common import Message, Total
from core.sa.repositories.book_user import BookUserRepository

router = APIRouter(prefix="/bookByUser", tags=["book by user"])

@router.get("", response_model=List[BookUser])
def get_all_book_by_user(db: Session = Depends(get_db)):
    return BookUserRepository(db).get_all()

@router.get("/total/{user_id}", response_model=Total)
def get_total_books(user_id: int, db: Session = Depends(get_db)):
    return {"total": BookUserRepository(db).count_books(user_id)}

@router.get("/totalRead/{user_id}", response_model=Total)
def get_total_books_read(user_id: int, db: Session = Depends(get_db)):
    return {"total": BookUserRepository(db).count_read(user_id)}

@router.get("/id/{book_user_id}", response_model=BookUserDetail)
def get_book_by_user(book_user_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(BookUserRepository(db).get_by_id(book_user_id), "Book not found")

@router.get("/user/{user_id}", response_model=List[BookUserDetail])
def get_user_books(user_id: int, db: Session = Depends(get_db)):
    """Every book in the user's collection, with its cover"""
    return BookUserRepository(db).get_user_books(user_id)

@router.get("/user/{user_id}/book/{book_id}", response_model=BookUserDetail)
def get_user_book(user_id: int, book_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(BookUserRepository(db).get_user_book(user_id, book_id), "Book not found")

@router.get("/reading/{user_id}", response_model=List[BookUserDetail])
def get_books_reading(user_id: int, db: Session = Depends(get_db)):
    """Books in progress with the percentage read"""
    return BookUserRepository(db).get_reading(user_id)

@router.get("/RecommendationByMostReadAuthor/{user_id}", response_model=List[Book])
def get_recommendation_by_most_read_author(user_id: int, db: Session = Depends(get_db)):
    """
    Books by the author the user has read most that they haven't read yet.

    Users with no read books get an empty list.
    """
    return BookUserRepository(db).unread_by_most_read_author(user_id)

@router.get("/RecommendationByMostReadGenre/{user_id}", response_model=List[Book])
def get_recommendation_by_most_read_genre(user_id: int, db: Session = Depends(get_db)):
    """
    Books in the genre the user has read most that they haven't read yet.

    Users with no read books get an empty list.
    """
    return BookUserRepository(db).unread_by_most_read_genre(user_id)

@router.post("", response_model=BookUser, status_code=status.HTTP_201_CREATED)
def create_book_by_user(entry: BookUserCreate, db: Session = Depends(get_db)):
    """
    Add a book to a user's collection by username and book title.

    A book already in the collection is left untouched and a 409 is returned.
    """
    return unwrap(BookUserRepository(db).create_book_user(
        entry.username,
        entry.title,
        status=entry.status.value,
        current_page=entry.current_page,
        start_date=entry.start_date,
        end_date=entry.end_date
    ))

@router.put("/progress", response_model=BookUser)
def record_progress(progress: BookUserProgress, db: Session = Depends(get_db)):
    """Create or update the user's reading state for a book"""
    return unwrap(BookUserRepository(db).record_progress(
        progress.user_id,
        progress.book_id,
        progress.status.value,
        current_page=progress.current_page,
        start_date=progress.start_date,
        end_date=progress.end_date
    ))

@router.put("/{book_user_id}", response_model=BookUser)
def update_book_by_user(book_user_id: int, entry: BookUserUpdate, db: Session = Depends(get_db)):
    return unwrap(BookUserRepository(db).update_book_user(
        book_user_id,
        entry.status.value,
        current_page=entry.current_page,
        start_date=entry.start_date,
        end_date=entry.end_date
    ))

@router.delete("/{book_user_id}", response_model=Message)
def delete_book_by_user(book_user_id: int, db: Session = Depends(get_db)):
    unwrap(BookUserRepository(db).delete_book_user(book_user_id))
    return {"message": "Book deleted successfully"}
