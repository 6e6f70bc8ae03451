# api/routes/bookshelves.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.bookshelf import Bookshelf, BookshelfCreate, BookshelfUpdate
from api.schemas.common import Message
from core.sa.models import BookshelfView
from core.sa.repositories.bookshelf import BookshelfRepository

router = APIRouter(prefix="/bookshelf", tags=["bookshelves"])

@router.get("", response_model=List[Bookshelf])
def get_bookshelves(db: Session = Depends(get_db)):
    return BookshelfRepository(db).get_all()

@router.get("/id/{bookshelf_id}", response_model=Bookshelf)
def get_bookshelf(bookshelf_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(BookshelfRepository(db).get_by_id(bookshelf_id), "Bookshelf not found")

@router.get("/username/{username}", response_model=List[Bookshelf])
def get_bookshelves_by_username(username: str, db: Session = Depends(get_db)):
    return BookshelfRepository(db).get_by_username(username)

@router.get("/view/{view}", response_model=List[Bookshelf])
def get_bookshelves_by_view(view: BookshelfView, db: Session = Depends(get_db)):
    """Shelves that are public or private"""
    return BookshelfRepository(db).get_by_view(view.value)

@router.get("/name/{name}", response_model=Bookshelf)
def get_bookshelf_by_name(name: str, db: Session = Depends(get_db)):
    return not_found_if_none(BookshelfRepository(db).get_by_name(name), "Bookshelf not found")

@router.post("", response_model=Bookshelf, status_code=status.HTTP_201_CREATED)
def create_bookshelf(bookshelf: BookshelfCreate, db: Session = Depends(get_db)):
    return unwrap(BookshelfRepository(db).create_bookshelf(
        bookshelf.username, bookshelf.name, bookshelf.view.value
    ))

@router.put("/{bookshelf_id}", response_model=Bookshelf)
def update_bookshelf(bookshelf_id: int, bookshelf: BookshelfUpdate, db: Session = Depends(get_db)):
    return unwrap(BookshelfRepository(db).update_bookshelf(
        bookshelf_id, bookshelf.name, bookshelf.view.value
    ))

@router.delete("/{bookshelf_id}", response_model=Message)
def delete_bookshelf(bookshelf_id: int, db: Session = Depends(get_db)):
    """Delete a shelf; the books on it are only taken off the shelf"""
    unwrap(BookshelfRepository(db).delete_bookshelf(bookshelf_id))
    return {"message": "Bookshelf deleted successfully"}
