# api/routes/authors.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.author import Author, AuthorCreate, AuthorUpdate
from api.schemas.common import Message
from core.sa.repositories.author import AuthorRepository

router = APIRouter(prefix="/authors", tags=["authors"])

@router.get("", response_model=List[Author])
def get_authors(db: Session = Depends(get_db)):
    return AuthorRepository(db).get_all()

@router.get("/id/{author_id}", response_model=Author)
def get_author(author_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(AuthorRepository(db).get_by_id(author_id), "Author not found")

@router.get("/name/{name}", response_model=List[Author])
def get_authors_by_name(name: str, db: Session = Depends(get_db)):
    """Authors whose first or last name equals the given name"""
    return AuthorRepository(db).get_by_name(name)

@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED)
def create_author(author: AuthorCreate, db: Session = Depends(get_db)):
    return unwrap(AuthorRepository(db).create_author(author.first_name, author.last_name))

@router.put("/{author_id}", response_model=Author)
def update_author(author_id: int, author: AuthorUpdate, db: Session = Depends(get_db)):
    return unwrap(AuthorRepository(db).update_author(author_id, author.first_name, author.last_name))

@router.delete("/{author_id}", response_model=Message)
def delete_author(author_id: int, db: Session = Depends(get_db)):
    """
    Delete an author.

    Authors still referenced by a book are kept and a 400 is returned.
    """
    unwrap(AuthorRepository(db).delete_author(author_id))
    return {"message": "Author deleted successfully"}
