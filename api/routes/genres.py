# api/routes/genres.py

from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.common import Message
from api.schemas.genre import Genre, GenreCreate, GenreUpdate
from core.sa.repositories.genre import GenreRepository

router = APIRouter(prefix="/genres", tags=["genres"])

@router.get("", response_model=List[Genre])
def get_genres(db: Session = Depends(get_db)):
    return GenreRepository(db).get_all()

@router.get("/popular", response_model=List[Genre])
def get_popular_genres(
    limit: int = Query(10, ge=1, le=100, description="Maximum number of genres to return"),
    db: Session = Depends(get_db)
):
    """Genres ordered by how many books use them"""
    return GenreRepository(db).get_popular_genres(limit=limit)

@router.get("/id/{genre_id}", response_model=Genre)
def get_genre(genre_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(GenreRepository(db).get_by_id(genre_id), "Genre not found")

@router.get("/name/{name}", response_model=Genre)
def get_genre_by_name(name: str, db: Session = Depends(get_db)):
    return not_found_if_none(GenreRepository(db).get_by_name(name), "Genre not found")

@router.post("", response_model=Genre, status_code=status.HTTP_201_CREATED)
def create_genre(genre: GenreCreate, db: Session = Depends(get_db)):
    return unwrap(GenreRepository(db).create_genre(genre.name))

@router.put("/{genre_id}", response_model=Genre)
def update_genre(genre_id: int, genre: GenreUpdate, db: Session = Depends(get_db)):
    return unwrap(GenreRepository(db).update_genre(genre_id, genre.name))

@router.delete("/{genre_id}", response_model=Message)
def delete_genre(genre_id: int, db: Session = Depends(get_db)):
    unwrap(GenreRepository(db).delete_genre(genre_id))
    return {"message": "Genre deleted successfully"}
