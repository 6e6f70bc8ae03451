# core/sa/repositories/genre.py

import logging
from typing import List, Optional, Tuple
from sqlalchemy import func, desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.result import Result, Ok, not_found, conflict, related_records
from core.sa.models import Genre, BookGenre

logger = logging.getLogger(__name__)

class GenreRepository:
    """Repository for managing Genre entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_all(self) -> List[Genre]:
        return self.session.query(Genre).order_by(Genre.id).all()

    def get_by_id(self, genre_id: int) -> Optional[Genre]:
        return self.session.get(Genre, genre_id)

    def get_by_name(self, name: str) -> Optional[Genre]:
        """Get a genre by its name.

        Args:
            name: The name of the genre to retrieve

        Returns:
            The Genre object if found, None otherwise
        """
        return self.session.query(Genre).filter(Genre.name == name).first()

    def get_popular_genres(self, limit: int = 10) -> List[Genre]:
        """Get genres ordered by number of associated books.

        Args:
            limit: Maximum number of genres to return (default: 10)

        Returns:
            List of Genre objects ordered by popularity
        """
        return (self.session.query(Genre)
                .outerjoin(Genre.book_genres)
                .group_by(Genre.id)
                .order_by(desc(func.count(BookGenre.book_id)), Genre.id)
                .limit(limit)
                .all())

    def get_or_create(self, name: str) -> Tuple[Genre, bool]:
        """Find a genre by exact name or add a new one to the session.

        The caller owns the transaction; nothing is committed here.

        Returns:
            (genre, was_created)
        """
        genre = self.get_by_name(name)
        if genre:
            return genre, False

        genre = Genre(name=name)
        self.session.add(genre)
        self.session.flush()  # Need to flush to get the genre.id
        logger.info("Created genre %r (id=%s)", name, genre.id)
        return genre, True

    def create_genre(self, name: str) -> Result[Genre]:
        if self.get_by_name(name):
            return conflict(f"Genre '{name}' already exists")

        genre = Genre(name=name)
        self.session.add(genre)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return conflict(f"Genre '{name}' already exists")
        return Ok(genre)

    def update_genre(self, genre_id: int, name: str) -> Result[Genre]:
        genre = self.get_by_id(genre_id)
        if not genre:
            return not_found(f"Genre with ID {genre_id} not found")

        existing = self.get_by_name(name)
        if existing and existing.id != genre_id:
            return conflict(f"Genre '{name}' already exists")

        genre.name = name
        self.session.commit()
        return Ok(genre)

    def has_related_records(self, genre_id: int) -> bool:
        """True when any book is linked to the genre"""
        return (
            self.session.query(BookGenre)
            .filter(BookGenre.genre_id == genre_id)
            .first()
        ) is not None

    def delete_genre(self, genre_id: int) -> Result[bool]:
        """Delete a genre that no book is linked to.

        Args:
            genre_id: ID of the genre to delete

        Returns:
            Ok(True) on success, a related_records error while books still
            use the genre, or not_found
        """
        genre = self.get_by_id(genre_id)
        if not genre:
            return not_found(f"Genre with ID {genre_id} not found")

        if self.has_related_records(genre_id):
            logger.warning("Refusing to delete genre %s: books still reference it", genre_id)
            return related_records("Cannot delete genre; related records exist.")

        self.session.delete(genre)
        self.session.commit()
        return Ok(True)
