# core/sa/repositories/book_genre.py
from typing import Optional, List
from sqlalchemy.orm import Session
from core.result import Result, Ok, not_found, conflict
from ..models import Book, Genre, BookGenre

class BookGenreRepository:
    """Links between books and genres, keyed by (book_id, genre_id)"""

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[BookGenre]:
        return self.session.query(BookGenre).order_by(BookGenre.book_id, BookGenre.genre_id).all()

    def get(self, book_id: int, genre_id: int) -> Optional[BookGenre]:
        return self.session.get(BookGenre, (book_id, genre_id))

    def get_by_book(self, book_id: int) -> List[BookGenre]:
        return (
            self.session.query(BookGenre)
            .filter(BookGenre.book_id == book_id)
            .order_by(BookGenre.genre_id)
            .all()
        )

    def get_by_genre(self, genre_id: int) -> List[BookGenre]:
        return (
            self.session.query(BookGenre)
            .filter(BookGenre.genre_id == genre_id)
            .order_by(BookGenre.book_id)
            .all()
        )

    def _check_sides(self, book_id: int, genre_id: int):
        if self.session.get(Book, book_id) is None:
            return not_found(f"Book with ID {book_id} not found")
        if self.session.get(Genre, genre_id) is None:
            return not_found(f"Genre with ID {genre_id} not found")
        return None

    def create(self, book_id: int, genre_id: int) -> Result[BookGenre]:
        error = self._check_sides(book_id, genre_id)
        if error:
            return error
        if self.get(book_id, genre_id):
            return conflict(f"Book {book_id} is already linked to genre {genre_id}")

        link = BookGenre(book_id=book_id, genre_id=genre_id)
        self.session.add(link)
        self.session.commit()
        return Ok(link)

    def update(self, book_id: int, genre_id: int, new_book_id: int, new_genre_id: int) -> Result[BookGenre]:
        """Move an existing link to a new (book, genre) pair.

        Returns:
            Ok(link), not_found for a missing link or side, conflict when
            the target pair is already linked
        """
        if not self.get(book_id, genre_id):
            return not_found(f"Book {book_id} is not linked to genre {genre_id}")

        error = self._check_sides(new_book_id, new_genre_id)
        if error:
            return error

        if (new_book_id, new_genre_id) != (book_id, genre_id) and self.get(new_book_id, new_genre_id):
            return conflict(f"Book {new_book_id} is already linked to genre {new_genre_id}")

        self.session.query(BookGenre).filter(
            BookGenre.book_id == book_id,
            BookGenre.genre_id == genre_id
        ).update(
            {BookGenre.book_id: new_book_id, BookGenre.genre_id: new_genre_id},
            synchronize_session=False
        )
        self.session.commit()
        return Ok(self.get(new_book_id, new_genre_id))

    def delete(self, book_id: int, genre_id: int) -> Result[bool]:
        deleted = self.session.query(BookGenre).filter(
            BookGenre.book_id == book_id,
            BookGenre.genre_id == genre_id
        ).delete()
        self.session.commit()

        if not deleted:
            return not_found(f"Book {book_id} is not linked to genre {genre_id}")
        return Ok(True)
