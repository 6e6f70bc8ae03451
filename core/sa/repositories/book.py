# core/sa/repositories/book.py
import logging
from typing import Optional, List, Dict, Any
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload, selectinload
from core.result import Result, Ok, not_found
from ..models import Book, Author, Genre, BookGenre, BookUser, BookshelfBook, Review

logger = logging.getLogger(__name__)

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def _with_relationships(self):
        return self.session.query(Book).options(
            joinedload(Book.author),
            selectinload(Book.genres)
        )

    def get_all(self) -> List[Book]:
        """Get every book with its author and genres loaded"""
        return self._with_relationships().order_by(Book.id).all()

    def get_by_id(self, book_id: int) -> Optional[Book]:
        return self._with_relationships().filter(Book.id == book_id).first()

    def get_by_title(self, title: str) -> Optional[Book]:
        """Get the first book whose title matches exactly"""
        return (
            self._with_relationships()
            .filter(Book.title == title)
            .order_by(Book.id)
            .first()
        )

    def search_books(self, keyword: str) -> List[Book]:
        """Search books by title, genre name, or author first/last name.

        Args:
            keyword: Substring to look for

        Returns:
            Matching books, each listed once, ordered by ID
        """
        pattern = f"%{keyword}%"
        matching_ids = (
            self.session.query(Book.id)
            .join(Author, Book.author_id == Author.id)
            .outerjoin(BookGenre, BookGenre.book_id == Book.id)
            .outerjoin(Genre, BookGenre.genre_id == Genre.id)
            .filter(
                or_(
                    Book.title.ilike(pattern),
                    Genre.name.ilike(pattern),
                    Author.first_name.ilike(pattern),
                    Author.last_name.ilike(pattern)
                )
            )
            .distinct()
        )
        return (
            self._with_relationships()
            .filter(Book.id.in_(matching_ids))
            .order_by(Book.id)
            .all()
        )

    def create_book(self, book_data: Dict[str, Any]) -> Result[Book]:
        """Create a book, resolving its author and genres by name"""
        from core.resolvers.book_creator import BookCreator
        return BookCreator(self.session).create_book(book_data)

    def update_book(self, book_id: int, book_data: Dict[str, Any]) -> Result[Book]:
        """Replace a book's fields and genre set"""
        from core.resolvers.book_creator import BookCreator
        return BookCreator(self.session).update_book(book_id, book_data)

    def delete_book(self, book_id: int) -> Result[bool]:
        """Delete a book after removing every row that references it.

        Genre links, shelf entries, reading progress and reviews go first;
        the whole removal is one transaction.
        """
        book = self.session.get(Book, book_id)
        if not book:
            return not_found(f"Book with ID {book_id} not found")

        try:
            self.session.query(BookGenre).filter(BookGenre.book_id == book_id).delete()
            self.session.query(BookshelfBook).filter(BookshelfBook.book_id == book_id).delete()
            self.session.query(BookUser).filter(BookUser.book_id == book_id).delete()
            self.session.query(Review).filter(Review.book_id == book_id).delete()
            self.session.delete(book)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Deleted book %s and its dependent rows", book_id)
        return Ok(True)
