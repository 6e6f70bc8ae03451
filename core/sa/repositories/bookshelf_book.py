# core/sa/repositories/bookshelf_book.py
from typing import Optional, List
from sqlalchemy.orm import Session
from core.result import Result, Ok, not_found, conflict
from ..models import Book, Bookshelf, BookshelfBook

class BookshelfBookRepository:
    """Books placed on shelves, keyed by (book_id, bookshelf_id)"""

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[BookshelfBook]:
        return (
            self.session.query(BookshelfBook)
            .order_by(BookshelfBook.bookshelf_id, BookshelfBook.book_id)
            .all()
        )

    def get(self, book_id: int, bookshelf_id: int) -> Optional[BookshelfBook]:
        return self.session.get(BookshelfBook, (book_id, bookshelf_id))

    def get_by_book(self, book_id: int) -> List[BookshelfBook]:
        return (
            self.session.query(BookshelfBook)
            .filter(BookshelfBook.book_id == book_id)
            .order_by(BookshelfBook.bookshelf_id)
            .all()
        )

    def get_by_bookshelf(self, bookshelf_id: int) -> List[BookshelfBook]:
        return (
            self.session.query(BookshelfBook)
            .filter(BookshelfBook.bookshelf_id == bookshelf_id)
            .order_by(BookshelfBook.book_id)
            .all()
        )

    def _check_sides(self, book_id: int, bookshelf_id: int):
        if self.session.get(Book, book_id) is None:
            return not_found(f"Book with ID {book_id} not found")
        if self.session.get(Bookshelf, bookshelf_id) is None:
            return not_found(f"Bookshelf with ID {bookshelf_id} not found")
        return None

    def create(self, book_id: int, bookshelf_id: int) -> Result[BookshelfBook]:
        """Put a book on a shelf"""
        error = self._check_sides(book_id, bookshelf_id)
        if error:
            return error
        if self.get(book_id, bookshelf_id):
            return conflict(f"Book {book_id} is already on bookshelf {bookshelf_id}")

        entry = BookshelfBook(book_id=book_id, bookshelf_id=bookshelf_id)
        self.session.add(entry)
        self.session.commit()
        return Ok(entry)

    def update(self, book_id: int, bookshelf_id: int, new_book_id: int, new_bookshelf_id: int) -> Result[BookshelfBook]:
        """Move a shelf entry to another book or shelf"""
        if not self.get(book_id, bookshelf_id):
            return not_found(f"Book {book_id} is not on bookshelf {bookshelf_id}")

        error = self._check_sides(new_book_id, new_bookshelf_id)
        if error:
            return error

        if (new_book_id, new_bookshelf_id) != (book_id, bookshelf_id) and self.get(new_book_id, new_bookshelf_id):
            return conflict(f"Book {new_book_id} is already on bookshelf {new_bookshelf_id}")

        self.session.query(BookshelfBook).filter(
            BookshelfBook.book_id == book_id,
            BookshelfBook.bookshelf_id == bookshelf_id
        ).update(
            {BookshelfBook.book_id: new_book_id, BookshelfBook.bookshelf_id: new_bookshelf_id},
            synchronize_session=False
        )
        self.session.commit()
        return Ok(self.get(new_book_id, new_bookshelf_id))

    def delete(self, book_id: int, bookshelf_id: int) -> Result[bool]:
        deleted = self.session.query(BookshelfBook).filter(
            BookshelfBook.book_id == book_id,
            BookshelfBook.bookshelf_id == bookshelf_id
        ).delete()
        self.session.commit()

        if not deleted:
            return not_found(f"Book {book_id} is not on bookshelf {bookshelf_id}")
        return Ok(True)
