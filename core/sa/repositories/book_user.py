# core/sa/repositories/book_user.py
import logging
from datetime import date
from typing import Optional, List
from sqlalchemy import func, and_, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload
from core.result import Result, Ok, not_found, conflict, invalid
from ..models import Author, Book, BookGenre, BookUser, Genre, ReadingStatus, User

logger = logging.getLogger(__name__)

VALID_STATUSES = {status.value for status in ReadingStatus}

class BookUserRepository:
    """Per-user reading state and the recommendations derived from it."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _with_book(self):
        return self.session.query(BookUser).options(
            joinedload(BookUser.book).joinedload(Book.author),
            joinedload(BookUser.book).joinedload(Book.image),
            joinedload(BookUser.book).selectinload(Book.genres)
        )

    def get_all(self) -> List[BookUser]:
        return self._with_book().order_by(BookUser.id).all()

    def get_by_id(self, book_user_id: int) -> Optional[BookUser]:
        return self._with_book().filter(BookUser.id == book_user_id).first()

    def get_user_books(self, user_id: int) -> List[BookUser]:
        """Every book in the user's collection with cover and author loaded"""
        return (
            self._with_book()
            .filter(BookUser.user_id == user_id)
            .order_by(BookUser.id)
            .all()
        )

    def get_user_book(self, user_id: int, book_id: int) -> Optional[BookUser]:
        return (
            self._with_book()
            .filter(BookUser.user_id == user_id, BookUser.book_id == book_id)
            .first()
        )

    def get_reading(self, user_id: int) -> List[BookUser]:
        """Books the user is currently reading; each row exposes .progress"""
        return (
            self._with_book()
            .filter(
                BookUser.user_id == user_id,
                BookUser.status == ReadingStatus.READING.value
            )
            .order_by(BookUser.id)
            .all()
        )

    def count_books(self, user_id: int) -> int:
        return self.session.query(BookUser).filter(BookUser.user_id == user_id).count()

    def count_read(self, user_id: int) -> int:
        return (
            self.session.query(BookUser)
            .filter(
                BookUser.user_id == user_id,
                BookUser.status == ReadingStatus.READ.value
            )
            .count()
        )

    def _validate_status(self, status: str):
        if status not in VALID_STATUSES:
            return invalid("Invalid status; must be one of: read, unread, reading.")
        return None

    def create_book_user(
        self,
        username: str,
        title: str,
        status: str = ReadingStatus.UNREAD.value,
        current_page: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> Result[BookUser]:
        """Add a book to a user's collection, both looked up by name.

        An existing (user, book) pair is never overwritten.

        Returns:
            Ok(book_user), not_found for an unknown username or title,
            conflict for a duplicate, validation for a bad status
        """
        error = self._validate_status(status)
        if error:
            return error

        user = self.session.query(User).filter(User.username == username).first()
        if not user:
            return not_found(f'User with username "{username}" does not exist.')

        book = self.session.query(Book).filter(Book.title == title).order_by(Book.id).first()
        if not book:
            return not_found(f'Book with title "{title}" does not exist.')

        if self.get_user_book(user.id, book.id):
            logger.warning("Book %s already in collection of user %s", book.id, user.id)
            return conflict(f'The book "{title}" is already in the user\'s collection.')

        book_user = BookUser(
            user_id=user.id,
            book_id=book.id,
            status=status,
            current_page=current_page,
            start_date=start_date,
            end_date=end_date
        )
        self.session.add(book_user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return conflict(f'The book "{title}" is already in the user\'s collection.')
        return Ok(book_user)

    def record_progress(
        self,
        user_id: int,
        book_id: int,
        status: str,
        current_page: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> Result[BookUser]:
        """Insert or update the user's reading state for one book"""
        error = self._validate_status(status)
        if error:
            return error

        if self.session.get(User, user_id) is None:
            return not_found(f"User with ID {user_id} not found")
        if self.session.get(Book, book_id) is None:
            return not_found(f"Book with ID {book_id} not found")

        book_user = (
            self.session.query(BookUser)
            .filter(BookUser.user_id == user_id, BookUser.book_id == book_id)
            .first()
        )
        if book_user is None:
            book_user = BookUser(user_id=user_id, book_id=book_id)
            self.session.add(book_user)

        book_user.status = status
        book_user.current_page = current_page
        book_user.start_date = start_date
        book_user.end_date = end_date
        self.session.commit()
        return Ok(book_user)

    def update_book_user(
        self,
        book_user_id: int,
        status: str,
        current_page: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> Result[BookUser]:
        error = self._validate_status(status)
        if error:
            return error

        book_user = self.session.get(BookUser, book_user_id)
        if not book_user:
            return not_found(f"Book with ID {book_user_id} not found or no changes made")

        book_user.status = status
        book_user.current_page = current_page
        book_user.start_date = start_date
        book_user.end_date = end_date
        self.session.commit()
        return Ok(book_user)

    def delete_book_user(self, book_user_id: int) -> Result[bool]:
        deleted = self.session.query(BookUser).filter(BookUser.id == book_user_id).delete()
        self.session.commit()
        if not deleted:
            return not_found(f"Book with ID {book_user_id} not found")
        return Ok(True)

    def most_read_author(self, user_id: int) -> Optional[Author]:
        """Author with the most books the user has marked read.

        Ties go to the lowest author id. Returns None when the user has
        not read anything.
        """
        read_count = func.count(BookUser.id)
        row = (
            self.session.query(Book.author_id, read_count)
            .join(BookUser, BookUser.book_id == Book.id)
            .filter(
                BookUser.user_id == user_id,
                BookUser.status == ReadingStatus.READ.value
            )
            .group_by(Book.author_id)
            .order_by(read_count.desc(), Book.author_id)
            .first()
        )
        if row is None:
            return None
        return self.session.get(Author, row[0])

    def most_read_genre(self, user_id: int) -> Optional[Genre]:
        """Genre with the most books the user has marked read.

        Ties go to the lowest genre id. Returns None when the user has
        not read anything.
        """
        read_count = func.count(BookUser.id)
        row = (
            self.session.query(BookGenre.genre_id, read_count)
            .join(BookUser, BookUser.book_id == BookGenre.book_id)
            .filter(
                BookUser.user_id == user_id,
                BookUser.status == ReadingStatus.READ.value
            )
            .group_by(BookGenre.genre_id)
            .order_by(read_count.desc(), BookGenre.genre_id)
            .first()
        )
        if row is None:
            return None
        return self.session.get(Genre, row[0])

    def _not_read_by(self, user_id: int):
        """Books query joined to the user's state, keeping unread and unstarted books"""
        return (
            self.session.query(Book)
            .options(joinedload(Book.author), selectinload(Book.genres))
            .outerjoin(
                BookUser,
                and_(BookUser.book_id == Book.id, BookUser.user_id == user_id)
            )
            .filter(
                or_(
                    BookUser.status.is_(None),
                    BookUser.status != ReadingStatus.READ.value
                )
            )
        )

    def unread_by_most_read_author(self, user_id: int) -> List[Book]:
        """Books by the user's most-read author that they have not read yet"""
        author = self.most_read_author(user_id)
        if author is None:
            return []
        return (
            self._not_read_by(user_id)
            .filter(Book.author_id == author.id)
            .order_by(Book.id)
            .all()
        )

    def unread_by_most_read_genre(self, user_id: int) -> List[Book]:
        """Books in the user's most-read genre that they have not read yet"""
        genre = self.most_read_genre(user_id)
        if genre is None:
            return []
        in_genre = (
            self.session.query(BookGenre.book_id)
            .filter(BookGenre.genre_id == genre.id)
        )
        return (
            self._not_read_by(user_id)
            .filter(Book.id.in_(in_genre))
            .order_by(Book.id)
            .all()
        )
