import logging
from typing import Optional, Dict, Any, List, Union
from datetime import date, datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..result import Result, Ok, not_found, conflict
from ..sa.models import Book, BookGenre, Image
from ..sa.repositories.author import AuthorRepository
from ..sa.repositories.genre import GenreRepository

logger = logging.getLogger(__name__)

class BookCreator:
    """Creates and updates book records together with their author and genres.

    Authors are resolved by exact (first_name, last_name) and genres by exact
    name; missing rows are created. Each call is a single transaction.
    """

    def __init__(self, session: Session):
        """
        Initialize the book creator.

        Args:
            session: SQLAlchemy session
        """
        self.session = session
        self.author_repository = AuthorRepository(session)
        self.genre_repository = GenreRepository(session)

    def create_book(self, book_data: Dict[str, Any]) -> Result[Book]:
        """
        Creates a book and its relationships from provided data

        Args:
            book_data: Dictionary with title, isbn, language, page_count,
                description, date_published, first_name, last_name,
                genres (list of names) and optional image_id

        Returns:
            Ok(book), or a conflict error if the ISBN is already taken
        """
        isbn = book_data['isbn']
        if self._get_by_isbn(isbn):
            logger.warning("Rejected book create: ISBN %s already exists", isbn)
            return conflict(f"Book with ISBN {isbn} already exists")

        image_error = self._check_image(book_data.get('image_id'))
        if image_error:
            return image_error

        try:
            author, _ = self.author_repository.get_or_create(
                book_data['first_name'], book_data['last_name']
            )
            book = self._create_book_entity(book_data, author.id)
            self.session.add(book)
            self.session.flush()  # Need the book.id for the genre links

            self._create_genre_relationships(book, book_data.get('genres', []))
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            return self._integrity_conflict(e, isbn)
        except Exception:
            self.session.rollback()
            raise

        logger.info("Created book %r (id=%s)", book.title, book.id)
        return Ok(book)

    def update_book(self, book_id: int, book_data: Dict[str, Any]) -> Result[Book]:
        """
        Replaces a book's fields, author and genre set.

        Existing genre links are deleted and re-created from the supplied
        names, so afterwards the book has exactly those genres.

        Args:
            book_id: ID of the book to update
            book_data: Same shape as for create_book

        Returns:
            Ok(book), not_found if the book is missing, conflict if the new
            ISBN belongs to another book
        """
        existing_book = self.session.get(Book, book_id)
        if not existing_book:
            return not_found(f"Book with ID {book_id} not found")

        isbn = book_data['isbn']
        other = self._get_by_isbn(isbn)
        if other and other.id != book_id:
            return conflict(f"Book with ISBN {isbn} already exists")

        image_error = self._check_image(book_data.get('image_id'))
        if image_error:
            return image_error

        try:
            author, _ = self.author_repository.get_or_create(
                book_data['first_name'], book_data['last_name']
            )

            existing_book.title = book_data['title']
            existing_book.isbn = isbn
            existing_book.language = book_data.get('language')
            existing_book.page_count = book_data.get('page_count')
            existing_book.description = book_data.get('description')
            existing_book.date_published = self._parse_date(book_data.get('date_published'))
            existing_book.author_id = author.id
            if 'image_id' in book_data:
                existing_book.image_id = book_data.get('image_id')

            # Delete existing relationships
            self.session.query(BookGenre).filter_by(book_id=existing_book.id).delete()

            # Create new relationships
            self._create_genre_relationships(existing_book, book_data.get('genres', []))
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            return self._integrity_conflict(e, isbn)
        except Exception:
            self.session.rollback()
            raise

        return Ok(existing_book)

    def _get_by_isbn(self, isbn: str) -> Optional[Book]:
        return self.session.query(Book).filter(Book.isbn == isbn).first()

    def _integrity_conflict(self, error: IntegrityError, isbn: str):
        """Word a conflict after the database rejected the write"""
        if 'isbn' in str(error.orig).lower():
            return conflict(f"Book with ISBN {isbn} already exists")
        logger.warning("Book write for ISBN %s hit a constraint: %s", isbn, error.orig)
        return conflict("Book conflicts with an existing author or genre record")

    def _check_image(self, image_id: Optional[int]):
        if image_id is not None and self.session.get(Image, image_id) is None:
            return not_found(f"Image with ID {image_id} not found")
        return None

    def _create_book_entity(self, book_data: Dict[str, Any], author_id: int) -> Book:
        """Creates the main book entity without genre links"""
        return Book(
            title=book_data['title'],
            isbn=book_data['isbn'],
            language=book_data.get('language'),
            page_count=book_data.get('page_count'),
            description=book_data.get('description'),
            date_published=self._parse_date(book_data.get('date_published')),
            author_id=author_id,
            image_id=book_data.get('image_id')
        )

    def _create_genre_relationships(self, book: Book, genre_names: List[str]) -> None:
        """Creates genre links for a book, creating missing genres"""
        # The same name twice would violate the bookgenre primary key
        for name in dict.fromkeys(genre_names):
            genre, _ = self.genre_repository.get_or_create(name)
            self.session.add(BookGenre(book_id=book.id, genre_id=genre.id))

    def _parse_date(self, value: Union[date, str, None]) -> Optional[date]:
        """Parse a date string from various formats"""
        if not value:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value

        formats = [
            '%Y-%m-%dT%H:%M:%S.%f',  # 2021-05-04T00:00:00.000000
            '%Y-%m-%d',              # 2021-05-04
        ]

        for fmt in formats:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        return None
