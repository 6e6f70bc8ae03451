# core/sa/repositories/bookshelf.py
import logging
from typing import Optional, List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from core.result import Result, Ok, not_found, conflict, invalid
from ..models import Bookshelf, BookshelfBook, BookshelfView, User

logger = logging.getLogger(__name__)

VALID_VIEWS = {view.value for view in BookshelfView}

class BookshelfRepository:
    """Repository for managing a user's named shelves."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _with_user(self):
        return self.session.query(Bookshelf).options(joinedload(Bookshelf.user))

    def get_all(self) -> List[Bookshelf]:
        return self._with_user().order_by(Bookshelf.id).all()

    def get_by_id(self, bookshelf_id: int) -> Optional[Bookshelf]:
        return self._with_user().filter(Bookshelf.id == bookshelf_id).first()

    def get_by_username(self, username: str) -> List[Bookshelf]:
        return (
            self._with_user()
            .join(User, Bookshelf.user_id == User.id)
            .filter(User.username == username)
            .order_by(Bookshelf.id)
            .all()
        )

    def get_by_view(self, view: str) -> List[Bookshelf]:
        return self._with_user().filter(Bookshelf.view == view).order_by(Bookshelf.id).all()

    def get_by_name(self, name: str) -> Optional[Bookshelf]:
        return self._with_user().filter(Bookshelf.name == name).first()

    def create_bookshelf(self, username: str, name: str, view: str) -> Result[Bookshelf]:
        """Create a shelf owned by the user with the given username.

        Args:
            username: Owner's username
            name: Shelf name, unique across all shelves
            view: 'public' or 'private'

        Returns:
            Ok(bookshelf), or validation/not_found/conflict errors
        """
        if view not in VALID_VIEWS:
            return invalid(f"Invalid view '{view}'. Must be one of: public, private")

        user = self.session.query(User).filter(User.username == username).first()
        if not user:
            return not_found(f'User with username "{username}" does not exist.')

        if self.get_by_name(name):
            logger.warning("Rejected bookshelf create: name %r taken", name)
            return conflict(f"Bookshelf '{name}' already exists")

        bookshelf = Bookshelf(user_id=user.id, name=name, view=view)
        self.session.add(bookshelf)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return conflict(f"Bookshelf '{name}' already exists")
        return Ok(bookshelf)

    def update_bookshelf(self, bookshelf_id: int, name: str, view: str) -> Result[Bookshelf]:
        if view not in VALID_VIEWS:
            return invalid(f"Invalid view '{view}'. Must be one of: public, private")

        bookshelf = self.get_by_id(bookshelf_id)
        if not bookshelf:
            return not_found(f"Bookshelf with ID {bookshelf_id} not found")

        existing = self.get_by_name(name)
        if existing and existing.id != bookshelf_id:
            return conflict(f"Bookshelf '{name}' already exists")

        bookshelf.name = name
        bookshelf.view = view
        self.session.commit()
        return Ok(bookshelf)

    def delete_bookshelf(self, bookshelf_id: int) -> Result[bool]:
        """Delete a shelf and the book entries placed on it"""
        bookshelf = self.session.get(Bookshelf, bookshelf_id)
        if not bookshelf:
            return not_found(f"Bookshelf with ID {bookshelf_id} not found")

        try:
            self.session.query(BookshelfBook).filter(
                BookshelfBook.bookshelf_id == bookshelf_id
            ).delete()
            self.session.delete(bookshelf)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Deleted bookshelf %s", bookshelf_id)
        return Ok(True)
