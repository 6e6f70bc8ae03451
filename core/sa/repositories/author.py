# core/sa/repositories/author.py
import logging
from typing import Optional, List, Tuple
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.result import Result, Ok, not_found, conflict, related_records
from ..models import Author, Book

logger = logging.getLogger(__name__)

class AuthorRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Author]:
        return self.session.query(Author).order_by(Author.id).all()

    def get_by_id(self, author_id: int) -> Optional[Author]:
        """Get an author by ID"""
        return self.session.get(Author, author_id)

    def get_by_full_name(self, first_name: str, last_name: str) -> Optional[Author]:
        """Exact, case-sensitive match on the (first, last) name pair"""
        return self.session.query(Author).filter(
            Author.first_name == first_name,
            Author.last_name == last_name
        ).first()

    def get_by_name(self, name: str) -> List[Author]:
        """Get authors whose first or last name equals the given name"""
        return self.session.query(Author).filter(
            or_(Author.first_name == name, Author.last_name == name)
        ).order_by(Author.id).all()

    def get_or_create(self, first_name: str, last_name: str) -> Tuple[Author, bool]:
        """Find an author by name or add a new one to the session.

        The caller owns the transaction; nothing is committed here.

        Returns:
            (author, was_created)
        """
        author = self.get_by_full_name(first_name, last_name)
        if author:
            return author, False

        author = Author(first_name=first_name, last_name=last_name)
        self.session.add(author)
        self.session.flush()  # Need to flush to get the author.id
        logger.info("Created author %s %s (id=%s)", first_name, last_name, author.id)
        return author, True

    def create_author(self, first_name: str, last_name: str) -> Result[Author]:
        if self.get_by_full_name(first_name, last_name):
            return conflict(f"Author '{first_name} {last_name}' already exists")

        author = Author(first_name=first_name, last_name=last_name)
        self.session.add(author)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return conflict(f"Author '{first_name} {last_name}' already exists")
        return Ok(author)

    def update_author(self, author_id: int, first_name: str, last_name: str) -> Result[Author]:
        author = self.get_by_id(author_id)
        if not author:
            return not_found(f"Author with ID {author_id} not found")

        existing = self.get_by_full_name(first_name, last_name)
        if existing and existing.id != author_id:
            return conflict(f"Author '{first_name} {last_name}' already exists")

        author.first_name = first_name
        author.last_name = last_name
        self.session.commit()
        return Ok(author)

    def has_related_records(self, author_id: int) -> bool:
        """True when any book references the author"""
        return self.session.query(Book.id).filter(Book.author_id == author_id).first() is not None

    def delete_author(self, author_id: int) -> Result[bool]:
        author = self.get_by_id(author_id)
        if not author:
            return not_found(f"Author with ID {author_id} not found")

        if self.has_related_records(author_id):
            logger.warning("Refusing to delete author %s: books still reference it", author_id)
            return related_records("Cannot delete author; related records exist.")

        self.session.delete(author)
        self.session.commit()
        return Ok(True)
