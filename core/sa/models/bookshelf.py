# core/sa/models/bookshelf.py
from enum import Enum
from sqlalchemy import Integer, String, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class BookshelfView(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"

class BookshelfBook(Base, TimestampMixin):
    __tablename__ = 'bookshelf_books'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    bookshelf_id: Mapped[int] = mapped_column(ForeignKey('bookshelf.id'), primary_key=True)

    # Relationships
    book = relationship('Book', back_populates='bookshelf_books')
    bookshelf = relationship('Bookshelf', back_populates='bookshelf_books')

class Bookshelf(Base, TimestampMixin):
    __tablename__ = 'bookshelf'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    view: Mapped[str] = mapped_column(String(10), nullable=False, default=BookshelfView.PRIVATE.value)

    # Relationships
    user = relationship('User', back_populates='bookshelves')
    bookshelf_books = relationship('BookshelfBook', back_populates='bookshelf')

    # Convenience relationship
    books = relationship('Book', secondary='bookshelf_books', viewonly=True)

    __table_args__ = (
        CheckConstraint("view IN ('public', 'private')", name='ck_bookshelf_view'),
        Index('idx_bookshelf_user_id', 'user_id'),
    )

    @property
    def username(self) -> str | None:
        return self.user.username if self.user else None
