# core/sa/models/book.py
from datetime import date
from sqlalchemy import String, Integer, Text, Date, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from core.utils.image import to_data_uri
from .base import Base, TimestampMixin

class BookGenre(Base, TimestampMixin):
    __tablename__ = 'bookgenre'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    genre_id: Mapped[int] = mapped_column(ForeignKey('genre.id'), primary_key=True)

    # Relationships
    book = relationship('Book', back_populates='book_genres')
    genre = relationship('Genre', back_populates='book_genres')

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    isbn: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    language: Mapped[str | None] = mapped_column(String(100), nullable=True)
    page_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_published: Mapped[date | None] = mapped_column(Date, nullable=True)
    author_id: Mapped[int] = mapped_column(ForeignKey('author.id'), nullable=False)
    image_id: Mapped[int | None] = mapped_column(ForeignKey('image.id'), nullable=True)

    # Relationships
    author = relationship('Author', back_populates='books')
    image = relationship('Image', back_populates='books')
    book_genres = relationship('BookGenre', back_populates='book')
    book_users = relationship('BookUser', back_populates='book')
    bookshelf_books = relationship('BookshelfBook', back_populates='book')
    reviews = relationship('Review', back_populates='book')

    # Convenience relationships
    genres = relationship('Genre', secondary='bookgenre', viewonly=True, order_by='Genre.name')
    bookshelves = relationship('Bookshelf', secondary='bookshelf_books', viewonly=True)

    __table_args__ = (
        Index('idx_book_title', 'title'),
        Index('idx_book_author_id', 'author_id'),
    )

    @property
    def genre_names(self) -> list[str]:
        return [genre.name for genre in self.genres]

    @property
    def cover_image(self) -> str | None:
        """Front cover as a data URI, if the book has an image"""
        return to_data_uri(self.image.image_front) if self.image else None
