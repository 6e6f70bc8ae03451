# core/sa/models/user.py
from datetime import date
from enum import Enum
from sqlalchemy import Integer, String, ForeignKey, Date, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator
from core.utils.progress import progress_percentage
from .base import Base, TimestampMixin

class ReadingStatus(str, Enum):
    READ = "read"
    UNREAD = "unread"
    READING = "reading"

class SafeDate(TypeDecorator):
    """Custom Date type that handles empty strings as None"""
    impl = Date
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value == '':
            return None
        return value

    def process_result_value(self, value, dialect):
        if value == '':
            return None
        return value

class BookUser(Base, TimestampMixin):
    """One user's reading state for one book."""
    __tablename__ = 'booksbyuser'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=ReadingStatus.UNREAD.value)
    current_page: Mapped[int | None] = mapped_column(Integer, nullable=True)
    start_date: Mapped[date | None] = mapped_column(SafeDate, nullable=True)
    end_date: Mapped[date | None] = mapped_column(SafeDate, nullable=True)

    # Relationships
    user = relationship('User', back_populates='book_users')
    book = relationship('Book', back_populates='book_users')

    __table_args__ = (
        UniqueConstraint('user_id', 'book_id', name='uix_booksbyuser_user_book'),
        CheckConstraint("status IN ('read', 'unread', 'reading')", name='ck_booksbyuser_status'),
    )

    @property
    def title(self) -> str | None:
        return self.book.title if self.book else None

    @property
    def progress(self) -> float:
        """Percent of the book read, derived from current_page on every access"""
        page_count = self.book.page_count if self.book else None
        return progress_percentage(self.current_page, page_count)

class User(Base, TimestampMixin):
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    reading_goal: Mapped[int | None] = mapped_column(Integer, nullable=True)
    profile_id: Mapped[int | None] = mapped_column(ForeignKey('profile.id'), nullable=True)

    # Relationships
    profile = relationship('Profile', back_populates='user')
    book_users = relationship('BookUser', back_populates='user')
    bookshelves = relationship('Bookshelf', back_populates='user')
    reviews = relationship('Review', back_populates='user')
    books = relationship('Book', secondary='booksbyuser', viewonly=True)

    @property
    def bio(self) -> str | None:
        return self.profile.bio if self.profile else None
