# core/sa/models/review.py
from sqlalchemy import Integer, Text, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Review(Base, TimestampMixin):
    __tablename__ = 'review'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    user_id: Mapped[int | None] = mapped_column(ForeignKey('user.id'), nullable=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    book = relationship('Book', back_populates='reviews')
    user = relationship('User', back_populates='reviews')

    __table_args__ = (
        CheckConstraint('rating >= 1 AND rating <= 5', name='ck_review_rating'),
        Index('idx_review_book_id', 'book_id'),
    )

    @property
    def title(self) -> str | None:
        return self.book.title if self.book else None
