# core/sa/models/author.py
from sqlalchemy import Integer, String, Index, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    books = relationship('Book', back_populates='author')

    __table_args__ = (
        UniqueConstraint('first_name', 'last_name', name='uix_author_name'),

        # Search index
        Index('idx_author_last_name', 'last_name'),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
