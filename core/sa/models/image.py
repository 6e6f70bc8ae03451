# core/sa/models/image.py
from sqlalchemy import Integer, LargeBinary
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Image(Base, TimestampMixin):
    """Front/side cover scans stored as raw bytes."""
    __tablename__ = 'image'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    image_front: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    image_side: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)

    # Relationships
    books = relationship('Book', back_populates='image')
