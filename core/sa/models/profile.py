# core/sa/models/profile.py
from sqlalchemy import Integer, Text, LargeBinary
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Profile(Base, TimestampMixin):
    __tablename__ = 'profile'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    picture: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)

    # Relationships
    user = relationship('User', back_populates='profile', uselist=False)

    @property
    def username(self) -> str | None:
        return self.user.username if self.user else None
