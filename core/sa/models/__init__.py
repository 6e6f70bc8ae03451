# core/sa/models/__init__.py
from .base import Base, TimestampMixin
from .author import Author
from .genre import Genre
from .image import Image
from .profile import Profile
from .book import Book, BookGenre
from .user import User, BookUser, ReadingStatus
from .review import Review
from .bookshelf import Bookshelf, BookshelfBook, BookshelfView

__all__ = [
    'Base',
    'TimestampMixin',
    'Author',
    'Genre',
    'Image',
    'Profile',
    'Book',
    'BookGenre',
    'User',
    'BookUser',
    'ReadingStatus',
    'Review',
    'Bookshelf',
    'BookshelfBook',
    'BookshelfView'
]
