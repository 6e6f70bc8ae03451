# core/sa/__init__.py
from .database import Database
from .models import (
    Base, Author, Genre, Image, Profile, Book, BookGenre,
    User, BookUser, ReadingStatus, Review, Bookshelf, BookshelfBook, BookshelfView
)

__all__ = [
    'Database',
    'Base',
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
