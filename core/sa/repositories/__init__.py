from .author import AuthorRepository
from .genre import GenreRepository
from .book import BookRepository
from .book_genre import BookGenreRepository
from .book_user import BookUserRepository
from .bookshelf import BookshelfRepository
from .bookshelf_book import BookshelfBookRepository
from .image import ImageRepository
from .profile import ProfileRepository
from .review import ReviewRepository
from .user import UserRepository, SignInResult

__all__ = [
    'AuthorRepository',
    'GenreRepository',
    'BookRepository',
    'BookGenreRepository',
    'BookUserRepository',
    'BookshelfRepository',
    'BookshelfBookRepository',
    'ImageRepository',
    'ProfileRepository',
    'ReviewRepository',
    'UserRepository',
    'SignInResult'
]
