# tests/conftest.py
import os
import sys
import pytest
from pathlib import Path
from datetime import date
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from api.main import create_app
from core.sa.database import Database
from core.sa.models import Base, Author, Genre, Book, BookGenre, BookUser
from core.sa.repositories.user import UserRepository

# 1x1 transparent PNG
PNG_DATA_URI = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

USER_PASSWORD = "Secret123!"

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_library.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    db.drop_db()
    db.init_db()

    yield db

    db.dispose()
    # Clean up the test database file after all tests
    try:
        os.remove(test_db_path)
    except OSError:
        pass

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Children before parents so foreign keys hold
    for table in reversed(Base.metadata.sorted_tables):
        db_session.execute(table.delete())
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def client(database):
    """API client bound to the test database"""
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(first_name="Jane", last_name="Doe")
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def sample_genre(db_session):
    """Create a sample genre for testing."""
    genre = Genre(name="Fantasy")
    db_session.add(genre)
    db_session.commit()
    return genre

@pytest.fixture
def sample_book(db_session, sample_author, sample_genre):
    """Create a sample book by the sample author in the sample genre."""
    book = Book(
        title="Test Book",
        isbn="9780000000001",
        language="English",
        page_count=200,
        description="Test book description",
        date_published=date(2020, 5, 4),
        author_id=sample_author.id
    )
    db_session.add(book)
    db_session.flush()
    db_session.add(BookGenre(book_id=book.id, genre_id=sample_genre.id))
    db_session.commit()
    return book

@pytest.fixture
def sample_user(db_session):
    """Create a sample user with a profile and a hashed password."""
    result = UserRepository(db_session).create_user({
        'first_name': "Test",
        'last_name': "Reader",
        'username': "reader",
        'email': "reader@example.com",
        'password': USER_PASSWORD,
        'phone_number': "5551234",
        'address': "1 Library Lane",
        'bio': "Reads a lot",
        'reading_goal': 12
    })
    return result.value

@pytest.fixture
def make_book(db_session):
    """Factory for books with a given author and genres."""
    counter = {'isbn': 0}

    def _make_book(title, author, genres=(), page_count=300):
        counter['isbn'] += 1
        book = Book(
            title=title,
            isbn=f"97800000{counter['isbn']:05d}",
            language="English",
            page_count=page_count,
            author_id=author.id
        )
        db_session.add(book)
        db_session.flush()
        for genre in genres:
            db_session.add(BookGenre(book_id=book.id, genre_id=genre.id))
        db_session.commit()
        return book

    return _make_book

@pytest.fixture
def mark(db_session):
    """Factory recording a user's reading status for a book."""
    def _mark(user, book, status, current_page=None):
        book_user = BookUser(user_id=user.id, book_id=book.id, status=status, current_page=current_page)
        db_session.add(book_user)
        db_session.commit()
        return book_user

    return _mark
