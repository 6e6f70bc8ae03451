import pytest
from sqlalchemy import inspect
from core.sa.database import Database
from core.sa.models import Genre

@pytest.fixture
def memory_db():
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()

def test_init_db_creates_all_tables(memory_db):
    tables = set(inspect(memory_db.engine).get_table_names())
    assert {
        'user', 'profile', 'author', 'book', 'genre', 'bookgenre', 'bookshelf',
        'bookshelf_books', 'booksbyuser', 'review', 'image'
    } <= tables

def test_get_db_commits_on_success(memory_db):
    with memory_db.get_db() as session:
        session.add(Genre(name="Poetry"))

    with memory_db.get_db() as session:
        assert session.query(Genre).count() == 1

def test_get_db_rolls_back_on_error(memory_db):
    with pytest.raises(RuntimeError):
        with memory_db.get_db() as session:
            session.add(Genre(name="Poetry"))
            session.flush()
            raise RuntimeError("boom")

    with memory_db.get_db() as session:
        assert session.query(Genre).count() == 0

def test_drop_db_removes_tables(memory_db):
    memory_db.drop_db()
    assert inspect(memory_db.engine).get_table_names() == []
