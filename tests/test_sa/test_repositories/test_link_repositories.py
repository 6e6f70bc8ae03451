# tests/test_sa/test_repositories/test_link_repositories.py

import pytest
from core.result import ErrorKind
from core.sa.models import Bookshelf, Genre
from core.sa.repositories.book_genre import BookGenreRepository
from core.sa.repositories.bookshelf_book import BookshelfBookRepository

@pytest.fixture
def book_genre_repo(db_session):
    return BookGenreRepository(db_session)

@pytest.fixture
def bookshelf_book_repo(db_session):
    return BookshelfBookRepository(db_session)

@pytest.fixture
def other_genre(db_session):
    genre = Genre(name="Horror")
    db_session.add(genre)
    db_session.commit()
    return genre

@pytest.fixture
def shelf(db_session, sample_user):
    shelf = Bookshelf(user_id=sample_user.id, name="Favourites", view="public")
    db_session.add(shelf)
    db_session.commit()
    return shelf

def test_book_genre_lookups(book_genre_repo, sample_book, sample_genre):
    assert [(l.book_id, l.genre_id) for l in book_genre_repo.get_all()] == [(sample_book.id, sample_genre.id)]
    assert len(book_genre_repo.get_by_book(sample_book.id)) == 1
    assert len(book_genre_repo.get_by_genre(sample_genre.id)) == 1

def test_book_genre_create(book_genre_repo, sample_book, other_genre):
    assert book_genre_repo.create(sample_book.id, other_genre.id).ok
    assert len(book_genre_repo.get_by_book(sample_book.id)) == 2

def test_book_genre_create_existing_link(book_genre_repo, sample_book, sample_genre):
    assert book_genre_repo.create(sample_book.id, sample_genre.id).kind == ErrorKind.CONFLICT

def test_book_genre_create_missing_side(book_genre_repo, sample_book):
    assert book_genre_repo.create(sample_book.id, 999).kind == ErrorKind.NOT_FOUND
    assert book_genre_repo.create(999, 1).kind == ErrorKind.NOT_FOUND

def test_book_genre_update_moves_link(book_genre_repo, sample_book, sample_genre, other_genre):
    result = book_genre_repo.update(sample_book.id, sample_genre.id, sample_book.id, other_genre.id)

    assert result.ok
    assert result.value.genre_id == other_genre.id
    assert book_genre_repo.get(sample_book.id, sample_genre.id) is None

def test_book_genre_update_missing_link(book_genre_repo, sample_book, other_genre):
    result = book_genre_repo.update(sample_book.id, other_genre.id, sample_book.id, other_genre.id)
    assert result.kind == ErrorKind.NOT_FOUND

def test_book_genre_delete(book_genre_repo, sample_book, sample_genre):
    assert book_genre_repo.delete(sample_book.id, sample_genre.id).ok
    assert book_genre_repo.delete(sample_book.id, sample_genre.id).kind == ErrorKind.NOT_FOUND

def test_bookshelf_book_create_and_lookup(bookshelf_book_repo, sample_book, shelf):
    assert bookshelf_book_repo.create(sample_book.id, shelf.id).ok
    assert [e.book_id for e in bookshelf_book_repo.get_by_bookshelf(shelf.id)] == [sample_book.id]
    assert [e.bookshelf_id for e in bookshelf_book_repo.get_by_book(sample_book.id)] == [shelf.id]

def test_bookshelf_book_duplicate(bookshelf_book_repo, sample_book, shelf):
    bookshelf_book_repo.create(sample_book.id, shelf.id)
    assert bookshelf_book_repo.create(sample_book.id, shelf.id).kind == ErrorKind.CONFLICT

def test_bookshelf_book_missing_shelf(bookshelf_book_repo, sample_book):
    assert bookshelf_book_repo.create(sample_book.id, 999).kind == ErrorKind.NOT_FOUND

def test_bookshelf_book_move(bookshelf_book_repo, db_session, sample_book, sample_user, shelf):
    other = Bookshelf(user_id=sample_user.id, name="Later", view="private")
    db_session.add(other)
    db_session.commit()
    bookshelf_book_repo.create(sample_book.id, shelf.id)

    result = bookshelf_book_repo.update(sample_book.id, shelf.id, sample_book.id, other.id)

    assert result.ok
    assert bookshelf_book_repo.get_by_bookshelf(shelf.id) == []
    assert len(bookshelf_book_repo.get_by_bookshelf(other.id)) == 1

def test_bookshelf_book_delete(bookshelf_book_repo, sample_book, shelf):
    bookshelf_book_repo.create(sample_book.id, shelf.id)
    assert bookshelf_book_repo.delete(sample_book.id, shelf.id).ok
    assert bookshelf_book_repo.delete(sample_book.id, shelf.id).kind == ErrorKind.NOT_FOUND
