# tests/test_sa/test_repositories/test_review_repository.py

import pytest
from core.result import ErrorKind
from core.sa.models import Review
from core.sa.repositories.review import ReviewRepository

@pytest.fixture
def review_repo(db_session):
    return ReviewRepository(db_session)

def test_create_review_by_title(review_repo, sample_book):
    result = review_repo.create_review("Test Book", 4, "Solid read")

    assert result.ok
    review = result.value
    assert review.book_id == sample_book.id
    assert review.title == "Test Book"
    assert review.created_at is not None

def test_create_review_unknown_title(review_repo, db_session):
    result = review_repo.create_review("No Such Book", 3, "???")

    assert result.kind == ErrorKind.NOT_FOUND
    assert db_session.query(Review).count() == 0

@pytest.mark.parametrize("rating", [0, 6])
def test_create_review_rating_out_of_range(review_repo, sample_book, rating):
    assert review_repo.create_review("Test Book", rating, "x").kind == ErrorKind.VALIDATION

def test_get_by_title_is_partial(review_repo, sample_book):
    review_repo.create_review("Test Book", 5, "Loved it")
    assert len(review_repo.get_by_title("Test")) == 1
    assert review_repo.get_by_title("Other") == []

def test_get_by_rating(review_repo, sample_book):
    review_repo.create_review("Test Book", 5, "Loved it")
    review_repo.create_review("Test Book", 2, "Meh")
    assert [r.description for r in review_repo.get_by_rating(5)] == ["Loved it"]

def test_update_review(review_repo, sample_book):
    review = review_repo.create_review("Test Book", 5, "Loved it").value
    result = review_repo.update_review(review.id, 3, "On reflection, fine")

    assert result.ok
    assert result.value.rating == 3

def test_update_missing_review(review_repo):
    assert review_repo.update_review(999, 3, "x").kind == ErrorKind.NOT_FOUND

def test_delete_review(review_repo, sample_book):
    review = review_repo.create_review("Test Book", 5, "Loved it").value
    assert review_repo.delete_review(review.id).ok
    assert review_repo.delete_review(review.id).kind == ErrorKind.NOT_FOUND
