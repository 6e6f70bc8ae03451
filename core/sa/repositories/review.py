# core/sa/repositories/review.py
import logging
from typing import Optional, List
from sqlalchemy.orm import Session, joinedload
from core.result import Result, Ok, not_found, invalid
from ..models import Review, Book, User

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5

class ReviewRepository:
    """Repository for reviews; each review belongs to a book"""

    def __init__(self, session: Session):
        self.session = session

    def _with_book(self):
        return self.session.query(Review).options(joinedload(Review.book))

    def get_all(self) -> List[Review]:
        return self._with_book().order_by(Review.id).all()

    def get_by_id(self, review_id: int) -> Optional[Review]:
        return self._with_book().filter(Review.id == review_id).first()

    def get_by_title(self, title: str) -> List[Review]:
        """Get reviews of every book whose title contains the given text"""
        return (
            self._with_book()
            .join(Book, Review.book_id == Book.id)
            .filter(Book.title.ilike(f"%{title}%"))
            .order_by(Review.id)
            .all()
        )

    def get_by_rating(self, rating: int) -> List[Review]:
        return self._with_book().filter(Review.rating == rating).order_by(Review.id).all()

    def create_review(
        self,
        title: str,
        rating: int,
        description: str,
        user_id: Optional[int] = None
    ) -> Result[Review]:
        """Create a review for the book with exactly this title.

        Args:
            title: Title of the reviewed book
            rating: Integer from 1 to 5
            description: Review text
            user_id: Optional author of the review

        Returns:
            Ok(review), not_found when no book has the title or the user is
            unknown, or a validation error for an out-of-range rating
        """
        if not MIN_RATING <= rating <= MAX_RATING:
            return invalid(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

        book = (
            self.session.query(Book)
            .filter(Book.title == title)
            .order_by(Book.id)
            .first()
        )
        if not book:
            logger.warning("Rejected review: no book titled %r", title)
            return not_found(f'Book with title "{title}" does not exist.')

        if user_id is not None and self.session.get(User, user_id) is None:
            return not_found(f"User with ID {user_id} not found")

        review = Review(book_id=book.id, user_id=user_id, rating=rating, description=description)
        self.session.add(review)
        self.session.commit()
        return Ok(review)

    def update_review(self, review_id: int, rating: int, description: str) -> Result[Review]:
        if not MIN_RATING <= rating <= MAX_RATING:
            return invalid(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

        review = self.get_by_id(review_id)
        if not review:
            return not_found(f"Review with ID {review_id} not found")

        review.rating = rating
        review.description = description
        self.session.commit()
        return Ok(review)

    def delete_review(self, review_id: int) -> Result[bool]:
        review = self.session.get(Review, review_id)
        if not review:
            return not_found(f"Review with ID {review_id} not found")

        self.session.delete(review)
        self.session.commit()
        return Ok(True)
