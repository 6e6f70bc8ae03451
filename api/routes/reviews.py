# api/routes/reviews.py

from typing import List
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.common import Message
from api.schemas.review import Review, ReviewCreate, ReviewUpdate
from core.sa.repositories.review import ReviewRepository

router = APIRouter(prefix="/reviews", tags=["reviews"])

@router.get("", response_model=List[Review])
def get_reviews(db: Session = Depends(get_db)):
    return ReviewRepository(db).get_all()

@router.get("/id/{review_id}", response_model=Review)
def get_review(review_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(ReviewRepository(db).get_by_id(review_id), "Review not found")

@router.get("/title/{title}", response_model=List[Review])
def get_reviews_by_title(title: str, db: Session = Depends(get_db)):
    """Reviews of books whose title contains the given text"""
    return ReviewRepository(db).get_by_title(title)

@router.get("/rating/{rating}", response_model=List[Review])
def get_reviews_by_rating(
    rating: int = Path(..., ge=1, le=5, description="Star rating from 1 to 5"),
    db: Session = Depends(get_db)
):
    return ReviewRepository(db).get_by_rating(rating)

@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
def create_review(review: ReviewCreate, db: Session = Depends(get_db)):
    """
    Review a book identified by its exact title.

    Ratings outside 1-5 are rejected with a 400 before anything is stored.
    """
    return unwrap(ReviewRepository(db).create_review(
        review.title, review.rating, review.description, user_id=review.user_id
    ))

@router.put("/{review_id}", response_model=Review)
def update_review(review_id: int, review: ReviewUpdate, db: Session = Depends(get_db)):
    return unwrap(ReviewRepository(db).update_review(review_id, review.rating, review.description))

@router.delete("/{review_id}", response_model=Message)
def delete_review(review_id: int, db: Session = Depends(get_db)):
    unwrap(ReviewRepository(db).delete_review(review_id))
    return {"message": "Review deleted successfully"}
