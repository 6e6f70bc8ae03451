# api/routes/images.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.common import Message
from api.schemas.image import Image, ImageCreate
from core.sa.repositories.image import ImageRepository

router = APIRouter(prefix="/images", tags=["images"])

@router.get("", response_model=List[Image])
def get_images(db: Session = Depends(get_db)):
    return ImageRepository(db).get_all()

@router.get("/id/{image_id}", response_model=Image)
def get_image(image_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(ImageRepository(db).get_by_id(image_id), "Image not found")

@router.post("", response_model=Image, status_code=status.HTTP_201_CREATED)
def create_image(image: ImageCreate, db: Session = Depends(get_db)):
    """
    Store cover images.

    Both fields are base64 data URIs (data:image/png;base64,...); the side
    image is optional.
    """
    return unwrap(ImageRepository(db).create_image(image.image_front, image.image_side))

@router.delete("/{image_id}", response_model=Message)
def delete_image(image_id: int, db: Session = Depends(get_db)):
    unwrap(ImageRepository(db).delete_image(image_id))
    return {"message": "Image deleted successfully"}
