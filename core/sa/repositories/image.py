# core/sa/repositories/image.py
import logging
from typing import Optional, List
from sqlalchemy.orm import Session
from core.result import Result, Ok, not_found, invalid
from core.utils.image import decode_image
from ..models import Image, Book

logger = logging.getLogger(__name__)

class ImageRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Image]:
        return self.session.query(Image).order_by(Image.id).all()

    def get_by_id(self, image_id: int) -> Optional[Image]:
        return self.session.get(Image, image_id)

    def create_image(self, image_front: str, image_side: Optional[str] = None) -> Result[Image]:
        """Store cover images sent as base64 data URIs.

        Args:
            image_front: Front cover, required
            image_side: Spine/side image, optional

        Returns:
            Ok(image), or a validation error for malformed base64 input
        """
        try:
            front = decode_image(image_front)
            side = decode_image(image_side) if image_side else None
        except ValueError as e:
            logger.warning("Rejected image upload: %s", e)
            return invalid(str(e))

        image = Image(image_front=front, image_side=side)
        self.session.add(image)
        self.session.commit()
        return Ok(image)

    def delete_image(self, image_id: int) -> Result[bool]:
        """Delete an image after clearing the books that use it as a cover"""
        image = self.get_by_id(image_id)
        if not image:
            return not_found(f"Image with ID {image_id} not found")

        try:
            self.session.query(Book).filter(Book.image_id == image_id).update(
                {Book.image_id: None}, synchronize_session=False
            )
            self.session.delete(image)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return Ok(True)
