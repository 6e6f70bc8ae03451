# api/schemas/image.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from api.schemas.common import NonEmptyStr
from core.utils.image import to_data_uri

class ImageCreate(BaseModel):
    image_front: NonEmptyStr
    image_side: Optional[str] = None

class Image(BaseModel):
    id: int
    image_front: str
    image_side: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator('image_front', 'image_side', mode='before')
    @classmethod
    def encode_image(cls, value):
        """Stored bytes go out as data URIs"""
        if isinstance(value, bytes):
            return to_data_uri(value)
        return value
