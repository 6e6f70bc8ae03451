# api/schemas/profile.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from core.utils.image import to_data_uri

class ProfileBase(BaseModel):
    bio: Optional[str] = None
    picture: Optional[str] = None

class ProfileCreate(ProfileBase):
    pass

class ProfileUpdate(ProfileBase):
    pass

class Profile(BaseModel):
    id: int
    bio: Optional[str] = None
    picture: Optional[str] = None
    username: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator('picture', mode='before')
    @classmethod
    def encode_picture(cls, value):
        if isinstance(value, bytes):
            return to_data_uri(value)
        return value
