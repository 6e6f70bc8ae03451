# api/schemas/user.py
import re
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from api.schemas.common import NonEmptyStr

SPECIAL_CHARACTERS = r'[!@#$%^&*(),.?":{}|<>]'

class UserBase(BaseModel):
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    username: NonEmptyStr
    email: EmailStr
    password: str
    phone_number: Optional[str] = None
    address: Optional[str] = None
    bio: Optional[str] = None
    reading_goal: Optional[int] = Field(None, ge=0)

    @field_validator('password')
    @classmethod
    def check_password_strength(cls, value: str) -> str:
        if len(value) < 8:
            raise ValueError('Password must be at least 8 characters long')
        if not re.search(r'[A-Z]', value):
            raise ValueError('Password must contain at least one uppercase letter')
        if not re.search(r'[a-z]', value):
            raise ValueError('Password must contain at least one lowercase letter')
        if not re.search(r'[0-9]', value):
            raise ValueError('Password must contain at least one number')
        if not re.search(SPECIAL_CHARACTERS, value):
            raise ValueError('Password must contain at least one special character')
        return value

    @field_validator('phone_number')
    @classmethod
    def check_phone_number(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.isdigit():
            raise ValueError('Phone number must contain only numbers')
        return value

class UserCreate(UserBase):
    pass

class UserUpdate(UserBase):
    pass

class User(BaseModel):
    id: int
    first_name: str
    last_name: str
    username: str
    email: str
    phone_number: Optional[str] = None
    address: Optional[str] = None
    reading_goal: Optional[int] = None
    profile_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

class UserWithProfile(User):
    bio: Optional[str] = None

class LoginRequest(BaseModel):
    username: str
    password: str

class LoginResponse(BaseModel):
    success: bool
    message: str
    user: Optional[UserWithProfile] = None

    model_config = ConfigDict(from_attributes=True)
