# api/routes/users.py

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.common import Message
from api.schemas.user import (
    User, UserCreate, UserUpdate, UserWithProfile, LoginRequest, LoginResponse
)
from core.sa.repositories.user import UserRepository

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=List[User])
def get_users(db: Session = Depends(get_db)):
    return UserRepository(db).get_all()

@router.get("/profiles", response_model=List[UserWithProfile])
def get_users_with_profile(db: Session = Depends(get_db)):
    """Users joined with their profile bio"""
    return UserRepository(db).get_all_with_profile()

@router.get("/id/{user_id}", response_model=UserWithProfile)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(UserRepository(db).get_by_id(user_id), "User not found")

@router.get("/username/{username}", response_model=UserWithProfile)
def get_user_by_username(username: str, db: Session = Depends(get_db)):
    return not_found_if_none(UserRepository(db).get_by_username(username), "User not found")

@router.post("", response_model=UserWithProfile, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """
    Register a user. A profile holding the bio is created alongside and the
    password is stored only as a salted hash.
    """
    return unwrap(UserRepository(db).create_user(user.model_dump()))

@router.put("/{user_id}", response_model=UserWithProfile)
def update_user(user_id: int, user: UserUpdate, db: Session = Depends(get_db)):
    return unwrap(UserRepository(db).update_user(user_id, user.model_dump()))

@router.delete("/{user_id}", response_model=Message)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Delete a user together with their shelves, reading progress and profile"""
    unwrap(UserRepository(db).delete_user(user_id))
    return {"message": "User deleted successfully"}

@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Check a username and password.

    Wrong credentials are not an HTTP error: the response carries
    success=false and a message. On success the public user fields are
    returned so the client can keep them.
    """
    result = UserRepository(db).sign_in(credentials.username, credentials.password)
    return {"success": result.success, "message": result.message, "user": result.user}
