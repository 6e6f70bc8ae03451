# api/routes/profiles.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import unwrap, not_found_if_none
from api.schemas.common import Message
from api.schemas.profile import Profile, ProfileCreate, ProfileUpdate
from core.sa.repositories.profile import ProfileRepository
from core.utils.image import decode_image

router = APIRouter(prefix="/profiles", tags=["profiles"])

def _decode_picture(picture: Optional[str]) -> Optional[bytes]:
    if not picture:
        return None
    try:
        return decode_image(picture)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.get("", response_model=List[Profile])
def get_profiles(db: Session = Depends(get_db)):
    return ProfileRepository(db).get_all()

@router.get("/username/{username}", response_model=Profile)
def get_profile_by_username(username: str, db: Session = Depends(get_db)):
    return not_found_if_none(ProfileRepository(db).get_by_username(username), "Profile not found")

@router.get("/{profile_id}", response_model=Profile)
def get_profile(profile_id: int, db: Session = Depends(get_db)):
    return not_found_if_none(ProfileRepository(db).get_by_id(profile_id), "Profile not found")

@router.post("", response_model=Profile, status_code=status.HTTP_201_CREATED)
def create_profile(profile: ProfileCreate, db: Session = Depends(get_db)):
    picture = _decode_picture(profile.picture)
    return unwrap(ProfileRepository(db).create_profile(profile.bio, picture))

@router.put("/{profile_id}", response_model=Profile)
def update_profile(profile_id: int, profile: ProfileUpdate, db: Session = Depends(get_db)):
    """Only the fields present in the body are changed"""
    picture = _decode_picture(profile.picture)
    return unwrap(ProfileRepository(db).update_profile(profile_id, profile.bio, picture))

@router.delete("/{profile_id}", response_model=Message)
def delete_profile(profile_id: int, db: Session = Depends(get_db)):
    unwrap(ProfileRepository(db).delete_profile(profile_id))
    return {"message": "Profile deleted successfully"}
