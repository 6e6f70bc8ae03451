# core/sa/repositories/profile.py
import logging
from typing import Optional, List
from sqlalchemy.orm import Session, joinedload
from core.result import Result, Ok, not_found
from ..models import Profile, User

logger = logging.getLogger(__name__)

class ProfileRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[Profile]:
        """Get every profile with its owning user loaded"""
        return (
            self.session.query(Profile)
            .options(joinedload(Profile.user))
            .order_by(Profile.id)
            .all()
        )

    def get_by_id(self, profile_id: int) -> Optional[Profile]:
        return self.session.get(Profile, profile_id)

    def get_by_username(self, username: str) -> Optional[Profile]:
        return (
            self.session.query(Profile)
            .join(User, User.profile_id == Profile.id)
            .filter(User.username == username)
            .first()
        )

    def create_profile(self, bio: Optional[str] = None, picture: Optional[bytes] = None) -> Result[Profile]:
        profile = Profile(bio=bio, picture=picture)
        self.session.add(profile)
        self.session.commit()
        return Ok(profile)

    def update_profile(
        self,
        profile_id: int,
        bio: Optional[str] = None,
        picture: Optional[bytes] = None
    ) -> Result[Profile]:
        """Update only the fields that were supplied.

        A None argument keeps the stored value, so a bio can be changed
        without re-sending the picture and vice versa.
        """
        profile = self.get_by_id(profile_id)
        if not profile:
            return not_found(f"Profile with ID {profile_id} not found")

        if bio is not None:
            profile.bio = bio
        if picture is not None:
            profile.picture = picture
        self.session.commit()
        return Ok(profile)

    def delete_profile(self, profile_id: int) -> Result[bool]:
        """Delete a profile, detaching it from its user first"""
        profile = self.get_by_id(profile_id)
        if not profile:
            return not_found(f"Profile with ID {profile_id} not found")

        try:
            self.session.query(User).filter(User.profile_id == profile_id).update(
                {User.profile_id: None}, synchronize_session=False
            )
            self.session.delete(profile)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Deleted profile %s", profile_id)
        return Ok(True)
