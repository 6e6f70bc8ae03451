import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from core.result import Result, Ok, not_found, conflict
from core.sa.models import User, Profile, BookUser, Bookshelf, BookshelfBook, Review
from core.utils.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


@dataclass
class SignInResult:
    """Outcome of a credential check; bad credentials are not exceptions."""
    success: bool
    message: str
    user: Optional[User] = None


class UserRepository:
    """Repository for managing User entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_all(self) -> List[User]:
        return self.session.query(User).order_by(User.id).all()

    def get_all_with_profile(self) -> List[User]:
        """Get every user that has a profile, with the profile loaded"""
        return (
            self.session.query(User)
            .join(User.profile)
            .options(joinedload(User.profile))
            .order_by(User.id)
            .all()
        )

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID.

        Args:
            user_id: The ID of the user

        Returns:
            The User object if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.session.query(User).filter(User.username == username).first()

    def create_user(self, user_data: Dict[str, Any]) -> Result[User]:
        """Create a new user together with an empty profile.

        Args:
            user_data: first_name, last_name, username, email, password,
                phone_number, address, bio, reading_goal

        Returns:
            Ok(user), or a conflict error if the username is taken
        """
        username = user_data['username']

        # Check if user already exists
        if self.get_by_username(username):
            return conflict(f"User with username '{username}' already exists")

        try:
            profile = Profile(bio=user_data.get('bio'))
            self.session.add(profile)
            self.session.flush()

            user = User(
                first_name=user_data['first_name'],
                last_name=user_data['last_name'],
                username=username,
                email=user_data['email'],
                password_hash=hash_password(user_data['password']),
                phone_number=user_data.get('phone_number'),
                address=user_data.get('address'),
                reading_goal=user_data.get('reading_goal'),
                profile_id=profile.id
            )
            self.session.add(user)
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return conflict(f"User with username '{username}' already exists")
        except Exception:
            self.session.rollback()
            raise

        logger.info("Created user %s (id=%s)", username, user.id)
        return Ok(user)

    def update_user(self, user_id: int, user_data: Dict[str, Any]) -> Result[User]:
        """Replace a user's details and their profile bio.

        Args:
            user_id: The ID of the user to update
            user_data: Same shape as for create_user

        Returns:
            Ok(user), not_found, or conflict when the new username belongs
            to someone else
        """
        user = self.get_by_id(user_id)
        if not user:
            return not_found(f"User with ID {user_id} not found")

        username = user_data['username']
        existing = self.get_by_username(username)
        if existing and existing.id != user_id:
            return conflict(f"User with username '{username}' already exists")

        try:
            user.first_name = user_data['first_name']
            user.last_name = user_data['last_name']
            user.username = username
            user.email = user_data['email']
            user.password_hash = hash_password(user_data['password'])
            user.phone_number = user_data.get('phone_number')
            user.address = user_data.get('address')
            user.reading_goal = user_data.get('reading_goal')

            if user.profile is None:
                user.profile = Profile(bio=user_data.get('bio'))
            elif user_data.get('bio') is not None:
                user.profile.bio = user_data['bio']

            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return conflict(f"User with username '{username}' already exists")
        except Exception:
            self.session.rollback()
            raise

        return Ok(user)

    def delete_user(self, user_id: int) -> Result[bool]:
        """Delete a user with their reading progress, shelves and profile.

        Reviews written by the user are kept and detached from them.
        """
        user = self.get_by_id(user_id)
        if not user:
            return not_found(f"User with ID {user_id} not found")

        profile = user.profile
        shelf_ids = [
            shelf_id for (shelf_id,) in
            self.session.query(Bookshelf.id).filter(Bookshelf.user_id == user_id)
        ]

        try:
            self.session.query(BookUser).filter(BookUser.user_id == user_id).delete()
            if shelf_ids:
                self.session.query(BookshelfBook).filter(
                    BookshelfBook.bookshelf_id.in_(shelf_ids)
                ).delete(synchronize_session=False)
            self.session.query(Bookshelf).filter(Bookshelf.user_id == user_id).delete()
            self.session.query(Review).filter(Review.user_id == user_id).update(
                {Review.user_id: None}, synchronize_session=False
            )
            self.session.delete(user)
            self.session.flush()
            if profile is not None:
                self.session.delete(profile)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Deleted user %s and related records", user_id)
        return Ok(True)

    def sign_in(self, username: str, password: str) -> SignInResult:
        """Check a username/password pair against the stored hash.

        Never raises for bad credentials; an unknown username and a wrong
        password produce the same failure message.
        """
        user = self.get_by_username(username)
        if user is None or not verify_password(user.password_hash, password):
            logger.warning("Failed sign-in attempt for %s", username)
            return SignInResult(success=False, message="Invalid username or password")

        return SignInResult(success=True, message="Signed in", user=user)
