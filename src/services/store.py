"""SQLAlchemy-backed persistence for users and posts."""

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import ConflictError, ServerError
from src.models.post import Post
from src.models.user import User

logger = logging.getLogger(__name__)

# SQLite integer keys are signed 64-bit
MAX_ROW_ID = 2**63 - 1


class CredentialStore:
    """User and post records for a single request's session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """Create a user. Raises ConflictError if the email is taken."""
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Email address already exists") from None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create user: {e}")
            raise ServerError(str(e)) from e
        self.db.refresh(user)
        return user

    def find_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def find_user_by_id(self, user_id: int) -> User | None:
        """Get a user by id. Ids outside the integer column range match nothing."""
        if not -MAX_ROW_ID - 1 <= user_id <= MAX_ROW_ID:
            return None
        return self.db.query(User).filter(User.id == user_id).first()

    def update_user_token(self, user_id: int, token: str, expiration: datetime) -> None:
        """Persist the current token and its expiry on the user row."""
        try:
            updated = (
                self.db.query(User)
                .filter(User.id == user_id)
                .update({User.token: token, User.token_expiration: expiration})
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to store token for user {user_id}: {e}")
            raise ServerError(str(e)) from e
        if updated == 0:
            raise ServerError(f"User {user_id} vanished before token update")

    def create_post(self, title: str, content: str, owner_id: int) -> Post:
        """Create a post owned by an existing user."""
        post = Post(title=title, content=content, author_id=owner_id)
        self.db.add(post)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create post for user {owner_id}: {e}")
            raise ServerError(str(e)) from e
        self.db.refresh(post)
        return post

    def list_posts_by_owner(self, owner_id: int) -> list[Post]:
        """Get all posts written by a user, oldest first."""
        return self.db.query(Post).filter(Post.author_id == owner_id).order_by(Post.id).all()
