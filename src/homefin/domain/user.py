"""User domain service."""

import uuid
from typing import Optional

from homefin.database.base import Database
from homefin.domain.entities import User
from homefin.domain.errors import ConflictError, NotFoundError, ValidationError
from homefin.domain.group import GroupService

DEFAULT_GROUP_NAME = "Personal"


class UserService:
    """Service for registering and looking up users."""

    def __init__(self, db: Database):
        """Initialize user service.

        Args:
            db: Database instance
        """
        self.db = db
        self.group_service = GroupService(db)

    def create_user(self, email: str, name: str) -> str:
        """Register a user together with a personal default group.

        Args:
            email: Unique email
            name: Display name

        Returns:
            User ID

        Raises:
            ValidationError: If email or name is empty
            ConflictError: If the email is taken
        """
        email = email.strip().lower() if email else ""
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email: '{email}'")
        if not name or not name.strip():
            raise ValidationError("User name cannot be empty")
        if self.db.get_user_by_email(email) is not None:
            raise ConflictError(f"User with email '{email}' already exists")

        user_id = uuid.uuid4().hex
        self.db.create_user(user_id=user_id, email=email, name=name.strip())
        self.group_service.create_group(user_id, DEFAULT_GROUP_NAME, is_default=True)
        return user_id

    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        return self.db.get_user(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return self.db.get_user_by_email(email.strip().lower())

    def require_user(self, email: str) -> User:
        """Get user by email or raise NotFoundError."""
        user = self.get_user_by_email(email)
        if user is None:
            raise NotFoundError(f"User '{email}' not found")
        return user
