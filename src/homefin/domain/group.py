"""Group and membership domain service."""

import secrets
from typing import Optional

from homefin.database.base import Database
from homefin.domain.entities import Group, GroupMember, GroupRole
from homefin.domain.errors import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    group_not_found,
    not_a_member,
)


def generate_group_id() -> str:
    """Return a short random group identifier that users can share to join."""
    return secrets.token_hex(4)


class GroupService:
    """Service for managing groups and memberships."""

    def __init__(self, db: Database):
        """Initialize group service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_group(self, user_id: str, name: str, is_default: bool = False) -> str:
        """Create a group and add its creator as admin.

        Args:
            user_id: Creating user ID
            name: Group name
            is_default: Make this the creator's default group

        Returns:
            Group ID

        Raises:
            ValidationError: If name is empty
        """
        if not name or not name.strip():
            raise ValidationError("Group name cannot be empty")

        group_id = generate_group_id()
        self.db.create_group(group_id=group_id, name=name.strip(), created_by=user_id)
        self.db.add_group_member(group_id=group_id, user_id=user_id, role=GroupRole.ADMIN)
        if is_default:
            self.db.set_default_group(user_id=user_id, group_id=group_id)
        return group_id

    def join_group(self, user_id: str, group_id: str) -> None:
        """Join an existing group as a member.

        Raises:
            NotFoundError: If the group does not exist
            ConflictError: If the user is already a member
        """
        if self.db.get_group(group_id) is None:
            raise NotFoundError(group_not_found(group_id))
        if self.db.get_group_member(group_id, user_id) is not None:
            raise ConflictError("You are already a member of this group")
        self.db.add_group_member(group_id=group_id, user_id=user_id, role=GroupRole.MEMBER)

    def list_user_groups(self, user_id: str) -> list[tuple[Group, GroupMember]]:
        """List the user's groups with their membership rows."""
        return self.db.list_user_memberships(user_id)

    def get_default_group(self, user_id: str) -> Optional[Group]:
        """Return the default group created by the user, if any."""
        for group, _member in self.db.list_user_memberships(user_id):
            if group.is_default and group.created_by == user_id:
                return group
        return None

    def set_default_group(self, user_id: str, group_id: str) -> None:
        """Make a group the user's single default group.

        All other defaults of the user are cleared first, in the same
        database transaction.

        Raises:
            NotFoundError: If the group does not exist
            PermissionDeniedError: If the user did not create the group
        """
        group = self.db.get_group(group_id)
        if group is None:
            raise NotFoundError(group_not_found(group_id))
        if group.created_by != user_id:
            raise PermissionDeniedError("Only the group creator can make it a default group")
        self.db.set_default_group(user_id=user_id, group_id=group_id)

    def require_membership(self, user_id: str, group_id: str) -> GroupMember:
        """Return the user's membership or raise.

        Raises:
            NotFoundError: If the group does not exist
            PermissionDeniedError: If the user is not a member
        """
        if self.db.get_group(group_id) is None:
            raise NotFoundError(group_not_found(group_id))
        member = self.db.get_group_member(group_id, user_id)
        if member is None:
            raise PermissionDeniedError(not_a_member(group_id))
        return member

    def resolve_group(self, user_id: str, group_id: Optional[str] = None) -> str:
        """Resolve the group a user acts in.

        Args:
            user_id: Acting user ID
            group_id: Explicit group, or None for the user's default group

        Returns:
            Group ID

        Raises:
            NotFoundError: If no group is given and the user has no default
            PermissionDeniedError: If the user is not a member of the group
        """
        if group_id is None:
            default_group = self.get_default_group(user_id)
            if default_group is None:
                raise NotFoundError("Default group not found")
            return default_group.id
        self.require_membership(user_id, group_id)
        return group_id
