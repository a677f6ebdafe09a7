"""Tests for UserService and GroupService."""

import pytest

from homefin.domain.entities import GroupRole
from homefin.domain.errors import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)


class TestUserService:
    def test_create_user_makes_default_group(self, user_service, group_service):
        user_id = user_service.create_user("Anna@Example.com", "Anna")

        user = user_service.get_user(user_id)
        assert user.email == "anna@example.com"

        default = group_service.get_default_group(user_id)
        assert default.name == "Personal"
        assert default.is_default is True
        assert default.created_by == user_id

        memberships = group_service.list_user_groups(user_id)
        assert len(memberships) == 1
        assert memberships[0][1].role == GroupRole.ADMIN

    def test_duplicate_email(self, user_service, sample_user):
        with pytest.raises(ConflictError, match="already exists"):
            user_service.create_user("ANNA@example.com", "Other Anna")

    def test_invalid_email(self, user_service):
        with pytest.raises(ValidationError):
            user_service.create_user("not-an-email", "Anna")

    def test_require_user(self, user_service, sample_user):
        assert user_service.require_user(" anna@example.com ").id == sample_user.id
        with pytest.raises(NotFoundError):
            user_service.require_user("nobody@example.com")


class TestGroupService:
    def test_group_ids_are_eight_hex_chars(self, group_service, sample_user):
        group_id = group_service.create_group(sample_user.id, "Family")

        assert len(group_id) == 8
        int(group_id, 16)

    def test_creator_becomes_admin(self, group_service, sample_user):
        group_id = group_service.create_group(sample_user.id, "Family")

        member = group_service.require_membership(sample_user.id, group_id)
        assert member.role == GroupRole.ADMIN

    def test_join_group(self, group_service, sample_user, other_user):
        group_id = group_service.create_group(sample_user.id, "Family")

        group_service.join_group(other_user.id, group_id)

        member = group_service.require_membership(other_user.id, group_id)
        assert member.role == GroupRole.MEMBER

    def test_join_twice_conflicts(self, group_service, sample_user, sample_group):
        with pytest.raises(ConflictError, match="already a member"):
            group_service.join_group(sample_user.id, sample_group)

    def test_join_unknown_group(self, group_service, sample_user):
        with pytest.raises(NotFoundError):
            group_service.join_group(sample_user.id, "deadbeef")

    def test_non_member_is_denied(self, group_service, sample_group, other_user):
        with pytest.raises(PermissionDeniedError):
            group_service.require_membership(other_user.id, sample_group)

    def test_set_default_group_keeps_single_default(
        self, group_service, sample_user, sample_group
    ):
        family = group_service.create_group(sample_user.id, "Family")

        group_service.set_default_group(sample_user.id, family)

        defaults = [
            grp for grp, _member in group_service.list_user_groups(sample_user.id)
            if grp.is_default
        ]
        assert [grp.id for grp in defaults] == [family]
        assert group_service.resolve_group(sample_user.id) == family

    def test_only_creator_sets_default(self, group_service, sample_user, other_user):
        family = group_service.create_group(sample_user.id, "Family")
        group_service.join_group(other_user.id, family)

        with pytest.raises(PermissionDeniedError):
            group_service.set_default_group(other_user.id, family)

    def test_resolve_group_explicit(self, group_service, sample_user, other_user, sample_group):
        assert group_service.resolve_group(sample_user.id, sample_group) == sample_group
        with pytest.raises(PermissionDeniedError):
            group_service.resolve_group(other_user.id, sample_group)

    def test_empty_name(self, group_service, sample_user):
        with pytest.raises(ValidationError):
            group_service.create_group(sample_user.id, "  ")
