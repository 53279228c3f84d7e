"""
Unit tests for the authorization policy functions.
"""

from healthtrack.core import policy
from healthtrack.models import Principal


class TestPrimitives:
    """Tests for can_act_as_owner and is_admin."""

    def test_owner_matches_username(self, testuser):
        assert policy.can_act_as_owner(testuser, "testuser") is True

    def test_owner_is_case_sensitive(self, testuser):
        assert policy.can_act_as_owner(testuser, "TestUser") is False

    def test_other_user_is_not_owner(self, other_user):
        assert policy.can_act_as_owner(other_user, "testuser") is False

    def test_admin_role(self, admin):
        assert policy.is_admin(admin) is True

    def test_user_role_is_not_admin(self, regular_user):
        assert policy.is_admin(regular_user) is False

    def test_no_roles_is_not_admin(self, testuser):
        assert policy.is_admin(testuser) is False

    def test_admin_role_among_others(self):
        principal = Principal(username="ops", roles={"ROLE_USER", "ROLE_ADMIN"})
        assert policy.is_admin(principal) is True


class TestCompositeRules:
    """Tests for the create/read/delete rules built on the primitives."""

    def test_create_is_owner_only(self, testuser, other_user, admin):
        assert policy.may_create(testuser, "testuser") is True
        assert policy.may_create(other_user, "testuser") is False
        # No admin override for creation
        assert policy.may_create(admin, "testuser") is False

    def test_read_is_owner_or_admin(self, testuser, other_user, admin):
        assert policy.may_read(testuser, "testuser") is True
        assert policy.may_read(admin, "testuser") is True
        assert policy.may_read(other_user, "testuser") is False

    def test_delete_is_admin_only(self, regular_user, admin):
        assert policy.may_delete(admin) is True
        assert policy.may_delete(regular_user) is False
