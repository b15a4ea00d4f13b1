"""Unit tests for the forwarded identity headers."""

from uuid import uuid4

import pytest

from learnhub.domain.value import UserRole
from learnhub.interface.api.identity import read_identity
from learnhub.interface.error import AuthenticationError


class TestReadIdentity:
    """Tests for read_identity."""

    def test_student_by_default(self):
        user_id = str(uuid4())

        user = read_identity(user_id, None)

        assert user.user_id == user_id
        assert user.role is UserRole.STUDENT

    def test_role_is_case_insensitive(self):
        user = read_identity(str(uuid4()), "Moderator")

        assert user.role is UserRole.MODERATOR
        assert user.role.can_moderate

    @pytest.mark.parametrize("user_id", [None, "", "  "])
    def test_missing_user(self, user_id):
        with pytest.raises(AuthenticationError, match="Not authenticated"):
            read_identity(user_id, None)

    def test_malformed_user(self):
        with pytest.raises(AuthenticationError, match="Invalid user identity"):
            read_identity("alice", None)

    def test_unknown_role(self):
        with pytest.raises(AuthenticationError, match="Unknown role"):
            read_identity(str(uuid4()), "superuser")
