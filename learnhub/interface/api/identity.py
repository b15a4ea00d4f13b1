"""Identity forwarded by the external authentication layer.

Authentication happens upstream; the gateway forwards the authenticated
user as ``X-User-Id`` and ``X-User-Role`` headers.
"""

from uuid import UUID

from fastapi import Header
from pydantic import BaseModel

from learnhub.domain.value import UserRole
from learnhub.interface.error import AuthenticationError, to_http_exception


class CurrentUser(BaseModel):
    """Authenticated user of the current request."""

    user_id: str
    role: UserRole = UserRole.STUDENT


def read_identity(user_id: str | None, role: str | None) -> CurrentUser:
    """Validate forwarded identity headers.

    Raises:
        AuthenticationError: If the user ID is missing or malformed, or the
            role is unknown
    """
    if not user_id or not user_id.strip():
        raise AuthenticationError("Not authenticated")
    try:
        parsed = UUID(user_id.strip())
    except ValueError:
        raise AuthenticationError("Invalid user identity") from None
    try:
        parsed_role = UserRole(role.strip().lower()) if role else UserRole.STUDENT
    except ValueError:
        raise AuthenticationError(f"Unknown role: {role}") from None
    return CurrentUser(user_id=str(parsed), role=parsed_role)


def get_current_user(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> CurrentUser:
    """FastAPI dependency returning the authenticated user (401 otherwise)."""
    try:
        return read_identity(x_user_id, x_user_role)
    except AuthenticationError as e:
        raise to_http_exception(e)


def get_optional_user(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> CurrentUser | None:
    """Like ``get_current_user``, but anonymous requests give None."""
    if x_user_id is None:
        return None
    return get_current_user(x_user_id, x_user_role)
