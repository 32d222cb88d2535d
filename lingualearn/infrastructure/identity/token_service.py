"""Access token verification."""

from uuid import UUID

import jwt
from jwt import InvalidTokenError

from lingualearn.config import get_settings
from lingualearn.domain.common.value_objects import UserId


def verify_access_token(token: str) -> UserId | None:
    """
    Verify an access token issued by the session provider.

    Returns:
        The subject as a UserId, or None if the token is invalid, expired,
        carries no expiry, is issued for another audience or carries no UUID
        subject
    """
    settings = get_settings()
    if not settings.JWT_SECRET:
        return None
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            options={"require": ["exp", "sub"]},
        )
        subject = payload.get("sub")
        if subject is None:
            return None
        return UserId(UUID(str(subject)))
    except (InvalidTokenError, ValueError):
        return None
