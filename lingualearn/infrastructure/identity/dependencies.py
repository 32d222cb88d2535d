"""FastAPI dependencies for identity."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from lingualearn.domain.common.value_objects import UserId
from lingualearn.infrastructure.identity.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> UserId | None:
    """
    Resolve the caller from the bearer token.

    Anonymous and invalid tokens both resolve to None; the row-level policies
    decide what such a caller may do, which is nothing.
    """
    if credentials is None:
        return None
    return verify_access_token(credentials.credentials)


CurrentIdentity = Annotated[UserId | None, Depends(get_current_identity)]
