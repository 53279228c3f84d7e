"""
Authentication utilities - turn a bearer token into a Principal.

Tokens are issued by the external identity provider; this module only
verifies them.
"""

from typing import Any, FrozenSet, Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ..config import settings
from ..models import Principal

# Missing credentials are reported as 401 below, not by the scheme itself
security = HTTPBearer(auto_error=False)

USERNAME_CLAIMS = ("sub", "username", "preferred_username")


def _extract_roles(claim: Any) -> FrozenSet[str]:
    """Roles may be a JSON list or a space-separated string."""
    if claim is None:
        return frozenset()
    if isinstance(claim, str):
        return frozenset(claim.split())
    if isinstance(claim, (list, tuple, set)):
        return frozenset(str(role) for role in claim)
    return frozenset()


def decode_principal(token: str) -> Optional[Principal]:
    """
    Decode and verify a JWT access token.

    Args:
        token: JWT token string

    Returns:
        Optional[Principal]: The caller's identity if the token is valid
        and names a user, None otherwise
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None

    username = next(
        (payload[claim] for claim in USERNAME_CLAIMS if payload.get(claim)),
        None
    )
    if not isinstance(username, str):
        return None

    return Principal(
        username=username,
        roles=_extract_roles(payload.get(settings.roles_claim))
    )


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Principal:
    """
    Dependency that yields the authenticated principal.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    principal = decode_principal(credentials.credentials)
    if principal is None:
        raise credentials_exception

    return principal
