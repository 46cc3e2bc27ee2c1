"""
FastAPI dependencies for authentication and service injection.

get_current_identity is the single gate in front of every protected route:
no handler below it runs without a verified identity.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobtracker.core.errors import ExpiredToken, InvalidToken, Unauthenticated
from jobtracker.core.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>).
# auto_error is off so every failure goes through Unauthenticated (401).
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """Verified caller for the lifetime of one request."""
    user_id: UUID
    name: str


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> Identity:
    """
    Extract and verify the bearer token of the current request.

    Raises:
        Unauthenticated: header missing or malformed, token empty,
            invalid or expired
    """
    if credentials is None or not credentials.credentials.strip():
        raise Unauthenticated()

    try:
        claims = token_service.verify(credentials.credentials.strip())
        user_id = UUID(claims.user_id)
    except ExpiredToken:
        logger.info("Rejected expired token")
        raise Unauthenticated()
    except (InvalidToken, ValueError) as e:
        logger.warning(f"Rejected invalid token: {type(e).__name__}")
        raise Unauthenticated()

    return Identity(user_id=user_id, name=claims.name)
