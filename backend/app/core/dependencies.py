"""
Authentication dependencies for FastAPI.

This module provides dependencies for protecting routes with Firebase ID
token verification.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from backend.app.core.config import settings
from backend.app.core.exceptions import AuthenticationError
from backend.app.core.firebase import FirebaseTokenVerifier
from backend.app.schemas.driver import DriverIdentity

# HTTP Bearer security scheme; a missing header is reported by get_current_driver
security = HTTPBearer(auto_error=False)

token_verifier = FirebaseTokenVerifier(check_revoked=settings.firebase_check_revoked)


def get_token_verifier() -> FirebaseTokenVerifier:
    """Token verifier dependency (overridden in tests)."""
    return token_verifier


async def get_current_driver(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: FirebaseTokenVerifier = Depends(get_token_verifier),
) -> DriverIdentity:
    """
    FastAPI dependency for bearer token authentication.

    Runs before any database session is opened for the request.

    Returns:
        Identity of the caller; its uid is the driver id used to scope queries

    Raises:
        AuthenticationError: 401 if no bearer token was sent
        InvalidTokenError: 403 if the identity provider rejects the token
        AuthServiceUnavailableError: 503 if the token cannot be verified at all
    """
    if credentials is None:
        raise AuthenticationError()

    identity = await verifier.verify(credentials.credentials)
    request.state.driver = identity
    return identity
