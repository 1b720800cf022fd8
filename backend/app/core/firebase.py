"""
Firebase Admin integration for ID token verification.

The identity provider issues the tokens; this backend only verifies them
and reads the subject id, email and display name.
"""

import json
import logging
from typing import Optional

import firebase_admin
from firebase_admin import auth, credentials
from starlette.concurrency import run_in_threadpool

from backend.app.core.config import Settings, settings
from backend.app.core.exceptions import AuthServiceUnavailableError, InvalidTokenError
from backend.app.schemas.driver import DriverIdentity

logger = logging.getLogger(__name__)


def initialize_firebase(config: Settings = settings) -> bool:
    """
    Initialize the default Firebase app from the configured service account.

    The credential is either a serialized JSON document
    (FIREBASE_SERVICE_ACCOUNT) or a path to one (FIREBASE_CREDENTIALS_FILE).

    Returns:
        True if an app is available after the call, False otherwise
    """
    if firebase_admin._apps:
        return True

    if config.firebase_service_account:
        try:
            cred = credentials.Certificate(json.loads(config.firebase_service_account))
        except ValueError as e:
            logger.error("FIREBASE_SERVICE_ACCOUNT is not a valid service account JSON: %s", e)
            return False
    elif config.firebase_credentials_file:
        cred = credentials.Certificate(config.firebase_credentials_file)
    else:
        logger.warning("Firebase credentials not configured; protected routes will answer 503.")
        return False

    firebase_admin.initialize_app(cred)
    logger.info("Firebase initialized successfully")
    return True


class FirebaseTokenVerifier:
    """
    Verifies Firebase ID tokens and maps them to a DriverIdentity.

    verify_id_token may fetch Google's public certificates over HTTP, so it
    runs in the threadpool instead of on the event loop.
    """

    def __init__(self, check_revoked: bool = False):
        self.check_revoked = check_revoked

    def _app(self) -> Optional[firebase_admin.App]:
        try:
            return firebase_admin.get_app()
        except ValueError:
            return None

    def _verify(self, token: str) -> dict:
        app = self._app()
        if app is None:
            raise AuthServiceUnavailableError("Token verifier is not configured")
        try:
            return auth.verify_id_token(token, app=app, check_revoked=self.check_revoked)
        except auth.CertificateFetchError as e:
            logger.error("Could not fetch token certificates: %s", e)
            raise AuthServiceUnavailableError()
        except (auth.InvalidIdTokenError, auth.UserDisabledError, ValueError) as e:
            # ExpiredIdTokenError and RevokedIdTokenError are InvalidIdTokenError subclasses
            logger.info("Rejected ID token: %s", e)
            raise InvalidTokenError()

    async def verify(self, token: str) -> DriverIdentity:
        claims = await run_in_threadpool(self._verify, token)
        return DriverIdentity(
            uid=claims["uid"],
            email=claims.get("email"),
            name=claims.get("name"),
        )
