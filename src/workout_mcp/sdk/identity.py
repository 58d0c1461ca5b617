"""
Firebase ID token verification.

One verification per request, no retries. Any rejection is an
InvalidTokenError; a missing token is an UnauthenticatedError.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from firebase_admin import auth as firebase_auth
from firebase_admin import exceptions as firebase_exceptions
from google.auth.exceptions import GoogleAuthError

from workout_mcp.errors import InvalidTokenError, UnauthenticatedError, UpstreamError
from workout_mcp.utils import with_deadline

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class VerifiedIdentity:
    """Subject proven by a verified token. Lives for one request."""
    subject_id: str


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an 'Authorization: Bearer <token>' header value."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


class FirebaseTokenVerifier:
    """Verifies Firebase ID tokens against a firebase_admin app."""

    def __init__(self, app=None, timeout: Optional[float] = None):
        self._app = app
        self._timeout = timeout

    async def verify(self, token: Optional[str]) -> VerifiedIdentity:
        """
        Verify a raw bearer token.

        Raises:
            UnauthenticatedError: If no token was given
            InvalidTokenError: If verification fails for any reason
        """
        if not token:
            raise UnauthenticatedError("Missing Firebase ID token")
        try:
            # verify_id_token is blocking (it may fetch signing certificates)
            decoded = await with_deadline(
                asyncio.to_thread(firebase_auth.verify_id_token, token, app=self._app),
                self._timeout,
                "token verification",
            )
        except (
            ValueError,
            firebase_exceptions.FirebaseError,
            GoogleAuthError,
            UpstreamError,
        ) as e:
            logger.warning(f"ID token verification failed: {e}")
            raise InvalidTokenError("Invalid Firebase ID token") from e

        uid = decoded.get("uid") or decoded.get("sub")
        if not uid:
            raise InvalidTokenError("Invalid Firebase ID token")
        return VerifiedIdentity(subject_id=uid)
