"""
Firestore access for exercises and user records.

Read-only. Firestore, credential and transport failures surface as UpstreamError.
"""

import logging
from typing import Any, Dict, List, Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

from workout_mcp.errors import UpstreamError
from workout_mcp.sdk.types import EXERCISES_COLLECTION, USERS_COLLECTION
from workout_mcp.utils import with_deadline

logger = logging.getLogger(__name__)


class FitnessStore:
    """
    Thin async wrapper over a Firestore AsyncClient.

    The client is passed in so tests can substitute a fake.
    """

    def __init__(self, db, timeout: Optional[float] = None):
        self._db = db
        self._timeout = timeout

    async def list_exercises(self, limit: int) -> List[Dict[str, Any]]:
        """
        Fetch up to `limit` exercise records.

        Returns:
            List of record dicts, each with its document id under "id"
        """
        query = self._db.collection(EXERCISES_COLLECTION).limit(limit)
        try:
            snapshots = await with_deadline(query.get(), self._timeout, "exercises query")
        except (GoogleAPIError, GoogleAuthError, OSError, ValueError) as e:
            logger.error(f"Firestore exercises query failed: {e}")
            raise UpstreamError(str(e)) from e
        return [{"id": snap.id, **(snap.to_dict() or {})} for snap in snapshots[:limit]]

    async def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch one user record by document id.

        Returns:
            The record dict, or None when no such document exists
        """
        try:
            ref = self._db.collection(USERS_COLLECTION).document(user_id)
            snap = await with_deadline(ref.get(), self._timeout, "user lookup")
        except (GoogleAPIError, GoogleAuthError, OSError, ValueError) as e:
            logger.error(f"Firestore user lookup failed: {e}")
            raise UpstreamError(str(e)) from e
        if not snap.exists:
            return None
        return snap.to_dict() or {}
