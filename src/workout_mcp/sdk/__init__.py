"""
Service SDK.

Thin async wrappers over the external services: Firestore (records),
Firebase Auth (identity) and OpenAI (completions). Each wrapper takes its
underlying client in the constructor.
"""

from workout_mcp.sdk.store import FitnessStore
from workout_mcp.sdk.completions import CompletionClient
from workout_mcp.sdk.identity import FirebaseTokenVerifier, VerifiedIdentity, bearer_token

__all__ = [
    "FitnessStore",
    "CompletionClient",
    "FirebaseTokenVerifier",
    "VerifiedIdentity",
    "bearer_token",
]
