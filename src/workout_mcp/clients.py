"""
Service construction for the workout MCP server.

Builds the long-lived service clients once at startup and hands them out
explicitly. Nothing here is a module-level singleton: create_services()
returns a Services bundle that the app factories take as an argument, so
tests can pass fakes instead.
"""

import logging
from dataclasses import dataclass

import firebase_admin
from firebase_admin import credentials as firebase_credentials
from firebase_admin import firestore_async
from openai import AsyncOpenAI

from workout_mcp.config import Settings
from workout_mcp.dispatcher import ToolDispatcher, create_dispatcher
from workout_mcp.errors import ConfigError
from workout_mcp.sdk.completions import CompletionClient
from workout_mcp.sdk.identity import FirebaseTokenVerifier
from workout_mcp.sdk.store import FitnessStore

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Long-lived clients shared by all requests. Safe for concurrent reads."""
    store: FitnessStore
    completions: CompletionClient
    verifier: FirebaseTokenVerifier

    def dispatcher(self) -> ToolDispatcher:
        return create_dispatcher(self.store, self.completions)


def init_firebase(service_account: dict):
    """
    Initialize (or reuse) the default firebase_admin app.

    Args:
        service_account: Parsed service-account JSON

    Returns:
        The firebase_admin App

    Raises:
        ConfigError: If the service account is rejected
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass  # no default app yet

    try:
        cred = firebase_credentials.Certificate(service_account)
        app = firebase_admin.initialize_app(cred)
    except (ValueError, OSError) as e:
        logger.error(f"Failed to initialize Firebase: {e}")
        raise ConfigError(f"Invalid Firebase service account: {e}") from e

    logger.info("Firebase initialized successfully")
    return app


def create_services(settings: Settings) -> Services:
    """Build every external client from settings."""
    app = init_firebase(settings.firebase_credentials)
    store = FitnessStore(firestore_async.client(app), timeout=settings.upstream_timeout)

    # The deadline is enforced by with_deadline; retries stay off.
    openai_client = AsyncOpenAI(api_key=settings.openai_api_key, max_retries=0)
    completions = CompletionClient(
        openai_client,
        model=settings.openai_model,
        timeout=settings.upstream_timeout,
    )
    logger.info(f"OpenAI initialized successfully (model: {settings.openai_model})")

    verifier = FirebaseTokenVerifier(app, timeout=settings.upstream_timeout)
    return Services(store=store, completions=completions, verifier=verifier)
