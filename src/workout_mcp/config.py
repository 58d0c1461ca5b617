"""
Environment-sourced configuration.

Settings are read once at startup. A .env file in the working directory is
loaded first; variables already set in the environment win.

Environment variables:
- FIREBASE_SERVICE_ACCOUNT: service-account JSON, inline
- FIREBASE_SERVICE_ACCOUNT_FILE: path to the service-account JSON file,
  used when the inline form is absent (default: firebase-service-account.json)
- OPENAI_API_KEY: completion service key (required)
- OPENAI_MODEL: completion model (default: gpt-4)
- HOST / PORT: REST listen address (default: 0.0.0.0 / 3000)
- MCP_TRANSPORT: 'stdio' (default) or 'rest'
- UPSTREAM_TIMEOUT_SECONDS: deadline for outbound calls (default: 30)
- LOG_LEVEL: root log level (default: INFO)
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from workout_mcp.errors import ConfigError

DEFAULT_SERVICE_ACCOUNT_FILE = "firebase-service-account.json"
DEFAULT_MODEL = "gpt-4"
DEFAULT_PORT = 3000
DEFAULT_TIMEOUT_SECONDS = 30.0
TRANSPORTS = ("stdio", "rest")


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration."""
    firebase_credentials: dict = field(repr=False)
    openai_api_key: str = field(repr=False)
    openai_model: str = DEFAULT_MODEL
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    transport: str = "stdio"
    upstream_timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (no .env loading then)

    Returns:
        Populated Settings

    Raises:
        ConfigError: If credentials are missing or any value is malformed
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    api_key = env.get("OPENAI_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("OPENAI_API_KEY is not set")

    transport = env.get("MCP_TRANSPORT", "stdio").strip().lower()
    if transport not in TRANSPORTS:
        raise ConfigError(
            f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}"
        )

    return Settings(
        firebase_credentials=_load_firebase_credentials(env),
        openai_api_key=api_key,
        openai_model=env.get("OPENAI_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
        host=env.get("HOST", "0.0.0.0"),
        port=_parse_number(env, "PORT", DEFAULT_PORT, int),
        transport=transport,
        upstream_timeout=_parse_number(env, "UPSTREAM_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS, float),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )


def _load_firebase_credentials(env: Mapping[str, str]) -> dict:
    """Service account from inline JSON, else from the credentials file."""
    inline = env.get("FIREBASE_SERVICE_ACCOUNT", "").strip()
    if inline:
        try:
            creds = json.loads(inline)
        except json.JSONDecodeError as e:
            raise ConfigError(f"FIREBASE_SERVICE_ACCOUNT is not valid JSON: {e}") from e
    else:
        path = Path(env.get("FIREBASE_SERVICE_ACCOUNT_FILE", DEFAULT_SERVICE_ACCOUNT_FILE))
        if not path.is_file():
            raise ConfigError(
                "Firebase credentials not found: set FIREBASE_SERVICE_ACCOUNT "
                f"or provide {path}"
            )
        try:
            with open(path, "r") as f:
                creds = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise ConfigError(f"Could not read Firebase credentials from {path}: {e}") from e

    if not isinstance(creds, dict):
        raise ConfigError("Firebase service account must be a JSON object")
    return creds


def _parse_number(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from e
    if value < 0:
        raise ConfigError(f"{key} must not be negative")
    return value
