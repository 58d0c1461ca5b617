"""Tests for sdk/identity.py: bearer parsing and Firebase token verification."""

import pytest
from unittest.mock import patch
from google.auth.exceptions import TransportError

from workout_mcp.errors import InvalidTokenError, UnauthenticatedError
from workout_mcp.sdk.identity import FirebaseTokenVerifier, VerifiedIdentity, bearer_token


class TestBearerToken:
    def test_extracts_token(self):
        assert bearer_token("Bearer abc.def") == "abc.def"

    def test_missing_header(self):
        assert bearer_token(None) is None
        assert bearer_token("") is None

    def test_wrong_scheme(self):
        assert bearer_token("Basic dXNlcjpwYXNz") is None

    def test_empty_token(self):
        assert bearer_token("Bearer ") is None


@pytest.mark.asyncio
async def test_verify_returns_identity():
    with patch("workout_mcp.sdk.identity.firebase_auth") as mock_auth:
        mock_auth.verify_id_token.return_value = {"uid": "abc", "email": "a@b.c"}
        identity = await FirebaseTokenVerifier(app="app").verify("tok")

    assert identity == VerifiedIdentity(subject_id="abc")
    mock_auth.verify_id_token.assert_called_once_with("tok", app="app")


@pytest.mark.asyncio
async def test_missing_token():
    with pytest.raises(UnauthenticatedError, match="Missing Firebase ID token"):
        await FirebaseTokenVerifier().verify(None)


@pytest.mark.asyncio
async def test_rejected_token():
    with patch("workout_mcp.sdk.identity.firebase_auth") as mock_auth:
        mock_auth.verify_id_token.side_effect = ValueError("Token expired")
        with pytest.raises(InvalidTokenError, match="Invalid Firebase ID token"):
            await FirebaseTokenVerifier().verify("expired")


@pytest.mark.asyncio
async def test_token_without_uid():
    with patch("workout_mcp.sdk.identity.firebase_auth") as mock_auth:
        mock_auth.verify_id_token.return_value = {}
        with pytest.raises(InvalidTokenError):
            await FirebaseTokenVerifier().verify("tok")


@pytest.mark.asyncio
async def test_certificate_fetch_failure_is_invalid_token():
    with patch("workout_mcp.sdk.identity.firebase_auth") as mock_auth:
        mock_auth.verify_id_token.side_effect = TransportError("certs unreachable")
        with pytest.raises(InvalidTokenError, match="Invalid Firebase ID token"):
            await FirebaseTokenVerifier().verify("tok")
