"""
Unit tests for auth module.
Tests use dummy tokens, never real credentials.
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException, Request

from app.core.auth import (
    AuthErrorCode,
    extract_bearer_token,
    verify_api_token,
    verify_auth_header,
)


def _request(header):
    mock_request = MagicMock(spec=Request)
    mock_request.headers.get.return_value = header
    return mock_request


class TestExtractBearerToken:
    """Tests for extract_bearer_token function."""

    def test_missing_authorization_header(self):
        """Should return 401 with 'Missing Authorization header' message."""
        with pytest.raises(HTTPException) as exc_info:
            extract_bearer_token(_request(None))

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Missing Authorization header"

    def test_invalid_format_no_bearer(self):
        with pytest.raises(HTTPException) as exc_info:
            extract_bearer_token(_request("Basic abc123"))

        assert exc_info.value.status_code == 401
        assert "Invalid Authorization header format" in exc_info.value.detail

    def test_invalid_format_extra_parts(self):
        with pytest.raises(HTTPException) as exc_info:
            extract_bearer_token(_request("Bearer token extra"))

        assert exc_info.value.status_code == 401

    def test_valid_bearer_token(self):
        assert extract_bearer_token(_request("Bearer valid_token_here")) == "valid_token_here"

    def test_bearer_case_insensitive(self):
        assert extract_bearer_token(_request("BEARER valid_token")) == "valid_token"


class TestVerifyApiToken:
    """Tests for verify_api_token function."""

    @patch("app.core.auth.get_settings")
    def test_matching_token(self, mock_settings):
        mock_settings.return_value = MagicMock(api_token="s3cret")
        verify_api_token("s3cret")

    @patch("app.core.auth.get_settings")
    def test_wrong_token_returns_401_with_error_code(self, mock_settings):
        mock_settings.return_value = MagicMock(api_token="s3cret")

        with pytest.raises(HTTPException) as exc_info:
            verify_api_token("guess")

        assert exc_info.value.status_code == 401
        assert AuthErrorCode.TOKEN_INVALID.value in exc_info.value.detail


class TestVerifyAuthHeader:

    @pytest.mark.asyncio
    @patch("app.core.auth.get_settings")
    async def test_accepts_configured_token(self, mock_settings):
        mock_settings.return_value = MagicMock(api_token="s3cret")
        await verify_auth_header(_request("Bearer s3cret"))

    @pytest.mark.asyncio
    @patch("app.core.auth.get_settings")
    async def test_rejects_missing_header(self, mock_settings):
        mock_settings.return_value = MagicMock(api_token="s3cret")
        with pytest.raises(HTTPException) as exc_info:
            await verify_auth_header(_request(None))
        assert exc_info.value.status_code == 401
