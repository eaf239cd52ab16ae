"""
Bearer token authentication for write endpoints.
Never log tokens or raw Authorization headers.
"""
import hmac
from enum import Enum

from fastapi import HTTPException, Request, status

from app.core.config import get_settings
from app.core.logging import get_safe_logger

logger = get_safe_logger(__name__)


class AuthErrorCode(str, Enum):
    """Error codes for authentication failures, safe to log and return."""
    NO_AUTH_HEADER = "NO_AUTH_HEADER"
    INVALID_AUTH_FORMAT = "INVALID_AUTH_FORMAT"
    TOKEN_INVALID = "TOKEN_INVALID"


def extract_bearer_token(request: Request) -> str:
    """
    Extract Bearer token from Authorization header.

    Raises:
        HTTPException: If header is missing or malformed
    """
    auth_header = request.headers.get("Authorization")

    if not auth_header:
        logger.warning("Missing authorization header", error_code=AuthErrorCode.NO_AUTH_HEADER.value)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header"
        )

    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.warning("Invalid authorization header format", error_code=AuthErrorCode.INVALID_AUTH_FORMAT.value)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format. Expected: Bearer <token>"
        )

    return parts[1].strip()


def verify_api_token(token: str) -> None:
    """
    Compare token against the configured API token.

    Raises:
        HTTPException 401: token does not match
    """
    expected = get_settings().api_token
    if not hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Token verification failed", error_code=AuthErrorCode.TOKEN_INVALID.value)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication failed ({AuthErrorCode.TOKEN_INVALID.value})"
        )


async def verify_auth_header(request: Request) -> None:
    """
    Route dependency that checks the bearer token before the body is read.

    Raises:
        HTTPException 401: token missing, malformed or invalid
    """
    token = extract_bearer_token(request)
    verify_api_token(token)
