"""
Shared route dependencies: per-app stores and public read checks.
"""
import json
from typing import Any, Callable

from fastapi import HTTPException, Request, status

from app.core.logging import get_safe_logger
from app.services.exceptions import ValidationError
from app.services.permissions import PUBLIC_ROLE_TYPE, PermissionStore, permission_action
from app.services.repository import ContentRepository

logger = get_safe_logger(__name__)


def get_repository(request: Request) -> ContentRepository:
    return request.app.state.repository


def get_permission_store(request: Request) -> PermissionStore:
    return request.app.state.permission_store


async def read_json_body(request: Request) -> Any:
    # Parsed by hand: services run their own runtime shape checks
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError("invalid JSON", field="body") from exc


def require_public(collection: str, action: str) -> Callable:
    """
    Dependency factory: reject the request unless the public role holds
    the permission for collection/action.
    """
    action_uid = permission_action(collection, action)

    async def _check(request: Request) -> None:
        store = get_permission_store(request)
        if not await store.is_allowed(PUBLIC_ROLE_TYPE, action_uid):
            logger.warning(
                "Public read denied",
                collection=collection,
                action=action,
                status_code=403
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden"
            )

    return _check
