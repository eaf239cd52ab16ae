"""
Public read permission bootstrap.

ensure_public_read() reconciles the permission store so that the public
role can call find/findOne on the configured collections. It is idempotent:
re-running never duplicates a permission or disables an enabled one.
All state lives in the store.
"""
import asyncio
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from app.core.logging import get_safe_logger

logger = get_safe_logger(__name__)

PUBLIC_ROLE_TYPE = "public"
PUBLIC_READ_ACTIONS = ("find", "findOne")


@dataclass
class Role:
    id: int
    type: str
    name: str = ""


@dataclass
class Permission:
    id: int
    action: str
    role_id: int
    enabled: bool = True


@dataclass
class ReconcileSummary:
    created: int = 0
    enabled: int = 0
    unchanged: int = 0
    actions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, int]:
        return {
            "created": self.created,
            "enabled": self.enabled,
            "unchanged": self.unchanged,
        }


def permission_action(collection: str, action: str) -> str:
    """Permission action uid, e.g. api::institution.institution.find"""
    return f"api::{collection}.{collection}.{action}"


class PermissionStore:
    """Base class for permission storage backends."""

    async def find_role(self, role_type: str) -> Optional[Role]:
        raise NotImplementedError

    async def find_permission(self, action: str, role_id: int) -> Optional[Permission]:
        raise NotImplementedError

    async def create_permission(self, action: str, role_id: int, enabled: bool) -> Permission:
        raise NotImplementedError

    async def update_permission(self, permission_id: int, enabled: bool) -> Permission:
        raise NotImplementedError

    async def is_allowed(self, role_type: str, action: str) -> bool:
        """True when the role holds an enabled permission for action."""
        role = await self.find_role(role_type)
        if role is None:
            return False
        permission = await self.find_permission(action, role.id)
        return permission is not None and permission.enabled


class InMemoryPermissionStore(PermissionStore):
    """Process-local store seeded with the public and authenticated roles."""

    def __init__(self, roles: Optional[Iterable[Role]] = None):
        if roles is None:
            roles = [
                Role(id=1, type="authenticated", name="Authenticated"),
                Role(id=2, type=PUBLIC_ROLE_TYPE, name="Public"),
            ]
        self._roles: Dict[str, Role] = {role.type: role for role in roles}
        self._permissions: Dict[int, Permission] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    @property
    def permissions(self) -> List[Permission]:
        return list(self._permissions.values())

    async def find_role(self, role_type: str) -> Optional[Role]:
        return self._roles.get(role_type)

    async def find_permission(self, action: str, role_id: int) -> Optional[Permission]:
        for permission in self._permissions.values():
            if permission.action == action and permission.role_id == role_id:
                return permission
        return None

    async def create_permission(self, action: str, role_id: int, enabled: bool) -> Permission:
        async with self._lock:
            permission = Permission(
                id=self._next_id,
                action=action,
                role_id=role_id,
                enabled=enabled,
            )
            self._permissions[permission.id] = permission
            self._next_id += 1
            return permission

    async def update_permission(self, permission_id: int, enabled: bool) -> Permission:
        async with self._lock:
            permission = self._permissions[permission_id]
            permission.enabled = enabled
            return permission


async def ensure_public_read(
    store: PermissionStore,
    collections: Iterable[str],
    actions: Iterable[str] = PUBLIC_READ_ACTIONS,
) -> ReconcileSummary:
    """
    Grant the public role the given actions on each collection.

    Collections are processed sequentially. Store errors propagate so a
    half-applied permission state fails startup instead of being served.
    """
    summary = ReconcileSummary()
    public_role = await store.find_role(PUBLIC_ROLE_TYPE)
    if public_role is None:
        logger.warning("Public role not found, skipping permission setup")
        return summary

    actions = tuple(actions)
    for collection in collections:
        for action in actions:
            action_uid = permission_action(collection, action)
            existing = await store.find_permission(action_uid, public_role.id)

            if existing is None:
                await store.create_permission(action_uid, public_role.id, enabled=True)
                summary.created += 1
            elif not existing.enabled:
                await store.update_permission(existing.id, enabled=True)
                summary.enabled += 1
            else:
                summary.unchanged += 1
            summary.actions.append(action_uid)

    logger.info("Public read permissions reconciled", **summary.to_dict())
    return summary
