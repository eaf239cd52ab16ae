"""
Institution service.

Write path: banner middleware -> field checks -> repository.
Read path: query builders -> repository -> normalize -> format_record.
"""
import re
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, List, Optional

from app.core.logging import get_safe_logger
from app.services.banner.middleware import apply_banner_validation
from app.services.banner.response import format_record, normalize
from app.services.exceptions import NotFoundError, ValidationError
from app.services.queries import (
    by_slug_with_banner,
    populate_banner,
    with_default_populate,
)
from app.services.repository import ContentRepository

logger = get_safe_logger(__name__)

COLLECTION = "institution"
NAME_MAX_LENGTH = 255

_SLUG_REGEX = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase, hyphen-separated slug (e.g. "SONA Tech School" -> "sona-tech-school")."""
    return _SLUG_REGEX.sub("-", value.lower()).strip("-")


def request_data(body: Any) -> MutableMapping:
    if not isinstance(body, MutableMapping):
        raise ValidationError("not an object", field="body")
    data = body.get("data")
    if not isinstance(data, MutableMapping):
        raise ValidationError("not an object", field="data")
    return data


def _validate_name(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("not a string", field="name")
    name = value.strip()
    if not name:
        raise ValidationError("empty", field="name")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"too long (max {NAME_MAX_LENGTH} characters)", field="name")
    return name


class InstitutionService:
    """Institution reads and writes on top of a ContentRepository."""

    def __init__(self, repository: ContentRepository):
        self._repository = repository

    def _slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        matches = self._repository.find(COLLECTION, {"filters": {"slug": {"$eq": slug}}})
        return any(record["id"] != exclude_id for record in matches)

    def _resolve_slug(self, data: Mapping, name: Optional[str], exclude_id: Optional[int] = None) -> str:
        raw = data.get("slug")
        if raw is None:
            if name is None:
                raise ValidationError("not a string", field="slug")
            slug = slugify(name)
        elif isinstance(raw, str):
            slug = slugify(raw)
        else:
            raise ValidationError("not a string", field="slug")

        if not slug:
            raise ValidationError("empty", field="slug")
        if self._slug_taken(slug, exclude_id=exclude_id):
            raise ValidationError("already taken", field="slug")
        return slug

    def list_institutions(self, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """All institutions; the banner image is populated unless overridden."""
        params = with_default_populate(params, populate_banner()["populate"])
        records = self._repository.find(COLLECTION, params)
        return [format_record(normalize(record)) for record in records]

    def get_by_slug(self, slug: str) -> Dict[str, Any]:
        matches = self._repository.find(COLLECTION, by_slug_with_banner(slug))
        record = matches[0] if matches else None
        return format_record(normalize(record))

    def create(self, body: Any) -> Dict[str, Any]:
        """
        Create an institution from a {"data": {...}} body.

        Raises:
            ValidationError: malformed body, name or slug
            BannerValidationError: banner fields rejected
        """
        data = request_data(body)
        apply_banner_validation(body)

        name = _validate_name(data.get("name"))
        slug = self._resolve_slug(data, name)

        record = self._repository.create(COLLECTION, {**data, "name": name, "slug": slug})
        logger.info("Institution created", collection=COLLECTION, entity_id=record["id"])
        return format_record(normalize(record))

    def update(self, entity_id: int, body: Any) -> Dict[str, Any]:
        """
        Partially update an institution.

        Raises:
            NotFoundError: no institution with entity_id
        """
        data = request_data(body)
        if self._repository.find_one(COLLECTION, entity_id) is None:
            raise NotFoundError("institution")

        apply_banner_validation(body)

        changes = dict(data)
        if "name" in data:
            changes["name"] = _validate_name(data["name"])
        if "slug" in data:
            changes["slug"] = self._resolve_slug(data, None, exclude_id=entity_id)

        record = self._repository.update(COLLECTION, entity_id, changes)
        logger.info("Institution updated", collection=COLLECTION, entity_id=entity_id)
        return format_record(normalize(record))
