"""
Banner validation for institution create/update requests.

Rewrites the banner fields of the request body in place with validated,
sanitized values. Bodies that do not touch the banner pass through.
"""
from collections.abc import MutableMapping
from typing import Any

from app.core.logging import get_safe_logger
from app.services.banner.validators import validate_payload
from app.services.exceptions import BannerValidationError, ValidationError
from app.services.sanitizers import sanitize_subtitle, sanitize_title

logger = get_safe_logger(__name__)

BANNER_FIELDS = ("bannerTitle", "bannerSubtitle", "bannerImage")


def _touches_banner(data: Any) -> bool:
    return isinstance(data, MutableMapping) and any(
        key in data for key in BANNER_FIELDS
    )


def apply_banner_validation(body: Any) -> None:
    """
    Validate and sanitize the banner slice of a {"data": {...}} body.

    Only bannerTitle, bannerSubtitle and bannerImage are overwritten.

    Raises:
        BannerValidationError: message is "Banner validation error: <reason>"
    """
    data = body.get("data") if isinstance(body, MutableMapping) else None
    if not _touches_banner(data):
        return

    try:
        payload = validate_payload({
            "title": data.get("bannerTitle"),
            "subtitle": data.get("bannerSubtitle"),
            "image": data.get("bannerImage"),
        })
    except ValidationError as exc:
        logger.warning(
            "Banner validation failed",
            error_code=exc.error_code.value,
            exception_class=type(exc).__name__
        )
        raise BannerValidationError(exc) from exc

    data["bannerTitle"] = sanitize_title(payload.title)
    data["bannerSubtitle"] = (
        sanitize_subtitle(payload.subtitle) if payload.subtitle else None
    )
    data["bannerImage"] = payload.image
