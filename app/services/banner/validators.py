"""
Banner field validators.

Inputs come from untrusted HTTP bodies, so every check is a runtime
type/shape check. All validators are fail-fast: the first violation raises
a ValidationError naming the field and the constraint.
"""
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from app.services.exceptions import ValidationError

TITLE_MAX_LENGTH = 255
SUBTITLE_MAX_LENGTH = 500

ALLOWED_IMAGE_MIMES = frozenset({
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
})


@dataclass(frozen=True)
class BannerPayload:
    """Validated banner triple. image is passed through as received."""
    title: str
    subtitle: Optional[str]
    image: Mapping[str, Any]


def _is_media_id(value: Any) -> bool:
    # bool is an int subclass but never a valid media id
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value) and value.is_integer()


def validate_title(value: Any, field: str = "bannerTitle") -> str:
    """Return the trimmed title, or raise if not a 1-255 char string."""
    if not isinstance(value, str):
        raise ValidationError("not a string", field=field)

    trimmed = value.strip()
    if not trimmed:
        raise ValidationError("empty", field=field)
    if len(trimmed) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"too long (max {TITLE_MAX_LENGTH} characters)", field=field
        )
    return trimmed


def validate_subtitle(value: Any, field: str = "bannerSubtitle") -> Optional[str]:
    """
    Validate the optional subtitle.

    None and whitespace-only strings mean "no subtitle" and return None.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("not a string", field=field)

    trimmed = value.strip()
    if not trimmed:
        return None
    if len(trimmed) > SUBTITLE_MAX_LENGTH:
        raise ValidationError(
            f"too long (max {SUBTITLE_MAX_LENGTH} characters)", field=field
        )
    return trimmed


def validate_image_ref(value: Any, field: str = "bannerImage") -> None:
    """
    Validate a media reference: integral id, url and mime strings, and a
    mime type from ALLOWED_IMAGE_MIMES.
    """
    if not isinstance(value, Mapping) and not value:
        raise ValidationError("missing", field=field)
    if not isinstance(value, Mapping):
        raise ValidationError("not an object", field=field)

    if not _is_media_id(value.get("id")):
        raise ValidationError("id must be an integer", field=f"{field}.id")

    url = value.get("url")
    if not isinstance(url, str) or not url:
        raise ValidationError("url must be a non-empty string", field=f"{field}.url")

    mime = value.get("mime")
    if not isinstance(mime, str) or not mime:
        raise ValidationError("mime must be a non-empty string", field=f"{field}.mime")

    if mime not in ALLOWED_IMAGE_MIMES:
        raise ValidationError(f"unsupported mime ({mime})", field=f"{field}.mime")


def validate_image_metadata(value: Any, field: str = "bannerImage") -> bool:
    """Check that a stored image carries what the frontend needs to render it."""
    if not isinstance(value, Mapping):
        raise ValidationError("not an object", field=field)

    for key in ("id", "url", "mime", "size"):
        if not value.get(key):
            raise ValidationError(f"image must have a {key}", field=f"{field}.{key}")
    return True


def validate_payload(raw: Any) -> BannerPayload:
    """
    Validate a raw {title, subtitle, image} mapping.

    Order: title, subtitle, image. The first failure wins.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("not an object", field="banner")

    title = validate_title(raw.get("title"))
    subtitle = validate_subtitle(raw.get("subtitle"))
    image = raw.get("image")
    validate_image_ref(image)

    return BannerPayload(title=title, subtitle=subtitle, image=image)
