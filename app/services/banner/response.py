"""
Response helpers for institution records with banners.

normalize() is a validation gate on records coming back from the
repository; format_record() narrows a record to the public field set.
"""
from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from app.core.config import get_settings
from app.services.exceptions import NotFoundError, SchemaError

# Public projection of an institution, in response order
PUBLIC_FIELDS = (
    "id",
    "name",
    "slug",
    "bannerTitle",
    "bannerSubtitle",
    "bannerImage",
    "createdAt",
    "updatedAt",
)

# Common aspect ratios snapped to within _RATIO_TOLERANCE
_COMMON_RATIOS = (
    (16 / 9, "16/9"),
    (4 / 3, "4/3"),
    (1.0, "1/1"),
    (3 / 2, "3/2"),
)
_RATIO_TOLERANCE = 0.01
DEFAULT_ASPECT_RATIO = "16/9"


class BannerMetadata(BaseModel):
    """Structured view of a banner media object."""
    id: int
    url: str
    mime: str
    size: float
    name: str
    width: Optional[int] = None
    height: Optional[int] = None
    alternative_text: Optional[str] = Field(default=None, alias="alternativeText")

    class Config:
        populate_by_name = True


def normalize(record: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """
    Assert that a stored institution has its banner fields.

    Presence check only: bannerTitle/bannerImage may be None, but the keys
    must exist. A present image must have a url.

    Raises:
        NotFoundError: record is None
        SchemaError: a banner key is missing or the image has no url
    """
    if record is None:
        raise NotFoundError("institution")

    if "bannerTitle" not in record:
        raise SchemaError("missing bannerTitle")
    if "bannerImage" not in record:
        raise SchemaError("missing bannerImage")

    image = record["bannerImage"]
    if image and not (isinstance(image, Mapping) and image.get("url")):
        raise SchemaError("image missing url")

    return record


def format_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Project a record onto PUBLIC_FIELDS. Missing keys become None."""
    return {key: record.get(key) for key in PUBLIC_FIELDS}


def has_banner_data(record: Mapping[str, Any]) -> bool:
    """True when both bannerTitle and bannerImage are set."""
    return (
        record.get("bannerTitle") is not None
        and record.get("bannerImage") is not None
    )


def build_image_url(image_url: str, base_url: Optional[str] = None) -> str:
    """
    Build an absolute image URL.

    URLs already starting with "http" are returned as-is. Relative paths are
    joined onto base_url, or STRAPI_URL when base_url is not given.
    """
    if image_url.startswith("http"):
        return image_url

    base = (base_url or get_settings().strapi_url).rstrip("/")
    return f"{base}/{image_url.lstrip('/')}"


def extract_banner_metadata(image: Mapping[str, Any]) -> BannerMetadata:
    return BannerMetadata.model_validate(dict(image))


def calculate_image_aspect_ratio(
    width: Optional[int] = None,
    height: Optional[int] = None
) -> str:
    """
    Aspect ratio string for responsive image sizing.

    Falls back to 16/9 without dimensions, snaps to a common ratio when
    close enough, otherwise returns "width/height".
    """
    if not width or not height:
        return DEFAULT_ASPECT_RATIO

    ratio = width / height
    for common, label in _COMMON_RATIOS:
        if abs(ratio - common) < _RATIO_TOLERANCE:
            return label

    return f"{width}/{height}"
