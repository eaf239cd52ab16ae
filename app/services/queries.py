"""
Query descriptor builders.

Descriptors are plain dicts handed to ContentRepository.find/find_one:
- filters:  {field: {"$eq": value}}
- populate: list of relation names, {name: True} mapping, or "*"

Every call returns a fresh dict, so callers may mutate the result.
"""
from typing import Any, Dict, Optional

BANNER_IMAGE_FIELD = "bannerImage"

PROGRAM_SECTION_DEFAULT_POPULATE: Dict[str, bool] = {
    "icon": True,
    "program": True,
}


def populate_banner() -> Dict[str, Any]:
    """Populate the institution banner image."""
    return {"populate": [BANNER_IMAGE_FIELD]}


def by_slug_with_banner(slug: str) -> Dict[str, Any]:
    """Institution lookup by slug with the banner image populated."""
    return {
        "filters": {"slug": {"$eq": slug}},
        **populate_banner(),
    }


def resolve_populate(requested: Any, default: Any) -> Any:
    """Use default only when the caller did not pass populate at all."""
    if requested is None:
        return _copy_populate(default)
    return requested


def with_default_populate(
    params: Optional[Dict[str, Any]],
    default: Any
) -> Dict[str, Any]:
    """Copy of params whose populate falls back to default."""
    resolved = dict(params or {})
    resolved["populate"] = resolve_populate(resolved.get("populate"), default)
    return resolved


def banner_cache_key(slug: str) -> str:
    return f"institution:banner:{slug}"


def _copy_populate(populate: Any) -> Any:
    if isinstance(populate, dict):
        return dict(populate)
    if isinstance(populate, list):
        return list(populate)
    return populate
