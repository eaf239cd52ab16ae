"""
Sanitizer for banner text fields.

Deterministic rules, applied in order:
- Trim whitespace
- Remove every '<' and '>' (tags are broken up, inner text is kept)
- Escape '"' to &quot; and "'" to &#39;
- Truncate to the field limit

Runs on already-validated strings only.
"""
import re

from app.services.banner.validators import SUBTITLE_MAX_LENGTH, TITLE_MAX_LENGTH

_ANGLE_BRACKETS_REGEX = re.compile(r"[<>]")
_QUOTES_REGEX = re.compile(r"[\"']")

_QUOTE_ENTITIES = {
    '"': "&quot;",
    "'": "&#39;",
}


def _sanitize_text(text: str, max_length: int) -> str:
    cleaned = _ANGLE_BRACKETS_REGEX.sub("", text.strip())
    cleaned = _QUOTES_REGEX.sub(lambda m: _QUOTE_ENTITIES[m.group(0)], cleaned)
    return cleaned[:max_length]


def sanitize_title(text: str) -> str:
    """Sanitize a banner title (max 255 chars)."""
    return _sanitize_text(text, TITLE_MAX_LENGTH)


def sanitize_subtitle(text: str) -> str:
    """Sanitize a banner subtitle (max 500 chars). Line breaks are kept."""
    return _sanitize_text(text, SUBTITLE_MAX_LENGTH)
