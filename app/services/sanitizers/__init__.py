"""
Sanitizers module.
Contains field-level sanitization for banner text.
"""
from app.services.sanitizers.banner_sanitizer import (
    sanitize_title,
    sanitize_subtitle,
)

__all__ = [
    "sanitize_title",
    "sanitize_subtitle",
]
