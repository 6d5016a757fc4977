import html
import re
from typing import Optional

_TAG_RE = re.compile(r"<[^>]*>")


def sanitize_string(value: Optional[str]) -> Optional[str]:
    """
    Sanitize a string by escaping HTML special characters to prevent XSS.
    Returns None if input is None.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    return html.escape(str(value), quote=True)


def strip_html_tags(value: str) -> str:
    """Plain-text rendition of an HTML fragment (tags removed, whitespace kept)"""
    return _TAG_RE.sub("", value)
