"""Shared validation utilities"""

import re
from typing import Optional

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str) -> str:
    """
    Generate a URL-friendly slug.

    Lower-cases the name, collapses every run of non-alphanumeric characters
    into one hyphen and trims hyphens from both ends.
    """
    return _NON_SLUG_CHARS.sub("-", name.lower().strip()).strip("-")


def normalize_email(email: Optional[str]) -> Optional[str]:
    """Lower-case and trim an email address for lookups"""
    if email is None:
        return None
    return email.strip().lower()
