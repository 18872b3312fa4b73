"""
Gravatar avatar URLs derived from an email address
"""
import hashlib
from urllib.parse import urlencode

GRAVATAR_BASE = "https://www.gravatar.com/avatar"


def gravatar_url(email: str, size: int = 200, rating: str = "pg", default: str = "mm") -> str:
    """
    Build the gravatar URL for an email

    Args:
        email: Account email, trimmed and lower-cased before hashing
        size: Image size in pixels
        rating: Highest allowed image rating
        default: Fallback image when no gravatar exists

    Returns:
        str: Deterministic avatar URL
    """
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{GRAVATAR_BASE}/{digest}?{query}"
