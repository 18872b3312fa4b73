"""
Utility functions for DevConnector API
"""
from app.utils.security import (
    InvalidTokenError,
    verify_password, dummy_verify, get_password_hash,
    create_access_token, verify_token
)
from app.utils.gravatar import gravatar_url

__all__ = [
    "InvalidTokenError",
    "verify_password", "dummy_verify", "get_password_hash",
    "create_access_token", "verify_token",
    "gravatar_url"
]
