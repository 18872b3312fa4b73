"""
Core functionality for DevConnector API
"""
from app.core.dependencies import get_current_user_id, body_or_empty

__all__ = ["get_current_user_id", "body_or_empty"]
