"""
Database models for DevConnector API
"""
from app.models.user import User
from app.models.profile import Profile, Experience, Education

__all__ = ["User", "Profile", "Experience", "Education"]
