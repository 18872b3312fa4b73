"""
Pydantic schemas for DevConnector API
"""
from app.schemas.user import (
    UserCreate, UserLogin, UserResponse, UserSummary,
    Token, TokenData
)
from app.schemas.profile import (
    ProfileCreate, ProfilePatch, ProfileResponse,
    ExperienceCreate, ExperienceResponse,
    EducationCreate, EducationResponse,
    SocialLinks, MessageResponse, SOCIAL_PLATFORMS
)

__all__ = [
    # User schemas
    "UserCreate", "UserLogin", "UserResponse", "UserSummary",
    "Token", "TokenData",
    # Profile schemas
    "ProfileCreate", "ProfilePatch", "ProfileResponse",
    "ExperienceCreate", "ExperienceResponse",
    "EducationCreate", "EducationResponse",
    "SocialLinks", "MessageResponse", "SOCIAL_PLATFORMS"
]
