"""
Pydantic schemas for Profile endpoints
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict
from datetime import date, datetime

from app.schemas.user import UserSummary
from app.schemas.validators import not_empty, blank_to_none

SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


class ProfileCreate(BaseModel):
    """Schema for creating or updating the caller's profile"""
    status: Optional[str] = Field(None, validate_default=True)
    skills: Optional[str] = Field(None, validate_default=True, description="Comma separated skills")
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator('status')
    @classmethod
    def status_required(cls, v):
        return not_empty(v, "Status is required")

    @field_validator('skills')
    @classmethod
    def skills_required(cls, v):
        return not_empty(v, "Skills are required")


class ProfilePatch(BaseModel):
    """
    Sparse set of profile fields to write

    A field left as None means "keep the stored value". Social links are
    merged key by key.
    """
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: Optional[List[str]] = None
    social: Dict[str, str] = Field(default_factory=dict)


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry"""
    title: Optional[str] = Field(None, validate_default=True)
    company: Optional[str] = Field(None, validate_default=True)
    location: Optional[str] = None
    from_date: Optional[date] = Field(None, validation_alias="from", validate_default=True)
    to_date: Optional[date] = Field(None, validation_alias="to")
    current: bool = False
    description: Optional[str] = None

    @field_validator('title')
    @classmethod
    def title_required(cls, v):
        return not_empty(v, "Title is required")

    @field_validator('company')
    @classmethod
    def company_required(cls, v):
        return not_empty(v, "Company is required")

    @field_validator('from_date', mode='before')
    @classmethod
    def from_required(cls, v):
        return not_empty(v, "From Date is required")

    @field_validator('to_date', mode='before')
    @classmethod
    def to_optional(cls, v):
        return blank_to_none(v)


class EducationCreate(BaseModel):
    """Schema for adding an education entry"""
    school: Optional[str] = Field(None, validate_default=True)
    degree: Optional[str] = Field(None, validate_default=True)
    fieldofstudy: Optional[str] = Field(None, validate_default=True)
    from_date: Optional[date] = Field(None, validation_alias="from", validate_default=True)
    to_date: Optional[date] = Field(None, validation_alias="to")
    current: bool = False
    description: Optional[str] = None

    @field_validator('school')
    @classmethod
    def school_required(cls, v):
        return not_empty(v, "School is required")

    @field_validator('degree')
    @classmethod
    def degree_required(cls, v):
        return not_empty(v, "Degree is required")

    @field_validator('fieldofstudy')
    @classmethod
    def fieldofstudy_required(cls, v):
        return not_empty(v, "Field of study is required")

    @field_validator('from_date', mode='before')
    @classmethod
    def from_required(cls, v):
        return not_empty(v, "From Date is required")

    @field_validator('to_date', mode='before')
    @classmethod
    def to_optional(cls, v):
        return blank_to_none(v)


class SocialLinks(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceResponse(BaseModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: date = Field(serialization_alias="from")
    to_date: Optional[date] = Field(None, serialization_alias="to")
    current: Optional[bool] = False
    description: Optional[str] = None

    model_config = {
        "from_attributes": True
    }


class EducationResponse(BaseModel):
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(serialization_alias="from")
    to_date: Optional[date] = Field(None, serialization_alias="to")
    current: Optional[bool] = False
    description: Optional[str] = None

    model_config = {
        "from_attributes": True
    }


class ProfileResponse(BaseModel):
    """Schema for a profile with its owner's public details"""
    id: str
    user: UserSummary
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: str
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    skills: List[str] = []
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: List[ExperienceResponse] = []
    education: List[EducationResponse] = []
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class MessageResponse(BaseModel):
    msg: str
