"""
Pydantic schemas for User model
"""
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from app.schemas.validators import exists, not_empty, min_length, is_email


class UserCreate(BaseModel):
    """Schema for registering a new user"""
    name: Optional[str] = Field(None, validate_default=True)
    email: Optional[str] = Field(None, validate_default=True)
    password: Optional[str] = Field(None, validate_default=True)

    @field_validator('name')
    @classmethod
    def name_required(cls, v):
        return not_empty(v, "Name is required").strip()

    @field_validator('email')
    @classmethod
    def email_valid(cls, v):
        return is_email(v, "Not a valid email")

    @field_validator('password')
    @classmethod
    def password_length(cls, v):
        return min_length(v, 6, "Please enter a password with at least 6 characters")


class UserLogin(BaseModel):
    """Schema for user login"""
    email: Optional[str] = Field(None, validate_default=True)
    password: Optional[str] = Field(None, validate_default=True)

    @field_validator('email')
    @classmethod
    def email_valid(cls, v):
        return is_email(v, "Not a valid email")

    @field_validator('password')
    @classmethod
    def password_required(cls, v):
        return exists(v, "Password is required")


class UserResponse(BaseModel):
    """Schema for user response (without password)"""
    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class UserSummary(BaseModel):
    """Public part of a user embedded in profiles"""
    id: str
    name: str
    avatar: Optional[str] = None

    model_config = {
        "from_attributes": True
    }


class Token(BaseModel):
    """Schema for JWT token response"""
    token: str


class TokenData(BaseModel):
    """Schema for token payload data"""
    id: str
