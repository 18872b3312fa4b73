"""
Profile API endpoints
Profile CRUD, experience/education entries and GitHub repositories
"""
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.database import get_db
from app.models import Profile
from app.schemas import (
    ProfileCreate, ProfileResponse, MessageResponse,
    ExperienceCreate, EducationCreate, TokenData
)
from app.core import get_current_user_id, body_or_empty
from app.services import ProfileService, GitHubService, GitHubProfileNotFound, get_github_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["Profile"])


def _own_profile(db: Session, user_id: str) -> Profile:
    profile = ProfileService.get_by_user(db, user_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No profile for this user"
        )
    return profile


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    current_user: TokenData = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Get current user's profile with their name and avatar

    Args:
        current_user: Identity from the token
        db: Database session

    Returns:
        ProfileResponse: The caller's profile
    """
    return _own_profile(db, current_user.id)


@router.post("", response_model=ProfileResponse)
def create_or_update_profile(
    profile_data: Optional[ProfileCreate] = Body(None),
    current_user: TokenData = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Create the caller's profile, or update only the supplied fields

    Args:
        profile_data: Profile fields; skills as a comma separated string
        current_user: Identity from the token
        db: Database session

    Returns:
        ProfileResponse: Profile after the write
    """
    profile_data = body_or_empty(ProfileCreate, profile_data)
    return ProfileService.upsert(db, current_user.id, profile_data)


@router.get("", response_model=List[ProfileResponse])
def list_profiles(db: Session = Depends(get_db)):
    """Get all profiles"""
    return ProfileService.list_all(db)


@router.get("/user/{user_id}", response_model=ProfileResponse)
def get_profile_by_user(
    user_id: str,
    db: Session = Depends(get_db)
):
    """
    Get the profile of any user

    Args:
        user_id: Owning user ID
        db: Database session

    Returns:
        ProfileResponse: That user's profile
    """
    profile = None
    if ProfileService.is_valid_id(user_id):
        profile = ProfileService.get_by_user(db, user_id)

    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Profile not found"
        )
    return profile


@router.delete("", response_model=MessageResponse)
def delete_account(
    current_user: TokenData = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Delete the caller's profile and user account

    Args:
        current_user: Identity from the token
        db: Database session

    Returns:
        MessageResponse: Confirmation
    """
    ProfileService.delete_account(db, current_user.id)
    return MessageResponse(msg="User removed")


@router.put("/experience", response_model=ProfileResponse)
def add_experience(
    experience: Optional[ExperienceCreate] = Body(None),
    current_user: TokenData = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Add an experience entry at the top of the caller's list

    Args:
        experience: Experience entry
        current_user: Identity from the token
        db: Database session

    Returns:
        ProfileResponse: Updated profile
    """
    experience = body_or_empty(ExperienceCreate, experience)
    profile = _own_profile(db, current_user.id)
    ProfileService.add_experience(profile, experience)
    db.commit()
    return ProfileService.get_by_user(db, current_user.id)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
def delete_experience(
    exp_id: str,
    current_user: TokenData = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Remove an experience entry; unknown ids leave the profile unchanged

    Args:
        exp_id: ID of the experience entry
        current_user: Identity from the token
        db: Database session

    Returns:
        ProfileResponse: Updated profile
    """
    profile = _own_profile(db, current_user.id)
    if ProfileService.remove_entry(profile.experience, exp_id):
        db.commit()
    else:
        logger.info(f"No experience {exp_id} on profile {profile.id}")
    return ProfileService.get_by_user(db, current_user.id)


@router.put("/education", response_model=ProfileResponse)
def add_education(
    education: Optional[EducationCreate] = Body(None),
    current_user: TokenData = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Add an education entry at the top of the caller's list

    Args:
        education: Education entry
        current_user: Identity from the token
        db: Database session

    Returns:
        ProfileResponse: Updated profile
    """
    education = body_or_empty(EducationCreate, education)
    profile = _own_profile(db, current_user.id)
    ProfileService.add_education(profile, education)
    db.commit()
    return ProfileService.get_by_user(db, current_user.id)


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
def delete_education(
    edu_id: str,
    current_user: TokenData = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Remove an education entry; unknown ids leave the profile unchanged"""
    profile = _own_profile(db, current_user.id)
    if ProfileService.remove_entry(profile.education, edu_id):
        db.commit()
    else:
        logger.info(f"No education {edu_id} on profile {profile.id}")
    return ProfileService.get_by_user(db, current_user.id)


@router.get("/github/{username}", response_model=None)
async def get_github_repos(
    username: str,
    github: GitHubService = Depends(get_github_service)
):
    """
    Get a GitHub user's latest repositories

    Args:
        username: GitHub login
        github: GitHub API client

    Returns:
        The repositories exactly as GitHub returned them
    """
    try:
        return await github.get_user_repos(username)
    except GitHubProfileNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No github profile found"
        )
