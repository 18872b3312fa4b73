"""
Profile Service
Profile lookups, sparse updates and experience/education list edits
"""
from typing import List, Optional, Union
import uuid
import logging

from sqlalchemy.orm import Session, joinedload

from app.models import Profile, Experience, Education, User
from app.schemas import (
    ProfileCreate, ProfilePatch, ExperienceCreate, EducationCreate,
    SOCIAL_PLATFORMS
)

logger = logging.getLogger(__name__)

PATCH_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")


class ProfileService:
    """Read and write profiles for a user"""

    @staticmethod
    def is_valid_id(value: str) -> bool:
        """Check that a path parameter looks like one of our ids"""
        try:
            uuid.UUID(value)
        except (ValueError, TypeError, AttributeError):
            return False
        return True

    @staticmethod
    def get_by_user(db: Session, user_id: str) -> Optional[Profile]:
        """
        Get a user's profile with the owner loaded

        Args:
            db: Database session
            user_id: Owning user ID

        Returns:
            Optional[Profile]: The profile, or None if the user has none
        """
        return (
            db.query(Profile)
            .options(joinedload(Profile.user))
            .filter(Profile.user_id == user_id)
            .first()
        )

    @staticmethod
    def list_all(db: Session) -> List[Profile]:
        return (
            db.query(Profile)
            .options(joinedload(Profile.user))
            .order_by(Profile.created_at)
            .all()
        )

    @staticmethod
    def parse_skills(raw: str) -> List[str]:
        """
        Split a comma separated skills string

        "node, react,  express" -> ["node", "react", "express"]
        """
        return [skill.strip() for skill in raw.split(",") if skill.strip()]

    @staticmethod
    def build_patch(data: ProfileCreate) -> ProfilePatch:
        """
        Keep only the fields the client actually supplied

        Empty strings count as not supplied.

        Args:
            data: Validated profile request

        Returns:
            ProfilePatch: Fields to write, None for everything else
        """
        fields = {}
        for name in PATCH_FIELDS:
            value = getattr(data, name)
            if value:
                fields[name] = value

        if data.skills:
            fields["skills"] = ProfileService.parse_skills(data.skills)

        fields["social"] = {
            platform: getattr(data, platform)
            for platform in SOCIAL_PLATFORMS
            if getattr(data, platform)
        }
        return ProfilePatch(**fields)

    @staticmethod
    def apply_patch(profile: Profile, patch: ProfilePatch) -> Profile:
        """
        Merge a patch into a profile, leaving absent fields untouched

        Args:
            profile: Stored or freshly created profile
            patch: Fields to overwrite

        Returns:
            Profile: The same profile instance
        """
        for name in PATCH_FIELDS:
            value = getattr(patch, name)
            if value is not None:
                setattr(profile, name, value)

        if patch.skills is not None:
            profile.skills = list(patch.skills)

        if patch.social:
            # JSON columns only notice reassignment, not in-place edits
            social = dict(profile.social or {})
            social.update(patch.social)
            profile.social = social

        return profile

    @staticmethod
    def upsert(db: Session, user_id: str, data: ProfileCreate) -> Profile:
        """
        Create the user's profile, or update it if one exists

        Args:
            db: Database session
            user_id: Owning user ID
            data: Validated profile request

        Returns:
            Profile: The stored profile after the write
        """
        patch = ProfileService.build_patch(data)
        profile = db.query(Profile).filter(Profile.user_id == user_id).first()

        if profile is None:
            profile = Profile(user_id=user_id, skills=[], social={})
            db.add(profile)
            logger.info(f"Creating profile for user {user_id}")

        ProfileService.apply_patch(profile, patch)
        db.commit()
        return ProfileService.get_by_user(db, user_id)

    @staticmethod
    def add_experience(profile: Profile, data: ExperienceCreate) -> Experience:
        """Insert an experience entry at the head of the list"""
        entry = Experience(
            title=data.title,
            company=data.company,
            location=data.location,
            from_date=data.from_date,
            to_date=data.to_date,
            current=data.current,
            description=data.description
        )
        profile.experience.insert(0, entry)
        return entry

    @staticmethod
    def add_education(profile: Profile, data: EducationCreate) -> Education:
        """Insert an education entry at the head of the list"""
        entry = Education(
            school=data.school,
            degree=data.degree,
            fieldofstudy=data.fieldofstudy,
            from_date=data.from_date,
            to_date=data.to_date,
            current=data.current,
            description=data.description
        )
        profile.education.insert(0, entry)
        return entry

    @staticmethod
    def remove_entry(entries: List[Union[Experience, Education]], entry_id: str) -> bool:
        """
        Remove the entry with the given id from an experience/education list

        Args:
            entries: The profile's experience or education collection
            entry_id: ID of the entry to remove

        Returns:
            bool: True if an entry was removed, False if none matched
        """
        index = next(
            (i for i, entry in enumerate(entries) if entry.id == entry_id),
            None
        )
        if index is None:
            return False

        entries.pop(index)
        return True

    @staticmethod
    def delete_account(db: Session, user_id: str) -> None:
        """
        Delete a user's profile and then the user, in one transaction

        Args:
            db: Database session
            user_id: User to remove
        """
        profile = db.query(Profile).filter(Profile.user_id == user_id).first()
        if profile is not None:
            db.delete(profile)

        user = db.get(User, user_id)
        if user is not None:
            db.delete(user)

        db.commit()
        logger.info(f"Removed profile and account for user {user_id}")
