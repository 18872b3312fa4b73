"""
Profile model with nested experience and education entries
"""
from sqlalchemy import Column, String, DateTime, Date, Text, Boolean, Integer, ForeignKey
from sqlalchemy import JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from sqlalchemy.ext.orderinglist import ordering_list
import uuid

from app.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Profile(Base):
    """Developer profile, one per user"""
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=_new_id, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    company = Column(String(255))
    website = Column(String(500))
    location = Column(String(255))
    status = Column(String(255), nullable=False)
    bio = Column(Text)
    githubusername = Column(String(255))
    skills = Column(JSON, nullable=False, default=list)  # Array of skill names
    social = Column(JSON, nullable=False, default=dict)  # platform -> URL

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="profile")
    experience = relationship(
        "Experience",
        back_populates="profile",
        order_by="Experience.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan"
    )
    education = relationship(
        "Education",
        back_populates="profile",
        order_by="Education.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Profile {self.user_id} - {self.status}>"


class Experience(Base):
    """Work experience entry, newest first"""
    __tablename__ = "experiences"

    id = Column(String(36), primary_key=True, default=_new_id, index=True)
    profile_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    location = Column(String(255))
    from_date = Column(Date, nullable=False)
    to_date = Column(Date)
    current = Column(Boolean, default=False)
    description = Column(Text)

    profile = relationship("Profile", back_populates="experience")

    def __repr__(self):
        return f"<Experience {self.title} @ {self.company}>"


class Education(Base):
    """Education entry, newest first"""
    __tablename__ = "educations"

    id = Column(String(36), primary_key=True, default=_new_id, index=True)
    profile_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    school = Column(String(255), nullable=False)
    degree = Column(String(255), nullable=False)
    fieldofstudy = Column(String(255), nullable=False)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date)
    current = Column(Boolean, default=False)
    description = Column(Text)

    profile = relationship("Profile", back_populates="education")

    def __repr__(self):
        return f"<Education {self.degree} @ {self.school}>"
