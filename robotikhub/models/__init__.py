"""
Models package for RobotikHub Portal
"""
from robotikhub.database import Base
from robotikhub.models.user_models import User, ROLE_ADMIN, ROLE_MEMBER
from robotikhub.models.club_models import (
    Activity,
    AttendanceRecord,
    GalleryPhoto,
    LearningMaterial,
    Achievement,
)
from robotikhub.models.profile_models import ClubProfile, Mission, OrganizationMember, PROFILE_ID

__all__ = [
    "Base",
    "User",
    "ROLE_ADMIN",
    "ROLE_MEMBER",
    "Activity",
    "AttendanceRecord",
    "GalleryPhoto",
    "LearningMaterial",
    "Achievement",
    "ClubProfile",
    "Mission",
    "OrganizationMember",
    "PROFILE_ID",
]
