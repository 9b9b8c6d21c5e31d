"""Public schema exports."""

from .auth import AdminUser, LoginResult, TokenPair
from .envelope import ApiResponse, CamelModel, PaginationMeta, PaginationParams
from .resources import (
    ActivityLog,
    Committee,
    CommitteeInput,
    CommitteeMember,
    CommitteeMemberInput,
    Contribution,
    ContributionInput,
    DashboardStats,
    GalleryImage,
    GalleryImageInput,
    LandDonor,
    LandDonorInput,
    OrderUpdate,
    PrayerTimes,
    SiteSettings,
    SiteSettingsInput,
    UserInput,
)

__all__ = [
    "ActivityLog",
    "AdminUser",
    "ApiResponse",
    "CamelModel",
    "Committee",
    "CommitteeInput",
    "CommitteeMember",
    "CommitteeMemberInput",
    "Contribution",
    "ContributionInput",
    "DashboardStats",
    "GalleryImage",
    "GalleryImageInput",
    "LandDonor",
    "LandDonorInput",
    "LoginResult",
    "OrderUpdate",
    "PaginationMeta",
    "PaginationParams",
    "PrayerTimes",
    "SiteSettings",
    "SiteSettingsInput",
    "TokenPair",
    "UserInput",
]
