"""Resource API groupings built on the request dispatcher."""

from .resources import (
    ActivityApi,
    AuthApi,
    CommitteesApi,
    ContributionsApi,
    GalleryApi,
    LandDonorsApi,
    ResourceApi,
    SettingsApi,
    StatisticsApi,
    UploadApi,
    UsersApi,
)

__all__ = [
    "ActivityApi",
    "AuthApi",
    "CommitteesApi",
    "ContributionsApi",
    "GalleryApi",
    "LandDonorsApi",
    "ResourceApi",
    "SettingsApi",
    "StatisticsApi",
    "UploadApi",
    "UsersApi",
]
