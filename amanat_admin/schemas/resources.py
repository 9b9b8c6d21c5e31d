"""
Pydantic models for the resources managed through the admin console.

Entity models mirror what the API returns. ``*Input`` models describe request
bodies; every field is optional so the same model serves create and partial
update calls (unset fields are not sent).
"""

import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .auth import UserRole
from .envelope import CamelModel

ContributionType = Literal["Cash", "Land", "Material"]
ContributionStatus = Literal["pending", "verified", "rejected"]
LandType = Literal["Agricultural", "Residential"]
Designation = Literal["president", "vice-president", "secretary", "treasurer", "member"]
CommitteeType = Literal["past", "current"]
GalleryCategory = Literal["Foundation", "Construction", "Events", "FinalLook", "Final Look", "Ceremony"]
ActivityType = Literal["contribution", "committee", "gallery", "settings", "user", "delete"]


class Entity(CamelModel):
    id: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Contribution(Entity):
    contributor_name: str
    type: ContributionType
    amount: float
    date: str
    anonymous: bool = False
    purpose: Optional[str] = None
    notes: Optional[str] = None
    receipt_number: Optional[str] = None
    status: ContributionStatus = "pending"


class LandDonor(Entity):
    name: str
    land_amount: float
    land_type: LandType
    location: str
    date: str
    quote: Optional[str] = None
    document_number: Optional[str] = None
    notes: Optional[str] = None
    verified: bool = False
    photo: Optional[str] = None


class CommitteeMember(Entity):
    name: str
    designation: Designation
    designation_label: str
    committee_id: int
    photo: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    order: int = 0


class Committee(Entity):
    name: str
    term: str
    description: str = ""
    image: Optional[str] = None
    type: CommitteeType = "current"
    members: List[CommitteeMember] = Field(default_factory=list)
    is_active: bool = True


class GalleryImage(Entity):
    url: str
    category: GalleryCategory
    alt: str
    description: Optional[str] = None
    date: Optional[str] = None
    featured: bool = False
    order: int = 0


class ActivityLog(Entity):
    action: str
    type: ActivityType
    entity_id: Optional[int] = None
    user: str
    timestamp: str
    details: Optional[str] = None


class SocialLinks(CamelModel):
    facebook: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None


class PrayerTimes(CamelModel):
    fajr: Optional[str] = None
    dhuhr: Optional[str] = None
    asr: Optional[str] = None
    maghrib: Optional[str] = None
    isha: Optional[str] = None


class SiteSettings(CamelModel):
    site_name: str
    tagline: str = ""
    description: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    prayer_times: PrayerTimes = Field(default_factory=PrayerTimes)
    logo: Optional[str] = None
    favicon: Optional[str] = None
    maintenance_mode: bool = False
    show_anonymous_donors: bool = True
    enable_gallery: bool = True


class DashboardStats(CamelModel):
    total_funds: float
    land_donated: float
    total_contributors: int
    pending_contributions: int
    monthly_growth: float
    total_committees: int
    gallery_images: int


class OrderUpdate(CamelModel):
    id: int
    order: int


class UserInput(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    role: Optional[UserRole] = None
    phone: Optional[str] = None
    is_active: Optional[bool] = None


class ContributionInput(CamelModel):
    contributor_name: Optional[str] = None
    type: Optional[ContributionType] = None
    amount: Optional[float] = Field(None, ge=0)
    date: Optional[datetime.date] = None
    anonymous: Optional[bool] = None
    purpose: Optional[str] = None
    notes: Optional[str] = None
    receipt_number: Optional[str] = None


class LandDonorInput(CamelModel):
    name: Optional[str] = None
    land_amount: Optional[float] = Field(None, ge=0)
    land_type: Optional[LandType] = None
    location: Optional[str] = None
    date: Optional[datetime.date] = None
    quote: Optional[str] = None
    document_number: Optional[str] = None
    notes: Optional[str] = None
    verified: Optional[bool] = None


class CommitteeInput(CamelModel):
    name: Optional[str] = None
    term: Optional[str] = None
    description: Optional[str] = None
    type: Optional[CommitteeType] = None
    is_active: Optional[bool] = None


class CommitteeMemberInput(CamelModel):
    name: Optional[str] = None
    designation: Optional[Designation] = None
    designation_label: Optional[str] = None
    committee_id: Optional[int] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    order: Optional[int] = None


class GalleryImageInput(CamelModel):
    url: Optional[str] = None
    category: Optional[GalleryCategory] = None
    alt: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime.date] = None
    featured: Optional[bool] = None
    order: Optional[int] = None


class SiteSettingsInput(CamelModel):
    site_name: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    facebook_url: Optional[str] = None
    youtube_url: Optional[str] = None
    twitter_url: Optional[str] = None
    show_anonymous_donors: Optional[bool] = None
    enable_gallery: Optional[bool] = None


__all__ = [
    "ActivityLog",
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
    "OrderUpdate",
    "PrayerTimes",
    "SiteSettings",
    "SiteSettingsInput",
    "SocialLinks",
    "UserInput",
]
