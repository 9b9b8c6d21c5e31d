"""
Path and verb bindings for every admin API resource.

Each grouping is a thin layer over ``RequestDispatcher.send``; authentication,
refresh and error conversion all happen in the dispatcher pipeline.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel

from amanat_admin.clients.dispatcher import RequestDispatcher
from amanat_admin.schemas import (
    ApiResponse,
    CommitteeInput,
    CommitteeMemberInput,
    ContributionInput,
    GalleryImageInput,
    LandDonorInput,
    OrderUpdate,
    PaginationParams,
    PrayerTimes,
    SiteSettingsInput,
    UserInput,
)

Payload = Union[BaseModel, Mapping[str, Any]]
Params = Union[PaginationParams, Mapping[str, Any], None]
# (filename, content, content type) as accepted by httpx multipart uploads.
UploadFile = Tuple[str, Union[bytes, BinaryIO], str]


def _to_body(payload: Optional[Payload]) -> Optional[Dict[str, Any]]:
    if payload is None:
        return None
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, exclude_none=True, mode="json")
    return dict(payload)


def _to_query(params: Params = None, **filters: Any) -> Dict[str, Any]:
    query: Dict[str, Any] = _to_body(params) or {}
    for key, value in filters.items():
        if value is None:
            continue
        query[key] = value
    return query


def _orders(orders: Iterable[Union[OrderUpdate, Mapping[str, int]]]) -> List[Dict[str, Any]]:
    return [_to_body(item) for item in orders]  # type: ignore[misc]


class ResourceApi:
    """Shared plumbing for resource groupings."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self._dispatcher = dispatcher

    async def _call(
        self,
        method: str,
        path: str,
        body: Optional[Payload] = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        files: Any = None,
        allow_refresh: bool = True,
    ) -> ApiResponse:
        payload = await self._dispatcher.send(
            method,
            path,
            _to_body(body),
            params=params or None,
            files=files,
            allow_refresh=allow_refresh,
        )
        if payload is None:
            return ApiResponse()
        return ApiResponse.model_validate(payload)


class AuthApi(ResourceApi):
    """Sign-in endpoints. A 401 from login, logout or refresh is final: no token refresh."""

    async def login(self, email: str, password: str) -> ApiResponse:
        return await self._call(
            "POST",
            "/auth/login",
            {"email": email, "password": password},
            allow_refresh=False,
        )

    async def logout(self) -> ApiResponse:
        return await self._call("POST", "/auth/logout", allow_refresh=False)

    async def refresh(self, refresh_token: str) -> ApiResponse:
        return await self._call(
            "POST", "/auth/refresh", {"refreshToken": refresh_token}, allow_refresh=False
        )

    async def change_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> ApiResponse:
        return await self._call(
            "POST",
            "/auth/change-password",
            {
                "currentPassword": current_password,
                "newPassword": new_password,
                "confirmPassword": confirm_password,
            },
        )

    async def get_profile(self) -> ApiResponse:
        return await self._call("GET", "/auth/me")


class UsersApi(ResourceApi):
    async def get_all(self, params: Params = None) -> ApiResponse:
        return await self._call("GET", "/users", params=_to_query(params))

    async def get_by_id(self, user_id: int) -> ApiResponse:
        return await self._call("GET", f"/users/{user_id}")

    async def create(self, data: Union[UserInput, Mapping[str, Any]]) -> ApiResponse:
        return await self._call("POST", "/users", data)

    async def update(self, user_id: int, data: Union[UserInput, Mapping[str, Any]]) -> ApiResponse:
        return await self._call("PUT", f"/users/{user_id}", data)

    async def delete(self, user_id: int) -> ApiResponse:
        return await self._call("DELETE", f"/users/{user_id}")

    async def toggle_status(self, user_id: int, is_active: bool) -> ApiResponse:
        return await self._call("PATCH", f"/users/{user_id}/status", {"isActive": is_active})


class CommitteesApi(ResourceApi):
    async def get_all(self, params: Params = None) -> ApiResponse:
        return await self._call("GET", "/committees", params=_to_query(params))

    async def get_current(self) -> ApiResponse:
        return await self._call("GET", "/committees/current")

    async def get_by_id(self, committee_id: int) -> ApiResponse:
        return await self._call("GET", f"/committees/{committee_id}")

    async def create(self, data: Union[CommitteeInput, Mapping[str, Any]]) -> ApiResponse:
        return await self._call("POST", "/committees", data)

    async def update(
        self, committee_id: int, data: Union[CommitteeInput, Mapping[str, Any]]
    ) -> ApiResponse:
        return await self._call("PUT", f"/committees/{committee_id}", data)

    async def delete(self, committee_id: int) -> ApiResponse:
        return await self._call("DELETE", f"/committees/{committee_id}")

    async def get_member(self, member_id: int) -> ApiResponse:
        return await self._call("GET", f"/committees/members/{member_id}")

    async def create_member(
        self, data: Union[CommitteeMemberInput, Mapping[str, Any]]
    ) -> ApiResponse:
        return await self._call("POST", "/committees/members", data)

    async def update_member(
        self, member_id: int, data: Union[CommitteeMemberInput, Mapping[str, Any]]
    ) -> ApiResponse:
        return await self._call("PUT", f"/committees/members/{member_id}", data)

    async def delete_member(self, member_id: int) -> ApiResponse:
        return await self._call("DELETE", f"/committees/members/{member_id}")

    async def reorder_members(
        self, committee_id: int, member_orders: Iterable[Union[OrderUpdate, Mapping[str, int]]]
    ) -> ApiResponse:
        return await self._call(
            "PATCH",
            f"/committees/{committee_id}/members/reorder",
            {"memberOrders": _orders(member_orders)},
        )


class ContributionsApi(ResourceApi):
    async def get_all(
        self,
        params: Params = None,
        *,
        type: Optional[str] = None,
        status: Optional[str] = None,
        anonymous: Optional[bool] = None,
    ) -> ApiResponse:
        query = _to_query(params, type=type, status=status, anonymous=anonymous)
        return await self._call("GET", "/contributions", params=query)

    async def get_by_id(self, contribution_id: int) -> ApiResponse:
        return await self._call("GET", f"/contributions/{contribution_id}")

    async def create(self, data: Union[ContributionInput, Mapping[str, Any]]) -> ApiResponse:
        return await self._call("POST", "/contributions", data)

    async def update(
        self, contribution_id: int, data: Union[ContributionInput, Mapping[str, Any]]
    ) -> ApiResponse:
        return await self._call("PUT", f"/contributions/{contribution_id}", data)

    async def update_status(
        self, contribution_id: int, status: str, notes: Optional[str] = None
    ) -> ApiResponse:
        body: Dict[str, Any] = {"status": status}
        if notes is not None:
            body["notes"] = notes
        return await self._call("PATCH", f"/contributions/{contribution_id}/status", body)

    async def delete(self, contribution_id: int) -> ApiResponse:
        return await self._call("DELETE", f"/contributions/{contribution_id}")

    async def get_statistics(self) -> ApiResponse:
        return await self._call("GET", "/contributions/statistics")

    async def get_monthly_data(self, year: Optional[int] = None) -> ApiResponse:
        return await self._call("GET", "/contributions/chart/monthly", params=_to_query(year=year))


class LandDonorsApi(ResourceApi):
    async def get_all(
        self,
        params: Params = None,
        *,
        verified: Optional[bool] = None,
        land_type: Optional[str] = None,
    ) -> ApiResponse:
        query = _to_query(params, verified=verified, landType=land_type)
        return await self._call("GET", "/land-donors", params=query)

    async def get_by_id(self, donor_id: int) -> ApiResponse:
        return await self._call("GET", f"/land-donors/{donor_id}")

    async def create(self, data: Union[LandDonorInput, Mapping[str, Any]]) -> ApiResponse:
        return await self._call("POST", "/land-donors", data)

    async def update(
        self, donor_id: int, data: Union[LandDonorInput, Mapping[str, Any]]
    ) -> ApiResponse:
        return await self._call("PUT", f"/land-donors/{donor_id}", data)

    async def toggle_verified(self, donor_id: int, verified: bool) -> ApiResponse:
        return await self._call("PATCH", f"/land-donors/{donor_id}/verify", {"verified": verified})

    async def delete(self, donor_id: int) -> ApiResponse:
        return await self._call("DELETE", f"/land-donors/{donor_id}")

    async def get_statistics(self) -> ApiResponse:
        return await self._call("GET", "/land-donors/statistics")


class GalleryApi(ResourceApi):
    async def get_all(
        self,
        params: Params = None,
        *,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> ApiResponse:
        query = _to_query(params, category=category, featured=featured)
        return await self._call("GET", "/gallery", params=query)

    async def get_by_id(self, image_id: int) -> ApiResponse:
        return await self._call("GET", f"/gallery/{image_id}")

    async def get_categories(self) -> ApiResponse:
        return await self._call("GET", "/gallery/categories")

    async def create(self, data: Union[GalleryImageInput, Mapping[str, Any]]) -> ApiResponse:
        return await self._call("POST", "/gallery", data)

    async def update(
        self, image_id: int, data: Union[GalleryImageInput, Mapping[str, Any]]
    ) -> ApiResponse:
        return await self._call("PUT", f"/gallery/{image_id}", data)

    async def toggle_featured(self, image_id: int, featured: bool) -> ApiResponse:
        return await self._call("PATCH", f"/gallery/{image_id}/featured", {"featured": featured})

    async def delete(self, image_id: int) -> ApiResponse:
        return await self._call("DELETE", f"/gallery/{image_id}")

    async def reorder(
        self, image_orders: Iterable[Union[OrderUpdate, Mapping[str, int]]]
    ) -> ApiResponse:
        return await self._call("PATCH", "/gallery/reorder", {"imageOrders": _orders(image_orders)})


class SettingsApi(ResourceApi):
    async def get(self) -> ApiResponse:
        return await self._call("GET", "/settings")

    async def update(self, data: Union[SiteSettingsInput, Mapping[str, Any]]) -> ApiResponse:
        return await self._call("PUT", "/settings", data)

    async def toggle_maintenance(self, enabled: bool) -> ApiResponse:
        return await self._call("PATCH", "/settings/maintenance", {"enabled": enabled})

    async def update_prayer_times(
        self, times: Union[PrayerTimes, Mapping[str, Any]]
    ) -> ApiResponse:
        return await self._call("PATCH", "/settings/prayer-times", times)


class ActivityApi(ResourceApi):
    async def get_all(self, params: Params = None, *, type: Optional[str] = None) -> ApiResponse:
        return await self._call("GET", "/activity", params=_to_query(params, type=type))

    async def get_recent(self, limit: Optional[int] = None) -> ApiResponse:
        return await self._call("GET", "/activity/recent", params=_to_query(limit=limit))

    async def cleanup(self, days: Optional[int] = None) -> ApiResponse:
        return await self._call("DELETE", "/activity/cleanup", params=_to_query(days=days))


class StatisticsApi(ResourceApi):
    async def get_dashboard(self) -> ApiResponse:
        return await self._call("GET", "/statistics/dashboard")

    async def refresh(self) -> ApiResponse:
        return await self._call("POST", "/statistics/refresh")


class UploadApi(ResourceApi):
    """Multipart uploads; the dispatcher leaves the content type to httpx."""

    async def upload_gallery_image(self, file: UploadFile) -> ApiResponse:
        return await self._call("POST", "/upload/gallery", files=[("image", file)])

    async def upload_multiple_gallery_images(self, files: Iterable[UploadFile]) -> ApiResponse:
        return await self._call(
            "POST", "/upload/gallery/multiple", files=[("images", item) for item in files]
        )

    async def upload_avatar(self, file: UploadFile) -> ApiResponse:
        return await self._call("POST", "/upload/avatar", files=[("avatar", file)])

    async def upload_member_photo(self, file: UploadFile) -> ApiResponse:
        return await self._call("POST", "/upload/member", files=[("photo", file)])

    async def delete_file(self, file_type: str, filename: str) -> ApiResponse:
        return await self._call("DELETE", f"/upload/{file_type}/{filename}")


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
    "UploadFile",
    "UsersApi",
]
