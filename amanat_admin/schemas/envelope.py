"""
Pydantic models for the JSON envelope shared by every admin API response.
"""

from typing import Any, List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Base model accepting both camelCase wire names and snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationMeta(CamelModel):
    """Paging information returned alongside list endpoints."""

    page: int
    limit: int
    total: int
    total_pages: int


class PaginationParams(CamelModel):
    """Query parameters accepted by paginated list endpoints."""

    page: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1)
    sort_by: Optional[str] = None
    sort_order: Optional[Literal["asc", "desc"]] = None
    search: Optional[str] = None


class ApiResponse(CamelModel):
    """The ``{ success, message, data, meta? }`` envelope."""

    success: bool = True
    message: str = ""
    data: Any = None
    meta: Optional[PaginationMeta] = None

    def data_as(self, model: Type[ModelT]) -> ModelT:
        return model.model_validate(self.data)

    def items_as(self, model: Type[ModelT]) -> List[ModelT]:
        return [model.model_validate(item) for item in self.data or []]


__all__ = [
    "ApiResponse",
    "CamelModel",
    "PaginationMeta",
    "PaginationParams",
]
