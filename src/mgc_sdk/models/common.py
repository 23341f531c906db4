"""Common response and request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PageMeta(BaseModel):
    """Pagination block of a list envelope."""

    offset: int = 0
    limit: int = 0
    count: int = 0
    total: int = 0


class Meta(BaseModel):
    """``meta`` object of a list envelope: ``{"page": {...}}``."""

    page: PageMeta = Field(default_factory=PageMeta)


class IDResponse(BaseModel):
    """Body returned by create-style endpoints."""

    id: str


class IDOrName(BaseModel):
    """Reference to a resource by id or by name."""

    id: str | None = None
    name: str | None = None


class PageOptions(BaseModel):
    """Offset/limit/sort query options shared by list endpoints.

    Every field is optional; ``None`` leaves the parameter out of the query.
    """

    limit: int | None = Field(default=None, serialization_alias="_limit")
    offset: int | None = Field(default=None, serialization_alias="_offset")
    sort: str | None = Field(default=None, serialization_alias="_sort")


class SortOptions(BaseModel):
    """Filters for ``list_all`` calls, which manage offset/limit themselves."""

    sort: str | None = Field(default=None, serialization_alias="_sort")
