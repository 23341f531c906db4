"""Machine image models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from mgc_sdk.models.common import Meta, PageOptions, SortOptions


class ImageStatus(str, Enum):
    ACTIVE = "active"
    DEPRECATED = "deprecated"
    DELETED = "deleted"
    PENDING = "pending"
    CREATING = "creating"
    IMPORTING = "importing"
    ERROR = "error"
    DELETING_ERROR = "deleting_error"


class MinimumRequirements(BaseModel):
    """Hardware an instance type must provide to boot the image."""

    vcpu: int = 0
    ram: int = 0
    disk: int = 0


class Image(BaseModel):
    """A public machine image."""

    id: str
    name: str
    status: str
    version: str | None = None
    platform: str | None = None
    release_at: str | None = None
    end_standard_support_at: str | None = None
    end_life_at: str | None = None
    minimum_requirements: MinimumRequirements = Field(default_factory=MinimumRequirements)
    labels: list[str] | None = None
    availability_zones: list[str] | None = None


class ImageList(BaseModel):
    meta: Meta = Field(default_factory=Meta)
    images: list[Image] = Field(default_factory=list)


class ImageListOptions(PageOptions):
    availability_zone: str | None = Field(
        default=None, serialization_alias="availability-zone",
    )


class ImageFilterOptions(SortOptions):
    availability_zone: str | None = Field(
        default=None, serialization_alias="availability-zone",
    )
