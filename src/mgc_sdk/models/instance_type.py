"""Instance type (machine type) models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mgc_sdk.models.common import Meta, PageOptions, SortOptions


class InstanceType(BaseModel):
    """A machine flavor; ``ram`` and ``disk`` are in MB and GB."""

    id: str
    name: str
    vcpus: int
    ram: int
    disk: int
    gpu: int | None = None
    status: str | None = None
    sku: str | None = None
    availability_zones: list[str] | None = None


class InstanceTypeList(BaseModel):
    meta: Meta = Field(default_factory=Meta)
    instance_types: list[InstanceType] = Field(default_factory=list)


class InstanceTypeListOptions(PageOptions):
    availability_zone: str | None = Field(
        default=None, serialization_alias="availability-zone",
    )


class InstanceTypeFilterOptions(SortOptions):
    availability_zone: str | None = Field(
        default=None, serialization_alias="availability-zone",
    )
