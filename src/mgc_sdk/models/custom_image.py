"""Custom (user-imported) image models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from mgc_sdk.models.common import Meta, PageOptions, SortOptions
from mgc_sdk.models.image import MinimumRequirements


class Platform(str, Enum):
    LINUX = "linux"
    WINDOWS = "windows"


class Architecture(str, Enum):
    X86_64 = "x86/64"


class License(str, Enum):
    """Whether the image software requires a license."""

    LICENSED = "licensed"
    UNLICENSED = "unlicensed"


class CustomImage(BaseModel):
    """A custom image imported from a disk file URL."""

    id: str
    name: str
    status: str
    platform: str | None = None
    architecture: str | None = None
    license: str | None = None
    requirements: MinimumRequirements | None = None
    version: str | None = None
    description: str | None = None
    uefi: bool | None = None
    metadata: dict[str, Any] | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CustomImageList(BaseModel):
    meta: Meta = Field(default_factory=Meta)
    images: list[CustomImage] = Field(default_factory=list)


class CreateCustomImageRequest(BaseModel):
    """Body of ``POST /v1/images/custom``.

    Platform, architecture and license accept the enum members or their raw
    string values; the API validates unknown values.
    """

    name: str
    platform: Platform | str
    architecture: Architecture | str
    license: License | str
    url: str
    requirements: MinimumRequirements | None = None
    version: str | None = None
    description: str | None = None
    uefi: bool | None = None


class CustomImageListOptions(PageOptions):
    pass


class CustomImageFilterOptions(SortOptions):
    pass
