"""Pydantic data models for the Magalu Cloud APIs."""

from mgc_sdk.models.common import IDOrName, IDResponse, Meta, PageMeta, PageOptions
from mgc_sdk.models.custom_image import (
    Architecture,
    CreateCustomImageRequest,
    CustomImage,
    CustomImageList,
    License,
    Platform,
)
from mgc_sdk.models.image import (
    Image,
    ImageFilterOptions,
    ImageList,
    ImageListOptions,
    ImageStatus,
    MinimumRequirements,
)
from mgc_sdk.models.instance import (
    CreateInstanceRequest,
    Instance,
    InstanceFilterOptions,
    InstanceList,
    InstanceListOptions,
)
from mgc_sdk.models.instance_type import (
    InstanceType,
    InstanceTypeFilterOptions,
    InstanceTypeList,
    InstanceTypeListOptions,
)
from mgc_sdk.models.snapshot import (
    CreateSnapshotRequest,
    RestoreSnapshotRequest,
    Snapshot,
    SnapshotFilterOptions,
    SnapshotList,
    SnapshotListOptions,
)
from mgc_sdk.models.storage import (
    Bucket,
    BucketLockConfig,
    Object,
    ObjectFilterOptions,
    ObjectListOptions,
    ObjectRetention,
    Policy,
    PolicyStatement,
    VersioningStatus,
)

__all__ = [
    "Architecture",
    "Bucket",
    "BucketLockConfig",
    "CreateCustomImageRequest",
    "CreateInstanceRequest",
    "CreateSnapshotRequest",
    "CustomImage",
    "CustomImageList",
    "IDOrName",
    "IDResponse",
    "Image",
    "ImageFilterOptions",
    "ImageList",
    "ImageListOptions",
    "ImageStatus",
    "Instance",
    "InstanceFilterOptions",
    "InstanceList",
    "InstanceListOptions",
    "InstanceType",
    "InstanceTypeFilterOptions",
    "InstanceTypeList",
    "InstanceTypeListOptions",
    "License",
    "Meta",
    "MinimumRequirements",
    "Object",
    "ObjectFilterOptions",
    "ObjectListOptions",
    "ObjectRetention",
    "PageMeta",
    "PageOptions",
    "Platform",
    "Policy",
    "PolicyStatement",
    "RestoreSnapshotRequest",
    "Snapshot",
    "SnapshotFilterOptions",
    "SnapshotList",
    "SnapshotListOptions",
    "VersioningStatus",
]
