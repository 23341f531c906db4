"""Instance snapshot models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mgc_sdk.models.common import IDOrName, Meta, PageOptions, SortOptions
from mgc_sdk.models.instance import CreateInstanceNetwork

SNAPSHOT_EXPAND_INSTANCE = "instance"


class SnapshotInstance(BaseModel):
    id: str
    name: str | None = None
    machine_type: IDOrName | None = None
    image: IDOrName | None = None


class Snapshot(BaseModel):
    """A point-in-time copy of an instance."""

    id: str
    name: str | None = None
    status: str
    state: str
    size: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    instance: SnapshotInstance | None = None
    availability_zones: list[str] | None = None


class SnapshotList(BaseModel):
    meta: Meta = Field(default_factory=Meta)
    snapshots: list[Snapshot] = Field(default_factory=list)


class SnapshotListOptions(PageOptions):
    expand: list[str] | None = None


class SnapshotFilterOptions(SortOptions):
    expand: list[str] | None = None


class CreateSnapshotRequest(BaseModel):
    name: str
    instance: IDOrName


class RestoreSnapshotRequest(BaseModel):
    """Body of ``POST /v1/snapshots/{id}``; creates a new instance."""

    name: str
    machine_type: IDOrName
    ssh_key_name: str | None = None
    availability_zone: str | None = None
    network: CreateInstanceNetwork | None = None
    user_data: str | None = None
