"""Object storage models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Bucket(BaseModel):
    name: str
    creation_date: datetime | None = None


class Object(BaseModel):
    """An object (or a common prefix when ``is_dir``) in a bucket."""

    key: str
    size: int | None = None
    last_modified: datetime | None = None
    etag: str | None = None
    content_type: str | None = None
    version_id: str | None = None
    is_dir: bool = False


class ObjectListOptions(BaseModel):
    """Listing options; ``offset``/``limit`` are applied over the listing."""

    prefix: str | None = None
    recursive: bool = False
    offset: int | None = None
    limit: int | None = None


class ObjectFilterOptions(BaseModel):
    prefix: str | None = None
    recursive: bool = False


class VersioningStatus(str, Enum):
    ENABLED = "Enabled"
    SUSPENDED = "Suspended"
    OFF = "Off"


class RetentionMode(str, Enum):
    GOVERNANCE = "GOVERNANCE"
    COMPLIANCE = "COMPLIANCE"


class ValidityUnit(str, Enum):
    DAYS = "Days"
    YEARS = "Years"


class BucketLockConfig(BaseModel):
    """Default object-lock retention of a bucket."""

    enabled: bool
    mode: RetentionMode | None = None
    validity: int | None = None
    unit: ValidityUnit | None = None


class ObjectRetention(BaseModel):
    mode: RetentionMode | None = None
    retain_until: datetime | None = None


class PolicyStatement(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sid: str | None = Field(default=None, alias="Sid")
    effect: str = Field(alias="Effect")
    principal: Any = Field(default=None, alias="Principal")
    action: str | list[str] = Field(alias="Action")
    resource: str | list[str] = Field(alias="Resource")
    condition: dict[str, Any] | None = Field(default=None, alias="Condition")


class Policy(BaseModel):
    """An S3 bucket policy document."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = Field(default="2012-10-17", alias="Version")
    id: str | None = Field(default=None, alias="Id")
    statement: list[PolicyStatement] = Field(default_factory=list, alias="Statement")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
