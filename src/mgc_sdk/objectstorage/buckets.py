"""Bucket operations."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from minio.commonconfig import GOVERNANCE
from minio.deleteobjects import DeleteObject
from minio.objectlockconfig import DAYS, YEARS, ObjectLockConfig
from minio.versioningconfig import ENABLED, SUSPENDED, VersioningConfig
from pydantic import ValidationError as PydanticValidationError

from mgc_sdk.client.errors import BucketError, InvalidPolicyError, ValidationError
from mgc_sdk.models.storage import (
    Bucket,
    BucketLockConfig,
    Policy,
    RetentionMode,
    ValidityUnit,
    VersioningStatus,
)
from mgc_sdk.objectstorage.validation import check_bucket_name

if TYPE_CHECKING:
    from mgc_sdk.objectstorage.client import ObjectStorageClient

logger = logging.getLogger(__name__)

_UNITS = {ValidityUnit.DAYS: DAYS, ValidityUnit.YEARS: YEARS}


class BucketService:
    """Bucket lifecycle, policy, object lock and versioning.

    Errors raised by the storage client propagate unchanged.
    """

    def __init__(self, client: ObjectStorageClient) -> None:
        self._client = client

    @property
    def _storage(self) -> Any:
        return self._client.storage

    def list(self) -> list[Bucket]:
        return [
            Bucket(name=b.name, creation_date=b.creation_date)
            for b in self._storage.list_buckets()
        ]

    def create(self, name: str, *, object_lock: bool = False) -> None:
        check_bucket_name(name)
        self._storage.make_bucket(
            bucket_name=name, location=self._client.endpoint.region, object_lock=object_lock,
        )

    def exists(self, name: str) -> bool:
        check_bucket_name(name)
        return bool(self._storage.bucket_exists(bucket_name=name))

    def delete(self, name: str, *, recursive: bool = False) -> None:
        """Delete a bucket; with *recursive* its objects are removed first."""
        check_bucket_name(name)
        if recursive:
            self._empty(name)
        self._storage.remove_bucket(bucket_name=name)

    def _empty(self, name: str) -> None:
        to_delete = (
            DeleteObject(obj.object_name)
            for obj in self._storage.list_objects(bucket_name=name, recursive=True)
        )
        failures = list(
            self._storage.remove_objects(bucket_name=name, delete_object_list=to_delete)
        )
        if failures:
            first = failures[0]
            raise BucketError(
                "delete",
                name,
                f"could not remove {len(failures)} object(s), "
                f"first: {first.name}: {first.message}",
            )
        logger.debug("bucket=%s emptied", name)

    def get_policy(self, name: str) -> Policy:
        check_bucket_name(name)
        raw = self._storage.get_bucket_policy(bucket_name=name)
        if not raw:
            raise InvalidPolicyError("empty policy document")
        try:
            return Policy.model_validate_json(raw)
        except PydanticValidationError as exc:
            raise InvalidPolicyError(str(exc)) from exc

    def set_policy(self, name: str, policy: Policy | dict[str, Any] | str) -> None:
        check_bucket_name(name)
        try:
            if isinstance(policy, str):
                policy = Policy.model_validate(json.loads(policy))
            elif isinstance(policy, dict):
                policy = Policy.model_validate(policy)
        except (ValueError, PydanticValidationError) as exc:
            raise InvalidPolicyError(str(exc)) from exc
        if not policy.statement:
            raise InvalidPolicyError("policy must have at least one statement")
        self._storage.set_bucket_policy(bucket_name=name, policy=policy.to_json())

    def delete_policy(self, name: str) -> None:
        check_bucket_name(name)
        self._storage.delete_bucket_policy(bucket_name=name)

    def lock(
        self,
        name: str,
        validity: int,
        unit: ValidityUnit | str = ValidityUnit.DAYS,
    ) -> None:
        """Set a GOVERNANCE default retention of *validity* days or years.

        *unit* is matched case-insensitively (``"DAYS"``, ``"days"``, ``"Days"``).

        The bucket must have been created with ``object_lock=True``.
        """
        check_bucket_name(name)
        if validity <= 0:
            raise ValidationError("validity must be positive", field="validity")
        try:
            minio_unit = _UNITS[ValidityUnit(unit.capitalize())]
        except ValueError:
            raise ValidationError(f"invalid validity unit: {unit}", field="unit") from None
        self._storage.set_object_lock_config(
            bucket_name=name, config=ObjectLockConfig(GOVERNANCE, validity, minio_unit),
        )

    def unlock(self, name: str) -> None:
        """Remove the bucket's default retention."""
        check_bucket_name(name)
        self._storage.delete_object_lock_config(bucket_name=name)

    def get_lock_config(self, name: str) -> BucketLockConfig:
        check_bucket_name(name)
        config = self._storage.get_object_lock_config(bucket_name=name)
        duration = getattr(config, "duration", None)
        unit = getattr(config, "duration_unit", None)
        if isinstance(duration, tuple):
            duration, unit = duration
        if config.mode is None:
            return BucketLockConfig(enabled=False)
        return BucketLockConfig(
            enabled=True,
            mode=RetentionMode(config.mode),
            validity=duration,
            unit=ValidityUnit(unit) if unit else None,
        )

    def is_locked(self, name: str) -> bool:
        return self.get_lock_config(name).enabled

    def get_versioning_status(self, name: str) -> VersioningStatus:
        check_bucket_name(name)
        config = self._storage.get_bucket_versioning(bucket_name=name)
        return VersioningStatus(config.status or VersioningStatus.OFF.value)

    def enable_versioning(self, name: str) -> None:
        check_bucket_name(name)
        self._storage.set_bucket_versioning(bucket_name=name, config=VersioningConfig(ENABLED))

    def suspend_versioning(self, name: str) -> None:
        check_bucket_name(name)
        self._storage.set_bucket_versioning(
            bucket_name=name, config=VersioningConfig(SUSPENDED),
        )
