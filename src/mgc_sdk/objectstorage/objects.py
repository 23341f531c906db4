"""Object operations."""

from __future__ import annotations

import io
import logging
from datetime import datetime
from itertools import islice
from typing import TYPE_CHECKING, Any

import urllib3
from minio.commonconfig import GOVERNANCE
from minio.retention import Retention

from mgc_sdk.client.errors import InvalidObjectDataError, ObjectError, ValidationError
from mgc_sdk.models.storage import (
    Object,
    ObjectFilterOptions,
    ObjectListOptions,
    ObjectRetention,
    RetentionMode,
)
from mgc_sdk.objectstorage.validation import check_bucket_name, check_object_key

if TYPE_CHECKING:
    from mgc_sdk.objectstorage.client import ObjectStorageClient

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _to_object(item: Any) -> Object:
    return Object(
        key=item.object_name,
        size=getattr(item, "size", None),
        last_modified=getattr(item, "last_modified", None),
        etag=getattr(item, "etag", None),
        content_type=getattr(item, "content_type", None),
        version_id=getattr(item, "version_id", None),
        is_dir=bool(getattr(item, "is_dir", False)),
    )


class ObjectService:
    def __init__(self, client: ObjectStorageClient) -> None:
        self._client = client

    @property
    def _storage(self) -> Any:
        return self._client.storage

    def upload(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str | None = None,
    ) -> None:
        check_bucket_name(bucket)
        check_object_key(key)
        if not data:
            raise InvalidObjectDataError("data cannot be empty")
        self._storage.put_object(
            bucket_name=bucket,
            object_name=key,
            data=io.BytesIO(data),
            length=len(data),
            content_type=content_type or DEFAULT_CONTENT_TYPE,
        )
        logger.debug("uploaded bucket=%s key=%s size=%d", bucket, key, len(data))

    def download(self, bucket: str, key: str, *, version_id: str | None = None) -> bytes:
        """Return the whole object body.

        Errors opening the object propagate from the storage client; a failure
        while reading the stream raises :class:`ObjectError`.
        """
        check_bucket_name(bucket)
        check_object_key(key)
        response = self._storage.get_object(
            bucket_name=bucket, object_name=key, version_id=version_id,
        )
        try:
            return response.read()
        except (OSError, urllib3.exceptions.HTTPError) as exc:
            raise ObjectError("download", bucket, key, str(exc)) from exc
        finally:
            response.close()
            response.release_conn()

    def list(self, bucket: str, opts: ObjectListOptions | None = None) -> list[Object]:
        check_bucket_name(bucket)
        opts = opts or ObjectListOptions()
        for field in ("offset", "limit"):
            if (getattr(opts, field) or 0) < 0:
                raise ValidationError(f"{field} must be >= 0", field=field)
        items = self._storage.list_objects(
            bucket_name=bucket, prefix=opts.prefix, recursive=opts.recursive,
        )
        start = opts.offset or 0
        stop = start + opts.limit if opts.limit is not None else None
        return [_to_object(item) for item in islice(items, start, stop)]

    def list_all(self, bucket: str, opts: ObjectFilterOptions | None = None) -> list[Object]:
        filters = opts.model_dump() if opts else {}
        return self.list(bucket, ObjectListOptions(**filters))

    def delete(self, bucket: str, key: str, *, version_id: str | None = None) -> None:
        check_bucket_name(bucket)
        check_object_key(key)
        self._storage.remove_object(bucket_name=bucket, object_name=key, version_id=version_id)

    def metadata(self, bucket: str, key: str) -> Object:
        check_bucket_name(bucket)
        check_object_key(key)
        return _to_object(self._storage.stat_object(bucket_name=bucket, object_name=key))

    def lock(self, bucket: str, key: str, retain_until: datetime) -> None:
        """Apply GOVERNANCE retention to the object until *retain_until*."""
        check_bucket_name(bucket)
        check_object_key(key)
        self._storage.set_object_retention(
            bucket_name=bucket, object_name=key, config=Retention(GOVERNANCE, retain_until),
        )

    def get_retention(self, bucket: str, key: str) -> ObjectRetention | None:
        check_bucket_name(bucket)
        check_object_key(key)
        retention = self._storage.get_object_retention(bucket_name=bucket, object_name=key)
        if retention is None:
            return None
        return ObjectRetention(
            mode=RetentionMode(retention.mode) if retention.mode else None,
            retain_until=retention.retain_until_date,
        )
