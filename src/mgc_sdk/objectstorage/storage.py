"""The S3 client capability the object storage services depend on.

``minio.Minio`` satisfies :class:`StorageClient` as is; tests plug in an
in-memory implementation. Only the calls the services make are listed, and
they are always invoked with keyword arguments.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import timedelta
from typing import Any, BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class StorageClient(Protocol):
    # Buckets
    def make_bucket(
        self, bucket_name: str, location: str | None = None, object_lock: bool = False,
    ) -> None: ...

    def list_buckets(self) -> list[Any]: ...

    def bucket_exists(self, bucket_name: str) -> bool: ...

    def remove_bucket(self, bucket_name: str) -> None: ...

    def get_bucket_policy(self, bucket_name: str) -> str: ...

    def set_bucket_policy(self, bucket_name: str, policy: str | bytes) -> None: ...

    def delete_bucket_policy(self, bucket_name: str) -> None: ...

    def get_object_lock_config(self, bucket_name: str) -> Any: ...

    def set_object_lock_config(self, bucket_name: str, config: Any) -> None: ...

    def delete_object_lock_config(self, bucket_name: str) -> None: ...

    def get_bucket_versioning(self, bucket_name: str) -> Any: ...

    def set_bucket_versioning(self, bucket_name: str, config: Any) -> None: ...

    # Objects
    def put_object(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        length: int,
        content_type: str = "application/octet-stream",
    ) -> Any: ...

    def get_object(
        self, bucket_name: str, object_name: str, version_id: str | None = None,
    ) -> Any: ...

    def list_objects(
        self, bucket_name: str, prefix: str | None = None, recursive: bool = False,
    ) -> Iterator[Any]: ...

    def remove_object(
        self, bucket_name: str, object_name: str, version_id: str | None = None,
    ) -> None: ...

    def remove_objects(
        self, bucket_name: str, delete_object_list: Iterable[Any],
    ) -> Iterator[Any]: ...

    def stat_object(
        self, bucket_name: str, object_name: str, version_id: str | None = None,
    ) -> Any: ...

    def set_object_retention(
        self, bucket_name: str, object_name: str, config: Any,
    ) -> None: ...

    def get_object_retention(self, bucket_name: str, object_name: str) -> Any: ...

    def set_app_info(self, app_name: str, app_version: str) -> None: ...

    # Presigned URLs
    def presigned_get_object(
        self,
        bucket_name: str,
        object_name: str,
        expires: timedelta = ...,
        extra_query_params: Any = None,
    ) -> str: ...

    def presigned_put_object(
        self, bucket_name: str, object_name: str, expires: timedelta = ...,
    ) -> str: ...

    def get_presigned_url(
        self,
        method: str,
        bucket_name: str,
        object_name: str,
        expires: timedelta = ...,
        extra_query_params: Any = None,
    ) -> str: ...
