"""Object storage service client backed by MinIO."""

from __future__ import annotations

from typing import Any

from minio import Minio

from mgc_sdk.client.core import CoreClient
from mgc_sdk.client.errors import ValidationError
from mgc_sdk.objectstorage.buckets import BucketService
from mgc_sdk.objectstorage.endpoints import Endpoint, validate_endpoint
from mgc_sdk.objectstorage.objects import ObjectService
from mgc_sdk.objectstorage.presigned import PresignedService
from mgc_sdk.objectstorage.storage import StorageClient

APP_NAME = "wrapper"


class ObjectStorageClient:
    """Buckets, objects and presigned URLs on the S3-compatible storage.

    A ``minio.Minio`` client is created for *endpoint* unless *storage* is
    given.
    """

    def __init__(
        self,
        core: CoreClient,
        access_key: str,
        secret_key: str,
        *,
        endpoint: Endpoint | str = Endpoint.BR_SE1,
        storage: StorageClient | None = None,
    ) -> None:
        if core is None:
            raise ValidationError("core client cannot be None", field="core")
        if not access_key:
            raise ValidationError("access key cannot be empty", field="access_key")
        if not secret_key:
            raise ValidationError("secret key cannot be empty", field="secret_key")
        self.core = core
        self.endpoint = validate_endpoint(endpoint)
        if storage is None:
            storage = Minio(
                self.endpoint.host,
                access_key=access_key,
                secret_key=secret_key,
                secure=self.endpoint.value.startswith("https://"),
                region=self.endpoint.region,
            )
        storage.set_app_info(APP_NAME, core.user_agent)
        self.storage = storage
        self.buckets = BucketService(self)
        self.objects = ObjectService(self)
        self.presigner = PresignedService(self)

    def close(self) -> None:
        self.core.close()

    def __enter__(self) -> ObjectStorageClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
