"""Presigned URL generation."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any

from mgc_sdk.client.errors import InvalidHTTPMethodError, ValidationError
from mgc_sdk.objectstorage.validation import check_bucket_name, check_object_key

if TYPE_CHECKING:
    from mgc_sdk.objectstorage.client import ObjectStorageClient

SUPPORTED_METHODS = ("GET", "HEAD", "PUT")


class PresignedService:
    def __init__(self, client: ObjectStorageClient) -> None:
        self._client = client

    def generate_presigned_url(
        self,
        method: str,
        bucket: str,
        key: str,
        expiry: timedelta | int,
        req_params: dict[str, str] | None = None,
    ) -> str:
        """Return a URL valid for *expiry* that authorizes *method* on one object.

        *expiry* is a ``timedelta`` or a number of seconds. Only ``GET``,
        ``HEAD`` and ``PUT`` are supported (matched exactly). *req_params* are
        signed as extra query parameters; ``PUT`` URLs do not carry them.
        """
        if method not in SUPPORTED_METHODS:
            raise InvalidHTTPMethodError(method)
        check_bucket_name(bucket)
        check_object_key(key)
        if not isinstance(expiry, timedelta):
            expiry = timedelta(seconds=expiry)
        if expiry <= timedelta(0):
            raise ValidationError("expiry must be positive", field="expiry")

        storage: Any = self._client.storage
        if method == "GET":
            return storage.presigned_get_object(
                bucket_name=bucket,
                object_name=key,
                expires=expiry,
                extra_query_params=req_params,
            )
        if method == "HEAD":
            return storage.get_presigned_url(
                method="HEAD",
                bucket_name=bucket,
                object_name=key,
                expires=expiry,
                extra_query_params=req_params,
            )
        return storage.presigned_put_object(
            bucket_name=bucket, object_name=key, expires=expiry,
        )
