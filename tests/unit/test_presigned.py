"""Tests for presigned URL generation."""

from __future__ import annotations

from datetime import timedelta
from urllib.parse import parse_qs, urlsplit

import pytest

from fakes import FakeStorageClient, NoSuchBucket
from mgc_sdk.client.errors import InvalidHTTPMethodError, ValidationError
from mgc_sdk.objectstorage.client import ObjectStorageClient


@pytest.fixture
def storage(object_storage: ObjectStorageClient) -> ObjectStorageClient:
    object_storage.buckets.create("test-bucket")
    return object_storage


class TestPresigner:
    @pytest.mark.parametrize("method", ["GET", "HEAD", "PUT"])
    def test_supported_methods(
        self, storage: ObjectStorageClient, fake_storage: FakeStorageClient, method: str,
    ):
        url = storage.presigner.generate_presigned_url(
            method, "test-bucket", "test-key", timedelta(minutes=1),
        )
        parts = urlsplit(url)
        assert parts.path == "/test-bucket/test-key"
        assert parse_qs(parts.query)["X-Amz-Expires"] == ["60"]
        assert fake_storage.called("presign")[-1]["method"] == method

    @pytest.mark.parametrize("method", ["DELETE", "POST", "get", "PATCH"])
    def test_unsupported_method(
        self, storage: ObjectStorageClient, fake_storage: FakeStorageClient, method: str,
    ):
        with pytest.raises(InvalidHTTPMethodError) as exc_info:
            storage.presigner.generate_presigned_url(
                method, "test-bucket", "test-key", timedelta(minutes=1),
            )
        assert exc_info.value.method == method
        assert fake_storage.called("presign") == []

    def test_non_positive_expiry(self, storage: ObjectStorageClient):
        with pytest.raises(ValidationError) as exc_info:
            storage.presigner.generate_presigned_url("GET", "test-bucket", "k", timedelta(0))
        assert exc_info.value.field == "expiry"

    def test_expiry_in_seconds(self, storage: ObjectStorageClient):
        url = storage.presigner.generate_presigned_url("GET", "test-bucket", "hello.txt", 3600)
        assert parse_qs(urlsplit(url).query)["X-Amz-Expires"] == ["3600"]

    def test_non_positive_expiry_in_seconds(self, storage: ObjectStorageClient, fake_storage: FakeStorageClient):
        with pytest.raises(ValidationError) as exc_info:
            storage.presigner.generate_presigned_url("GET", "test-bucket", "k", -5)
        assert exc_info.value.field == "expiry"
        assert fake_storage.called("presign") == []

    def test_storage_error_propagates(self, storage: ObjectStorageClient):
        with pytest.raises(NoSuchBucket):
            storage.presigner.generate_presigned_url(
                "GET", "other-bucket", "test-key", timedelta(hours=1),
            )
