"""Tests for ObjectStorageClient construction and endpoints."""

from __future__ import annotations

import pytest
from minio import Minio

from fakes import FakeStorageClient
from mgc_sdk.client.core import CoreClient
from mgc_sdk.client.errors import (
    InvalidBucketNameError,
    InvalidObjectKeyError,
    ValidationError,
)
from mgc_sdk.objectstorage import Endpoint, ObjectStorageClient, StorageClient
from mgc_sdk.objectstorage.endpoints import validate_endpoint
from mgc_sdk.objectstorage.validation import check_bucket_name, check_object_key


class TestConstruction:
    def test_requires_core(self, fake_storage: FakeStorageClient):
        with pytest.raises(ValidationError) as exc_info:
            ObjectStorageClient(None, "ak", "sk", storage=fake_storage)
        assert exc_info.value.field == "core"

    @pytest.mark.parametrize(
        ("access", "secret", "field"),
        [("", "sk", "access_key"), ("ak", "", "secret_key")],
    )
    def test_requires_credentials(self, core: CoreClient, access: str, secret: str, field: str):
        with pytest.raises(ValidationError) as exc_info:
            ObjectStorageClient(core, access, secret)
        assert exc_info.value.field == field

    def test_unknown_endpoint(self, core: CoreClient):
        with pytest.raises(ValidationError) as exc_info:
            ObjectStorageClient(core, "ak", "sk", endpoint="https://s3.example.com")
        assert exc_info.value.field == "endpoint"

    def test_sets_app_info(self, core: CoreClient, fake_storage: FakeStorageClient):
        ObjectStorageClient(core, "ak", "sk", storage=fake_storage)
        assert fake_storage.app_info == ("wrapper", core.user_agent)

    def test_services_attached(self, object_storage: ObjectStorageClient):
        assert object_storage.buckets is not None
        assert object_storage.objects is not None
        assert object_storage.presigner is not None
        assert object_storage.endpoint is Endpoint.BR_SE1

    def test_builds_minio_client(self, core: CoreClient):
        client = ObjectStorageClient(core, "ak", "sk", endpoint=Endpoint.BR_NE1)
        assert isinstance(client.storage, Minio)

    def test_fake_satisfies_protocol(self, fake_storage: FakeStorageClient):
        assert isinstance(fake_storage, StorageClient)


class TestEndpoints:
    def test_host_and_region(self):
        assert Endpoint.BR_SE1.host == "br-se1.magaluobjects.com"
        assert Endpoint.BR_NE1.region == "br-ne1"

    def test_validate_from_string(self):
        assert validate_endpoint("https://br-ne1.magaluobjects.com/") is Endpoint.BR_NE1


class TestValidation:
    @pytest.mark.parametrize("name", ["my-bucket", "abc", "logs.2024", "a1-b2"])
    def test_valid_bucket_names(self, name: str):
        check_bucket_name(name)

    @pytest.mark.parametrize(
        "name", ["", "ab", "My-Bucket", "-bucket", "bucket-", "a..b", "a" * 64, "with_underscore"],
    )
    def test_invalid_bucket_names(self, name: str):
        with pytest.raises(InvalidBucketNameError):
            check_bucket_name(name)

    def test_empty_key(self):
        with pytest.raises(InvalidObjectKeyError):
            check_object_key("")

    def test_nested_key(self):
        check_object_key("dir/sub/file.txt")
