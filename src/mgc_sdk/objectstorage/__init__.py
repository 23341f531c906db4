"""S3-compatible object storage: buckets, objects and presigned URLs."""

from mgc_sdk.objectstorage.client import ObjectStorageClient
from mgc_sdk.objectstorage.endpoints import Endpoint
from mgc_sdk.objectstorage.storage import StorageClient

__all__ = ["Endpoint", "ObjectStorageClient", "StorageClient"]
