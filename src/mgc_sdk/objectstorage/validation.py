"""Local checks run before any storage call."""

from __future__ import annotations

import re

from mgc_sdk.client.errors import InvalidBucketNameError, InvalidObjectKeyError

_BUCKET_NAME = re.compile(r"^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$")


def check_bucket_name(name: str) -> None:
    """Raise ``InvalidBucketNameError`` unless *name* is a valid S3 bucket name."""
    if not name or not _BUCKET_NAME.match(name) or ".." in name:
        raise InvalidBucketNameError(name)


def check_object_key(key: str) -> None:
    if not key:
        raise InvalidObjectKeyError(key)
