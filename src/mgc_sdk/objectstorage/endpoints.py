"""Regional object storage endpoints."""

from __future__ import annotations

from enum import Enum
from urllib.parse import urlsplit

from mgc_sdk.client.errors import ValidationError


class Endpoint(str, Enum):
    BR_SE1 = "https://br-se1.magaluobjects.com"
    BR_NE1 = "https://br-ne1.magaluobjects.com"

    @property
    def region(self) -> str:
        return self.host.split(".", 1)[0]

    @property
    def host(self) -> str:
        return urlsplit(self.value).netloc


def validate_endpoint(endpoint: Endpoint | str) -> Endpoint:
    """Return the :class:`Endpoint` for *endpoint*, rejecting unknown URLs."""
    if isinstance(endpoint, Endpoint):
        return endpoint
    try:
        return Endpoint(str(endpoint).rstrip("/"))
    except ValueError:
        known = ", ".join(e.value for e in Endpoint)
        raise ValidationError(
            f"unknown endpoint '{endpoint}' (expected one of: {known})",
            field="endpoint",
        ) from None
