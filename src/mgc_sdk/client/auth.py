"""Authentication for the Magalu Cloud REST API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from mgc_sdk.config.constants import API_KEY_HEADER
from mgc_sdk.config.models import ClientConfig


class APIKeyAuth(httpx.Auth):
    """Authenticate using a Magalu Cloud API key (X-API-Key header)."""

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[API_KEY_HEADER] = self.api_key
        yield request


def resolve_auth(config: ClientConfig) -> httpx.Auth | None:
    """Resolve authentication from client settings."""
    if config.api_key:
        return APIKeyAuth(config.api_key)
    return None
