"""Core HTTP client shared by every Magalu Cloud service."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from mgc_sdk.client.auth import resolve_auth
from mgc_sdk.client.errors import (
    AuthenticationError,
    BadRequestError,
    ConflictError,
    DecodingError,
    HTTPError,
    NotFoundError,
    ServerError,
    TransportError,
)
from mgc_sdk.config.models import ClientConfig

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CoreClient:
    """Synchronous HTTP client for the Magalu Cloud REST API.

    Owns one ``httpx.Client``; it holds no per-call state and can be shared
    between threads.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.base_url = self.config.url
        if transport is None:
            transport = httpx.HTTPTransport(
                retries=self.config.max_retries, verify=self.config.verify_ssl,
            )
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(self.config),
            timeout=self.config.timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": self.config.user_agent,
            },
        )

    @property
    def user_agent(self) -> str:
        return self.config.user_agent

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> CoreClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def new_request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: list[tuple[str, str]] | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Build a request relative to the regional base URL.

        Pydantic bodies are serialized by wire name with unset fields left
        out. ``timeout`` overrides the configured timeout for this request;
        ``None`` keeps the configured one.
        """
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body
        if params:
            kwargs["params"] = params
        if timeout is not None:
            kwargs["timeout"] = timeout
        return self._client.build_request(method.upper(), path, **kwargs)

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        status = response.status_code
        body = response.text
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = None
        detail = body
        if isinstance(payload, dict):
            detail = str(payload.get("message") or payload.get("error") or body)
        kwargs: dict[str, Any] = {
            "method": response.request.method,
            "url": str(response.request.url),
            "body": body,
        }
        if status in (400, 422):
            raise BadRequestError(status, detail, **kwargs)
        if status in (401, 403):
            raise AuthenticationError(status, detail or "Check your API key.", **kwargs)
        if status == 404:
            raise NotFoundError(status, detail, **kwargs)
        if status == 409:
            raise ConflictError(status, detail, **kwargs)
        if status >= 500:
            raise ServerError(status, detail, **kwargs)
        raise HTTPError(status, detail, **kwargs)

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send *request*, mapping transport failures and non-2xx statuses."""
        started = time.monotonic()
        try:
            response = self._client.send(request)
        except httpx.TimeoutException as exc:
            logger.warning("method=%s url=%s result=timeout", request.method, request.url)
            raise TransportError(f"Request to {request.url} timed out: {exc}") from exc
        except httpx.TransportError as exc:
            logger.warning("method=%s url=%s result=transport_error", request.method, request.url)
            raise TransportError(f"Cannot reach {request.url}: {exc}") from exc
        except httpx.InvalidURL as exc:
            raise TransportError(f"Invalid URL {request.url}: {exc}") from exc
        logger.debug(
            "method=%s url=%s status=%s duration_ms=%s",
            request.method,
            request.url,
            response.status_code,
            int((time.monotonic() - started) * 1000),
        )
        self._raise_for_status(response)
        return response

    def do(self, request: httpx.Request, result_type: type[T] | None = None) -> T | None:
        """Execute *request* and decode the body as *result_type*.

        With ``result_type=None`` the body is ignored. An empty body where a
        result is expected is a ``DecodingError`` even on 200.
        """
        response = self.send(request)
        if result_type is None:
            return None
        content = response.content
        if not content or not content.strip():
            raise DecodingError(
                f"Empty response body from {request.method} {request.url}",
                status_code=response.status_code,
            )
        try:
            return TypeAdapter(result_type).validate_json(content)
        except PydanticValidationError as exc:
            raise DecodingError(
                f"Cannot decode response from {request.method} {request.url}: {exc}",
                body=response.text,
                status_code=response.status_code,
            ) from exc

    def execute(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: list[tuple[str, str]] | None = None,
        result_type: type[T] | None = None,
        timeout: float | None = None,
    ) -> T | None:
        """Build, send and decode a single request."""
        request = self.new_request(method, path, body=body, params=params, timeout=timeout)
        return self.do(request, result_type)
