"""Tests for the core HTTP client and API key auth."""

from __future__ import annotations

import json

import httpx
import pytest
import respx
from pydantic import BaseModel

from mgc_sdk.client.auth import APIKeyAuth, resolve_auth
from mgc_sdk.client.core import CoreClient
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
from mgc_sdk.models.common import IDResponse

BASE = "https://api.magalu.cloud/br-se1"


class Body(BaseModel):
    name: str
    description: str | None = None


class TestAuth:
    def test_api_key_auth(self):
        auth = APIKeyAuth("secret")
        request = httpx.Request("GET", "https://example.com")
        modified = next(auth.auth_flow(request))
        assert modified.headers["X-API-Key"] == "secret"

    def test_resolve_auth(self):
        assert isinstance(resolve_auth(ClientConfig(api_key="k")), APIKeyAuth)

    def test_resolve_auth_none(self):
        assert resolve_auth(ClientConfig()) is None


class TestNewRequest:
    def test_url_and_headers(self, core: CoreClient):
        request = core.new_request("get", "/compute/v1/images", params=[("_limit", "1")])
        assert request.method == "GET"
        assert str(request.url) == f"{BASE}/compute/v1/images?_limit=1"
        assert request.headers["User-Agent"].startswith("mgc-sdk-python/")
        assert request.headers["Accept"] == "application/json"

    def test_region_selects_base_url(self):
        with CoreClient(ClientConfig(region="br-ne1")) as client:
            request = client.new_request("GET", "/compute/v1/images")
        assert str(request.url).startswith("https://api.magalu.cloud/br-ne1/")

    def test_base_url_override(self):
        with CoreClient(ClientConfig(base_url="http://localhost:8080/")) as client:
            request = client.new_request("GET", "/v1/x")
        assert str(request.url) == "http://localhost:8080/v1/x"

    def test_model_body_excludes_none(self, core: CoreClient):
        request = core.new_request("POST", "/x", body=Body(name="a"))
        assert json.loads(request.content) == {"name": "a"}
        assert request.headers["Content-Type"] == "application/json"

    def test_no_body(self, core: CoreClient):
        assert core.new_request("GET", "/x").content == b""

    def test_timeout_override(self, core: CoreClient):
        request = core.new_request("GET", "/x", timeout=2.5)
        assert request.extensions["timeout"]["read"] == 2.5

    def test_default_timeout(self, core: CoreClient):
        request = core.new_request("GET", "/x")
        assert request.extensions["timeout"]["read"] == 30.0


class TestDo:
    @respx.mock
    def test_decodes_result(self, core: CoreClient):
        respx.post(f"{BASE}/x").mock(return_value=httpx.Response(200, json={"id": "abc"}))
        result = core.execute("POST", "/x", body={"a": 1}, result_type=IDResponse)
        assert result == IDResponse(id="abc")

    @respx.mock
    def test_sends_api_key(self, core: CoreClient):
        route = respx.get(f"{BASE}/x").mock(return_value=httpx.Response(204))
        core.execute("GET", "/x")
        assert route.calls.last.request.headers["X-API-Key"] == "test-api-key"

    @respx.mock
    def test_no_result_type_ignores_body(self, core: CoreClient):
        respx.delete(f"{BASE}/x").mock(return_value=httpx.Response(204))
        assert core.execute("DELETE", "/x") is None

    @respx.mock
    def test_empty_body_is_decoding_error(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(return_value=httpx.Response(200, content=b""))
        with pytest.raises(DecodingError) as exc_info:
            core.execute("GET", "/x", result_type=IDResponse)
        assert exc_info.value.status_code == 200

    @respx.mock
    def test_whitespace_body_is_decoding_error(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(return_value=httpx.Response(200, content=b"  \n"))
        with pytest.raises(DecodingError):
            core.execute("GET", "/x", result_type=IDResponse)

    @respx.mock
    def test_malformed_json(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(return_value=httpx.Response(200, content=b'{"id": '))
        with pytest.raises(DecodingError) as exc_info:
            core.execute("GET", "/x", result_type=IDResponse)
        assert exc_info.value.body == '{"id": '

    @respx.mock
    def test_wrong_shape(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(return_value=httpx.Response(200, json={"name": "x"}))
        with pytest.raises(DecodingError):
            core.execute("GET", "/x", result_type=IDResponse)


class TestStatusMapping:
    @pytest.mark.parametrize(
        ("status", "cls"),
        [
            (400, BadRequestError),
            (422, BadRequestError),
            (401, AuthenticationError),
            (403, AuthenticationError),
            (404, NotFoundError),
            (409, ConflictError),
            (500, ServerError),
            (503, ServerError),
            (418, HTTPError),
        ],
    )
    @respx.mock
    def test_status_to_error(self, core: CoreClient, status: int, cls: type):
        respx.get(f"{BASE}/x").mock(
            return_value=httpx.Response(status, json={"message": "went wrong"}),
        )
        with pytest.raises(cls) as exc_info:
            core.execute("GET", "/x", result_type=IDResponse)
        exc = exc_info.value
        assert exc.status_code == status
        assert exc.detail == "went wrong"
        assert exc.method == "GET"
        assert exc.url == f"{BASE}/x"
        assert '"went wrong"' in exc.body

    @respx.mock
    def test_error_key_detail(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(
            return_value=httpx.Response(409, json={"error": "already exists"}),
        )
        with pytest.raises(ConflictError, match="already exists"):
            core.execute("GET", "/x")

    @respx.mock
    def test_plain_text_detail(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(return_value=httpx.Response(502, text="Bad Gateway"))
        with pytest.raises(ServerError, match="Bad Gateway"):
            core.execute("GET", "/x")

    @respx.mock
    def test_empty_error_body_keeps_status_error(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(return_value=httpx.Response(500))
        with pytest.raises(ServerError) as exc_info:
            core.execute("GET", "/x", result_type=IDResponse)
        assert exc_info.value.body == ""

    @respx.mock
    def test_auth_error_hint(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(return_value=httpx.Response(401))
        with pytest.raises(AuthenticationError, match="Check your API key"):
            core.execute("GET", "/x")


class TestTransport:
    @respx.mock
    def test_connect_error(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(TransportError, match="Cannot reach"):
            core.execute("GET", "/x")

    @respx.mock
    def test_timeout(self, core: CoreClient):
        respx.get(f"{BASE}/x").mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(TransportError, match="timed out"):
            core.execute("GET", "/x", timeout=0.1)
