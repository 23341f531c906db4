"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from fakes import FakeStorageClient
from mgc_sdk.client.core import CoreClient
from mgc_sdk.compute.client import VirtualMachineClient
from mgc_sdk.config.manager import ConfigManager
from mgc_sdk.config.models import ClientConfig, Profile
from mgc_sdk.objectstorage.client import ObjectStorageClient


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the user's config file and MGC_* variables."""
    config_file = tmp_path / "mgc" / "config.toml"
    monkeypatch.setattr("mgc_sdk.config.manager.CONFIG_FILE", config_file)
    for var in ("MGC_PROFILE", "MGC_API_KEY", "MGC_REGION", "MGC_ACCESS_KEY", "MGC_SECRET_KEY"):
        monkeypatch.delenv(var, raising=False)
    return config_file


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> Profile:
    return Profile(
        name="test",
        api_key="test-api-key",
        region="br-se1",
        access_key="test-access",
        secret_key="test-secret",
    )


@pytest.fixture
def core() -> CoreClient:
    client = CoreClient(ClientConfig(api_key="test-api-key", max_retries=0))
    yield client
    client.close()


@pytest.fixture
def vm(core: CoreClient) -> VirtualMachineClient:
    return VirtualMachineClient(core)


@pytest.fixture
def fake_storage() -> FakeStorageClient:
    return FakeStorageClient()


@pytest.fixture
def object_storage(core: CoreClient, fake_storage: FakeStorageClient) -> ObjectStorageClient:
    return ObjectStorageClient(core, "test-access", "test-secret", storage=fake_storage)


@pytest.fixture
def image_payload() -> dict:
    """One public image as returned by ``GET /v1/images``."""
    return {
        "id": "img-1",
        "name": "cloud-ubuntu-24.04 LTS",
        "status": "active",
        "version": "24.04",
        "platform": "linux",
        "release_at": "2024-05-01T00:00:00Z",
        "minimum_requirements": {"vcpu": 1, "ram": 1, "disk": 10},
        "labels": ["ubuntu"],
        "availability_zones": ["br-se1-a", "br-se1-b"],
    }


def make_images(count: int, start: int = 0) -> list[dict]:
    return [
        {"id": f"img-{i}", "name": f"image-{i}", "status": "active"}
        for i in range(start, start + count)
    ]


@pytest.fixture
def images_page():
    """Build an ``ImageList`` envelope around *count* generated images."""

    def build(count: int, start: int = 0, limit: int = 50) -> dict:
        return {
            "meta": {"page": {"offset": start, "limit": limit, "count": count, "total": count}},
            "images": make_images(count, start),
        }

    return build
