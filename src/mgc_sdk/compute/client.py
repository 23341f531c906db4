"""Compute (virtual machine) service client."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx

from mgc_sdk.client.core import CoreClient
from mgc_sdk.client.errors import ValidationError
from mgc_sdk.compute.custom_images import CustomImageService
from mgc_sdk.compute.images import ImageService
from mgc_sdk.compute.instance_types import InstanceTypeService
from mgc_sdk.compute.instances import InstanceService
from mgc_sdk.compute.snapshots import SnapshotService

T = TypeVar("T")

DEFAULT_BASE_PATH = "/compute"


class VirtualMachineClient:
    """Entry point for instances, images, instance types and snapshots.

    Usage::

        with VirtualMachineClient(CoreClient(ClientConfig(api_key=key))) as vm:
            images = vm.images.list_all()
    """

    def __init__(self, core: CoreClient, *, base_path: str = DEFAULT_BASE_PATH) -> None:
        if core is None:
            raise ValidationError("core client cannot be None", field="core")
        self.core = core
        self.base_path = base_path.rstrip("/")
        self.instances = InstanceService(self)
        self.images = ImageService(self)
        self.custom_images = CustomImageService(self)
        self.instance_types = InstanceTypeService(self)
        self.snapshots = SnapshotService(self)

    def close(self) -> None:
        self.core.close()

    def __enter__(self) -> VirtualMachineClient:
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
        return self.core.new_request(
            method, f"{self.base_path}{path}", body=body, params=params, timeout=timeout,
        )

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
        request = self.new_request(method, path, body=body, params=params, timeout=timeout)
        return self.core.do(request, result_type)
