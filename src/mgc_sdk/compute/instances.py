"""Virtual machine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mgc_sdk.client.pagination import paginate
from mgc_sdk.client.query import encode_query
from mgc_sdk.models.common import IDOrName, IDResponse
from mgc_sdk.models.instance import (
    CreateInstanceRequest,
    Instance,
    InstanceFilterOptions,
    InstanceList,
    InstanceListOptions,
    RenameRequest,
    RetypeRequest,
)

if TYPE_CHECKING:
    from mgc_sdk.compute.client import VirtualMachineClient


class InstanceService:
    """Create, inspect and drive the lifecycle of instances.

    Lifecycle calls (start, stop, suspend, retype, rename) return as soon as
    the API accepts them; poll :meth:`get` for the resulting state.
    """

    def __init__(self, client: VirtualMachineClient) -> None:
        self._client = client

    def list(
        self,
        opts: InstanceListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> InstanceList:
        result: InstanceList = self._client.execute(
            "GET",
            "/v1/instances",
            params=encode_query(opts),
            result_type=InstanceList,
            timeout=timeout,
        )
        return result

    def list_all(
        self,
        opts: InstanceFilterOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Instance]:
        filters = opts.model_dump() if opts else {}

        def fetch(offset: int, limit: int, remaining: float | None) -> list[Instance]:
            page_opts = InstanceListOptions(**filters, offset=offset, limit=limit)
            return self.list(page_opts, timeout=remaining).instances

        return paginate(fetch, timeout=timeout)

    def create(self, req: CreateInstanceRequest, *, timeout: float | None = None) -> str:
        """Request a new instance and return its id."""
        result: IDResponse = self._client.execute(
            "POST", "/v1/instances", body=req, result_type=IDResponse, timeout=timeout,
        )
        return result.id

    def get(
        self,
        instance_id: str,
        expand: list[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Instance:
        params = [("expand", ",".join(expand))] if expand else None
        result: Instance = self._client.execute(
            "GET",
            f"/v1/instances/{instance_id}",
            params=params,
            result_type=Instance,
            timeout=timeout,
        )
        return result

    def delete(
        self,
        instance_id: str,
        delete_public_ip: bool = False,
        *,
        timeout: float | None = None,
    ) -> None:
        params = [("delete_public_ip", "true" if delete_public_ip else "false")]
        self._client.execute(
            "DELETE", f"/v1/instances/{instance_id}", params=params, timeout=timeout,
        )

    def rename(self, instance_id: str, new_name: str, *, timeout: float | None = None) -> None:
        self._client.execute(
            "PATCH",
            f"/v1/instances/{instance_id}/rename",
            body=RenameRequest(name=new_name),
            timeout=timeout,
        )

    def retype(
        self, instance_id: str, machine_type: IDOrName, *, timeout: float | None = None,
    ) -> None:
        self._client.execute(
            "POST",
            f"/v1/instances/{instance_id}/retype",
            body=RetypeRequest(machine_type=machine_type),
            timeout=timeout,
        )

    def start(self, instance_id: str, *, timeout: float | None = None) -> None:
        self._client.execute("POST", f"/v1/instances/{instance_id}/start", timeout=timeout)

    def stop(self, instance_id: str, *, timeout: float | None = None) -> None:
        self._client.execute("POST", f"/v1/instances/{instance_id}/stop", timeout=timeout)

    def suspend(self, instance_id: str, *, timeout: float | None = None) -> None:
        self._client.execute("POST", f"/v1/instances/{instance_id}/suspend", timeout=timeout)
