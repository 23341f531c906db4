"""Instance snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mgc_sdk.client.pagination import paginate
from mgc_sdk.client.query import encode_query
from mgc_sdk.models.common import IDResponse
from mgc_sdk.models.instance import RenameRequest
from mgc_sdk.models.snapshot import (
    CreateSnapshotRequest,
    RestoreSnapshotRequest,
    Snapshot,
    SnapshotFilterOptions,
    SnapshotList,
    SnapshotListOptions,
)

if TYPE_CHECKING:
    from mgc_sdk.compute.client import VirtualMachineClient


class SnapshotService:
    def __init__(self, client: VirtualMachineClient) -> None:
        self._client = client

    def list(
        self,
        opts: SnapshotListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> SnapshotList:
        result: SnapshotList = self._client.execute(
            "GET",
            "/v1/snapshots",
            params=encode_query(opts),
            result_type=SnapshotList,
            timeout=timeout,
        )
        return result

    def list_all(
        self,
        opts: SnapshotFilterOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Snapshot]:
        filters = opts.model_dump() if opts else {}

        def fetch(offset: int, limit: int, remaining: float | None) -> list[Snapshot]:
            page_opts = SnapshotListOptions(**filters, offset=offset, limit=limit)
            return self.list(page_opts, timeout=remaining).snapshots

        return paginate(fetch, timeout=timeout)

    def create(self, req: CreateSnapshotRequest, *, timeout: float | None = None) -> str:
        """Snapshot an instance and return the snapshot id."""
        result: IDResponse = self._client.execute(
            "POST", "/v1/snapshots", body=req, result_type=IDResponse, timeout=timeout,
        )
        return result.id

    def get(
        self,
        snapshot_id: str,
        expand: list[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Snapshot:
        params = [("expand", ",".join(expand))] if expand else None
        result: Snapshot = self._client.execute(
            "GET",
            f"/v1/snapshots/{snapshot_id}",
            params=params,
            result_type=Snapshot,
            timeout=timeout,
        )
        return result

    def delete(self, snapshot_id: str, *, timeout: float | None = None) -> None:
        self._client.execute("DELETE", f"/v1/snapshots/{snapshot_id}", timeout=timeout)

    def rename(self, snapshot_id: str, new_name: str, *, timeout: float | None = None) -> None:
        self._client.execute(
            "PATCH",
            f"/v1/snapshots/{snapshot_id}/rename",
            body=RenameRequest(name=new_name),
            timeout=timeout,
        )

    def restore(
        self,
        snapshot_id: str,
        req: RestoreSnapshotRequest,
        *,
        timeout: float | None = None,
    ) -> str:
        """Create a new instance from a snapshot and return the instance id."""
        result: IDResponse = self._client.execute(
            "POST",
            f"/v1/snapshots/{snapshot_id}",
            body=req,
            result_type=IDResponse,
            timeout=timeout,
        )
        return result.id
