"""Instance types (machine flavors)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mgc_sdk.client.pagination import paginate
from mgc_sdk.client.query import encode_query
from mgc_sdk.models.instance_type import (
    InstanceType,
    InstanceTypeFilterOptions,
    InstanceTypeList,
    InstanceTypeListOptions,
)

if TYPE_CHECKING:
    from mgc_sdk.compute.client import VirtualMachineClient


class InstanceTypeService:
    def __init__(self, client: VirtualMachineClient) -> None:
        self._client = client

    def list(
        self,
        opts: InstanceTypeListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> InstanceTypeList:
        result: InstanceTypeList = self._client.execute(
            "GET",
            "/v1/instance-types",
            params=encode_query(opts),
            result_type=InstanceTypeList,
            timeout=timeout,
        )
        return result

    def list_all(
        self,
        opts: InstanceTypeFilterOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> list[InstanceType]:
        filters = opts.model_dump() if opts else {}

        def fetch(offset: int, limit: int, remaining: float | None) -> list[InstanceType]:
            page_opts = InstanceTypeListOptions(**filters, offset=offset, limit=limit)
            return self.list(page_opts, timeout=remaining).instance_types

        return paginate(fetch, timeout=timeout)
