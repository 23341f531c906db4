"""Custom images imported from a disk file URL."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mgc_sdk.client.pagination import paginate
from mgc_sdk.client.query import encode_query
from mgc_sdk.models.common import IDResponse
from mgc_sdk.models.custom_image import (
    CreateCustomImageRequest,
    CustomImage,
    CustomImageFilterOptions,
    CustomImageList,
    CustomImageListOptions,
)

if TYPE_CHECKING:
    from mgc_sdk.compute.client import VirtualMachineClient


class CustomImageService:
    def __init__(self, client: VirtualMachineClient) -> None:
        self._client = client

    def create(
        self, req: CreateCustomImageRequest, *, timeout: float | None = None,
    ) -> str:
        """Register a custom image and return its id.

        The image is imported asynchronously; use :meth:`get` to follow its
        status.
        """
        result: IDResponse = self._client.execute(
            "POST", "/v1/images/custom", body=req, result_type=IDResponse, timeout=timeout,
        )
        return result.id

    def get(self, image_id: str, *, timeout: float | None = None) -> CustomImage:
        result: CustomImage = self._client.execute(
            "GET", f"/v1/images/custom/{image_id}", result_type=CustomImage, timeout=timeout,
        )
        return result

    def list(
        self,
        opts: CustomImageListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> CustomImageList:
        result: CustomImageList = self._client.execute(
            "GET",
            "/v1/images/custom",
            params=encode_query(opts),
            result_type=CustomImageList,
            timeout=timeout,
        )
        return result

    def list_all(
        self,
        opts: CustomImageFilterOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> list[CustomImage]:
        filters = opts.model_dump() if opts else {}

        def fetch(offset: int, limit: int, remaining: float | None) -> list[CustomImage]:
            page_opts = CustomImageListOptions(**filters, offset=offset, limit=limit)
            return self.list(page_opts, timeout=remaining).images

        return paginate(fetch, timeout=timeout)

    def delete(self, image_id: str, *, timeout: float | None = None) -> None:
        self._client.execute("DELETE", f"/v1/images/custom/{image_id}", timeout=timeout)
