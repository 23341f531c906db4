"""Public machine images."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mgc_sdk.client.pagination import paginate
from mgc_sdk.client.query import encode_query
from mgc_sdk.models.image import (
    Image,
    ImageFilterOptions,
    ImageList,
    ImageListOptions,
)

if TYPE_CHECKING:
    from mgc_sdk.compute.client import VirtualMachineClient


class ImageService:
    """List the machine images instances can boot from."""

    def __init__(self, client: VirtualMachineClient) -> None:
        self._client = client

    def list(
        self,
        opts: ImageListOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> ImageList:
        """Fetch one page of images.

        Sends ``_limit``, ``_offset``, ``_sort`` and ``availability-zone``
        for the options that are set.
        """
        result: ImageList = self._client.execute(
            "GET",
            "/v1/images",
            params=encode_query(opts),
            result_type=ImageList,
            timeout=timeout,
        )
        return result

    def list_all(
        self,
        opts: ImageFilterOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Image]:
        """Fetch every image matching *opts*, following pagination."""
        filters = opts.model_dump() if opts else {}

        def fetch(offset: int, limit: int, remaining: float | None) -> list[Image]:
            page_opts = ImageListOptions(**filters, offset=offset, limit=limit)
            return self.list(page_opts, timeout=remaining).images

        return paginate(fetch, timeout=timeout)
