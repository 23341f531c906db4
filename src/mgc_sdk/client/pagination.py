"""Offset/limit auto-pagination."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence, TypeVar

from mgc_sdk.client.errors import TransportError
from mgc_sdk.config.constants import PAGE_SIZE

T = TypeVar("T")

PageFetcher = Callable[[int, int, Optional[float]], Sequence[T]]

logger = logging.getLogger(__name__)


def paginate(
    fetch_page: PageFetcher[T],
    *,
    page_size: int = PAGE_SIZE,
    timeout: float | None = None,
) -> list[T]:
    """Fetch every page of a list endpoint, returning all records in order.

    ``fetch_page(offset, limit, timeout)`` returns the records of one page.
    Pages are requested sequentially with increasing offsets until one comes
    back with fewer than ``page_size`` records; the server's ``total`` is not
    consulted. Any page error propagates and nothing collected so far is
    returned.

    ``timeout`` bounds the whole listing. Each page gets the remaining
    budget, which httpx applies per connect/read/write phase, so the deadline
    is checked again once the page returns. An exhausted budget raises
    ``TransportError``.
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    deadline = time.monotonic() + timeout if timeout is not None else None
    records: list[T] = []
    offset = 0

    def remaining_budget() -> float | None:
        if deadline is None:
            return None
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise TransportError(
                f"Deadline exceeded after {len(records)} records (offset {offset})"
            )
        return remaining

    while True:
        page = fetch_page(offset, page_size, remaining_budget())
        remaining_budget()
        records.extend(page)
        logger.debug("offset=%s limit=%s returned=%s", offset, page_size, len(page))
        if len(page) < page_size:
            return records
        offset += page_size
