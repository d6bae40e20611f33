"""Pager - exhaust a cursor-based listing into one list.

Listing endpoints return at most ``limit`` records plus a ``next_page``
cursor. page_all keeps requesting with the previous cursor until the server
stops returning one. A listing either succeeds completely or raises; partial
results are never returned.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from .exceptions import PageProgressError, RequestCancelledError
from .options import Options, merge_options

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_PAGES = 10_000


class NextPage(BaseModel):
    """Continuation cursor from a response envelope.

    The offset is opaque and must be sent back unchanged.
    """

    model_config = ConfigDict(frozen=True)

    offset: str
    path: str | None = None
    uri: str | None = None


def page_all(
    fetch_page: Callable[[Options], tuple[list[T], NextPage | None]],
    page_size: int,
    base_options: Options | None = None,
    *,
    max_pages: int = DEFAULT_MAX_PAGES,
    cancel: threading.Event | None = None,
) -> list[T]:
    """Fetch every page of a listing.

    Args:
        fetch_page: Fetches one page for the given options and returns its
            records with the next cursor, or None when exhausted.
        page_size: Records requested per page.
        base_options: Options each page request is built on.
        max_pages: Upper bound on requests before giving up.
        cancel: Checked before each request; when set the listing stops.

    Returns:
        All records in server order.

    Raises:
        ValueError: If page_size or max_pages is not positive.
        PageProgressError: If the cursor repeats or max_pages is exceeded.
        RequestCancelledError: If cancel is set before the listing finishes.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if max_pages < 1:
        raise ValueError(f"max_pages must be positive, got {max_pages}")

    base = base_options or Options()
    records: list[T] = []
    offset: str | None = None
    pages = 0

    while True:
        if cancel is not None and cancel.is_set():
            raise RequestCancelledError(pages)
        if pages >= max_pages:
            raise PageProgressError(
                f"Listing did not finish within {max_pages} pages", offset, pages
            )

        page = Options(limit=page_size, offset=offset)
        page_records, next_page = fetch_page(merge_options(base, [page]))
        pages += 1
        records.extend(page_records)

        if next_page is None:
            logger.debug(f"Listing exhausted after {pages} pages, {len(records)} records")
            return records

        if offset is not None and next_page.offset == offset:
            raise PageProgressError("Server returned the same cursor twice", offset, pages)
        offset = next_page.offset
