"""
Paginator — Walks currentPage/totalPage list endpoints to exhaustion.

The page fetcher is injected: it signs, sends and validates, and returns the
envelope's `data`. This module never touches HTTP.

Pages are fetched strictly in sequence (page N+1 depends on totalPage from
page N) with no inter-page delay. Batches are kept as-is until the end, then
folded once by `aggregate_fn`.
"""

from __future__ import annotations
import math
from typing import Any, Awaitable, Callable, Optional

from .config import DEFAULT_PAGE_SIZE, logger
from .errors import KucoinError, PaginationError
from .models import PageState, TimeUnit
from .utils import time_convert_from_kucoin

FetchPage = Callable[[dict], Awaitable[Any]]
Aggregate = Callable[[list], Any]

DEFAULT_PAGINATE_FIELDS = {"currentPage": "currentPage", "totalPage": "totalPage"}


def _log(msg: str):
    logger.log("PAGINATE", msg)


def _identity(batches: list) -> list:
    return batches


async def auto_paginate(
    fetch_page: FetchPage,
    query: Optional[dict] = None,
    items_field: str = "items",
    paginate_fields: Optional[dict] = None,
    aggregate_fn: Optional[Aggregate] = None,
    max_pages: float = math.inf,
) -> Any:
    """
    Fetch every page and return `aggregate_fn(batches)`.

    Stops when:
      - `max_pages` is finite and currentPage >= max_pages
      - currentPage or totalPage is missing (single-page endpoint)
      - currentPage >= totalPage

    Any fetch failure aborts the whole sequence; nothing partial is returned.
    KucoinError subclasses propagate with their type intact; anything else is
    wrapped in PaginationError.
    """
    if max_pages < 1:
        raise ValueError(f"max_pages must be >= 1, got {max_pages}")

    fields = {**DEFAULT_PAGINATE_FIELDS, **(paginate_fields or {})}
    aggregate = aggregate_fn or _identity

    q = dict(query) if query is not None else {"pageSize": DEFAULT_PAGE_SIZE}
    q.setdefault("currentPage", 1)

    batches: list = []
    while True:
        requested = q["currentPage"]
        try:
            payload = await fetch_page(dict(q))
        except KucoinError as e:
            e.add_note(f"auto_paginate: aborted on page {requested}")
            raise
        except Exception as e:
            raise PaginationError(requested, e) from e

        page = PageState.from_payload(
            payload,
            items_field=items_field,
            current_field=fields["currentPage"],
            total_field=fields["totalPage"],
        )
        batches.append(page.items)

        if math.isfinite(max_pages) and page.current_page is not None and page.current_page >= max_pages:
            _log(f"Reached max_pages={int(max_pages)}")
            break
        if not page.has_next:
            break
        next_page = page.current_page + 1
        if next_page <= requested:
            # Server echoed a stale page number; requests must strictly advance
            _log(f"⚠ Page counter did not advance (requested {requested}, got {page.current_page})")
            break
        q["currentPage"] = next_page

    _log(f"Fetched {len(batches)} page(s)")
    return aggregate(batches)


# ── Reducers ─────────────────────────────────────────────────────────────────


def flatten_pages(batches: list) -> list:
    """Concatenate page batches in page order. Non-list batches count as one item."""
    out: list = []
    for batch in batches:
        if batch is None:
            continue
        if isinstance(batch, list):
            out.extend(batch)
        else:
            out.append(batch)
    return out


def flatten_with_datetime(field: str, unit: TimeUnit = "ms") -> Aggregate:
    """
    Reducer: flatten, then derive `<field>_datetime` once over the combined set.

    Rows missing the field get None so every row carries the same keys.
    Rows are copied; the fetched page objects are left as they came.
    """
    target = f"{field}_datetime"

    def reduce(batches: list) -> list:
        rows = []
        for row in flatten_pages(batches):
            if isinstance(row, dict):
                value = row.get(field)
                row = {**row, target: time_convert_from_kucoin(value, unit) if value is not None else None}
            rows.append(row)
        return rows

    return reduce
