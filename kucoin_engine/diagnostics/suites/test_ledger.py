"""
Test Suite: Ledger — Paginated history through auto_paginate.
Requires valid API credentials. Walks at most a couple of pages.
"""

import uvloop

from ...adapter import KucoinAdapter
from ...models import Credentials, PageState
from ..fixtures.expected_schemas import PAGE_SCHEMA, LEDGER_ITEM_FIELDS


def run(config: dict) -> list[dict]:
    """Run all ledger/pagination diagnostic tests."""
    results = []
    creds: Credentials = config["creds"]

    if not creds.is_complete():
        return [_fail("Ledger: Pre-check", "No API credentials")]

    adapter = KucoinAdapter(creds)

    # ── Test: Raw Page Shape ─────────────────────────────────────────────────
    results.append(_test_page_shape(adapter))

    # ── Test: Bounded Pagination ─────────────────────────────────────────────
    results.append(_test_bounded_pagination(adapter, page_size=10, max_pages=2))

    adapter.close()
    return results


def _test_page_shape(adapter: KucoinAdapter) -> dict:
    name = "Ledger: Page Shape"
    try:
        data = uvloop.run(adapter._request(
            "GET", "/api/v1/accounts/ledgers", {"currentPage": 1, "pageSize": 10},
        ))
        for key in PAGE_SCHEMA["page_keys"]:
            assert key in data, f"Page missing key: {key}"

        page = PageState.from_payload(data)
        assert page.current_page == 1, f"Expected page 1, got {page.current_page}"

        if page.items:
            for field in LEDGER_ITEM_FIELDS:
                assert field in page.items[0], f"Ledger item missing field: {field}"

        return _pass(name, f"totalPage={page.total_page}, totalNum={page.total_num}")
    except Exception as e:
        return _fail(name, str(e))


def _test_bounded_pagination(adapter: KucoinAdapter, page_size: int, max_pages: int) -> dict:
    name = f"Ledger: Paginate (max_pages={max_pages})"
    try:
        rows = uvloop.run(adapter.get_spot_ledger(page_size=page_size, max_pages=max_pages))
        assert len(rows) <= page_size * max_pages, f"Fetched {len(rows)} rows, cap is {page_size * max_pages}"

        missing = [r.get("id") for r in rows if "createdAt_datetime" not in r]
        assert not missing, f"{len(missing)} rows lack createdAt_datetime"

        latest = rows[0]["createdAt_datetime"].isoformat() if rows else "n/a"
        return _pass(name, f"{len(rows)} rows, latest={latest}")
    except Exception as e:
        return _fail(name, str(e))


# ── Result Helpers ───────────────────────────────────────────────────────────


def _pass(name: str, detail: str = "") -> dict:
    return {"name": name, "passed": True, "detail": detail}


def _fail(name: str, reason: str) -> dict:
    return {"name": name, "passed": False, "detail": reason}
