"""
Adapter — The private-endpoint bridge.

Signs every call via the Authenticator, sends it through the RestClient (which
validates the envelope), and walks list endpoints with auto_paginate.
Only a representative slice of the KuCoin surface lives here; each wrapper is
one documented endpoint.
"""

from __future__ import annotations
import math
import orjson as json
from typing import Any, Optional

from .auth import Authenticator
from .config import ACCOUNT_TIMEOUT, DEFAULT_PAGE_SIZE, logger
from .errors import KucoinError
from .models import Credentials
from .paginator import auto_paginate, flatten_with_datetime
from .rest_client import RestClient
from .utils import build_query


# ── Logging ──────────────────────────────────────────────────────────────────

def _log(msg: str):
    logger.log("ADAPTER", msg)


def _warn(msg: str):
    logger.log("ADAPTER", f"⚠ {msg}")


# ── The Adapter ──────────────────────────────────────────────────────────────

class KucoinAdapter:
    """
    Private KuCoin calls. Credentials are fixed at construction and read-only,
    so one adapter may serve concurrent calls. Those calls share the
    RestClient session from worker threads, which relies on urllib3's pool
    being thread-safe.
    """

    def __init__(
        self,
        creds: Credentials,
        rest: Optional[RestClient] = None,
        auth: Optional[Authenticator] = None,
    ):
        self.name = "KucoinAdapter"
        self.creds = creds
        self.rest = rest or RestClient(base_url=creds.base_url)
        self.auth = auth or Authenticator(creds, self.rest)

        if not creds.is_complete():
            _warn("Incomplete credentials. Private calls will be rejected.")

    # ── Accounts ─────────────────────────────────────────────────────────────

    async def get_accounts(self, currency: Optional[str] = None, account_type: Optional[str] = None) -> list[dict]:
        """List spot/margin accounts (GET /api/v1/accounts)."""
        data = await self._request(
            "GET", "/api/v1/accounts",
            {"currency": currency, "type": account_type},
            op="get_accounts",
        )
        return data or []

    # ── Paginated History ────────────────────────────────────────────────────

    async def get_spot_ledger(
        self,
        query: Optional[dict] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: float = math.inf,
    ) -> list[dict]:
        """Ledger records for spot/margin accounts, all pages, newest first."""
        return await self._paginate(
            "/api/v1/accounts/ledgers",
            query, page_size, max_pages,
            aggregate_fn=flatten_with_datetime("createdAt", "ms"),
            op="get_spot_ledger",
        )

    async def get_deposit_list(
        self,
        query: Optional[dict] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: float = math.inf,
    ) -> list[dict]:
        """Deposit history (GET /api/v1/deposits), all pages."""
        return await self._paginate(
            "/api/v1/deposits",
            query, page_size, max_pages,
            aggregate_fn=flatten_with_datetime("createdAt", "ms"),
            op="get_deposit_list",
        )

    # ── Internal: Signed Request ─────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        endpoint: str,
        query: Optional[dict] = None,
        payload: Optional[dict] = None,
        timeout: float = ACCOUNT_TIMEOUT,
        op: str = "",
    ) -> Any:
        """Sign, send, validate. Returns the envelope's `data`."""
        # The signed path and the sent path are the same string
        method = method.strip().upper()
        path = endpoint + build_query(query)
        body = json.dumps(payload).decode("utf-8") if payload else ""

        try:
            headers = await self.auth.build_headers(method, path, body)
            envelope = await self.rest.request(method, path, headers, body, timeout)
        except KucoinError as e:
            if op:
                e.add_note(f"in {op}: {method} {path}")
            raise

        return envelope.data

    async def _paginate(
        self,
        endpoint: str,
        query: Optional[dict],
        page_size: int,
        max_pages: float,
        aggregate_fn=None,
        op: str = "",
    ) -> Any:
        initial = {"currentPage": 1, "pageSize": page_size, **(query or {})}

        async def fetch_page(q: dict) -> Any:
            return await self._request("GET", endpoint, q, op=op)

        result = await auto_paginate(
            fetch_page,
            query=initial,
            items_field="items",
            aggregate_fn=aggregate_fn,
            max_pages=max_pages,
        )
        if isinstance(result, list):
            _log(f"{op or endpoint}: {len(result)} rows")
        return result

    def close(self):
        self.rest.close()
