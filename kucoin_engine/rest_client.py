"""
REST Client — HTTP transport for the KuCoin API.

Handles:
- Pooled session with TCP_NODELAY
- Timeout / connection failure classification (NetworkError)
- Envelope validation of every response
- Server time (public, unauthenticated)

Blocking `requests` calls are pushed to a worker thread so callers can await
them without stalling the event loop.
"""

from __future__ import annotations
import asyncio
import socket
import requests
from typing import Optional

from .config import REST_BASE, TIME_ENDPOINT, ACCOUNT_TIMEOUT, MARKET_TIMEOUT, logger
from .envelope import process_response
from .errors import NetworkError, StructureError
from .models import ResponseEnvelope


# ── Logging ──────────────────────────────────────────────────────────────────

def _log(msg: str):
    logger.log("REST", msg)


def _err(msg: str):
    logger.log("REST", f"❌ {msg}")


# ── The Client ───────────────────────────────────────────────────────────────

class RestClient:
    """
    Transport for KuCoin REST calls. Stateless apart from the session pool.

    Concurrent awaits share one `requests.Session` across worker threads; that
    relies on urllib3's connection pool being thread-safe.
    """

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None):
        self.base = (base_url or REST_BASE).rstrip("/")
        if session is None:
            session = requests.Session()
            adapter = requests.adapters.HTTPAdapter(pool_connections=10, pool_maxsize=10)
            adapter.poolmanager.connection_pool_kw['socket_options'] = [
                (socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
            ]
            session.mount('https://', adapter)
            session.mount('http://', adapter)
        self.session = session

    # ── Requests ─────────────────────────────────────────────────────────────

    def send(
        self,
        method: str,
        path: str,
        headers: Optional[dict] = None,
        body: str = "",
        timeout: float = MARKET_TIMEOUT,
    ) -> ResponseEnvelope:
        """Blocking request. `path` must already carry its query string."""
        url = f"{self.base}{path}"
        verb = method.strip().upper()
        try:
            resp = self.session.request(
                verb,
                url,
                headers=headers,
                data=body.encode("utf-8") if body else None,
                timeout=timeout,
            )
        except requests.exceptions.RequestException as e:
            _err(f"{verb} {path} failed: {e}")
            raise NetworkError(url, e) from e

        return process_response(resp, url)

    async def request(
        self,
        method: str,
        path: str,
        headers: Optional[dict] = None,
        body: str = "",
        timeout: float = MARKET_TIMEOUT,
    ) -> ResponseEnvelope:
        return await asyncio.to_thread(self.send, method, path, headers, body, timeout)

    # ── Server Time ──────────────────────────────────────────────────────────

    async def fetch_server_time(self) -> int:
        """Current exchange time in ms (GET /api/v1/timestamp)."""
        envelope = await self.request("GET", TIME_ENDPOINT, timeout=ACCOUNT_TIMEOUT)
        data = envelope.data
        if isinstance(data, bool) or not isinstance(data, (int, float, str)):
            raise StructureError(f"{self.base}{TIME_ENDPOINT}")
        try:
            return int(data)
        except ValueError as e:
            raise StructureError(f"{self.base}{TIME_ENDPOINT}") from e

    def close(self):
        self.session.close()
        _log("Session closed")
