"""
Auth — Request signing for KuCoin private endpoints.

Every signed call costs one extra round-trip: the timestamp must come from
the exchange clock (KuCoin rejects anything more than ~5s off), so server
time is fetched fresh for each signature. No caching, no skew estimation,
no fallback to the local clock.

Prehash:   {timestamp}{METHOD}{path?query}{body}
Signature: base64(HMAC-SHA256(secret, prehash))
Passphrase is sent signed, not raw: base64(HMAC-SHA256(secret, passphrase)).
"""

from __future__ import annotations
from typing import Optional

from .config import sign_hmac_b64, logger
from .errors import SigningError
from .models import Credentials, SignedRequest
from .rest_client import RestClient


def _log(msg: str):
    logger.log("AUTH", msg)


def _err(msg: str):
    logger.log("AUTH", f"❌ {msg}")


def sign_request(
    method: str,
    path: str,
    body: str,
    creds: Credentials,
    timestamp: int,
) -> SignedRequest:
    """Sign a request for a fixed timestamp. Pure; no I/O."""
    if not method or not method.strip():
        raise ValueError("HTTP method must be a non-empty string")

    verb = method.strip().upper()
    body = body or ""
    prehash = f"{int(timestamp)}{verb}{path}{body}"

    return SignedRequest(
        timestamp=int(timestamp),
        method=verb,
        path=path,
        body=body,
        signature=sign_hmac_b64(creds.api_secret, prehash),
        encrypted_passphrase=sign_hmac_b64(creds.api_secret, creds.api_passphrase),
    )


class Authenticator:
    """Produces KC-API-* header sets bound to method, path and body."""

    def __init__(self, creds: Credentials, rest: Optional[RestClient] = None):
        self.creds = creds
        self.rest = rest or RestClient(base_url=creds.base_url)

    async def sign(self, method: str, path: str, body: str = "") -> SignedRequest:
        try:
            timestamp = await self.rest.fetch_server_time()
            return sign_request(method, path, body, self.creds, timestamp)
        except Exception as e:
            _err(f"Signing {method} {path} failed: {e}")
            raise SigningError(str(e), cause=e) from e

    async def build_headers(self, method: str, path: str, body: str = "") -> dict[str, str]:
        signed = await self.sign(method, path, body)
        return signed.headers(self.creds)


async def build_headers(
    method: str,
    path: str,
    body: str,
    creds: Credentials,
    rest: Optional[RestClient] = None,
) -> dict[str, str]:
    """One-shot helper: fetch server time and return the signed header set."""
    return await Authenticator(creds, rest).build_headers(method, path, body)
