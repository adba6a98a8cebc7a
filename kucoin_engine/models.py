"""
Models — Typed shapes for the signing and pagination core.

KuCoin wraps every response in the same envelope: {code, data, msg?}.
List endpoints nest a page inside `data`: {currentPage, pageSize, totalNum,
totalPage, items}. Optional fields stay Optional; nothing downstream trusts a
field the boundary did not check.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Literal, Optional


# ── Standard Enums ───────────────────────────────────────────────────────────

TimeUnit = Literal["ms", "ns", "s"]


# ── Credentials ──────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Credentials:
    api_key: str
    api_secret: str
    api_passphrase: str
    key_version: str = "2"
    base_url: str = "https://api.kucoin.com"

    def is_complete(self) -> bool:
        return bool(self.api_key and self.api_secret and self.api_passphrase)

    def __repr__(self) -> str:
        # Never leak secrets into logs or tracebacks
        return (
            f"Credentials(api_key={self.api_key[:6]!r}..., key_version={self.key_version!r}, "
            f"base_url={self.base_url!r})"
        )


# ── Signing ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class SignedRequest:
    timestamp: int                 # Server time, ms
    method: str                    # Uppercase verb
    path: str                      # Endpoint + query string, exactly as sent
    body: str                      # Serialized JSON or ""
    signature: str                 # base64(HMAC-SHA256(secret, prehash))
    encrypted_passphrase: str      # base64(HMAC-SHA256(secret, passphrase))

    @property
    def prehash(self) -> str:
        return f"{self.timestamp}{self.method}{self.path}{self.body}"

    def headers(self, creds: Credentials) -> dict[str, str]:
        """Header set required by every KuCoin private endpoint."""
        return {
            "KC-API-KEY": creds.api_key,
            "KC-API-SIGN": self.signature,
            "KC-API-TIMESTAMP": str(self.timestamp),
            "KC-API-PASSPHRASE": self.encrypted_passphrase,
            "KC-API-KEY-VERSION": creds.key_version,
            "Content-Type": "application/json",
        }


# ── Responses ────────────────────────────────────────────────────────────────

@dataclass(slots=True)
class ResponseEnvelope:
    code: str
    data: Any = None
    msg: Optional[str] = None
    raw: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.code == "200000"


@dataclass(slots=True)
class PageState:
    current_page: Optional[int] = None
    total_page: Optional[int] = None
    page_size: Optional[int] = None
    total_num: Optional[int] = None
    items: Any = None

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        items_field: str = "items",
        current_field: str = "currentPage",
        total_field: str = "totalPage",
    ) -> PageState:
        """Read page metadata from a `data` payload. Missing fields stay None."""
        if not isinstance(payload, dict):
            return cls(items=payload)

        items = payload.get(items_field)
        return cls(
            current_page=_as_int(payload.get(current_field)),
            total_page=_as_int(payload.get(total_field)),
            page_size=_as_int(payload.get("pageSize")),
            total_num=_as_int(payload.get("totalNum")),
            items=items if items is not None else payload,
        )

    @property
    def has_next(self) -> bool:
        if self.current_page is None or self.total_page is None:
            return False
        return self.current_page < self.total_page


def _as_int(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None
