"""
Utils — Query strings, KuCoin time units, symbol checks.
"""

from __future__ import annotations
import re
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import urlencode

from .models import TimeUnit

_UNIT_DIVISOR = {"ms": 1_000, "ns": 1_000_000_000, "s": 1}
_TICKER_RE = re.compile(r"^[A-Z0-9]+-[A-Z0-9]+$")


# ── Query Strings ────────────────────────────────────────────────────────────


def build_query(params: Optional[dict]) -> str:
    """
    "?k=v&..." from a dict, or "" when nothing is left.

    None values are dropped, lists are comma-joined, bools are lowercased.
    The returned string is both signed and sent, so it must not be re-encoded.
    """
    if not params:
        return ""

    clean = {}
    for k, v in params.items():
        if v is None:
            continue
        if isinstance(v, (list, tuple)):
            v = ",".join(str(x) for x in v)
        elif isinstance(v, bool):
            v = str(v).lower()
        clean[k] = v

    if not clean:
        return ""
    return "?" + urlencode(clean, safe=",")


# ── Time Conversion ──────────────────────────────────────────────────────────


def time_convert_from_kucoin(value, unit: TimeUnit = "ms") -> datetime:
    """KuCoin numeric timestamp -> aware UTC datetime."""
    if unit not in _UNIT_DIVISOR:
        raise ValueError(f"Unknown time unit: {unit}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("Input must be a numeric value.")
    return datetime.fromtimestamp(value / _UNIT_DIVISOR[unit], tz=timezone.utc)


def time_convert_to_kucoin(dt: datetime, unit: TimeUnit = "ms") -> int:
    """Datetime -> KuCoin numeric timestamp. Naive datetimes are taken as UTC."""
    if unit not in _UNIT_DIVISOR:
        raise ValueError(f"Unknown time unit: {unit}")
    if not isinstance(dt, datetime):
        raise TypeError("Input must be a datetime object.")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - datetime(1970, 1, 1, tzinfo=timezone.utc)
    # Integer math keeps ms/ns exact
    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    if unit == "s":
        return micros // 1_000_000
    if unit == "ms":
        return micros // 1_000
    return micros * 1_000


def convert_datetime_range_to_ms(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> dict[str, int]:
    """
    {"startAt", "endAt"} in ms. A missing bound is filled so the window is 24h;
    with neither bound the window ends now.
    """
    window = timedelta(hours=24)
    if start is None and end is None:
        end = now or datetime.now(timezone.utc)
        start = end - window
    elif start is None:
        start = end - window
    elif end is None:
        end = start + window

    start_ms = time_convert_to_kucoin(start, "ms")
    end_ms = time_convert_to_kucoin(end, "ms")
    if start_ms > end_ms:
        raise ValueError("start must be before end.")
    return {"startAt": start_ms, "endAt": end_ms}


# ── Symbols ──────────────────────────────────────────────────────────────────


def verify_ticker(symbol: str) -> bool:
    """True for KuCoin spot symbols like BTC-USDT."""
    return bool(symbol) and bool(_TICKER_RE.match(symbol))
