"""
Test Suite: Server Time — Public timestamp endpoint and envelope shape.
No authentication required.
"""

import time
import requests
import uvloop

from ...envelope import process_response
from ...rest_client import RestClient
from ..fixtures.expected_schemas import ENVELOPE_SCHEMA, TIMESTAMP_RESPONSE_SCHEMA


def run(config: dict) -> list[dict]:
    """Run all server-time diagnostic tests. Returns list of result dicts."""
    results = []
    base = config["rest_base"]

    # ── Test: Raw Envelope ───────────────────────────────────────────────────
    results.append(_test_raw_envelope(base))

    # ── Test: Server Time via RestClient ─────────────────────────────────────
    results.append(_test_server_time(base))

    # ── Test: Clock Skew ─────────────────────────────────────────────────────
    results.append(_test_clock_skew(base))

    return results


def _test_raw_envelope(base: str) -> dict:
    name = "Time: Raw Envelope"
    try:
        url = f"{base}/api/v1/timestamp"
        resp = requests.get(url, timeout=3)
        envelope = process_response(resp, url)

        for key in TIMESTAMP_RESPONSE_SCHEMA["required_keys"]:
            assert key in envelope.raw, f"Missing top-level key: {key}"
        assert envelope.code == ENVELOPE_SCHEMA["success_code"], f"Unexpected code: {envelope.code}"

        return _pass(name, f"code={envelope.code}, data={envelope.data}")
    except Exception as e:
        return _fail(name, str(e))


def _test_server_time(base: str) -> dict:
    name = "Time: Fetch Server Time"
    try:
        rest = RestClient(base_url=base)
        ts = uvloop.run(rest.fetch_server_time())
        rest.close()

        assert isinstance(ts, int), f"Timestamp is {type(ts).__name__}, expected int"
        assert ts > TIMESTAMP_RESPONSE_SCHEMA["min_ms"], f"Timestamp too old: {ts}"
        assert ts < TIMESTAMP_RESPONSE_SCHEMA["max_ms"], f"Timestamp in far future: {ts}"

        return _pass(name, f"server={ts}")
    except Exception as e:
        return _fail(name, str(e))


def _test_clock_skew(base: str) -> dict:
    name = "Time: Local Clock Skew"
    try:
        rest = RestClient(base_url=base)
        before = int(time.time() * 1000)
        ts = uvloop.run(rest.fetch_server_time())
        after = int(time.time() * 1000)
        rest.close()

        # Compare against the midpoint of the round-trip
        local = (before + after) // 2
        skew = ts - local
        tolerance = TIMESTAMP_RESPONSE_SCHEMA["tolerance_ms"]

        # Informational only: signing never uses the local clock
        detail = f"skew={skew:+d}ms, rtt={after - before}ms"
        if abs(skew) > tolerance:
            detail += f" (local clock outside {tolerance}ms tolerance)"
        return _pass(name, detail)
    except Exception as e:
        return _fail(name, str(e))


# ── Result Helpers ───────────────────────────────────────────────────────────


def _pass(name: str, detail: str = "") -> dict:
    return {"name": name, "passed": True, "detail": detail}


def _fail(name: str, reason: str) -> dict:
    return {"name": name, "passed": False, "detail": reason}
