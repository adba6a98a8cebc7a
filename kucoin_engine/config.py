"""
Config — Loads .env, exposes KuCoin endpoints, signing primitives and the logger.

Credentials are resolved once into a `Credentials` object and passed explicitly;
nothing here reads the environment at request time.
"""

import os
import hmac
import base64
import hashlib
import queue
import threading
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .models import Credentials

# ── Load .env from same directory ────────────────────────────────────────────

_env_path = Path(__file__).parent / ".env"
load_dotenv(_env_path)

# ── Endpoints ────────────────────────────────────────────────────────────────

REST_BASE = "https://api.kucoin.com"
TIME_ENDPOINT = "/api/v1/timestamp"
SUCCESS_CODE = "200000"

# Per-call timeouts (seconds). Account/time endpoints are short-lived.
ACCOUNT_TIMEOUT = 3
MARKET_TIMEOUT = 10

DEFAULT_PAGE_SIZE = 50
DEFAULT_KEY_VERSION = "2"

# ── Credential Resolution ────────────────────────────────────────────────────


def load_credentials(
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
    api_passphrase: Optional[str] = None,
    base_url: Optional[str] = None,
    key_version: Optional[str] = None,
) -> Credentials:
    """Build Credentials from explicit args, falling back to KC_API_* env vars."""
    return Credentials(
        api_key=(api_key or os.getenv("KC_API_KEY", "")).strip(),
        api_secret=(api_secret or os.getenv("KC_API_SECRET", "")).strip(),
        api_passphrase=(api_passphrase or os.getenv("KC_API_PASSPHRASE", "")).strip(),
        key_version=(key_version or os.getenv("KC_API_KEY_VERSION", "") or DEFAULT_KEY_VERSION).strip(),
        base_url=(base_url or os.getenv("KC_API_ENDPOINT", "") or REST_BASE).strip().rstrip("/"),
    )


# ── HMAC Signing ─────────────────────────────────────────────────────────────


def sign_hmac_b64(secret: str, message: str) -> str:
    """HMAC-SHA256 signature, base64 encoded (KuCoin API-SIGN format)."""
    return sign_hmac_bytes_b64(secret.encode("utf-8"), message.encode("utf-8"))


def sign_hmac_bytes_b64(secret_bytes: bytes, message_bytes: bytes) -> str:
    digest = hmac.new(secret_bytes, message_bytes, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


# ── Async Logger ─────────────────────────────────────────────────────────────

class AsyncLogger:
    def __init__(self):
        self._q = queue.Queue()
        self._t = threading.Thread(target=self._worker, daemon=True)
        self._t.start()
        self.enabled = True

    def _worker(self):
        while True:
            msg = self._q.get()
            if msg is None: break
            print(msg, flush=True)
            self._q.task_done()

    def log(self, prefix, msg):
        if self.enabled:
            self._q.put(f"[{prefix}] {msg}")

    def shutdown(self):
        self._q.put(None)
        self._t.join(timeout=1.0)

logger = AsyncLogger()


# ── Validation ───────────────────────────────────────────────────────────────


def validate_credentials(creds: Credentials) -> bool:
    if not creds.is_complete():
        print("[Config] ⚠ Incomplete KuCoin credentials. Private endpoints will fail.")
        return False
    return True


def mask(s: str) -> str:
    return s[:6] + "..." + s[-4:] if len(s) > 10 else "***" if s else ""


def print_config(creds: Credentials):
    print()
    print(f"  ┌─ KuCoin Engine Config ────────────────────────┐")
    print(f"  │  REST:        {creds.base_url:<32}│")
    print(f"  │  API Key:     {mask(creds.api_key):<32}│")
    print(f"  │  Key Version: {creds.key_version:<32}│")
    print(f"  └───────────────────────────────────────────────┘")
    print()
