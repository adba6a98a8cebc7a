"""
Expected Schemas — Defines the expected shape of KuCoin API responses.
Used by diagnostic suites to validate that live responses match known structure.
"""

# ── Envelope (every endpoint) ────────────────────────────────────────────────

ENVELOPE_SCHEMA = {
    "required_keys": ["code"],
    "success_code": "200000",
}

# ── Server Time ──────────────────────────────────────────────────────────────

TIMESTAMP_RESPONSE_SCHEMA = {
    "required_keys": ["code", "data"],
    # Sanity window for a ms timestamp (2020-09 .. 2100)
    "min_ms": 1_600_000_000_000,
    "max_ms": 4_102_444_800_000,
    # KuCoin rejects signatures more than 5s off server time
    "tolerance_ms": 5_000,
}

# ── Signed Headers ───────────────────────────────────────────────────────────

SIGNED_HEADER_KEYS = [
    "KC-API-KEY",
    "KC-API-SIGN",
    "KC-API-TIMESTAMP",
    "KC-API-PASSPHRASE",
    "KC-API-KEY-VERSION",
    "Content-Type",
]

# ── Accounts ─────────────────────────────────────────────────────────────────

ACCOUNT_FIELDS = ["id", "currency", "type", "balance", "available", "holds"]

# ── Paginated List ───────────────────────────────────────────────────────────

PAGE_SCHEMA = {
    "page_keys": ["currentPage", "pageSize", "totalNum", "totalPage", "items"],
}

LEDGER_ITEM_FIELDS = [
    "id",
    "currency",
    "amount",
    "fee",
    "balance",
    "accountType",
    "bizType",
    "direction",
    "createdAt",
    "context",
]
