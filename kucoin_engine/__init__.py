"""
KuCoin Engine — Request signing and auto-pagination for the KuCoin REST API.

Usage:
    import asyncio
    from kucoin_engine import KucoinAdapter, load_credentials

    async def main():
        adapter = KucoinAdapter(load_credentials())
        accounts = await adapter.get_accounts(currency="USDT")
        ledger = await adapter.get_spot_ledger({"currency": "USDT"}, max_pages=2)
        adapter.close()

    asyncio.run(main())
"""

from .adapter import KucoinAdapter
from .auth import Authenticator, build_headers, sign_request
from .config import load_credentials
from .envelope import process_response
from .errors import (
    KucoinError, NetworkError, HttpError, ParseError, StructureError,
    ApiError, SigningError, PaginationError,
)
from .models import Credentials, SignedRequest, ResponseEnvelope, PageState
from .paginator import auto_paginate, flatten_pages, flatten_with_datetime
from .rest_client import RestClient
from .utils import (
    build_query, time_convert_from_kucoin, time_convert_to_kucoin,
    convert_datetime_range_to_ms, verify_ticker,
)

__all__ = [
    "KucoinAdapter",
    "Authenticator", "build_headers", "sign_request",
    "load_credentials",
    "process_response",
    "KucoinError", "NetworkError", "HttpError", "ParseError", "StructureError",
    "ApiError", "SigningError", "PaginationError",
    "Credentials", "SignedRequest", "ResponseEnvelope", "PageState",
    "auto_paginate", "flatten_pages", "flatten_with_datetime",
    "RestClient",
    "build_query", "time_convert_from_kucoin", "time_convert_to_kucoin",
    "convert_datetime_range_to_ms", "verify_ticker",
]
