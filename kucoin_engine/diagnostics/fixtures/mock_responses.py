"""
Mock Responses — Sample KuCoin API responses for offline/unit testing.
Used to validate signing, envelope handling and pagination without the live API.
"""

MOCK_SERVER_TIME = 1700000000000

MOCK_TIMESTAMP_RESPONSE = {
    "code": "200000",
    "data": MOCK_SERVER_TIME,
}

# Signing fixture: secret "s3cr3t", GET /api/v1/accounts?currency=USDT, empty body
SIGNING_FIXTURE = {
    "api_key": "test-key",
    "api_secret": "s3cr3t",
    "api_passphrase": "passphrase",
    "key_version": "2",
    "timestamp": MOCK_SERVER_TIME,
    "method": "GET",
    "path": "/api/v1/accounts?currency=USDT",
    "body": "",
    "prehash": "1700000000000GET/api/v1/accounts?currency=USDT",
    "signature": "VO8dFgSpksmP1d/pFoQX1Dk83oiSUH4RNoR+bDlwXek=",
    "encrypted_passphrase": "eCA3d5Ns/0hRgZ07j1EiFIRZckgF0OAn5xEQoJPI5wc=",
}

SIGNING_FIXTURE_POST = {
    "method": "post",
    "path": "/api/v1/orders",
    "body": '{"size":1}',
    "signature": "AKrra9mCn3clpiOcDEvo3Z3sbEUSEqXjFJ7+Zg0tzsY=",
}

MOCK_ACCOUNTS_RESPONSE = {
    "code": "200000",
    "data": [
        {
            "id": "5bd6e9286d99522a52e458de",
            "currency": "USDT",
            "type": "trade",
            "balance": "237582.04299",
            "available": "237582.032",
            "holds": "0.01099",
        },
    ],
}

MOCK_API_ERROR_RESPONSE = {
    "code": "400100",
    "msg": "Bad Request",
}

MOCK_API_ERROR_NO_MSG_RESPONSE = {
    "code": "400000",
    "data": {},
}


def ledger_page(current_page: int, total_page: int, page_size: int = 2) -> dict:
    """One page of /api/v1/accounts/ledgers, `page_size` items tagged with the page number."""
    return {
        "currentPage": current_page,
        "pageSize": page_size,
        "totalNum": total_page * page_size,
        "totalPage": total_page,
        "items": [
            {
                "id": f"p{current_page}-{i}",
                "currency": "USDT",
                "amount": "0.01",
                "fee": "0",
                "balance": "0",
                "accountType": "TRADE",
                "bizType": "SUB_TRANSFER",
                "direction": "out",
                "createdAt": 1728658481484 + current_page * 1000 + i,
                "context": "",
            }
            for i in range(page_size)
        ],
    }


MOCK_LEDGER_RESPONSE = {
    "code": "200000",
    "data": ledger_page(1, 1, page_size=1),
}

MOCK_EMPTY_PAGE = {
    "currentPage": 1,
    "pageSize": 50,
    "totalNum": 0,
    "totalPage": 0,
    "items": [],
}
