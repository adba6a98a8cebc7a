"""Pytest configuration and HTTP fakes for the KuCoin engine tests."""

import sys
from pathlib import Path
from urllib.parse import urlsplit, parse_qs

import orjson
import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from kucoin_engine.diagnostics.fixtures.mock_responses import (  # noqa: E402
    MOCK_TIMESTAMP_RESPONSE,
    SIGNING_FIXTURE,
)
from kucoin_engine.models import Credentials  # noqa: E402
from kucoin_engine.rest_client import RestClient  # noqa: E402

BASE_URL = "https://api.test.local"


class FakeResponse:
    def __init__(self, status_code: int = 200, body=None, content: bytes | None = None):
        self.status_code = status_code
        if content is None:
            content = orjson.dumps(body) if body is not None else b""
        self.content = content


class FakeSession:
    """
    Stands in for requests.Session. Responses are routed by URL path; each
    route holds a queue whose last entry repeats. An entry may be a
    FakeResponse, an exception to raise, or a callable(method, url, headers, data).
    """

    def __init__(self):
        self.calls: list[dict] = []
        self.routes: dict[str, list] = {}
        self.closed = False

    def route(self, path: str, *entries):
        self.routes.setdefault(path, []).extend(entries)
        return self

    def request(self, method, url, headers=None, data=None, timeout=None):
        parts = urlsplit(url)
        self.calls.append({
            "method": method,
            "url": url,
            "path": parts.path,
            "query": parse_qs(parts.query),
            "headers": dict(headers or {}),
            "data": data,
            "timeout": timeout,
        })
        queue = self.routes.get(parts.path)
        if not queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        entry = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(entry, BaseException):
            raise entry
        if callable(entry):
            return entry(method, url, headers, data)
        return entry

    def calls_to(self, path: str) -> list[dict]:
        return [c for c in self.calls if c["path"] == path]

    def close(self):
        self.closed = True


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def timed_session(session):
    """Session whose time endpoint always answers the fixture server time."""
    return session.route("/api/v1/timestamp", FakeResponse(body=MOCK_TIMESTAMP_RESPONSE))


@pytest.fixture
def rest(session):
    return RestClient(base_url=BASE_URL, session=session)


@pytest.fixture
def creds():
    return Credentials(
        api_key=SIGNING_FIXTURE["api_key"],
        api_secret=SIGNING_FIXTURE["api_secret"],
        api_passphrase=SIGNING_FIXTURE["api_passphrase"],
        key_version=SIGNING_FIXTURE["key_version"],
        base_url=BASE_URL,
    )
