"""
Envelope — The single success/failure gate for every KuCoin HTTP response.

Checks run in order and stop at the first failure:
    1. HTTP status == 200          -> HttpError (body never inspected)
    2. body parses as JSON         -> ParseError
    3. body is an object w/ `code` -> StructureError
    4. code == "200000"            -> ApiError(code, msg)

Endpoint-specific shapes are the caller's business; this returns the whole
envelope and the caller reads `data`.
"""

from __future__ import annotations
import orjson as json

from .config import SUCCESS_CODE
from .errors import HttpError, ParseError, StructureError, ApiError
from .models import ResponseEnvelope

NO_MESSAGE = "No error message provided"


def process_response(response, url: str) -> ResponseEnvelope:
    """Validate a raw `requests.Response`-like object (status_code, content)."""
    status = response.status_code
    if status != 200:
        raise HttpError(status, url, _text(response.content))

    try:
        parsed = json.loads(response.content)
    except json.JSONDecodeError as e:
        raise ParseError(url, str(e)) from e

    if not isinstance(parsed, dict) or "code" not in parsed:
        raise StructureError(url)

    code = str(parsed["code"])
    if code != SUCCESS_CODE:
        msg = parsed.get("msg") or NO_MESSAGE
        raise ApiError(code, msg)

    return ResponseEnvelope(
        code=code,
        data=parsed.get("data"),
        msg=parsed.get("msg"),
        raw=parsed,
    )


def _text(content) -> str:
    if isinstance(content, (bytes, bytearray)):
        return bytes(content[:500]).decode("utf-8", errors="replace")
    return str(content or "")[:500]
