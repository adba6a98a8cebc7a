"""
Errors — Typed failure hierarchy for KuCoin REST calls.

Callers branch on the class, not on message text. Every wrapper keeps the
original exception reachable through `__cause__`.
"""

from __future__ import annotations
from typing import Optional


class KucoinError(Exception):
    """Base exception for all KuCoin client errors."""


# Transport

class NetworkError(KucoinError):
    """Request did not complete: timeout or connection failure."""
    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Network error for URL {url}: {cause}")


class HttpError(KucoinError):
    """Response received with a non-200 status."""
    def __init__(self, status: int, url: str, content: str = "") -> None:
        self.status = status
        self.url = url
        self.content = content
        super().__init__(f"HTTP request failed with status code {status} for URL: {url}")


# Envelope

class ParseError(KucoinError):
    """Body is not valid JSON."""
    def __init__(self, url: str, detail: str = "") -> None:
        self.url = url
        super().__init__(f"Failed to parse JSON response from {url}: {detail}")


class StructureError(KucoinError):
    """Parsed JSON lacks the `code` field."""
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("Invalid API response structure: missing 'code' field.")


class ApiError(KucoinError):
    """Envelope `code` present but not the success code."""
    def __init__(self, code: str, msg: str) -> None:
        self.code = code
        self.msg = msg
        super().__init__(f"KuCoin API returned an error: {code} - {msg}")


# Core primitives

class SigningError(KucoinError):
    """Server-time fetch or hashing failed while building headers."""
    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(f"Failed to build request headers: {message}")


class PaginationError(KucoinError):
    """A page fetch failed; the whole pagination sequence is aborted."""
    def __init__(self, page: Optional[int], cause: BaseException) -> None:
        self.page = page
        self.cause = cause
        super().__init__(f"Error in auto_paginate on page {page}: {cause}")
