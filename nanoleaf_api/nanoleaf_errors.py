"""Nanoleaf errors."""

from typing import Any, Optional


class NanoleafError(Exception):
    """Base Exception thrown from nanoleaf_api.

    Wraps the underlying cause and renders it as its own description.
    """

    def __init__(self, cause: Any):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return str(self.cause) or repr(self.cause)


class NanoleafUrlError(NanoleafError):
    """Base address or path does not form a valid request URL."""


class NanoleafHttpError(NanoleafError):
    """Request to the device failed."""


class NanoleafStatusError(NanoleafHttpError):
    """Device answered with a status outside 2xx."""

    def __init__(self, status: int, url: Optional[str] = None, text: str = ""):
        message = f"API-Error {status}"
        if url:
            message += f" for {url}"
        if text:
            message += f": {text}"
        super().__init__(message)
        self.status = status
        self.url = url
        self.text = text


class NanoleafDecodeError(NanoleafHttpError):
    """Response body does not match the expected schema."""
