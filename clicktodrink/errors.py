from __future__ import annotations

import json
from typing import Any, Optional


class ApiError(Exception):
    """Base class for failures raised by the commerce API gateway."""


class ConfigurationError(ApiError):
    """Raised when required client configuration is missing."""


class NetworkError(ApiError):
    """Raised when the transport could not obtain a response from the remote service."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class RemoteRejection(ApiError):
    """Raised when the remote service answered but the response indicates failure.

    The status code and body are kept exactly as received so callers can decide
    how to present them.
    """

    def __init__(self, status_code: int, body: str, url: Optional[str] = None) -> None:
        super().__init__(f"Remote service rejected the request ({status_code}): {body}")
        self.status_code = status_code
        self.body = body
        self.url = url

    def json(self) -> Any:
        """Decode the rejection body as JSON, or return None when it is not JSON."""
        try:
            return json.loads(self.body)
        except ValueError:
            return None
