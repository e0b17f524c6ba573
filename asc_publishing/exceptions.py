from __future__ import annotations
import requests
from asc_publishing.models.errors import ErrorResponse


class AppStoreConnectError(Exception):
    """Base error; `response` is the raw transport response when one was received."""

    def __init__(self, message: str, response: requests.Response | None = None) -> None:
        super().__init__(message)
        self.response = response


class TransportError(AppStoreConnectError):
    """Network failure or a non-2xx status."""

    def __init__(
        self,
        message: str,
        response: requests.Response | None = None,
        error_response: ErrorResponse | None = None,
    ) -> None:
        super().__init__(message, response)
        self.error_response = error_response

    @property
    def status_code(self) -> int | None:
        if self.response is None:
            return None
        return self.response.status_code


class DecodeError(AppStoreConnectError):
    """A 2xx body that does not match the expected envelope."""
