"""
HTTP transport for the App Store Connect API.

Every call is exactly one request on the shared `requests.Session`; there is
no retry, caching or pagination. Typed results come back together with the
raw `requests.Response` so callers can inspect status codes and headers.
"""
from __future__ import annotations

import logging
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from asc_publishing.config import ASC_BASE_URL, DEFAULT_TIMEOUT, Settings, get_settings
from asc_publishing.exceptions import DecodeError, TransportError
from asc_publishing.models.base import Query, RequestDocument
from asc_publishing.models.errors import ErrorResponse
from asc_publishing.publishing import PublishingService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class AppStoreConnectClient:
    def __init__(
        self,
        token: str,
        *,
        base_url: str = ASC_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # a caller-supplied session may be shared; credentials go per request
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        self.publishing = PublishingService(self)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, session: requests.Session | None = None
    ) -> AppStoreConnectClient:
        settings = settings or get_settings()
        return cls(
            settings.token,
            base_url=settings.base_url,
            timeout=settings.timeout,
            session=session,
        )

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> AppStoreConnectClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def get(
        self,
        path: str,
        params: Query | dict[str, str] | None,
        model: type[ModelT],
    ) -> tuple[ModelT, requests.Response]:
        if isinstance(params, Query):
            params = params.to_params()
        response = self._request("GET", path, params=params or None)
        return self._decode(response, model), response

    def post(
        self, path: str, body: RequestDocument, model: type[ModelT]
    ) -> tuple[ModelT, requests.Response]:
        response = self._request("POST", path, body=body.to_payload())
        return self._decode(response, model), response

    def patch(
        self, path: str, body: RequestDocument, model: type[ModelT]
    ) -> tuple[ModelT, requests.Response]:
        response = self._request("PATCH", path, body=body.to_payload())
        return self._decode(response, model), response

    def delete(self, path: str) -> requests.Response:
        return self._request("DELETE", path)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> requests.Response:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=body,
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.debug("%s %s returned %s", method, url, response.status_code)
            raise self._status_error(method, url, response)
        return response

    @staticmethod
    def _status_error(method: str, url: str, response: requests.Response) -> TransportError:
        message = f"{method} {url} returned {response.status_code}"
        try:
            error_response = ErrorResponse.model_validate_json(response.content)
        except ValidationError:
            # body is not a structured error payload
            error_response = None
        if error_response is not None and error_response.errors:
            message += f": {error_response.errors[0]}"
        return TransportError(message, response=response, error_response=error_response)

    @staticmethod
    def _decode(response: requests.Response, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"{response.url}: body does not match {model.__name__}",
                response=response,
            ) from e
