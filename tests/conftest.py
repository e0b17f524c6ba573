"""Shared fixtures: a recording stand-in for requests.Session and canned bodies."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from asc_publishing.client import AppStoreConnectClient

BASE_URL = "https://api.appstoreconnect.apple.com/v1"


@dataclass
class Call:
    method: str
    url: str
    params: dict[str, str] | None
    json: dict[str, Any] | None
    headers: dict[str, str] | None
    timeout: float | None


def make_response(status: int, body: Any = None, raw: bytes | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode()
    else:
        response._content = b""
    response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """Records every request and answers from a queue of canned responses."""

    def __init__(self) -> None:
        self.headers: CaseInsensitiveDict[str] = CaseInsensitiveDict()
        self.calls: list[Call] = []
        self.responses: list[requests.Response] = []
        self.error: Exception | None = None
        self.closed = False

    def queue(self, status: int, body: Any = None, raw: bytes | None = None) -> None:
        self.responses.append(make_response(status, body, raw))

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append(Call(method, url, params, json, headers, timeout))
        if self.error is not None:
            raise self.error
        response = self.responses.pop(0)
        response.url = url
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> AppStoreConnectClient:
    return AppStoreConnectClient("test-token", base_url=BASE_URL, timeout=5, session=session)


@pytest.fixture
def phased_release_body() -> dict[str, Any]:
    return {
        "data": {
            "type": "appStoreVersionPhasedReleases",
            "id": "abc123",
            "attributes": {
                "phasedReleaseState": "ACTIVE",
                "currentDayNumber": 3,
                "startDate": "2021-03-01T10:00:00Z",
                "totalPauseDuration": 0,
            },
            "links": {"self": f"{BASE_URL}/appStoreVersionPhasedReleases/abc123"},
        },
        "links": {"self": f"{BASE_URL}/appStoreVersionPhasedReleases/abc123"},
    }


@pytest.fixture
def pre_order_body() -> dict[str, Any]:
    return {
        "data": {
            "type": "appPreOrders",
            "id": "po-42",
            "attributes": {
                "appReleaseDate": "2026-12-01",
                "preOrderAvailableDate": "2026-10-20",
            },
            "links": {"self": f"{BASE_URL}/appPreOrders/po-42"},
        },
        "links": {"self": f"{BASE_URL}/appPreOrders/po-42"},
    }


@pytest.fixture
def error_body() -> dict[str, Any]:
    return {
        "errors": [
            {
                "id": "5f2c",
                "status": "409",
                "code": "ENTITY_ERROR.STATE_INVALID",
                "title": "The request entity is not in a valid state.",
                "detail": "The phased release is already complete.",
                "source": {"pointer": "/data/attributes/phasedReleaseState"},
            }
        ]
    }
