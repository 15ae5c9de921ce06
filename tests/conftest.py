"""
Shared fixtures for Shipyard CLI tests.
"""

import json
from typing import Any, Dict, Optional, Union
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers

from shipyard_cli.api import HTTPClient, ShipyardAPIClient
from shipyard_cli.config import ShipyardConfig

BASE_URL = "http://shipyard.test:8080"


def make_response(
    status_code: int = 200,
    body: Union[bytes, str, Any] = b"",
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """
    Build a real requests.Response with a buffered body.

    The encoding is derived from the headers the same way requests does it
    for a live response.
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    elif not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = get_encoding_from_headers(response.headers)
    return response


@pytest.fixture
def config():
    """Config authenticating with username and token."""
    return ShipyardConfig(url=BASE_URL, username="admin", token="tok3n", timeout=10)


@pytest.fixture
def session():
    """Fake transport; set ``session.request.return_value`` per test."""
    mock = MagicMock(spec=requests.Session)
    mock.request.return_value = make_response(200, [])
    return mock


@pytest.fixture
def http(config, session):
    return HTTPClient(config, session=session)


@pytest.fixture
def client(config, session):
    return ShipyardAPIClient(config, session=session)


def sent(session) -> dict:
    """Keyword arguments of the last request sent through the fake transport."""
    return session.request.call_args.kwargs


def sent_json(session) -> Any:
    return json.loads(sent(session)["data"])
