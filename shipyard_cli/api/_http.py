"""
Base HTTP client for the Shipyard API.

Handles URL building, credential headers, the per-operation status contract
and classification of failures. JSON encoding and decoding helpers used by
the domain APIs live here too.
"""

import json
import logging
from dataclasses import asdict, is_dataclass
from typing import Optional, Any, Dict, List

import requests

from ..config import ShipyardConfig, get_config
from ..exceptions import (
    CodecError,
    RequestError,
    TransportError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

SERVICE_KEY_HEADER = "X-Service-Key"
ACCESS_TOKEN_HEADER = "X-Access-Token"


def encode_body(value: Any) -> bytes:
    """
    Serialize a request body to JSON bytes.

    Dataclass instances are converted to dicts first.

    Raises:
        CodecError: If the value is not JSON serializable
    """
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    try:
        return json.dumps(value).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise CodecError(f"Could not encode request body: {e}", original=e) from e


def decode_body(response: requests.Response) -> Any:
    """
    Decode a JSON response body.

    An empty or malformed body is an error, not an empty result.

    Raises:
        CodecError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise CodecError(f"Could not decode response body: {e}", original=e) from e


def decode_list(response: requests.Response) -> List[Any]:
    """Decode a JSON array response body; ``null`` yields an empty list."""
    data = decode_body(response)
    if data is None:
        return []
    if not isinstance(data, list):
        raise CodecError(
            f"Could not decode response body: expected a JSON array, got {type(data).__name__}"
        )
    return data


def _body_text(response: requests.Response) -> str:
    """Response body as UTF-8 text, ignoring any charset the server declared."""
    return response.content.decode("utf-8", errors="replace")


class HTTPClient:
    """
    Base HTTP client for the Shipyard API.

    Handles:
    - Transport (an injected or privately owned ``requests.Session``)
    - Authentication headers
    - Expected-status enforcement
    - Error classification

    Requests are never retried. Holds no mutable state besides the lazily
    created session, so one instance can be shared between threads as far as
    the session allows.
    """

    def __init__(
        self,
        config: Optional[ShipyardConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            config: Optional configuration. Uses global config if not provided.
            session: Optional transport. A private session is created on first
                use if not provided, and closed by ``close()``.
        """
        self.config = config or get_config()
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.verify = self.config.verify_ssl
        return self._session

    def build_url(self, path: str) -> str:
        """Join the configured base URL and a server-relative path verbatim."""
        return f"{self.config.url}{path}"

    def _get_headers(self) -> dict:
        """Get the authentication header; a service key wins over user credentials."""
        if self.config.service_key:
            return {SERVICE_KEY_HEADER: self.config.service_key}
        return {ACCESS_TOKEN_HEADER: f"{self.config.username}:{self.config.token}"}

    def _handle_response(
        self,
        response: requests.Response,
        expected_status: int,
    ) -> requests.Response:
        """Enforce the status contract and classify failures."""
        logger.debug(f"Response: {response.status_code} (expected {expected_status})")

        if response.status_code == 401:
            raise UnauthorizedError(details=_body_text(response) or None)

        if response.status_code != expected_status:
            raise RequestError(_body_text(response), status_code=response.status_code)

        return response

    def request(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
        expected_status: int = 200,
    ) -> requests.Response:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST or DELETE)
            path: Server-relative path, including any query string
            body: Pre-serialized request body, or None
            expected_status: The status code that means success

        Returns:
            The response, with its body unread by this layer

        Raises:
            TransportError: The request could not be sent or answered
            UnauthorizedError: The server answered 401
            RequestError: The server answered any other unexpected status
        """
        url = self.build_url(path)
        headers = self._get_headers()

        logger.debug(
            f"Request: {method} {url} "
            f"(auth: {'service key' if SERVICE_KEY_HEADER in headers else 'access token'})"
        )

        kwargs: Dict[str, Any] = {}
        # An injected session keeps whatever timeout policy its owner gave it
        if self._owns_session:
            kwargs["timeout"] = self.config.timeout

        try:
            response = self.session.request(
                method=method,
                url=url,
                data=body,
                headers=headers,
                **kwargs,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        return self._handle_response(response, expected_status)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
