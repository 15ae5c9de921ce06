"""
Service Keys API - Keys for non-interactive callers.
"""

from typing import Dict, Any, List

from ..models import ServiceKeyRequest
from ._http import HTTPClient, encode_body, decode_body, decode_list


class ServiceKeysAPI:
    """
    API for service key management.

    A service key sent in the ``X-Service-Key`` header authenticates a
    caller without a username and token.
    """

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self) -> List[Dict[str, Any]]:
        """List service keys."""
        response = self._http.request("GET", "/api/servicekeys")
        return decode_list(response)

    def create(self, description: str) -> Dict[str, Any]:
        """
        Create a service key.

        Args:
            description: Free-text description shown when listing keys

        Returns:
            The new key record, including the generated ``key``
        """
        body = encode_body(ServiceKeyRequest(description=description))
        response = self._http.request("POST", "/api/servicekeys", body=body)
        return decode_body(response)

    def remove(self, key: Dict[str, Any]) -> None:
        """Remove a service key. The full record is sent as the body."""
        body = encode_body(key)
        self._http.request("DELETE", "/api/servicekeys", body=body, expected_status=204)
