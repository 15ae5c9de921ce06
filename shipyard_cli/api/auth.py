"""
Auth API - Credential login.
"""

from typing import Dict, Any

from ..models import LoginRequest
from ._http import HTTPClient, encode_body, decode_body


class AuthAPI:
    """API for obtaining an access token."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """
        Authenticate with username and password.

        Args:
            username: Account username
            password: Account password

        Returns:
            Auth token record; the token itself is under ``auth_token``

        Raises:
            UnauthorizedError: If the credentials are rejected
        """
        body = encode_body(LoginRequest(username=username, password=password))
        response = self._http.request("POST", "/auth/login", body=body)
        return decode_body(response)
