"""
Accounts API - Account and role management.
"""

from typing import Dict, Any, List

from ..models import ChangePasswordRequest
from ._http import HTTPClient, encode_body, decode_body, decode_list


class AccountsAPI:
    """
    API for account management operations.

    Handles:
    - Account listing, creation and deletion
    - Role lookup
    - Password changes for the current account
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Accounts API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def list(self) -> List[Dict[str, Any]]:
        """List all accounts."""
        response = self._http.request("GET", "/api/accounts")
        return decode_list(response)

    def add(self, account: Dict[str, Any]) -> None:
        """
        Create an account.

        Args:
            account: Account record (username, password, role)
        """
        body = encode_body(account)
        # The server answers 204 here, unlike the other create endpoints
        self._http.request("POST", "/api/accounts", body=body, expected_status=204)

    def delete(self, account: Dict[str, Any]) -> None:
        """Delete an account. The full record is sent as the body."""
        body = encode_body(account)
        self._http.request("DELETE", "/api/accounts", body=body, expected_status=204)

    def roles(self) -> List[Dict[str, Any]]:
        """List available roles."""
        response = self._http.request("GET", "/api/roles")
        return decode_list(response)

    def role(self, name: str) -> Dict[str, Any]:
        """Get a role by name."""
        response = self._http.request("GET", f"/api/roles/{name}")
        return decode_body(response)

    def change_password(self, password: str) -> None:
        """Change the password of the authenticated account."""
        body = encode_body(ChangePasswordRequest(password=password))
        self._http.request("POST", "/account/changepassword", body=body)
