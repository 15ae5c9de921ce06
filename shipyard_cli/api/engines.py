"""
Engines API - Compute engine registration.
"""

from typing import Dict, Any, List

from ._http import HTTPClient, encode_body, decode_body, decode_list


class EnginesAPI:
    """
    API for compute engine operations.

    An engine record wraps the Docker host description under its ``engine``
    key; that nested ``id`` identifies the engine in paths.
    """

    def __init__(self, http: HTTPClient):
        self._http = http

    def list(self) -> List[Dict[str, Any]]:
        """List registered engines."""
        response = self._http.request("GET", "/api/engines")
        return decode_list(response)

    def get(self, engine_id: str) -> Dict[str, Any]:
        """Get an engine by ID."""
        response = self._http.request("GET", f"/api/engines/{engine_id}")
        return decode_body(response)

    def add(self, engine: Dict[str, Any]) -> None:
        """Register an engine with the cluster."""
        body = encode_body(engine)
        self._http.request("POST", "/api/engines", body=body, expected_status=201)

    def remove(self, engine: Dict[str, Any]) -> None:
        """Remove an engine from the cluster."""
        engine_id = (engine.get("engine") or {}).get("id", "")
        self._http.request("DELETE", f"/api/engines/{engine_id}", expected_status=204)
