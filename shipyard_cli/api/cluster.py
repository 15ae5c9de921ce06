"""
Cluster API - Cluster-wide information and events.
"""

from typing import Dict, Any, List

from ._http import HTTPClient, decode_body, decode_list


class ClusterAPI:
    """API for cluster info and the event log."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def info(self) -> Dict[str, Any]:
        """Get cluster capacity and usage summary."""
        response = self._http.request("GET", "/api/cluster/info")
        return decode_body(response)

    def events(self) -> List[Dict[str, Any]]:
        """List cluster events."""
        response = self._http.request("GET", "/api/events")
        return decode_list(response)
