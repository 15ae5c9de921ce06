"""
Containers API - Container lifecycle operations.
"""

from typing import Dict, Any, List

from ._http import HTTPClient, encode_body, decode_body, decode_list


class ContainersAPI:
    """
    API for container operations.

    Handles:
    - Listing and inspecting containers
    - Running containers from an image
    - Destroying containers
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Containers API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def list(self) -> List[Dict[str, Any]]:
        """List all containers in the cluster."""
        response = self._http.request("GET", "/api/containers")
        return decode_list(response)

    def get(self, container_id: str) -> Dict[str, Any]:
        """Get a container by ID."""
        response = self._http.request("GET", f"/api/containers/{container_id}")
        return decode_body(response)

    def run(
        self,
        image: Dict[str, Any],
        count: int = 1,
        pull: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Run one or more containers from an image.

        Args:
            image: Image record (name, cpus, memory, environment, ...)
            count: Number of containers to start
            pull: Pull the image on the engine before starting

        Returns:
            The started containers, in the order the server returned them
        """
        body = encode_body(image)
        pull_flag = "true" if pull else "false"
        response = self._http.request(
            "POST",
            f"/api/containers?count={count}&pull={pull_flag}",
            body=body,
            expected_status=201
        )
        return decode_list(response)

    def destroy(self, container: Dict[str, Any]) -> None:
        """Stop and remove a container. The full record is sent as the body."""
        body = encode_body(container)
        self._http.request(
            "DELETE",
            f"/api/containers/{container.get('id', '')}",
            body=body,
            expected_status=204
        )
