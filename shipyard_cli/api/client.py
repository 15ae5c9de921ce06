"""
Shipyard API Client - Main facade for all API operations.

This module exposes every endpoint both through domain-specific sub-clients
and through flat methods on the facade.
"""

from typing import Optional, Dict, Any, List

import requests

from ..config import ShipyardConfig
from ._http import HTTPClient
from .accounts import AccountsAPI
from .auth import AuthAPI
from .cluster import ClusterAPI
from .containers import ContainersAPI
from .engines import EnginesAPI
from .service_keys import ServiceKeysAPI


class ShipyardAPIClient:
    """
    Client for interacting with the Shipyard cluster management API.

    This is a facade that provides both:
    - Domain-specific sub-clients (client.containers, client.engines, etc.)
    - Flat methods (client.list_containers(), client.run_container(), etc.)

    Usage (sub-clients):
        client = ShipyardAPIClient(config)
        containers = client.containers.list()
        client.engines.remove(engine)

    Usage (flat):
        client = ShipyardAPIClient(config)
        containers = client.list_containers()
        client.remove_engine(engine)
    """

    def __init__(
        self,
        config: Optional[ShipyardConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the API client.

        Args:
            config: Optional configuration. Uses global config if not provided.
            session: Optional HTTP transport to use instead of a private session.
        """
        self._http = HTTPClient(config, session=session)

        # Domain-specific API modules
        self.containers = ContainersAPI(self._http)
        self.engines = EnginesAPI(self._http)
        self.cluster = ClusterAPI(self._http)
        self.accounts = AccountsAPI(self._http)
        self.auth = AuthAPI(self._http)
        self.service_keys = ServiceKeysAPI(self._http)

    @property
    def config(self) -> ShipyardConfig:
        """Get the configuration."""
        return self._http.config

    # ========== Container Methods ==========

    def list_containers(self) -> List[Dict[str, Any]]:
        """List all containers."""
        return self.containers.list()

    def get_container(self, container_id: str) -> Dict[str, Any]:
        """Get a container by ID."""
        return self.containers.get(container_id)

    def run_container(
        self,
        image: Dict[str, Any],
        count: int = 1,
        pull: bool = False
    ) -> List[Dict[str, Any]]:
        """Run containers from an image."""
        return self.containers.run(image, count, pull)

    def destroy_container(self, container: Dict[str, Any]) -> None:
        """Destroy a container."""
        self.containers.destroy(container)

    # ========== Engine Methods ==========

    def list_engines(self) -> List[Dict[str, Any]]:
        """List registered engines."""
        return self.engines.list()

    def get_engine(self, engine_id: str) -> Dict[str, Any]:
        """Get an engine by ID."""
        return self.engines.get(engine_id)

    def add_engine(self, engine: Dict[str, Any]) -> None:
        """Register an engine."""
        self.engines.add(engine)

    def remove_engine(self, engine: Dict[str, Any]) -> None:
        """Remove an engine."""
        self.engines.remove(engine)

    # ========== Cluster Methods ==========

    def cluster_info(self) -> Dict[str, Any]:
        """Get cluster info."""
        return self.cluster.info()

    def list_events(self) -> List[Dict[str, Any]]:
        """List cluster events."""
        return self.cluster.events()

    # ========== Account Methods ==========

    def list_accounts(self) -> List[Dict[str, Any]]:
        """List accounts."""
        return self.accounts.list()

    def add_account(self, account: Dict[str, Any]) -> None:
        """Create an account."""
        self.accounts.add(account)

    def delete_account(self, account: Dict[str, Any]) -> None:
        """Delete an account."""
        self.accounts.delete(account)

    def list_roles(self) -> List[Dict[str, Any]]:
        """List roles."""
        return self.accounts.roles()

    def get_role(self, name: str) -> Dict[str, Any]:
        """Get a role by name."""
        return self.accounts.role(name)

    def change_password(self, password: str) -> None:
        """Change the current account's password."""
        self.accounts.change_password(password)

    # ========== Auth Methods ==========

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """Log in and get an auth token."""
        return self.auth.login(username, password)

    # ========== Service Key Methods ==========

    def list_service_keys(self) -> List[Dict[str, Any]]:
        """List service keys."""
        return self.service_keys.list()

    def create_service_key(self, description: str) -> Dict[str, Any]:
        """Create a service key."""
        return self.service_keys.create(description)

    def remove_service_key(self, key: Dict[str, Any]) -> None:
        """Remove a service key."""
        self.service_keys.remove(key)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "ShipyardAPIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# Convenience function for quick API access
def get_client(
    config: Optional[ShipyardConfig] = None,
    session: Optional[requests.Session] = None
) -> ShipyardAPIClient:
    """
    Get an API client instance.

    Args:
        config: Optional configuration
        session: Optional HTTP transport

    Returns:
        ShipyardAPIClient instance
    """
    return ShipyardAPIClient(config, session=session)
