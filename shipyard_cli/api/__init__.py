"""
Shipyard API Client Package.

Structure:
    - client.py: Main ShipyardAPIClient facade
    - _http.py: Base HTTP client with auth headers, status checks and JSON codec
    - containers.py: Container listing, run and destroy
    - engines.py: Engine registration
    - cluster.py: Cluster info and events
    - accounts.py: Accounts, roles and password changes
    - auth.py: Login
    - service_keys.py: Service key management

Usage:
    from shipyard_cli.api import ShipyardAPIClient
    from shipyard_cli.config import ShipyardConfig

    config = ShipyardConfig(url="http://shipyard:8080", service_key="...")
    with ShipyardAPIClient(config) as client:
        containers = client.containers.list()
        engines = client.list_engines()
"""

from .client import ShipyardAPIClient, get_client
from ._http import HTTPClient, encode_body, decode_body, decode_list
from .containers import ContainersAPI
from .engines import EnginesAPI
from .cluster import ClusterAPI
from .accounts import AccountsAPI
from .auth import AuthAPI
from .service_keys import ServiceKeysAPI

__all__ = [
    # Main client
    "ShipyardAPIClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    "encode_body",
    "decode_body",
    "decode_list",
    # Domain APIs
    "ContainersAPI",
    "EnginesAPI",
    "ClusterAPI",
    "AccountsAPI",
    "AuthAPI",
    "ServiceKeysAPI",
]
