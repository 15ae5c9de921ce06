"""
Request bodies for the endpoints that don't take a domain record.

Domain records (containers, engines, accounts, ...) are passed through as
plain dicts; these dataclasses only describe the small credential payloads.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoginRequest:
    username: str
    password: str


@dataclass(frozen=True)
class ChangePasswordRequest:
    password: str


@dataclass(frozen=True)
class ServiceKeyRequest:
    description: str
