"""API clients for the betting backend."""

from .auth_client import AuthClient
from .base import APIException, BaseClient, TransportException
from .bets_client import CompletedBetsClient

__all__ = [
    "BaseClient",
    "APIException",
    "TransportException",
    "AuthClient",
    "CompletedBetsClient",
]
