"""Clients for the Google Ads REST API."""

from .auth import ServiceAccountTokenManager, TokenProvider
from .http import HTTPResponse, ReliableHTTPClient

__all__ = [
    "ServiceAccountTokenManager",
    "TokenProvider",
    "HTTPResponse",
    "ReliableHTTPClient",
]
