"""Service-account access tokens for the Google Ads API.

Tokens are minted by ``google-auth`` from a service account key and cached
for the life of the process. One cached token is shared by every
concurrent tool call:

- Readers check the cached token without locking.
- A token is refreshed ahead of time once it is within
  ``TOKEN_REFRESH_BUFFER`` of expiry.
- Refresh happens under an ``asyncio.Lock``; callers that were waiting on
  the lock re-check the cache first, so at most one refresh is in flight.
- The blocking ``credentials.refresh`` call runs in the default executor.
"""

import asyncio
import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from google_ads_mcp.core.exceptions import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)

# OAuth2 scopes required for Google Ads API
GOOGLE_ADS_SCOPES = ["https://www.googleapis.com/auth/adwords"]

TOKEN_REFRESH_BUFFER = timedelta(minutes=5)


class TokenProvider(Protocol):
    """Anything that can hand out a bearer token for the Google Ads API."""

    async def get_access_token(self) -> str: ...


def _utc(dt: datetime | None) -> datetime | None:
    # google-auth reports naive UTC expiry times
    if dt is not None and dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


class ServiceAccountTokenManager:
    """Caches and refreshes service-account access tokens."""

    def __init__(
        self, credentials: Any, refresh_buffer: timedelta = TOKEN_REFRESH_BUFFER
    ):
        self._credentials = credentials
        self._refresh_buffer = refresh_buffer
        self._token: str | None = None
        self._expiry: datetime | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_service_account_json(
        cls, service_account_json: str, scopes: list[str] | None = None
    ) -> "ServiceAccountTokenManager":
        """Build a token manager from the contents of a service account key file.

        Raises:
            ConfigurationError: If the key is not valid JSON or is incomplete
        """
        try:
            info = json.loads(service_account_json)
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=scopes or GOOGLE_ADS_SCOPES
            )
        except (ValueError, KeyError, TypeError) as e:
            raise ConfigurationError(
                f"Invalid service account credentials: {e}"
            ) from e
        return cls(credentials)

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _is_valid(self) -> bool:
        if not self._token or self._expiry is None:
            return False
        return self._now() + self._refresh_buffer < self._expiry

    async def get_access_token(self) -> str:
        """Return a cached token, refreshing it first if it is about to expire.

        Raises:
            AuthenticationError: If a new token could not be obtained
        """
        if self._is_valid():
            return self._token  # type: ignore[return-value]

        async with self._lock:
            if self._is_valid():
                return self._token  # type: ignore[return-value]
            await self._refresh_token()
            return self._token  # type: ignore[return-value]

    async def _refresh_token(self) -> None:
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._credentials.refresh, Request())
        except (GoogleAuthError, OSError) as e:
            raise AuthenticationError(f"failed to obtain access token: {e}") from e

        token = self._credentials.token
        if not token:
            raise AuthenticationError("failed to obtain access token: empty token")

        self._token = token
        self._expiry = _utc(self._credentials.expiry)
        logger.info(f"Refreshed Google Ads access token, expires at {self._expiry}")

    def invalidate(self) -> None:
        """Drop the cached token so the next call refreshes."""
        self._token = None
        self._expiry = None

    def token_info(self) -> dict[str, Any]:
        """Describe the cached token without exposing it."""
        info: dict[str, Any] = {
            "has_token": self._token is not None,
            "is_valid": self._is_valid(),
        }
        if self._expiry is not None:
            info["expires_in"] = max(
                0, int((self._expiry - self._now()).total_seconds())
            )
        return info

    async def verify_credentials(self) -> None:
        """Force a token exchange to prove the credentials work.

        Raises:
            AuthenticationError: If the exchange fails
        """
        async with self._lock:
            self.invalidate()
            await self._refresh_token()
