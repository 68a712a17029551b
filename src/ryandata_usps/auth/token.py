"""OAuth2 client-credentials token cache.

The USPS APIs authenticate with short-lived bearer tokens obtained from the
OAuth2 token endpoint. TokenManager keeps one token per set of credentials
and renews it shortly before it expires.

Thread Safety:
    The cached token is an immutable CachedToken snapshot that is replaced
    with a single attribute assignment. Readers take no lock; a refresh is
    serialized by a lock and re-checks the snapshot after acquiring it, so
    concurrent callers racing past an expired token cause at most one call
    to the token endpoint.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from ryandata_usps.config import DEFAULT_TIMEOUT
from ryandata_usps.models.errors import TokenError

logger = logging.getLogger(__name__)

# Renew this many seconds before the provider-reported expiry
REFRESH_BUFFER_SECONDS = 5 * 60
# Lifetime assumed when the provider omits expires_in
DEFAULT_EXPIRES_IN_SECONDS = 60 * 60


@dataclass(frozen=True)
class CachedToken:
    """Access token together with the moment it should stop being used.

    Attributes:
        access_token: The bearer token string.
        expires_at: Clock reading (seconds) after which the token is stale.
            Already has the refresh buffer subtracted.
    """

    access_token: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return self.access_token != "" and now < self.expires_at


class TokenResponse(BaseModel):
    """Successful response body from the OAuth2 token endpoint."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = ""
    token_type: str = ""
    expires_in: Optional[int] = None


class TokenManager:
    """Lazily acquires and caches an OAuth2 client-credentials token.

    Example:
        >>> manager = TokenManager("id", "secret", "https://apis.usps.com/oauth2/v3/token")
        >>> manager.get_token()  # first call hits the token endpoint
        'eyJraWQi...'
        >>> manager.get_token()  # served from cache until near expiry
        'eyJraWQi...'
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        token_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
        clock: Callable[[], float] = time.monotonic,
        refresh_buffer: float = REFRESH_BUFFER_SECONDS,
    ) -> None:
        """Initialize the token manager.

        Args:
            client_id: OAuth2 client ID.
            client_secret: OAuth2 client secret.
            token_url: Token endpoint URL.
            timeout: Timeout in seconds for the token request.
            transport: Optional httpx transport (used when no http_client is given).
            http_client: Optional pre-built client; it is not closed by close().
            clock: Monotonic time source in seconds.
            refresh_buffer: Seconds subtracted from the reported lifetime.
        """
        self._client_id = client_id
        self._client_secret = client_secret
        self._token_url = token_url
        self._clock = clock
        self._refresh_buffer = refresh_buffer

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout, transport=transport)

        self._lock = threading.Lock()
        self._cached: Optional[CachedToken] = None

    @property
    def expires_at(self) -> Optional[float]:
        """Clock reading at which the cached token goes stale, if one is cached."""
        cached = self._cached
        return cached.expires_at if cached is not None else None

    def get_token(self) -> str:
        """Return a valid access token, refreshing it if necessary.

        Returns:
            The bearer token string.

        Raises:
            TokenError: If a refresh was needed and failed. The cache is left
                as it was.
        """
        cached = self._cached
        if cached is not None and cached.is_valid(self._clock()):
            return cached.access_token
        return self._refresh()

    def invalidate(self) -> None:
        """Drop the cached token so the next get_token() call refreshes it."""
        with self._lock:
            self._cached = None

    def close(self) -> None:
        """Close the underlying HTTP client if this manager created it."""
        if self._owns_client:
            self._client.close()

    def _refresh(self) -> str:
        with self._lock:
            # Another caller may have refreshed while we waited for the lock
            cached = self._cached
            if cached is not None and cached.is_valid(self._clock()):
                return cached.access_token

            self._cached = self._request_token()
            return self._cached.access_token

    def _request_token(self) -> CachedToken:
        logger.debug("Requesting USPS access token from %s", self._token_url)
        try:
            response = self._client.post(
                self._token_url,
                json={
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                    "grant_type": "client_credentials",
                },
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise TokenError("Token request failed", f"token request failed: {exc}") from exc

        if response.status_code != 200:
            raise TokenError(
                "Token request failed",
                f"token request failed with status {response.status_code}",
                status=str(response.status_code),
            )

        try:
            payload = TokenResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise TokenError.from_validation_error(
                "failed to decode token response", exc, {"token_url": self._token_url}
            ) from exc

        if not payload.access_token:
            raise TokenError("Token request failed", "received empty access token")

        expires_in = payload.expires_in or DEFAULT_EXPIRES_IN_SECONDS
        expires_at = self._clock() + expires_in - self._refresh_buffer
        logger.debug(
            "USPS access token cached (expires_in=%ss, refresh_buffer=%ss)",
            expires_in,
            self._refresh_buffer,
        )
        return CachedToken(access_token=payload.access_token, expires_at=expires_at)
