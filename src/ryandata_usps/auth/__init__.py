from __future__ import annotations

from ryandata_usps.auth.bearer import BearerTokenAuth
from ryandata_usps.auth.token import (
    DEFAULT_EXPIRES_IN_SECONDS,
    REFRESH_BUFFER_SECONDS,
    CachedToken,
    TokenManager,
    TokenResponse,
)

__all__ = [
    "BearerTokenAuth",
    "CachedToken",
    "TokenManager",
    "TokenResponse",
    "REFRESH_BUFFER_SECONDS",
    "DEFAULT_EXPIRES_IN_SECONDS",
]
