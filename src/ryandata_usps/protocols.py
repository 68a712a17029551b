from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenProviderProtocol(Protocol):
    """Protocol for bearer token sources.

    Implementations return a currently-valid access token, refreshing it
    themselves when needed, and raise TokenError when none can be obtained.
    """

    def get_token(self) -> str:
        """Return a valid bearer token.

        Returns:
            Access token string suitable for an Authorization header.
        """
        ...
