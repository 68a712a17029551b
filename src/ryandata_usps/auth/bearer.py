from __future__ import annotations

from collections.abc import Generator

import httpx

from ryandata_usps.protocols import TokenProviderProtocol


class BearerTokenAuth(httpx.Auth):
    """httpx auth hook that attaches a fresh bearer token to every request.

    The token provider decides whether a network refresh is needed; this
    hook only asks for the current token each time a request is sent.
    """

    def __init__(self, token_provider: TokenProviderProtocol) -> None:
        self._token_provider = token_provider

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._token_provider.get_token()
        request.headers["Authorization"] = f"Bearer {token}"
        yield request
