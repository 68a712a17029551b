from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ryandata_usps.auth import BearerTokenAuth, TokenManager
from ryandata_usps.config import ClientConfig
from ryandata_usps.models import (
    Address,
    InputValidationError,
    QueryParam,
    TransportError,
    UnexpectedResponseError,
    ValidationResult,
)
from ryandata_usps.protocols import TokenProviderProtocol
from ryandata_usps.remote.convert import convert_error, convert_response
from ryandata_usps.remote.schema import AddressResponse, ErrorMessage
from ryandata_usps.validation import create_input_validators

logger = logging.getLogger(__name__)

ADDRESS_PATH = "/address"

# Statuses for which USPS documents a structured error body
STRUCTURED_ERROR_STATUSES = frozenset({400, 401, 403, 404, 429, 503})


def build_address_params(address: Address) -> dict[str, str]:
    """Build ``GET /address`` query parameters from an address.

    Street address and state are always sent (state uppercased); optional
    fields are only included when non-empty.
    """
    params = {
        QueryParam.STREET_ADDRESS.value: address.street_address,
        QueryParam.STATE.value: address.state.upper(),
    }
    params.update(address.to_query_params())
    return params


class UspsAddressClient:
    """REST client for the USPS Addresses v3 validation endpoint.

    Handles OAuth2 token acquisition and refresh transparently; every
    request carries a bearer token obtained from the token manager.

    Example:
        >>> config = ClientConfig(client_id="...", client_secret="...")
        >>> with UspsAddressClient(config) as client:
        ...     results = client.validate_address(
        ...         Address(street_address="1600 Pennsylvania Ave NW", state="DC")
        ...     )
        >>> results[0].address.zip_code
        '20500'
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        token_provider: Optional[TokenProviderProtocol] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Credentials and endpoints. A defaulted private copy is kept.
            transport: Optional httpx transport shared by API and token calls.
            token_provider: Optional token source replacing the built-in TokenManager.

        Raises:
            ConfigurationError: If the client ID or secret is missing.
        """
        config.validate_credentials()
        self._config = config.with_defaults()

        self._token_manager: Optional[TokenManager] = None
        if token_provider is None:
            self._token_manager = TokenManager(
                self._config.client_id,
                self._config.client_secret,
                self._config.token_url,
                timeout=self._config.timeout,
                transport=transport,
            )
            token_provider = self._token_manager
        self._token_provider = token_provider

        self._client = httpx.Client(
            base_url=self._config.server_url,
            timeout=self._config.timeout,
            transport=transport,
            auth=BearerTokenAuth(token_provider),
            headers={"Accept": "application/json"},
        )
        self._validators = create_input_validators()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def token_provider(self) -> TokenProviderProtocol:
        return self._token_provider

    def close(self) -> None:
        """Close the underlying HTTP clients."""
        self._client.close()
        if self._token_manager is not None:
            self._token_manager.close()

    def __enter__(self) -> UspsAddressClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _check_input(self, address: Optional[Address]) -> Address:
        if address is None:
            raise InputValidationError("Invalid address", "address is required")

        result = self._validators.validate(address)
        if not result.is_valid:
            messages = [err.message for err in result.errors]
            raise InputValidationError(
                "Invalid address",
                messages[0],
                context={"errors": messages},
            )
        return address

    def _debug(self, msg: str, *args: Any) -> None:
        if self._config.debug:
            logger.debug(msg, *args)

    def _request(self, params: dict[str, str]) -> httpx.Response:
        try:
            return self._client.get(ADDRESS_PATH, params=params)
        except httpx.HTTPError as exc:
            raise TransportError(
                "USPS API request failed",
                f"USPS API request failed: {exc}",
            ) from exc

    def _raise_for_error(self, response: httpx.Response) -> None:
        status = response.status_code
        if status in STRUCTURED_ERROR_STATUSES:
            try:
                message = ErrorMessage.model_validate_json(response.content)
            except ValidationError:
                message = None
            if message is not None:
                error = convert_error(message)
                error.context["http_status"] = status
                raise error

        raise UnexpectedResponseError(
            "Unexpected response",
            f"unexpected status code: {status}",
            status=str(status),
        )

    def _parse_success(self, response: httpx.Response) -> AddressResponse:
        body = response.content.strip()
        if not body or body == b"null":
            raise UnexpectedResponseError("Unexpected response", "unexpected empty response")
        try:
            return AddressResponse.model_validate_json(body)
        except ValidationError as exc:
            raise UnexpectedResponseError.from_validation_error(
                "invalid address response", exc
            ) from exc

    def validate_address(self, address: Optional[Address]) -> list[ValidationResult]:
        """Validate and canonicalize a single address.

        Args:
            address: Address with at least street_address and a 2-letter state.

        Returns:
            List of ValidationResult. USPS currently answers with exactly one
            result per address; the list leaves room for multiple candidates.

        Raises:
            InputValidationError: Required fields missing; no request is sent.
            TokenError: An access token could not be obtained.
            UspsApiError: USPS returned a structured error.
            TransportError: The request failed before a response arrived.
            UnexpectedResponseError: Unrecognized status or empty/invalid body.
        """
        address = self._check_input(address)

        params = build_address_params(address)
        self._debug("Calling USPS API with params: %s", params)

        response = self._request(params)
        self._debug("USPS API response status: %d", response.status_code)
        self._debug("USPS API response body: %s", response.text)

        if response.status_code != 200:
            self._raise_for_error(response)

        return [convert_response(self._parse_success(response))]

