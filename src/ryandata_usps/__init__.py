"""ryandata-usps: USPS Addresses API client with managed OAuth2 tokens.

This package validates and canonicalizes US postal addresses against the
USPS Addresses v3 REST API:
- OAuth2 client-credentials tokens acquired lazily, cached, and refreshed
  five minutes before they expire (safe under concurrent callers)
- Stable public models independent of the USPS wire format
- Typed errors for configuration, input, token, API and transport failures

Quick Start:
    >>> from ryandata_usps import Address, ClientConfig, UspsAddressClient
    >>> config = ClientConfig(client_id="...", client_secret="...")
    >>> client = UspsAddressClient(config)
    >>> results = client.validate_address(
    ...     Address(street_address="350 Fifth Avenue", city="New York", state="ny")
    ... )
    >>> print(results[0].address.full_zip)  # "10118-0110"

    # Handle provider errors
    >>> from ryandata_usps import UspsApiError
    >>> try:
    ...     client.validate_address(Address(street_address="100 broadway", state="zz"))
    ... except UspsApiError as err:
    ...     print(err.status, err.title, err.detail)
"""

from __future__ import annotations

from ryandata_usps.auth import BearerTokenAuth, CachedToken, TokenManager
from ryandata_usps.config import (
    PRODUCTION_SERVER_URL,
    PRODUCTION_TOKEN_URL,
    TESTING_SERVER_URL,
    TESTING_TOKEN_URL,
    ClientConfig,
)
from ryandata_usps.models import (
    PACKAGE_NAME,
    AdditionalInfo,
    Address,
    ConfigurationError,
    Correction,
    DPVConfirmation,
    ErrorSource,
    InputValidationError,
    Match,
    QueryParam,
    TokenError,
    TransportError,
    UnexpectedResponseError,
    UspsApiError,
    UspsError,
    ValidationResult,
)
from ryandata_usps.protocols import TokenProviderProtocol
from ryandata_usps.remote import UspsAddressClient, build_address_params

__version__ = "0.1.0"
__package_name__ = "ryandata-usps"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "UspsAddressClient",
    "ClientConfig",
    "build_address_params",
    # Endpoints
    "PRODUCTION_SERVER_URL",
    "PRODUCTION_TOKEN_URL",
    "TESTING_SERVER_URL",
    "TESTING_TOKEN_URL",
    # Models
    "Address",
    "AdditionalInfo",
    "Correction",
    "Match",
    "ValidationResult",
    "QueryParam",
    "DPVConfirmation",
    # Errors
    "PACKAGE_NAME",
    "ErrorSource",
    "UspsError",
    "ConfigurationError",
    "InputValidationError",
    "TokenError",
    "UspsApiError",
    "TransportError",
    "UnexpectedResponseError",
    # Authentication
    "TokenManager",
    "CachedToken",
    "BearerTokenAuth",
    "TokenProviderProtocol",
]
