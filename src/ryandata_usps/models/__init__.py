"""Public data models package.

Re-exports the address, result and error types used throughout the client.
"""

from __future__ import annotations

from ryandata_usps.models.address import (
    AdditionalInfo,
    Address,
    Correction,
    Match,
)
from ryandata_usps.models.enums import (
    DPVConfirmation,
    QueryParam,
)
from ryandata_usps.models.errors import (
    PACKAGE_NAME,
    ConfigurationError,
    ErrorSource,
    InputValidationError,
    TokenError,
    TransportError,
    UnexpectedResponseError,
    UspsApiError,
    UspsError,
)
from ryandata_usps.models.results import ValidationResult

__all__ = [
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
    # Enums
    "QueryParam",
    "DPVConfirmation",
    # Address models
    "Address",
    "Correction",
    "Match",
    "AdditionalInfo",
    # Results
    "ValidationResult",
]
