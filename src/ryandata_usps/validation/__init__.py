"""Pre-flight input validation for address validation requests."""

from ryandata_usps.validation.validators import (
    StateCodeValidator,
    StreetAddressValidator,
    create_input_validators,
)

__all__ = [
    "StateCodeValidator",
    "StreetAddressValidator",
    "create_input_validators",
]
