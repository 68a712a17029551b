from __future__ import annotations

from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

if TYPE_CHECKING:
    from ryandata_usps.models import Address

STATE_CODE_LENGTH = 2


class StreetAddressValidator(BaseValidator["Address"]):
    """Requires a non-empty primary street address line."""

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "street_address"

    def validate(self, address: Address) -> ValidationResult:
        """Validate the street address.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with an error if the street address is empty.
        """
        result = ValidationResult(is_valid=True)
        if not address.street_address:
            result.add_error(
                field="street_address",
                message="street address is required",
                value=address.street_address,
            )
        return result


class StateCodeValidator(BaseValidator["Address"]):
    """Requires a two-character state abbreviation.

    Only the length is checked here; USPS itself rejects unknown states.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "state_code"

    def validate(self, address: Address) -> ValidationResult:
        """Validate the state code.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with an error if the state is empty or not two characters.
        """
        result = ValidationResult(is_valid=True)
        if len(address.state) != STATE_CODE_LENGTH:
            result.add_error(
                field="state",
                message="2 letter state abbreviation is required",
                value=address.state,
            )
        return result


def create_input_validators() -> CompositeValidator[Address]:
    """Create the pre-flight validation pipeline run before every API call.

    Returns:
        CompositeValidator checking the fields USPS requires.
    """
    builder: ValidatorPipelineBuilder[Address] = ValidatorPipelineBuilder("usps_input")
    builder.add(StreetAddressValidator())
    builder.add(StateCodeValidator())
    return builder.build()
