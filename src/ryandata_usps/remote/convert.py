"""Translation from USPS wire models to the public models.

Every function here is pure: no I/O, no shared state.
"""

from __future__ import annotations

from typing import Optional

from ryandata_usps.models.address import AdditionalInfo, Address, Correction, Match
from ryandata_usps.models.enums import (
    MORE_INFO_NEEDED_CODE,
    SECONDARY_NOT_CONFIRMED_MESSAGE,
    DPVConfirmation,
)
from ryandata_usps.models.errors import ErrorSource, UspsApiError
from ryandata_usps.models.results import ValidationResult
from ryandata_usps.remote.schema import (
    AddressAdditionalInfo,
    AddressResponse,
    CodedText,
    DomesticAddress,
    ErrorMessage,
)


def _str(value: Optional[str]) -> str:
    return value if value is not None else ""


def generate_user_message(
    code: str, text: str, dpv_confirmation: str, has_secondary_address: bool
) -> str:
    """Pick the message to show an end user for a correction.

    Code 32 ("more information needed") is ambiguous on its own. When DPV
    says the secondary unit is present but unconfirmed and the canonical
    address carries one, the USPS text is replaced with a clearer message.
    Everything else passes the USPS text through.

    Args:
        code: Correction code.
        text: USPS correction text.
        dpv_confirmation: DPV confirmation indicator from additional info.
        has_secondary_address: Whether the canonical address has a secondary line.

    Returns:
        The user-facing message.
    """
    if code == MORE_INFO_NEEDED_CODE:
        if dpv_confirmation == DPVConfirmation.MISSING_SECONDARY.value:
            return text
        if (
            dpv_confirmation == DPVConfirmation.SECONDARY_UNCONFIRMED.value
            and has_secondary_address
        ):
            return SECONDARY_NOT_CONFIRMED_MESSAGE
    return text


def convert_address(address: DomesticAddress, firm: Optional[str] = None) -> Address:
    """Convert a USPS DomesticAddress (plus the top-level firm) to an Address."""
    return Address(
        firm=_str(firm),
        street_address=_str(address.street_address),
        street_address_abbreviation=_str(address.street_address_abbreviation),
        secondary_address=_str(address.secondary_address),
        city=_str(address.city),
        city_abbreviation=_str(address.city_abbreviation),
        state=_str(address.state),
        zip_code=_str(address.zip_code),
        zip_plus4=_str(address.zip_plus4),
        urbanization=_str(address.urbanization),
    )


def convert_additional_info(info: AddressAdditionalInfo) -> AdditionalInfo:
    return AdditionalInfo(
        delivery_point=_str(info.delivery_point),
        carrier_route=_str(info.carrier_route),
        dpv_confirmation=_str(info.dpv_confirmation),
        dpv_cmra=_str(info.dpv_cmra),
        business=_str(info.business),
        central_delivery_point=_str(info.central_delivery_point),
        vacant=_str(info.vacant),
    )


def _non_empty(entries: Optional[list[CodedText]]) -> list[tuple[str, str]]:
    pairs = [(_str(e.code), _str(e.text)) for e in entries or []]
    return [(code, text) for code, text in pairs if code or text]


def convert_response(response: AddressResponse) -> ValidationResult:
    """Convert a successful USPS response into a ValidationResult.

    Args:
        response: Decoded ``GET /address`` body.

    Returns:
        ValidationResult with empty corrections/matches dropped and user
        messages attached to corrections.
    """
    address = Address()
    if response.address is not None:
        address = convert_address(response.address, response.firm)

    dpv_confirmation = ""
    if response.additional_info is not None:
        dpv_confirmation = _str(response.additional_info.dpv_confirmation)

    has_secondary_address = bool(
        response.address is not None and response.address.secondary_address
    )

    corrections = tuple(
        Correction(
            code=code,
            text=text,
            user_message=generate_user_message(
                code, text, dpv_confirmation, has_secondary_address
            ),
        )
        for code, text in _non_empty(response.corrections)
    )
    matches = tuple(Match(code=code, text=text) for code, text in _non_empty(response.matches))

    additional_info = None
    if response.additional_info is not None:
        additional_info = convert_additional_info(response.additional_info)

    return ValidationResult(
        address=address,
        corrections=corrections,
        matches=matches,
        warnings=tuple(response.warnings or ()),
        additional_info=additional_info,
    )


def convert_error(message: Optional[ErrorMessage]) -> UspsApiError:
    """Convert a USPS structured error body into a UspsApiError.

    The top-level code/message are used first; the first detailed sub-error,
    when present, overrides title, detail and source.
    """
    if message is None or message.error is None:
        return UspsApiError("Unknown error")

    body = message.error
    status = code = title = detail = ""
    source: Optional[ErrorSource] = None

    if body.code is not None:
        # No separate status field at this level; the code is status-derived
        code = status = body.code
    if body.message is not None:
        title = detail = body.message

    if body.errors:
        first = body.errors[0]
        if first.detail is not None:
            detail = first.detail
        if first.title is not None:
            title = first.title
        if first.source is not None:
            source = ErrorSource(
                parameter=_str(first.source.parameter),
                example=_str(first.source.example),
            )

    return UspsApiError(title, detail, status=status, code=code, source=source)
