"""Wire models for the USPS Addresses v3 JSON payloads.

These mirror the provider schema field for field (camelCase aliases, every
field optional) and are only used to decode responses. Callers never see
them; remote.convert translates them into the public models.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class DomesticAddress(_WireModel):
    street_address: Optional[str] = Field(default=None, alias="streetAddress")
    street_address_abbreviation: Optional[str] = Field(
        default=None, alias="streetAddressAbbreviation"
    )
    secondary_address: Optional[str] = Field(default=None, alias="secondaryAddress")
    city: Optional[str] = None
    city_abbreviation: Optional[str] = Field(default=None, alias="cityAbbreviation")
    state: Optional[str] = None
    zip_code: Optional[str] = Field(default=None, alias="ZIPCode")
    zip_plus4: Optional[str] = Field(default=None, alias="ZIPPlus4")
    urbanization: Optional[str] = None


class AddressAdditionalInfo(_WireModel):
    delivery_point: Optional[str] = Field(default=None, alias="deliveryPoint")
    carrier_route: Optional[str] = Field(default=None, alias="carrierRoute")
    dpv_confirmation: Optional[str] = Field(default=None, alias="DPVConfirmation")
    dpv_cmra: Optional[str] = Field(default=None, alias="DPVCMRA")
    business: Optional[str] = None
    central_delivery_point: Optional[str] = Field(default=None, alias="centralDeliveryPoint")
    vacant: Optional[str] = None


class CodedText(_WireModel):
    """A ``{code, text}`` pair, used for both corrections and matches."""

    code: Optional[str] = None
    text: Optional[str] = None


class AddressResponse(_WireModel):
    """Body of a successful ``GET /address`` call."""

    firm: Optional[str] = None
    address: Optional[DomesticAddress] = None
    additional_info: Optional[AddressAdditionalInfo] = Field(
        default=None, alias="additionalInfo"
    )
    corrections: Optional[list[CodedText]] = None
    matches: Optional[list[CodedText]] = None
    warnings: Optional[list[str]] = None


class ErrorSourceBody(_WireModel):
    parameter: Optional[str] = None
    example: Optional[str] = None


class ErrorDetail(_WireModel):
    status: Optional[str] = None
    code: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    source: Optional[ErrorSourceBody] = None


class ErrorBody(_WireModel):
    code: Optional[str] = None
    message: Optional[str] = None
    errors: Optional[list[ErrorDetail]] = None


class ErrorMessage(_WireModel):
    """Body of a structured error response (400/401/403/404/429/503)."""

    api_version: Optional[str] = Field(default=None, alias="apiVersion")
    error: Optional[ErrorBody] = None
