"""Address model classes.

This module contains the public Pydantic models exchanged with callers:
the input/canonical Address plus the correction, match and additional-info
records that accompany a validation result.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ryandata_usps.models.enums import QUERY_PARAM_FIELDS


class Address(BaseModel):
    """A US postal address.

    Used both as the input to ``validate_address`` and as the canonical
    address returned by USPS. Every field is a plain string; absent values
    are empty strings, never ``None``.
    """

    model_config = ConfigDict(extra="ignore")

    firm: str = Field(default="", description="Firm or business name at the address")
    street_address: str = Field(default="", description="Primary street address line")
    street_address_abbreviation: str = Field(
        default="", description="Abbreviated street address (canonical output only)"
    )
    secondary_address: str = Field(
        default="", description="Secondary unit designator, e.g. apartment or suite"
    )
    city: str = Field(default="", description="City name")
    city_abbreviation: str = Field(
        default="", description="Abbreviated city name (canonical output only)"
    )
    state: str = Field(default="", description="Two-letter state code")
    zip_code: str = Field(default="", description="5-digit ZIP code")
    zip_plus4: str = Field(default="", description="4-digit ZIP+4 extension")
    urbanization: str = Field(
        default="", description="Urbanization code (Puerto Rico addresses)"
    )

    @property
    def full_zip(self) -> str:
        """ZIP code with the +4 extension appended when present."""
        if self.zip_code and self.zip_plus4:
            return f"{self.zip_code}-{self.zip_plus4}"
        return self.zip_code

    def to_query_params(self) -> dict[str, str]:
        """Map the non-empty optional fields to USPS query parameter names."""
        params: dict[str, str] = {}
        for attr, param in QUERY_PARAM_FIELDS.items():
            value = getattr(self, attr)
            if value:
                params[param.value] = value
        return params

    def to_dict(self) -> dict[str, str]:
        """Convert address to dictionary."""
        data = self.model_dump()
        data["full_zip"] = self.full_zip
        return data


class Correction(BaseModel):
    """A hint from USPS on how to improve the submitted address."""

    model_config = ConfigDict(frozen=True)

    code: str = ""
    text: str = ""
    user_message: str = Field(
        default="",
        description="Message suitable for showing to the person who entered the address",
    )


class Match(BaseModel):
    """A USPS indicator of how well the address matched."""

    model_config = ConfigDict(frozen=True)

    code: str = ""
    text: str = ""


class AdditionalInfo(BaseModel):
    """Delivery metadata reported alongside a canonical address."""

    model_config = ConfigDict(frozen=True)

    delivery_point: str = ""
    carrier_route: str = ""
    dpv_confirmation: str = Field(
        default="",
        description="Delivery Point Validation indicator: Y, D, S or N",
    )
    dpv_cmra: str = Field(default="", description="Commercial Mail Receiving Agency flag")
    business: str = ""
    central_delivery_point: str = ""
    vacant: str = ""
