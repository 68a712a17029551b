"""USPS wire-level enumerations and constants."""

from __future__ import annotations

from enum import Enum


class QueryParam(str, Enum):
    """Query parameter names accepted by ``GET /address``."""

    STREET_ADDRESS = "streetAddress"
    SECONDARY_ADDRESS = "secondaryAddress"
    CITY = "city"
    STATE = "state"
    ZIP_CODE = "ZIPCode"
    FIRM = "firm"
    URBANIZATION = "urbanization"


class DPVConfirmation(str, Enum):
    """Delivery Point Validation confirmation indicators."""

    CONFIRMED = "Y"
    MISSING_SECONDARY = "D"
    SECONDARY_UNCONFIRMED = "S"
    NOT_CONFIRMED = "N"


# Optional Address attributes sent only when non-empty
QUERY_PARAM_FIELDS: dict[str, QueryParam] = {
    "secondary_address": QueryParam.SECONDARY_ADDRESS,
    "city": QueryParam.CITY,
    "zip_code": QueryParam.ZIP_CODE,
    "firm": QueryParam.FIRM,
    "urbanization": QueryParam.URBANIZATION,
}

# Correction code meaning "more information needed"
MORE_INFO_NEEDED_CODE = "32"

SECONDARY_NOT_CONFIRMED_MESSAGE = (
    "USPS does not have enough data to validate the secondary address. "
    "Please double check what you entered."
)
