from __future__ import annotations

from ryandata_usps.remote.client import (
    UspsAddressClient,
    build_address_params,
)
from ryandata_usps.remote.convert import (
    convert_error,
    convert_response,
    generate_user_message,
)

__all__ = [
    "UspsAddressClient",
    "build_address_params",
    "convert_error",
    "convert_response",
    "generate_user_message",
]
