"""Result classes for address validation operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ryandata_usps.models.address import AdditionalInfo, Address, Correction, Match


@dataclass(frozen=True)
class ValidationResult:
    """Canonicalized address plus the USPS commentary on it.

    Produced fresh for every call; callers own the instance.
    """

    address: Address = field(default_factory=Address)
    corrections: tuple[Correction, ...] = ()
    matches: tuple[Match, ...] = ()
    warnings: tuple[str, ...] = ()
    additional_info: AdditionalInfo | None = None

    @property
    def dpv_confirmation(self) -> str:
        """DPV confirmation indicator, or an empty string when not reported."""
        if self.additional_info is None:
            return ""
        return self.additional_info.dpv_confirmation

    @property
    def needs_correction(self) -> bool:
        """Check if USPS suggested any corrections to the input."""
        return len(self.corrections) > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary (e.g. for JSON export)."""
        return {
            "address": self.address.to_dict(),
            "corrections": [c.model_dump() for c in self.corrections],
            "matches": [m.model_dump() for m in self.matches],
            "warnings": list(self.warnings),
            "additional_info": (
                self.additional_info.model_dump() if self.additional_info else None
            ),
        }
