"""Freshness tier value object."""

from enum import StrEnum


class FreshnessTier(StrEnum):
    """Freshness of a product relative to its expiry date."""

    FRESH = "fresh"
    EXPIRING_SOON = "expiring-soon"
    EXPIRED = "expired"

    @property
    def requires_attention(self) -> bool:
        """Check if this tier requires attention."""
        return self in {FreshnessTier.EXPIRED, FreshnessTier.EXPIRING_SOON}

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case FreshnessTier.FRESH:
                return "Fresh"
            case FreshnessTier.EXPIRING_SOON:
                return "Expiring Soon"
            case FreshnessTier.EXPIRED:
                return "Expired"

    def __str__(self) -> str:
        return self.value
