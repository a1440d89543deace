"""Seat zone catalog: base unit price per zone."""

from decimal import Decimal
from types import MappingProxyType

from pricing.domain.errors import UnknownZoneError
from pricing.domain.value_objects import SeatZone

BASE_PRICES = MappingProxyType(
    {
        SeatZone.VIP: Decimal("180.00"),
        SeatZone.PREMIUM: Decimal("120.00"),
        SeatZone.STANDARD: Decimal("80.00"),
        SeatZone.BALCONY: Decimal("60.00"),
    }
)


def parse_zone(value: SeatZone | str) -> SeatZone:
    """Coerce a zone or its name into a SeatZone.

    Raises:
        UnknownZoneError: If the value names no defined zone.
    """
    if isinstance(value, SeatZone):
        return value
    try:
        return SeatZone(value)
    except ValueError:
        raise UnknownZoneError(value) from None


def base_price(zone: SeatZone | str) -> Decimal:
    """Return the base unit price for a seat zone."""
    return BASE_PRICES[parse_zone(zone)]
