"""Domain models for a booking to be priced.

These are pure value objects with no API input rules.
Request parsing lives in pricing/handlers/serializers.py.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Self

from pricing.domain.errors import EmptySelectionError
from pricing.domain.value_objects import MembershipTier, Money, PromoType, SeatZone, to_decimal


@dataclass(frozen=True)
class Event:
    """Domain representation of the event being booked."""

    name: str
    is_weekend: bool
    booking_fee: Decimal
    is_high_demand: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "booking_fee", to_decimal(self.booking_fee))
        if self.booking_fee < 0:
            raise ValueError("Booking fee cannot be negative")


@dataclass(frozen=True)
class Promo:
    """Promotional discount; value is percentage points or a currency amount."""

    type: PromoType
    value: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_decimal(self.value))
        if self.value < 0:
            raise ValueError("Promo value cannot be negative")

    @classmethod
    def none(cls) -> Self:
        return cls(type=PromoType.NONE)


@dataclass(frozen=True)
class BookingRequest:
    """Immutable input bundle for the pricing pipeline."""

    event: Event
    seat_zones: tuple[SeatZone, ...]
    tier: MembershipTier = MembershipTier.NONE
    promo: Promo | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.seat_zones, tuple):
            object.__setattr__(self, "seat_zones", tuple(self.seat_zones))
        if not self.seat_zones:
            raise EmptySelectionError()


@dataclass(frozen=True)
class PriceStep:
    """Running total after one pipeline step."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemised result of pricing a booking."""

    total: Money
    steps: tuple[PriceStep, ...] = field(default=())
