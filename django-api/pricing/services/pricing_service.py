"""Pricing service - the booking price pipeline lives here.

Services:
- Depend only on the domain layer
- Validate domain invariants
- Return domain values or raise domain errors

The pipeline is an ordered tuple of named steps. Every step receives the
running total produced by the previous one, so the order below is part of
the pricing rules and must not be changed.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal

from pricing.domain.catalog import base_price
from pricing.domain.models import BookingRequest, Event, PriceBreakdown, PriceStep, Promo
from pricing.domain.rates import apply_promo, discount_rate
from pricing.domain.value_objects import MembershipTier, Money, SeatZone

logger = logging.getLogger(__name__)

WEEKEND_SURCHARGE = Decimal("1.10")
HIGH_DEMAND_SURCHARGE = Decimal("1.20")


@dataclass(frozen=True)
class PricingStep:
    """A named transformation of the running total."""

    name: str
    apply: Callable[[Decimal, BookingRequest], Decimal]


def seat_subtotal(total: Decimal, request: BookingRequest) -> Decimal:
    return total + sum((base_price(zone) for zone in request.seat_zones), Decimal("0"))


def weekend_surcharge(total: Decimal, request: BookingRequest) -> Decimal:
    if request.event.is_weekend:
        return total * WEEKEND_SURCHARGE
    return total


def booking_fee(total: Decimal, request: BookingRequest) -> Decimal:
    return total + request.event.booking_fee


def membership_discount(total: Decimal, request: BookingRequest) -> Decimal:
    return total * (1 - discount_rate(request.tier))


def promo_discount(total: Decimal, request: BookingRequest) -> Decimal:
    return apply_promo(total, request.promo)


def high_demand_surcharge(total: Decimal, request: BookingRequest) -> Decimal:
    if request.event.is_high_demand:
        return total * HIGH_DEMAND_SURCHARGE
    return total


def floor_and_round(total: Decimal, request: BookingRequest) -> Decimal:
    return Money.from_total(total).amount


PIPELINE: tuple[PricingStep, ...] = (
    PricingStep("SeatSubtotal", seat_subtotal),
    PricingStep("WeekendSurcharge", weekend_surcharge),
    PricingStep("BookingFee", booking_fee),
    PricingStep("MembershipDiscount", membership_discount),
    PricingStep("PromoDiscount", promo_discount),
    PricingStep("HighDemandSurcharge", high_demand_surcharge),
    PricingStep("FloorAndRound", floor_and_round),
)


class PricingService:
    """Service for booking price computation."""

    def __init__(self, steps: tuple[PricingStep, ...] = PIPELINE) -> None:
        self._steps = steps

    def quote(self, request: BookingRequest) -> PriceBreakdown:
        """Price a booking, recording the running total after each step."""
        total = Decimal("0")
        steps = []
        for step in self._steps:
            total = step.apply(total, request)
            steps.append(PriceStep(name=step.name, amount=total))
        breakdown = PriceBreakdown(total=Money.from_total(total), steps=tuple(steps))
        logger.debug(
            "Priced %d seat(s) for %r: %s",
            len(request.seat_zones),
            request.event.name,
            breakdown.total,
        )
        return breakdown

    def price(self, request: BookingRequest) -> Decimal:
        """Return the final rounded total for a booking."""
        return self.quote(request).total.amount


def compute_final_price(
    event: Event,
    seat_zones: Iterable[SeatZone | str],
    tier: MembershipTier | str = MembershipTier.NONE,
    promo: Promo | None = None,
) -> Decimal:
    """Compute the final payable total for a booking.

    Raises:
        EmptySelectionError: If seat_zones is empty. Nothing is computed.
        UnknownEnumValueError: If a zone, tier or promo type is not defined.
    """
    request = BookingRequest(event=event, seat_zones=tuple(seat_zones), tier=tier, promo=promo)
    return PricingService().price(request)
