from pricing.domain.errors import (
    DomainError,
    EmptySelectionError,
    ErrorCode,
    UnknownEnumValueError,
    UnknownZoneError,
)
from pricing.domain.models import BookingRequest, Event, PriceBreakdown, PriceStep, Promo
from pricing.domain.value_objects import MembershipTier, Money, PromoType, SeatZone

__all__ = [
    "BookingRequest",
    "Event",
    "Promo",
    "PriceBreakdown",
    "PriceStep",
    "SeatZone",
    "MembershipTier",
    "PromoType",
    "Money",
    "DomainError",
    "ErrorCode",
    "EmptySelectionError",
    "UnknownEnumValueError",
    "UnknownZoneError",
]
