"""Rate tables for membership and promo discounts.

Both tables are fixed business rules and only consulted by the pricing
pipeline. String inputs are accepted for deserialised data and coerced
through the enum; anything outside it raises UnknownEnumValueError.
"""

from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import TypeVar

from pricing.domain.errors import UnknownEnumValueError
from pricing.domain.models import Promo
from pricing.domain.value_objects import MembershipTier, PromoType

E = TypeVar("E", bound=Enum)

HUNDRED = Decimal("100")

MEMBERSHIP_DISCOUNT_RATES = MappingProxyType(
    {
        MembershipTier.NONE: Decimal("0"),
        MembershipTier.SILVER: Decimal("0.05"),
        MembershipTier.GOLD: Decimal("0.10"),
    }
)


def _coerce(enum_cls: type[E], value: E | str, kind: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownEnumValueError(kind, value) from None


def parse_tier(value: MembershipTier | str) -> MembershipTier:
    return _coerce(MembershipTier, value, "membership tier")


def parse_promo_type(value: PromoType | str) -> PromoType:
    return _coerce(PromoType, value, "promo type")


def discount_rate(tier: MembershipTier | str) -> Decimal:
    """Return the fractional discount for a membership tier."""
    return MEMBERSHIP_DISCOUNT_RATES[parse_tier(tier)]


def _percent_off(total: Decimal, value: Decimal) -> Decimal:
    return total * (1 - value / HUNDRED)


def _fixed_off(total: Decimal, value: Decimal) -> Decimal:
    return total - value


PROMO_RULES = MappingProxyType(
    {
        PromoType.NONE: lambda total, value: total,
        PromoType.PERCENT: _percent_off,
        PromoType.STUDENT: _percent_off,
        PromoType.FIXED: _fixed_off,
    }
)


def apply_promo(running_total: Decimal, promo: Promo | None) -> Decimal:
    """Apply a promo to the running total.

    PERCENT and STUDENT take value percent off, FIXED subtracts value.
    The result may be negative; flooring happens at the end of the pipeline.
    """
    if promo is None:
        return running_total
    rule = PROMO_RULES[parse_promo_type(promo.type)]
    return rule(running_total, promo.value)
