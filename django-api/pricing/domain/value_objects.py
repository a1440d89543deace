"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Self

CENTS = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert an amount to Decimal through its string form.

    Floats go through str() so 0.015 becomes Decimal("0.015") and not its
    binary approximation.
    """
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}") from None


class SeatZone(Enum):
    """Seating category with a fixed base price."""

    VIP = "VIP"
    PREMIUM = "PREMIUM"
    STANDARD = "STANDARD"
    BALCONY = "BALCONY"


class MembershipTier(Enum):
    """Loyalty tier of the booking customer."""

    NONE = "NONE"
    SILVER = "SILVER"
    GOLD = "GOLD"


class PromoType(Enum):
    """How a promo value is interpreted."""

    NONE = "NONE"
    PERCENT = "PERCENT"
    FIXED = "FIXED"
    STUDENT = "STUDENT"


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def from_total(cls, value: Decimal) -> Self:
        """Floor a running total at zero and round it half-up to cents."""
        if value <= 0:
            value = Decimal("0")
        return cls(amount=value.quantize(CENTS, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
