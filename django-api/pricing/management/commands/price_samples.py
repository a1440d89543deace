from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand

from pricing.domain import BookingRequest, Event, MembershipTier, Promo, PromoType, SeatZone
from pricing.services.pricing_service import PricingService

SAMPLE_BOOKINGS = (
    (
        "Concert",
        BookingRequest(
            event=Event("Campus Concert", is_weekend=True, booking_fee=Decimal("5.00"), is_high_demand=True),
            seat_zones=(SeatZone.VIP, SeatZone.VIP, SeatZone.PREMIUM),
            tier=MembershipTier.GOLD,
            promo=Promo(PromoType.STUDENT, Decimal("15")),
        ),
    ),
    (
        "Movie Night",
        BookingRequest(
            event=Event("Movie Night", is_weekend=False, booking_fee=Decimal("2.00")),
            seat_zones=(SeatZone.STANDARD, SeatZone.STANDARD, SeatZone.STANDARD),
        ),
    ),
    (
        "Sport Day",
        BookingRequest(
            event=Event("Campus Sport Day", is_weekend=True, booking_fee=Decimal("5.00")),
            seat_zones=(SeatZone.BALCONY, SeatZone.BALCONY, SeatZone.BALCONY),
            tier=MembershipTier.SILVER,
            promo=Promo(PromoType.FIXED, Decimal("15")),
        ),
    ),
)


def describe_promo(promo: Promo | None, currency: str) -> str:
    if promo is None or promo.type is PromoType.NONE:
        return "NONE"
    if promo.type is PromoType.FIXED:
        return f"FIXED {currency}{promo.value:g}"
    return f"{promo.type.value} {promo.value:g}%"


class Command(BaseCommand):
    help = "Print payment summaries for the sample bookings."

    def add_arguments(self, parser):
        parser.add_argument(
            "--breakdown",
            action="store_true",
            help="Also print the running total after each pricing step.",
        )

    def handle(self, *args, **options):
        currency = settings.PRICING_CURRENCY
        service = PricingService()
        for index, (label, booking) in enumerate(SAMPLE_BOOKINGS, start=1):
            breakdown = service.quote(booking)
            if index > 1:
                self.stdout.write("")
            self.stdout.write(f"=== Payment Summary {index} ({label}) ===")
            self.stdout.write(f"Event: {booking.event.name}")
            self.stdout.write(f"Seats: {', '.join(zone.value for zone in booking.seat_zones)}")
            self.stdout.write(f"Membership: {booking.tier.value}")
            self.stdout.write(f"Promo: {describe_promo(booking.promo, currency)}")
            if options["breakdown"]:
                for step in breakdown.steps:
                    self.stdout.write(f"  {step.name}: {step.amount}")
            self.stdout.write(f"Final Total: {currency} {breakdown.total}")
