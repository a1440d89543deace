"""Serializers for parsing quote requests and rendering price breakdowns.

Input serializers only check the shape of the payload. Enum names are
resolved by the domain layer so unknown values surface as domain errors.
"""

from decimal import Decimal

from rest_framework import serializers

from pricing.domain import BookingRequest, Event, Promo
from pricing.domain.catalog import parse_zone
from pricing.domain.rates import parse_promo_type, parse_tier


class EventInputSerializer(serializers.Serializer):
    """Event attributes that affect the price."""

    name = serializers.CharField(max_length=255)
    is_weekend = serializers.BooleanField(default=False)
    booking_fee = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), default=Decimal("0")
    )
    is_high_demand = serializers.BooleanField(default=False)


class PromoInputSerializer(serializers.Serializer):
    """Optional promotional discount."""

    type = serializers.CharField(max_length=32)
    value = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0"), default=Decimal("0")
    )


class QuoteRequestSerializer(serializers.Serializer):
    """Payload for POST /api/quotes."""

    event = EventInputSerializer()
    seat_zones = serializers.ListField(child=serializers.CharField(max_length=32))
    tier = serializers.CharField(max_length=32, default="NONE")
    promo = PromoInputSerializer(required=False, allow_null=True)

    def to_booking_request(self) -> BookingRequest:
        """Build the domain request from validated data.

        Raises:
            EmptySelectionError: If no seat zones were supplied.
            UnknownEnumValueError: If a zone, tier or promo type is not defined.
        """
        data = self.validated_data
        promo_data = data.get("promo")
        promo = None
        if promo_data is not None:
            promo = Promo(type=parse_promo_type(promo_data["type"]), value=promo_data["value"])
        return BookingRequest(
            event=Event(**data["event"]),
            seat_zones=tuple(parse_zone(zone) for zone in data["seat_zones"]),
            tier=parse_tier(data["tier"]),
            promo=promo,
        )


class PriceStepSerializer(serializers.Serializer):
    """Serializer for PriceStep domain model."""

    name = serializers.CharField()
    amount = serializers.DecimalField(max_digits=None, decimal_places=None)


class PriceBreakdownSerializer(serializers.Serializer):
    """Serializer for PriceBreakdown domain model."""

    total = serializers.DecimalField(max_digits=12, decimal_places=2, source="total.amount")
    steps = PriceStepSerializer(many=True)
