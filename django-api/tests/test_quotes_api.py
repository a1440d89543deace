"""Integration tests for the quote endpoint.

Run with: pytest tests/test_quotes_api.py -v
"""

import pytest
from rest_framework.test import APIClient

QUOTE_URL = "/api/quotes"


@pytest.fixture
def concert_payload() -> dict:
    return {
        "event": {
            "name": "Campus Concert",
            "is_weekend": True,
            "booking_fee": "5.00",
            "is_high_demand": True,
        },
        "seat_zones": ["VIP", "VIP", "PREMIUM"],
        "tier": "GOLD",
        "promo": {"type": "STUDENT", "value": "15"},
    }


class TestQuote:
    """Tests for POST /api/quotes"""

    def test_quote_returns_total_and_steps(self, api_client: APIClient, concert_payload):
        """Given a valid booking, returns the total, currency and steps."""
        response = api_client.post(QUOTE_URL, concert_payload, format="json")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == "489.29"
        assert body["currency"] == "RM"
        assert [step["name"] for step in body["steps"]] == [
            "SeatSubtotal",
            "WeekendSurcharge",
            "BookingFee",
            "MembershipDiscount",
            "PromoDiscount",
            "HighDemandSurcharge",
            "FloorAndRound",
        ]
        assert body["steps"][-1]["amount"] == "489.29"

    def test_quote_defaults_tier_and_promo(self, api_client: APIClient):
        """Given no tier or promo, prices with neither."""
        payload = {
            "event": {"name": "Movie Night", "booking_fee": "2.00"},
            "seat_zones": ["STANDARD", "STANDARD", "STANDARD"],
        }
        response = api_client.post(QUOTE_URL, payload, format="json")

        assert response.status_code == 200
        assert response.json()["total"] == "242.00"

    def test_quote_accepts_null_promo(self, api_client: APIClient, concert_payload):
        """Given a null promo, prices without a promo."""
        concert_payload["promo"] = None
        response = api_client.post(QUOTE_URL, concert_payload, format="json")

        assert response.status_code == 200
        # 479.70 * 1.20
        assert response.json()["total"] == "575.64"

    def test_quote_uses_configured_currency(self, api_client: APIClient, concert_payload, settings):
        """The currency comes from PRICING_CURRENCY."""
        settings.PRICING_CURRENCY = "MYR"
        response = api_client.post(QUOTE_URL, concert_payload, format="json")

        assert response.json()["currency"] == "MYR"

    def test_empty_selection_returns_400(self, api_client: APIClient, concert_payload):
        """Given no seats, returns 400 with EMPTY_SELECTION."""
        concert_payload["seat_zones"] = []
        response = api_client.post(QUOTE_URL, concert_payload, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "code": "EMPTY_SELECTION",
            "message": "Seat selection cannot be empty",
        }

    def test_unknown_zone_returns_400(self, api_client: APIClient, concert_payload):
        """Given an undefined zone, returns 400 with UNKNOWN_ZONE."""
        concert_payload["seat_zones"] = ["VIP", "MOSH_PIT"]
        response = api_client.post(QUOTE_URL, concert_payload, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "UNKNOWN_ZONE"

    @pytest.mark.parametrize(
        ("field", "value"),
        [("tier", "PLATINUM"), ("promo", {"type": "BOGO", "value": "1"})],
    )
    def test_unknown_enum_value_returns_400(self, api_client: APIClient, concert_payload, field, value):
        """Given an undefined tier or promo type, returns 400 with UNKNOWN_ENUM_VALUE."""
        concert_payload[field] = value
        response = api_client.post(QUOTE_URL, concert_payload, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "UNKNOWN_ENUM_VALUE"

    def test_negative_booking_fee_returns_field_error(self, api_client: APIClient, concert_payload):
        """Given a negative fee, returns 400 with a field error."""
        concert_payload["event"]["booking_fee"] = "-1.00"
        response = api_client.post(QUOTE_URL, concert_payload, format="json")

        assert response.status_code == 400
        assert "booking_fee" in response.json()["event"]

    def test_missing_event_returns_field_error(self, api_client: APIClient, concert_payload):
        """Given no event, returns 400 with a field error."""
        del concert_payload["event"]
        response = api_client.post(QUOTE_URL, concert_payload, format="json")

        assert response.status_code == 400
        assert "event" in response.json()

    def test_get_not_allowed(self, api_client: APIClient):
        """GET is not allowed on the quote endpoint."""
        response = api_client.get(QUOTE_URL)

        assert response.status_code == 405
