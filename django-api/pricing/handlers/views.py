"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from pricing.domain import DomainError
from pricing.handlers.serializers import PriceBreakdownSerializer, QuoteRequestSerializer
from pricing.services.pricing_service import PricingService

logger = logging.getLogger(__name__)


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class QuoteView(APIView):
    """Handler for POST /api/quotes"""

    service_class = PricingService

    def post(self, request: Request) -> Response:
        serializer = QuoteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = serializer.to_booking_request()
            breakdown = self.service_class().quote(booking)
        except DomainError as error:
            logger.info("Rejected quote: %s", error)
            return domain_error_response(error)

        payload = dict(PriceBreakdownSerializer(breakdown).data)
        payload["currency"] = settings.PRICING_CURRENCY
        return Response(payload, status=status.HTTP_200_OK)
