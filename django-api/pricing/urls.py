from django.urls import path

from pricing.handlers import QuoteView

urlpatterns = [
    path("quotes", QuoteView.as_view(), name="quote"),
]
