from pricing.handlers.views import QuoteView

__all__ = ["QuoteView"]
