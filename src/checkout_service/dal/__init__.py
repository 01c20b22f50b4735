"""
Data Access Layer

External service integration for the checkout service. The only backend is
the PayPal REST API; no state is persisted between invocations.
"""

from checkout_service.dal.paypal_client import PayPalCredentials, PayPalHttpClient

__all__ = ["PayPalCredentials", "PayPalHttpClient"]
