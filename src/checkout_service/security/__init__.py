"""
Security utilities for the checkout service.

Currently limited to resolving the PayPal REST credentials from the
environment or AWS Secrets Manager.
"""

from checkout_service.security.credentials import load_paypal_credentials

__all__ = ["load_paypal_credentials"]
