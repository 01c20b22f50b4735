"""
PayPal Checkout Service Module.

This package contains the serverless implementation of the PayPal checkout
endpoint, split into the layers of the three-layer architecture:

- handlers: API Gateway entry point, request parsing and response envelope
- logic: order creation and capture against PayPal
- dal: PayPal REST API client
- models: request, response and PayPal payload models
- security: credential loading
"""

__version__ = "1.0.0"
__description__ = "PayPal order creation and capture for AWS Lambda"

# Re-export commonly used classes for convenience
from checkout_service.models.input import CaptureOrderData, CreateOrderData, PaymentAction
from checkout_service.models.output import CaptureOrderOutput, CreateOrderOutput
from checkout_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "CaptureOrderData",
    "CreateOrderData",
    "PaymentAction",
    "CaptureOrderOutput",
    "CreateOrderOutput",
    "logger",
    "tracer",
    "metrics",
]
