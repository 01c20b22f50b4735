"""
Service Models Package

Pydantic models for request validation, PayPal API payloads and the data
section of successful responses.
"""

from .input import (
    ACTION_MODELS,
    CaptureOrderData,
    CreateOrderData,
    PaymentAction,
    PaymentRequest,
)
from .output import CaptureDetails, CaptureOrderOutput, CreateOrderOutput
from .paypal import PayPalAccessToken, PayPalLink, PayPalOrder

__all__ = [
    # Input models
    "ACTION_MODELS",
    "CaptureOrderData",
    "CreateOrderData",
    "PaymentAction",
    "PaymentRequest",

    # Output models
    "CaptureDetails",
    "CaptureOrderOutput",
    "CreateOrderOutput",

    # PayPal payloads
    "PayPalAccessToken",
    "PayPalLink",
    "PayPalOrder",
]
