"""
Input models for request validation using Pydantic.

The request body is validated in two steps: ``PaymentRequest`` checks the
envelope (``action`` + ``data``), then the model registered for the action
validates ``data``. Each data model maps the field that failed to the fixed
message returned to the caller.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

TWO_PLACES = Decimal('0.01')

# Plain decimal notation with optional exponent, no digit separators
AMOUNT_PATTERN = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


class PaymentAction(str, Enum):
    """Actions accepted by the checkout handler."""

    CREATE_ORDER = 'createOrder'
    CAPTURE_ORDER = 'captureOrder'


class PaymentRequest(BaseModel):
    """Top level request body."""

    # Any non-empty value; unknown values are rejected later as unsupported
    action: Annotated[Any, Field(
        description='Requested operation',
        examples=['createOrder', 'captureOrder']
    )]

    data: Annotated[Dict[str, Any], Field(
        description='Operation specific payload'
    )]

    @field_validator('action')
    @classmethod
    def require_action(cls, v: Any) -> Any:
        if v is None or v is False or v == '' or v == 0:
            raise ValueError('action is required')
        return v


class ActionData(BaseModel):
    """Base class for action payloads with per-field error messages."""

    model_config = ConfigDict(populate_by_name=True)

    error_messages: ClassVar[Dict[str, str]] = {}
    default_error_message: ClassVar[str] = 'Invalid request data'

    @classmethod
    def error_message(cls, exc: ValidationError) -> str:
        """Return the caller facing message for the first failing field."""
        for error in exc.errors():
            if error['loc']:
                message = cls.error_messages.get(str(error['loc'][0]))
                if message:
                    return message
        return cls.default_error_message


class CreateOrderData(ActionData):
    """Payload of a createOrder request."""

    error_messages: ClassVar[Dict[str, str]] = {
        'amount': 'Invalid amount specified',
        'currency': 'Invalid currency specified',
    }

    amount: Annotated[Decimal, Field(
        description='Order total, rounded to two decimals',
        examples=['19.99', 5]
    )]

    currency: Annotated[Optional[str], Field(
        default=None,
        description='ISO 4217 currency code, defaults to the configured currency',
        examples=['EUR', 'USD']
    )] = None

    @field_validator('amount', mode='before')
    @classmethod
    def parse_amount(cls, v: Any) -> Decimal:
        """Accept numbers and numeric strings greater than zero."""
        if isinstance(v, bool) or not isinstance(v, (int, float, str, Decimal)):
            raise ValueError('amount must be a number')
        text = str(v).strip()
        if not AMOUNT_PATTERN.fullmatch(text):
            raise ValueError('amount must be a decimal number')
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise ValueError('amount must be a number')
        if not value.is_finite():
            raise ValueError('amount must be finite')

        try:
            value = value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValueError('amount is out of range')
        if value <= 0:
            raise ValueError('amount must be greater than 0')
        return value

    @field_validator('currency')
    @classmethod
    def validate_currency(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip().upper()
        if not v:
            return None
        if len(v) != 3 or not v.isascii() or not v.isalpha():
            raise ValueError('currency must be a three letter code')
        return v

    @property
    def formatted_amount(self) -> str:
        """Amount as PayPal expects it, e.g. ``'10.00'``."""
        return f'{self.amount:.2f}'


class CaptureOrderData(ActionData):
    """Payload of a captureOrder request."""

    error_messages: ClassVar[Dict[str, str]] = {
        'orderId': 'Invalid order ID',
        'order_id': 'Invalid order ID',
    }
    default_error_message: ClassVar[str] = 'Invalid order ID'

    order_id: Annotated[str, Field(
        alias='orderId',
        pattern=r'^[A-Z0-9]{17}$',
        description='PayPal order id returned by createOrder',
        examples=['5O190127TN364715T']
    )]


ACTION_MODELS: Dict[PaymentAction, type] = {
    PaymentAction.CREATE_ORDER: CreateOrderData,
    PaymentAction.CAPTURE_ORDER: CaptureOrderData,
}
