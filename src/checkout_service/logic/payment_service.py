"""
Business Logic Layer for PayPal checkout.

Builds the Orders v2 requests for the two supported actions, performs them
through the PayPal client and reshapes the vendor responses into the output
models returned to the caller.
"""

from typing import Any, Dict

from checkout_service.dal.paypal_client import PayPalHttpClient
from checkout_service.handlers.utils.errors import PayPalResponseError
from checkout_service.handlers.utils.observability import count, logger, tracer
from checkout_service.models.input import CaptureOrderData, CreateOrderData
from checkout_service.models.output import CaptureDetails, CaptureOrderOutput, CreateOrderOutput


class PaymentService:
    """Business logic service for PayPal orders."""

    def __init__(
        self,
        paypal_client: PayPalHttpClient,
        return_url: str,
        cancel_url: str,
        default_currency: str = 'EUR',
    ):
        """
        Initialize payment service.

        Args:
            paypal_client: Authenticated-on-demand PayPal client
            return_url: Where PayPal sends the buyer after approval
            cancel_url: Where PayPal sends the buyer after cancelling
            default_currency: Currency used when the request omits one
        """
        self.paypal_client = paypal_client
        self.return_url = return_url
        self.cancel_url = cancel_url
        self.default_currency = default_currency

    def build_order_body(self, request: CreateOrderData) -> Dict[str, Any]:
        """Build the Orders v2 create request body."""
        return {
            'intent': 'CAPTURE',
            'application_context': {
                'shipping_preference': 'NO_SHIPPING',
                'user_action': 'PAY_NOW',
                'return_url': self.return_url,
                'cancel_url': self.cancel_url,
            },
            'purchase_units': [{
                'amount': {
                    'currency_code': request.currency or self.default_currency,
                    'value': request.formatted_amount,
                },
            }],
        }

    @tracer.capture_method
    def create_order(self, request: CreateOrderData) -> CreateOrderOutput:
        """
        Create a PayPal order awaiting buyer approval.

        Args:
            request: Validated createOrder payload

        Returns:
            Order id, approval URL and PayPal status

        Raises:
            PayPalResponseError: PayPal did not return an approval link
        """
        body = self.build_order_body(request)
        purchase_amount = body['purchase_units'][0]['amount']

        logger.info("Creating PayPal order", extra=purchase_amount)
        order = self.paypal_client.create_order(body)

        approval_link = order.link_for('approve')
        if approval_link is None or not approval_link.href:
            raise PayPalResponseError('Missing approval URL in PayPal response')

        count("OrderCreated")
        tracer.put_annotation("order_id", order.id or "unknown")
        logger.info("PayPal order created", extra={
            "order_id": order.id,
            "order_status": order.status,
        })

        return CreateOrderOutput(
            order_id=order.id,
            approval_url=approval_link.href,
            status=order.status,
        )

    @tracer.capture_method
    def capture_order(self, request: CaptureOrderData) -> CaptureOrderOutput:
        """
        Capture the payment of an order the buyer approved.

        Args:
            request: Validated captureOrder payload

        Returns:
            Capture id, status and payer/purchase details

        Raises:
            PayPalResponseError: PayPal's answer carries no id
        """
        tracer.put_annotation("order_id", request.order_id)
        logger.info("Capturing PayPal order", extra={"order_id": request.order_id})

        order = self.paypal_client.capture_order(request.order_id)
        if not order.id:
            raise PayPalResponseError('Incomplete capture response from PayPal')

        count("OrderCaptured")
        logger.info("PayPal order captured", extra={
            "order_id": order.id,
            "order_status": order.status,
        })

        return CaptureOrderOutput(
            capture_id=order.id,
            status=order.status,
            details=CaptureDetails(
                payer=order.payer,
                create_time=order.create_time,
                purchase_units=order.purchase_units,
            ),
        )
