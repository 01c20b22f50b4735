"""
Unit tests for the payment business logic.
"""

import json

import pytest

from checkout_service.handlers.utils.errors import PayPalHttpError, PayPalResponseError
from checkout_service.logic.payment_service import PaymentService
from checkout_service.models.input import CaptureOrderData, CreateOrderData

from paypal_fakes import APPROVAL_URL, ORDER_ID, created_order_payload


@pytest.fixture
def service(paypal_api):
    with paypal_api.client() as client:
        yield PaymentService(
            paypal_client=client,
            return_url="digitalevdoctor://payment-success",
            cancel_url="digitalevdoctor://payment-canceled",
        )


class TestCreateOrder:
    """Test cases for order creation."""

    def test_order_body(self, service):
        body = service.build_order_body(CreateOrderData(amount="12.5"))

        assert body == {
            "intent": "CAPTURE",
            "application_context": {
                "shipping_preference": "NO_SHIPPING",
                "user_action": "PAY_NOW",
                "return_url": "digitalevdoctor://payment-success",
                "cancel_url": "digitalevdoctor://payment-canceled",
            },
            "purchase_units": [{
                "amount": {"currency_code": "EUR", "value": "12.50"},
            }],
        }

    def test_requested_currency_wins_over_default(self, service):
        body = service.build_order_body(CreateOrderData(amount=3, currency="usd"))

        assert body["purchase_units"][0]["amount"] == {"currency_code": "USD", "value": "3.00"}

    def test_configured_default_currency(self, paypal_api):
        with paypal_api.client() as client:
            service = PaymentService(client, return_url="a://ok", cancel_url="a://cancel", default_currency="GBP")
            body = service.build_order_body(CreateOrderData(amount=3))

        assert body["purchase_units"][0]["amount"]["currency_code"] == "GBP"

    def test_create_order(self, service, paypal_api):
        result = service.create_order(CreateOrderData(amount=10))

        assert result.order_id == ORDER_ID
        assert result.approval_url == APPROVAL_URL
        assert result.status == "CREATED"

        sent = json.loads(paypal_api.order_requests[0].content)
        assert sent["purchase_units"][0]["amount"]["value"] == "10.00"

    def test_missing_approval_link(self, service, paypal_api):
        payload = created_order_payload()
        payload["links"] = [link for link in payload["links"] if link["rel"] != "approve"]
        paypal_api.responses["/v2/checkout/orders"] = (201, payload)

        with pytest.raises(PayPalResponseError) as exc_info:
            service.create_order(CreateOrderData(amount=10))

        assert exc_info.value.message == "Missing approval URL in PayPal response"

    def test_approval_link_without_href(self, service, paypal_api):
        payload = created_order_payload()
        payload["links"] = [{"rel": "approve", "method": "GET"}]
        paypal_api.responses["/v2/checkout/orders"] = (201, payload)

        with pytest.raises(PayPalResponseError):
            service.create_order(CreateOrderData(amount=10))

    def test_vendor_error_propagates(self, service, paypal_api):
        paypal_api.responses["/v2/checkout/orders"] = (400, {"name": "INVALID_REQUEST"})

        with pytest.raises(PayPalHttpError) as exc_info:
            service.create_order(CreateOrderData(amount=10))

        assert exc_info.value.status_code == 400


class TestCaptureOrder:
    """Test cases for order capture."""

    def test_capture_order(self, service, paypal_api):
        result = service.capture_order(CaptureOrderData(orderId=ORDER_ID))

        assert result.capture_id == ORDER_ID
        assert result.status == "COMPLETED"
        assert result.details.payer["payer_id"] == "QYR5Z8XDVJNXQ"
        assert result.details.create_time == "2026-10-19T10:00:00Z"
        assert result.details.purchase_units[0]["payments"]["captures"][0]["id"] == "3C679366HH908993F"

        assert paypal_api.order_requests[0].url.path == f"/v2/checkout/orders/{ORDER_ID}/capture"

    def test_capture_response_without_id(self, service, paypal_api):
        paypal_api.responses[f"/v2/checkout/orders/{ORDER_ID}/capture"] = (201, {"status": "COMPLETED"})

        with pytest.raises(PayPalResponseError) as exc_info:
            service.capture_order(CaptureOrderData(orderId=ORDER_ID))

        assert exc_info.value.message == "Incomplete capture response from PayPal"
