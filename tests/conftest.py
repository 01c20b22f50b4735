"""
Pytest configuration and shared fixtures for the PayPal checkout Lambda.

This module provides the test environment, a fake PayPal REST API served
through ``httpx.MockTransport`` and helpers to build API Gateway events.
"""

import base64
import json
import os
from typing import Any, Callable, Dict
from unittest.mock import Mock, patch

import pytest

# Powertools reads these at import time, so set them before importing the service
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "POWERTOOLS_SERVICE_NAME": "test-paypal-checkout",
    "POWERTOOLS_METRICS_NAMESPACE": "TestPayPalCheckout",
    "POWERTOOLS_TRACE_DISABLED": "true",
    "LOG_LEVEL": "DEBUG",
})

from checkout_service.dal.paypal_client import PayPalHttpClient  # noqa: E402
from checkout_service.handlers.models.env_vars import CheckoutHandlerEnvVars  # noqa: E402
from checkout_service.handlers.utils.observability import metrics  # noqa: E402
from paypal_fakes import FakePayPalApi  # noqa: E402


@pytest.fixture
def paypal_api() -> FakePayPalApi:
    """Fake PayPal API recording every request it receives."""
    return FakePayPalApi()


@pytest.fixture
def env_vars() -> CheckoutHandlerEnvVars:
    """Handler configuration with credentials in the environment."""
    return CheckoutHandlerEnvVars(
        PAYPAL_CLIENT_ID="test-client",
        PAYPAL_SECRET="test-secret",
    )


@pytest.fixture
def checkout_env(env_vars, paypal_api):
    """Wire the handler to ``env_vars`` and the fake PayPal API."""

    def client_factory(env: CheckoutHandlerEnvVars) -> PayPalHttpClient:
        return paypal_api.client(base_url=env.paypal_base_url)

    with patch(
        "checkout_service.handlers.checkout_handler.get_handler_env_vars",
        return_value=env_vars,
    ) as mock_env, patch(
        "checkout_service.handlers.checkout_handler.create_paypal_client",
        side_effect=client_factory,
    ):
        yield mock_env


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway proxy events carrying a request body."""

    def make_event(body: Any = None, is_base64_encoded: bool = False) -> Dict[str, Any]:
        if isinstance(body, dict) and not is_base64_encoded:
            body = json.dumps(body)
        if is_base64_encoded and body is not None:
            raw = body if isinstance(body, str) else json.dumps(body)
            body = base64.b64encode(raw.encode("utf-8")).decode("ascii")

        return {
            "resource": "/payments",
            "path": "/payments",
            "httpMethod": "POST",
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "body": body,
            "isBase64Encoded": is_base64_encoded,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": "POST",
                "path": "/test/payments",
                "identity": {"sourceIp": "127.0.0.1", "userAgent": "test-agent/1.0"},
            },
            "pathParameters": None,
            "queryStringParameters": None,
            "stageVariables": None,
        }

    return make_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-checkout-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-checkout-function"
    context.memory_limit_in_mb = 512
    context.get_remaining_time_in_millis = lambda: 30000
    context.aws_request_id = "test-lambda-request-id"
    context.log_group_name = "/aws/lambda/test-checkout-function"
    context.log_stream_name = "2026/10/19/[$LATEST]test123"
    return context


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics recorded outside a decorated handler."""
    yield
    metrics.clear_metrics()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
