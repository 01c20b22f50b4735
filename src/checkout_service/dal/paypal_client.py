"""
PayPal REST API client.

This module is the external service integration of the data access layer. It
authenticates with the OAuth2 client credentials grant and performs the
Orders v2 calls used by the checkout service over a single ``httpx.Client``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from checkout_service.handlers.utils.errors import (
    PayPalConnectionError,
    PayPalHttpError,
    PayPalResponseError,
)
from checkout_service.handlers.utils.observability import logger, tracer
from checkout_service.models.paypal import PayPalAccessToken, PayPalOrder

TOKEN_PATH = '/v1/oauth2/token'
ORDERS_PATH = '/v2/checkout/orders'


@dataclass(frozen=True)
class PayPalCredentials:
    """PayPal REST application credentials."""

    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        return f"PayPalCredentials(client_id={self.client_id!r}, client_secret='***')"


class PayPalHttpClient:
    """
    Minimal PayPal Orders v2 client.

    One instance serves one Lambda invocation: the access token is fetched on
    the first call and reused for the rest of the instance's life. Use it as a
    context manager so the underlying connection pool is closed.
    """

    def __init__(
        self,
        credentials: PayPalCredentials,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the PayPal client.

        Args:
            credentials: Client id and secret of the PayPal REST app
            base_url: Sandbox or live API base URL
            timeout: Timeout in seconds applied to every request
            transport: Custom httpx transport (for testing)
        """
        self.credentials = credentials
        self.base_url = base_url
        self._access_token: Optional[str] = None
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={'Accept': 'application/json'},
        )

    def __enter__(self) -> 'PayPalHttpClient':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @tracer.capture_method(capture_response=False)
    def get_access_token(self) -> str:
        """Fetch a bearer token with the client credentials grant."""
        if self._access_token:
            return self._access_token

        response = self._send(
            'POST',
            TOKEN_PATH,
            data={'grant_type': 'client_credentials'},
            auth=(self.credentials.client_id, self.credentials.client_secret),
        )
        try:
            token = PayPalAccessToken.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            raise PayPalResponseError('Missing access token in PayPal response')

        self._access_token = token.access_token
        logger.debug("PayPal access token acquired", extra={"expires_in": token.expires_in})
        return self._access_token

    @tracer.capture_method
    def execute(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Perform an authenticated JSON call against the PayPal API.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            body: JSON request body
            headers: Extra request headers

        Returns:
            Decoded JSON response body ({} for empty bodies)

        Raises:
            PayPalHttpError: PayPal answered with a non-2xx status
            PayPalConnectionError: PayPal could not be reached
        """
        request_headers = {'Authorization': f'Bearer {self.get_access_token()}'}
        if headers:
            request_headers.update(headers)

        response = self._send(method, path, json=body, headers=request_headers)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            raise PayPalResponseError('PayPal returned a non-JSON response')

    def create_order(self, body: Dict[str, Any]) -> PayPalOrder:
        """Create an order, asking PayPal for the full representation back."""
        result = self.execute(
            'POST',
            ORDERS_PATH,
            body=body,
            headers={'Prefer': 'return=representation'},
        )
        return PayPalOrder.model_validate(result)

    def capture_order(self, order_id: str) -> PayPalOrder:
        """Capture the payment of an approved order."""
        result = self.execute('POST', f'{ORDERS_PATH}/{order_id}/capture', body={})
        return PayPalOrder.model_validate(result)

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error("PayPal request timed out", extra={"path": path, "error": str(e)})
            raise PayPalConnectionError('PayPal request timed out')
        except httpx.RequestError as e:
            logger.error("PayPal request failed", extra={"path": path, "error": str(e)})
            raise PayPalConnectionError(f'PayPal request failed: {e}')

        if response.is_error:
            debug_id = response.headers.get('paypal-debug-id')
            logger.warning("PayPal API returned an error", extra={
                "path": path,
                "status_code": response.status_code,
                "paypal_debug_id": debug_id,
            })
            raise PayPalHttpError(
                status_code=response.status_code,
                message=response.text,
                debug_id=debug_id,
            )

        return response
