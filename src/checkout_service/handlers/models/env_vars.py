"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by the
checkout Lambda handler. Values are parsed with aws-lambda-env-modeler.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field

SANDBOX_BASE_URL = 'https://api-m.sandbox.paypal.com'
LIVE_BASE_URL = 'https://api-m.paypal.com'


class CheckoutHandlerEnvVars(BaseModel):
    """Environment variables for the checkout handler."""

    # PayPal REST app credentials
    PAYPAL_CLIENT_ID: Annotated[Optional[str], Field(
        default=None,
        description='PayPal REST application client id'
    )] = None

    PAYPAL_SECRET: Annotated[Optional[str], Field(
        default=None,
        description='PayPal REST application client secret'
    )] = None

    # Secrets Manager fallback holding {"client_id": ..., "client_secret": ...}
    PAYPAL_CREDENTIALS_SECRET_NAME: Annotated[Optional[str], Field(
        default=None,
        description='Secrets Manager secret name with PayPal credentials'
    )] = None

    # Only the exact value "production" selects the live API
    PAYPAL_ENVIRONMENT: Annotated[str, Field(
        default='sandbox',
        description='PayPal environment (production or sandbox)'
    )] = 'sandbox'

    # Only the exact value "production" hides debug traces in error responses
    NODE_ENV: Annotated[str, Field(
        default='development',
        description='Runtime mode of the function'
    )] = 'development'

    PAYPAL_TIMEOUT_SECONDS: Annotated[float, Field(
        default=30.0,
        description='Timeout in seconds for each PayPal API call',
        gt=0,
        le=900
    )] = 30.0

    PAYPAL_RETURN_URL: Annotated[str, Field(
        default='digitalevdoctor://payment-success',
        description='Redirect target after the buyer approves the payment'
    )] = 'digitalevdoctor://payment-success'

    PAYPAL_CANCEL_URL: Annotated[str, Field(
        default='digitalevdoctor://payment-canceled',
        description='Redirect target after the buyer cancels the payment'
    )] = 'digitalevdoctor://payment-canceled'

    DEFAULT_CURRENCY: Annotated[str, Field(
        default='EUR',
        description='Currency used when a createOrder request omits one',
        pattern=r'^[A-Z]{3}$'
    )] = 'EUR'

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='paypal-checkout',
        description='Service name for AWS Powertools'
    )] = 'paypal-checkout'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.NODE_ENV == 'production'

    @property
    def paypal_base_url(self) -> str:
        """Base URL of the PayPal REST API for the configured environment."""
        return LIVE_BASE_URL if self.PAYPAL_ENVIRONMENT == 'production' else SANDBOX_BASE_URL


def get_handler_env_vars() -> CheckoutHandlerEnvVars:
    """
    Get typed environment variables for the checkout handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=CheckoutHandlerEnvVars)
