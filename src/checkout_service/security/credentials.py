"""
PayPal credential loading.

Credentials come from the ``PAYPAL_CLIENT_ID``/``PAYPAL_SECRET`` environment
variables. When either is missing and ``PAYPAL_CREDENTIALS_SECRET_NAME`` is set,
they are read from AWS Secrets Manager through the Powertools parameters
utility, which caches the secret for warm invocations.
"""

from typing import Any

from aws_lambda_powertools.utilities import parameters
from aws_lambda_powertools.utilities.parameters.exceptions import (
    GetParameterError,
    TransformParameterError,
)

from checkout_service.dal.paypal_client import PayPalCredentials
from checkout_service.handlers.models.env_vars import CheckoutHandlerEnvVars
from checkout_service.handlers.utils.errors import ConfigurationError
from checkout_service.handlers.utils.observability import logger, tracer

SECRET_MAX_AGE_SECONDS = 300


@tracer.capture_method(capture_response=False)
def load_paypal_credentials(env_vars: CheckoutHandlerEnvVars) -> PayPalCredentials:
    """
    Resolve the PayPal credentials for this invocation.

    Raises:
        ConfigurationError: No complete pair of credentials is available
    """
    if env_vars.PAYPAL_CLIENT_ID and env_vars.PAYPAL_SECRET:
        return PayPalCredentials(
            client_id=env_vars.PAYPAL_CLIENT_ID,
            client_secret=env_vars.PAYPAL_SECRET,
        )

    if not env_vars.PAYPAL_CREDENTIALS_SECRET_NAME:
        logger.error("PayPal credentials missing from environment")
        raise ConfigurationError()

    return _load_from_secret(env_vars.PAYPAL_CREDENTIALS_SECRET_NAME)


def _load_from_secret(secret_name: str) -> PayPalCredentials:
    try:
        secret: Any = parameters.get_secret(
            secret_name,
            transform='json',
            max_age=SECRET_MAX_AGE_SECONDS,
        )
    except (GetParameterError, TransformParameterError) as e:
        logger.error("Unable to read PayPal credentials secret", extra={
            "secret_name": secret_name,
            "error": str(e),
        })
        raise ConfigurationError()

    if not isinstance(secret, dict) or not secret.get('client_id') or not secret.get('client_secret'):
        logger.error("PayPal credentials secret is incomplete", extra={"secret_name": secret_name})
        raise ConfigurationError()

    logger.debug("PayPal credentials loaded from secret", extra={"secret_name": secret_name})
    return PayPalCredentials(
        client_id=str(secret['client_id']),
        client_secret=str(secret['client_secret']),
    )
