"""
Checkout Handler - Lambda function for PayPal order creation and capture.

This module implements the handler layer of the checkout service. A single
endpoint receives ``{"action": ..., "data": ...}``, validates it, delegates to
the payment service and answers with the JSON envelope
``{"status", "code"?, "message"?, "data"?, "debug"?}``.
"""

import base64
import binascii
import json
import os
import traceback
from functools import wraps
from typing import Any, Dict, Optional, Tuple

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from checkout_service.dal.paypal_client import PayPalHttpClient
from checkout_service.handlers.models.env_vars import CheckoutHandlerEnvVars, get_handler_env_vars
from checkout_service.handlers.utils.errors import (
    BaseServiceError,
    ValidationError,
    create_api_response,
    format_error_response,
    format_success_response,
    log_error_metrics,
)
from checkout_service.handlers.utils.observability import count, logger, metrics, tracer, tag_action
from checkout_service.logic.payment_service import PaymentService
from checkout_service.models.input import ACTION_MODELS, PaymentAction, PaymentRequest
from checkout_service.security.credentials import load_paypal_credentials

EnvelopeResult = Tuple[int, Dict[str, Any]]

BODY_REQUIRED = 'Request body is required'
INVALID_JSON = 'Invalid JSON format'
MISSING_ACTION_OR_DATA = 'Missing action or data parameter'
UNSUPPORTED_ACTION = 'Unsupported action'
INTERNAL_ERROR = 'Internal server error'


def is_production_mode() -> bool:
    """Whether debug traces must be left out of error responses."""
    try:
        return get_handler_env_vars().is_production
    except ValueError:
        # Misconfigured environment, fall back to the raw variable
        return os.environ.get('NODE_ENV') == 'production'


def _debug_trace() -> Optional[str]:
    if is_production_mode():
        return None
    return traceback.format_exc()


def handle_service_errors(func):
    """Decorator turning raised errors into ``(status_code, envelope)`` results."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> EnvelopeResult:
        try:
            return func(*args, **kwargs)

        except ValidationError as e:
            log_error_metrics(e)
            return e.status_code, format_error_response(e.status_code, e.message)

        except BaseServiceError as e:
            log_error_metrics(e)
            return e.status_code, format_error_response(
                e.status_code,
                e.message,
                debug=_debug_trace(),
            )

        except Exception as e:
            logger.exception("Unexpected error in handler", extra={
                "error": str(e),
                "function_name": func.__name__,
            })
            count("ErrorCount")
            count("UnexpectedError")

            return 500, format_error_response(
                500,
                str(e) or INTERNAL_ERROR,
                debug=_debug_trace(),
            )

    return wrapper


def read_request_body(event: APIGatewayProxyEvent) -> Any:
    """
    Return the decoded JSON payload of the request.

    An object body (direct invocation) is returned unchanged.

    Raises:
        ValidationError: Body missing or not valid JSON
    """
    body = event.raw_event.get('body')
    if body is None or body == '':
        raise ValidationError(BODY_REQUIRED)

    if not isinstance(body, str):
        return body

    if event.is_base64_encoded:
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError):
            raise ValidationError(INVALID_JSON)

    try:
        return json.loads(body, parse_constant=_reject_constant)
    except ValueError:
        raise ValidationError(INVALID_JSON)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f'Invalid JSON constant {name}')


def parse_payment_request(payload: Any) -> Tuple[PaymentAction, Dict[str, Any]]:
    """
    Validate the request envelope and resolve the action.

    Raises:
        ValidationError: Envelope incomplete or action unknown
    """
    try:
        request = PaymentRequest.model_validate(payload)
    except PydanticValidationError:
        raise ValidationError(MISSING_ACTION_OR_DATA)

    try:
        action = PaymentAction(request.action)
    except (ValueError, TypeError):
        logger.info("Unsupported action requested", extra={"requested_action": request.action})
        raise ValidationError(UNSUPPORTED_ACTION)

    return action, request.data


def validate_action_data(action: PaymentAction, data: Dict[str, Any]) -> BaseModel:
    """
    Validate ``data`` against the model registered for ``action``.

    Raises:
        ValidationError: With the fixed message of the first failing field
    """
    model = ACTION_MODELS[action]
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        logger.info("Action data validation failed", extra={
            "validation_errors": e.errors(include_url=False, include_context=False, include_input=False),
        })
        raise ValidationError(model.error_message(e))


def create_paypal_client(env_vars: CheckoutHandlerEnvVars) -> PayPalHttpClient:
    """Build the PayPal client for this invocation's environment and credentials."""
    credentials = load_paypal_credentials(env_vars)
    return PayPalHttpClient(
        credentials=credentials,
        base_url=env_vars.paypal_base_url,
        timeout=env_vars.PAYPAL_TIMEOUT_SECONDS,
    )


@tracer.capture_method
@handle_service_errors
def process_payment_request(event: APIGatewayProxyEvent) -> EnvelopeResult:
    """
    Run one checkout request from raw event to response envelope.

    Args:
        event: API Gateway proxy event

    Returns:
        HTTP status code and response envelope
    """
    payload = read_request_body(event)
    action, data = parse_payment_request(payload)
    tag_action(action.value)

    action_data = validate_action_data(action, data)

    env_vars = get_handler_env_vars()
    with create_paypal_client(env_vars) as paypal_client:
        service = PaymentService(
            paypal_client=paypal_client,
            return_url=env_vars.PAYPAL_RETURN_URL,
            cancel_url=env_vars.PAYPAL_CANCEL_URL,
            default_currency=env_vars.DEFAULT_CURRENCY,
        )

        if action is PaymentAction.CREATE_ORDER:
            result = service.create_order(action_data)
        else:
            result = service.capture_order(action_data)

    return 200, format_success_response(result.to_response_data())


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway response whose status code mirrors the envelope code
    """
    count("RequestCount")

    status_code, envelope = process_payment_request(event)

    logger.info("Checkout request completed", extra={
        "status_code": status_code,
        "envelope_status": envelope["status"],
    })

    return create_api_response(
        status_code=status_code,
        body=envelope,
        request_id=context.aws_request_id,
    )
