"""
Error types and response helpers for the checkout Lambda handlers.

Every failure the service can produce is expressed as a ``BaseServiceError``
carrying the HTTP status it maps to. The handler turns these into the uniform
``{"status": "error", "code": ..., "message": ...}`` envelope via
``format_error_response`` and wraps the envelope with ``create_api_response``.
"""

import json
from enum import Enum
from typing import Any, Dict, Optional

from checkout_service.handlers.utils.observability import count, logger, tracer


class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    CONFIGURATION = "CONFIGURATION"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    INFRASTRUCTURE = "INFRASTRUCTURE"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.INFRASTRUCTURE,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.severity = severity
        self.category = category

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_code": self.error_code,
            "status_code": self.status_code,
            "message": self.message,
            "severity": self.severity.value,
            "category": self.category.value,
        }


class ValidationError(BaseServiceError):
    """Raised when the request body or its data fails validation."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
        )


class ConfigurationError(BaseServiceError):
    """Raised when the function is deployed without usable settings."""

    def __init__(self, message: str = "PayPal credentials not configured"):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )


class ExternalServiceError(BaseServiceError):
    """Raised when external service calls fail."""

    def __init__(
        self,
        message: str,
        service_name: str,
        error_code: str = "EXTERNAL_SERVICE_ERROR",
        status_code: int = 502,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status_code,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.EXTERNAL_SERVICE,
        )
        self.service_name = service_name


class PayPalHttpError(ExternalServiceError):
    """PayPal answered with a non-2xx status; the status is passed through."""

    def __init__(self, status_code: int, message: str, debug_id: Optional[str] = None):
        super().__init__(
            message=message or f"PayPal request failed with status {status_code}",
            service_name="paypal",
            error_code="PAYPAL_HTTP_ERROR",
            status_code=status_code,
        )
        self.debug_id = debug_id


class PayPalConnectionError(ExternalServiceError):
    """PayPal could not be reached or did not answer in time."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            service_name="paypal",
            error_code="PAYPAL_CONNECTION_ERROR",
            status_code=502,
        )


class PayPalResponseError(BaseServiceError):
    """PayPal answered 2xx but the payload lacks a field we depend on."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="PAYPAL_RESPONSE_ERROR",
            status_code=500,
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.EXTERNAL_SERVICE,
        )


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""
    count("ErrorCount")
    if isinstance(error, ValidationError):
        count("ValidationError")
    elif isinstance(error, ExternalServiceError):
        count("PayPalApiError")

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_metadata("error_details", error.to_dict())

    log = logger.warning if error.status_code < 500 else logger.error
    log(
        "Service error occurred",
        extra={
            "error_code": error.error_code,
            "error_status": error.status_code,
            "error_severity": error.severity.value,
            "error_category": error.category.value,
            "error_message": error.message,
        },
    )


def format_error_response(
    status_code: int,
    message: str,
    debug: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the error envelope returned to the caller."""
    response: Dict[str, Any] = {
        "status": "error",
        "code": status_code,
        "message": message,
    }
    if debug:
        response["debug"] = debug
    return response


def format_success_response(data: Dict[str, Any]) -> Dict[str, Any]:
    return {"status": "success", "data": data}


def create_api_response(
    status_code: int,
    body: Any,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create standardized API Gateway response."""

    default_headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
        "Access-Control-Allow-Methods": "OPTIONS,POST",
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
        "Referrer-Policy": "strict-origin-when-cross-origin",
    }

    if request_id:
        default_headers["X-Request-ID"] = request_id

    if headers:
        default_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": default_headers,
        "body": body if isinstance(body, str) else json.dumps(body),
    }
