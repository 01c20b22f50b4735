"""
AWS Lambda Handlers Module.

Entry points of the checkout service. The handler layer parses and validates
the API Gateway request, delegates to the logic layer and turns results and
errors into the JSON response envelope.

The handlers use AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
- Typed access to API Gateway events
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from checkout_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
