"""
Centralized observability utilities for the checkout Lambda handlers.

Configured AWS Lambda Powertools instances shared by the handler, logic and
data access layers, plus small helpers that tag the current invocation.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics, MetricUnit
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'PayPalCheckout'

# Service name comes from POWERTOOLS_SERVICE_NAME, level from LOG_LEVEL
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true" or when running outside Lambda
tracer: Tracer = Tracer()

# Dimension "service" comes from POWERTOOLS_SERVICE_NAME
metrics = Metrics(namespace=METRICS_NAMESPACE)


def tag_action(action: str) -> None:
    """Attach the requested checkout action to logs and the active trace."""
    logger.append_keys(action=action)
    tracer.put_annotation("action", action)


def count(metric_name: str, value: int = 1) -> None:
    metrics.add_metric(name=metric_name, unit=MetricUnit.Count, value=value)
