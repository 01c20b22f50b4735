"""
Checkout Lambda Function - Entry point for the PayPal checkout API.

This module serves as the Lambda function entry point that delegates to the
checkout handler of the three-layer service package.
"""

import os
import sys
from typing import Any, Dict

# Add the service package to the Python path when deployed as a flat bundle
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from checkout_service.handlers.checkout_handler import lambda_handler as checkout_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the checkout API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return checkout_handler(event, context)
