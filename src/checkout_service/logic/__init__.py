"""
Business Logic Layer Module.

Sits between the handler and the PayPal client: builds vendor requests from
validated input and reshapes vendor responses into output models.
"""

from checkout_service.logic.payment_service import PaymentService

__all__ = ["PaymentService"]
