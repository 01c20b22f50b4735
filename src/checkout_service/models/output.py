"""
Output models for the ``data`` section of successful responses.

Fields are snake_case in Python and serialized with the camelCase names the
mobile client reads, so always dump with ``by_alias=True``.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateOrderOutput(BaseModel):
    """Result of a createOrder request."""

    model_config = ConfigDict(populate_by_name=True)

    order_id: Annotated[Optional[str], Field(
        default=None,
        serialization_alias='orderId',
        description='PayPal order id, needed later for captureOrder',
        examples=['5O190127TN364715T']
    )] = None

    approval_url: Annotated[str, Field(
        serialization_alias='approvalUrl',
        description='URL where the buyer approves the payment',
        examples=['https://www.sandbox.paypal.com/checkoutnow?token=5O190127TN364715T']
    )]

    status: Annotated[Optional[str], Field(
        default=None,
        description='Order status as reported by PayPal',
        examples=['CREATED', 'PAYER_ACTION_REQUIRED']
    )] = None

    def to_response_data(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CaptureDetails(BaseModel):
    """Subset of the captured order echoed back to the caller."""

    payer: Optional[Dict[str, Any]] = None
    create_time: Optional[str] = None
    purchase_units: Optional[List[Dict[str, Any]]] = None


class CaptureOrderOutput(BaseModel):
    """Result of a captureOrder request."""

    model_config = ConfigDict(populate_by_name=True)

    capture_id: Annotated[str, Field(
        serialization_alias='captureId',
        description='Identifier of the captured order',
        examples=['5O190127TN364715T']
    )]

    status: Annotated[Optional[str], Field(
        default=None,
        description='Order status after capture',
        examples=['COMPLETED']
    )] = None

    details: Annotated[CaptureDetails, Field(
        default_factory=CaptureDetails,
        description='Payer and purchase unit details of the captured order'
    )]

    def to_response_data(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
