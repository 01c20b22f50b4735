"""
PayPal Orders v2 payload models.

Only the fields the service reads are declared; everything else PayPal sends is
kept as extra data so nothing is lost when the response is logged.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PayPalLink(BaseModel):
    """HATEOAS link attached to a PayPal order."""

    model_config = ConfigDict(extra='allow')

    href: Optional[str] = None
    rel: Optional[str] = None
    method: Optional[str] = None


class PayPalOrder(BaseModel):
    """Order resource returned by the create and capture endpoints."""

    model_config = ConfigDict(extra='allow')

    id: Annotated[Optional[str], Field(
        default=None,
        description='PayPal order id',
        examples=['5O190127TN364715T']
    )] = None

    status: Annotated[Optional[str], Field(
        default=None,
        description='Order status as reported by PayPal',
        examples=['CREATED', 'COMPLETED']
    )] = None

    links: Optional[List[PayPalLink]] = Field(default_factory=list)
    payer: Optional[Dict[str, Any]] = None
    create_time: Optional[str] = None
    purchase_units: Optional[List[Dict[str, Any]]] = None

    def link_for(self, rel: str) -> Optional[PayPalLink]:
        """Return the first link with the given relation, if any."""
        return next((link for link in self.links or [] if link.rel == rel), None)


class PayPalAccessToken(BaseModel):
    """Response of the OAuth2 client credentials grant."""

    model_config = ConfigDict(extra='ignore')

    access_token: str
    token_type: str = 'Bearer'
    expires_in: Optional[int] = None
