"""Client domain schemas - Pydantic models for pricing lookups"""

from typing import Any, Optional

from pydantic import BaseModel


class ClientPricingInfo(BaseModel):
    name: str
    pricingTable: Optional[Any] = None
    pricingNotes: Optional[str] = None


class PricingCheckResponse(BaseModel):
    """Whether the caller has a custom pricing relationship with a provider"""

    hasCustomPricing: bool
    message: Optional[str] = None
    clientInfo: Optional[ClientPricingInfo] = None
