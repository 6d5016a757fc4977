"""Client service - Business logic for client pricing lookups"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...context import RequestContext
from ...errors import ValidationError
from ...shared.validators import normalize_email
from .repository import ClientRepository
from .schemas import ClientPricingInfo, PricingCheckResponse

logger = logging.getLogger(__name__)


class ClientService:
    """Service layer for client business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ClientRepository()

    def check_pricing(self, provider_id: Optional[str], ctx: RequestContext) -> PricingCheckResponse:
        """Check whether the caller is a client of provider_id with custom pricing"""
        if ctx.session is None or not ctx.session.email:
            return PricingCheckResponse(hasCustomPricing=False, message="Not logged in")

        if not provider_id:
            raise ValidationError("Provider ID is required")

        client = self.repo.get_active_client(
            self.db, normalize_email(ctx.session.email), provider_id
        )
        if not client:
            return PricingCheckResponse(hasCustomPricing=False, message="No client record found")

        logger.debug(f"✅ Client record {client.id} found for provider {provider_id}")
        return PricingCheckResponse(
            hasCustomPricing=bool(client.pricing_table),
            clientInfo=ClientPricingInfo(
                name=client.name,
                pricingTable=client.pricing_table,
                pricingNotes=client.pricing_notes,
            ),
        )
