"""Client router - FastAPI endpoints for client pricing lookups"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...context import RequestContext, get_request_context
from ...database import get_db
from ...errors import AppError, InternalError
from .schemas import PricingCheckResponse
from .service import ClientService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clients", tags=["Clients"])


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    """Dependency injection for ClientService"""
    return ClientService(db)


@router.get("/check-pricing", response_model=PricingCheckResponse, response_model_exclude_unset=True)
async def check_pricing(
    provider_id: Optional[str] = Query(None, alias="providerId"),
    ctx: RequestContext = Depends(get_request_context),
    service: ClientService = Depends(get_client_service),
):
    """Check if the logged-in user has custom pricing with a provider"""
    try:
        return service.check_pricing(provider_id, ctx)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Check pricing error: {e}")
        raise InternalError("Failed to check pricing", details=str(e)) from e
