"""Provider type router - FastAPI endpoints for tenant-scoped provider types"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...context import RequestContext, get_tenant_request_context
from ...database import get_db
from ...errors import AppError, InternalError
from .schemas import (
    ProviderTypeCreate,
    ProviderTypeCreatedEnvelope,
    ProviderTypeEnvelope,
    ProviderTypeListEnvelope,
    ProviderTypePatch,
    ProviderTypeResponse,
)
from .service import ProviderTypeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tenants/{tenant_slug}/provider-types", tags=["Provider Types"])


def get_provider_type_service(db: Session = Depends(get_db)) -> ProviderTypeService:
    """Dependency injection for ProviderTypeService"""
    return ProviderTypeService(db)


@router.get("", response_model=ProviderTypeListEnvelope)
async def list_provider_types(
    ctx: RequestContext = Depends(get_tenant_request_context),
    service: ProviderTypeService = Depends(get_provider_type_service),
):
    """List the tenant's provider types with provider counts"""
    try:
        rows = service.list_provider_types(ctx)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Provider types fetch error: {e}")
        raise InternalError("Failed to fetch provider types", details=str(e)) from e

    return ProviderTypeListEnvelope(
        providerTypes=[ProviderTypeResponse.from_model(pt, count) for pt, count in rows]
    )


@router.post("", response_model=ProviderTypeCreatedEnvelope, status_code=201)
async def create_provider_type(
    data: ProviderTypeCreate,
    ctx: RequestContext = Depends(get_tenant_request_context),
    service: ProviderTypeService = Depends(get_provider_type_service),
):
    try:
        provider_type = service.create_provider_type(data, ctx)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Provider type creation error: {e}")
        raise InternalError("Failed to create provider type", details=str(e)) from e

    return ProviderTypeCreatedEnvelope(
        message="Provider type created",
        providerType=ProviderTypeResponse.from_model(provider_type, 0),
    )


@router.get("/{provider_type_id}", response_model=ProviderTypeEnvelope)
async def get_provider_type(
    provider_type_id: str,
    ctx: RequestContext = Depends(get_tenant_request_context),
    service: ProviderTypeService = Depends(get_provider_type_service),
):
    try:
        provider_type, provider_count = service.get_provider_type(provider_type_id, ctx)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Provider type fetch error: {e}")
        raise InternalError("Failed to fetch provider type", details=str(e)) from e

    return ProviderTypeEnvelope(
        providerType=ProviderTypeResponse.from_model(provider_type, provider_count)
    )


@router.patch("/{provider_type_id}", response_model=ProviderTypeEnvelope)
async def update_provider_type(
    provider_type_id: str,
    data: ProviderTypePatch,
    ctx: RequestContext = Depends(get_tenant_request_context),
    service: ProviderTypeService = Depends(get_provider_type_service),
):
    try:
        provider_type = service.update_provider_type(provider_type_id, data, ctx)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Provider type update error: {e}")
        raise InternalError("Failed to update provider type", details=str(e)) from e

    return ProviderTypeEnvelope(providerType=ProviderTypeResponse.from_model(provider_type))


@router.delete("/{provider_type_id}")
async def delete_provider_type(
    provider_type_id: str,
    ctx: RequestContext = Depends(get_tenant_request_context),
    service: ProviderTypeService = Depends(get_provider_type_service),
):
    """Delete a provider type that no provider uses"""
    try:
        return service.delete_provider_type(provider_type_id, ctx)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Provider type deletion error: {e}")
        raise InternalError("Failed to delete provider type", details=str(e)) from e
