"""
Per-request context.

Tenant and session are resolved once per request by FastAPI dependencies and
handed to the services as an explicit RequestContext value.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from .auth import SessionUser, get_optional_session
from .database import get_db
from .errors import TenantNotFoundError, TenantOwnershipError
from .models import Tenant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TenantContext:
    tenant_id: str
    tenant_slug: str


@dataclass(frozen=True)
class RequestContext:
    tenant: Optional[TenantContext] = None
    session: Optional[SessionUser] = None

    @property
    def tenant_id(self) -> str:
        if self.tenant is None:
            raise TenantNotFoundError("Tenant context not available")
        return self.tenant.tenant_id


def resolve_tenant(db: Session, tenant_slug: str) -> TenantContext:
    """Look up an active tenant by slug"""
    tenant = (
        db.query(Tenant).filter(Tenant.slug == tenant_slug, Tenant.is_active.is_(True)).first()
    )
    if not tenant:
        logger.warning(f"⚠️ No active tenant found with slug: {tenant_slug}")
        raise TenantNotFoundError(f"No active tenant found with slug: {tenant_slug}")
    return TenantContext(tenant_id=tenant.id, tenant_slug=tenant.slug)


def verify_tenant_ownership(
    ctx: RequestContext, resource_tenant_id: Optional[str], not_found_message: str
) -> None:
    """Raise when a resource does not belong to the caller's tenant"""
    if resource_tenant_id != ctx.tenant_id:
        logger.warning(
            f"⚠️ Tenant {ctx.tenant_id} attempted to access resource owned by {resource_tenant_id}"
        )
        raise TenantOwnershipError(not_found_message)


async def get_tenant_request_context(
    tenant_slug: str = Path(...),
    session: Optional[SessionUser] = Depends(get_optional_session),
    db: Session = Depends(get_db),
) -> RequestContext:
    """Context for tenant-scoped routes (/tenants/{tenant_slug}/...)"""
    return RequestContext(tenant=resolve_tenant(db, tenant_slug), session=session)


async def get_request_context(
    session: Optional[SessionUser] = Depends(get_optional_session),
) -> RequestContext:
    """Context for routes outside a tenant scope"""
    return RequestContext(session=session)
