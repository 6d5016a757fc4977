"""Provider type service - Business logic for provider type operations"""

import logging

from sqlalchemy.orm import Session

from ...context import RequestContext, verify_tenant_ownership
from ...errors import ConflictError, NotFoundError, ValidationError
from ...models import ProviderType
from ...shared.validators import generate_slug
from .repository import ProviderTypeRepository
from .schemas import ProviderTypeCreate, ProviderTypePatch

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Provider type not found"

# Request field -> column
PATCH_FIELDS = {
    "name": "name",
    "nameSingular": "name_singular",
    "description": "description",
    "icon": "icon",
    "defaultSlotDuration": "default_slot_duration",
    "defaultSlotCapacity": "default_slot_capacity",
    "allowGroupSessions": "allow_group_sessions",
    "requireApproval": "require_approval",
    "displayOrder": "display_order",
    "isActive": "is_active",
}
NULLABLE_COLUMNS = {"description", "icon"}


class ProviderTypeService:
    """Service layer for provider type business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProviderTypeRepository()

    def list_provider_types(self, ctx: RequestContext) -> list[tuple[ProviderType, int]]:
        return self.repo.list_for_tenant(self.db, ctx.tenant_id)

    def get_provider_type(self, provider_type_id: str, ctx: RequestContext) -> tuple[ProviderType, int]:
        """Get a provider type owned by the caller's tenant, with its provider count"""
        found = self.repo.get_with_provider_count(self.db, provider_type_id)
        if not found:
            raise NotFoundError(NOT_FOUND_MESSAGE)

        provider_type, provider_count = found
        verify_tenant_ownership(ctx, provider_type.tenant_id, NOT_FOUND_MESSAGE)
        return provider_type, provider_count

    def unique_slug(self, name: str, tenant_id: str) -> str:
        """Slug for name, suffixed -1, -2, ... until unused within the tenant"""
        base = generate_slug(name)
        slug = base
        counter = 1
        while self.repo.slug_exists(self.db, tenant_id, slug):
            slug = f"{base}-{counter}"
            counter += 1
        return slug

    def create_provider_type(self, data: ProviderTypeCreate, ctx: RequestContext) -> ProviderType:
        if not data.name or not data.nameSingular:
            raise ValidationError("Name and singular name are required")

        tenant_id = ctx.tenant_id
        slug = self.unique_slug(data.name, tenant_id)
        logger.info(f"📥 Creating provider type '{slug}' for tenant {tenant_id}")

        return self.repo.create(
            self.db,
            tenant_id,
            name=data.name,
            name_singular=data.nameSingular,
            slug=slug,
            description=data.description or None,
            icon=data.icon or "👤",
            default_slot_duration=data.defaultSlotDuration or 60,
            default_slot_capacity=data.defaultSlotCapacity or 1,
            allow_group_sessions=data.allowGroupSessions or False,
            require_approval=data.requireApproval or False,
            is_active=True,
            display_order=0,
        )

    def update_provider_type(
        self, provider_type_id: str, data: ProviderTypePatch, ctx: RequestContext
    ) -> ProviderType:
        provider_type = self.repo.get_by_id(self.db, provider_type_id)
        if not provider_type:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        verify_tenant_ownership(ctx, provider_type.tenant_id, NOT_FOUND_MESSAGE)

        updates = {}
        for field, value in data.model_dump(exclude_unset=True).items():
            column = PATCH_FIELDS[field]
            if value is None and column not in NULLABLE_COLUMNS:
                raise ValidationError(f"{field} cannot be null")
            updates[column] = value

        return self.repo.update(self.db, provider_type, **updates)

    def delete_provider_type(self, provider_type_id: str, ctx: RequestContext) -> dict:
        provider_type, provider_count = self.get_provider_type(provider_type_id, ctx)

        if provider_count > 0:
            raise ConflictError(
                f"Cannot delete provider type with {provider_count} provider(s). Remove providers first."
            )

        self.repo.delete(self.db, provider_type)
        logger.info(f"🗑️ Provider type {provider_type_id} deleted")
        return {"message": "Provider type deleted"}
