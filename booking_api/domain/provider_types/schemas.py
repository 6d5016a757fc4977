"""Provider type domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderTypeCreate(BaseModel):
    """Schema for creating a provider type; name checks happen in the service"""

    name: Optional[str] = None
    nameSingular: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    defaultSlotDuration: Optional[int] = Field(None, gt=0)
    defaultSlotCapacity: Optional[int] = Field(None, gt=0)
    allowGroupSessions: Optional[bool] = None
    requireApproval: Optional[bool] = None


class ProviderTypePatch(BaseModel):
    """Partial update: only keys present in the request body are written"""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1)
    nameSingular: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    defaultSlotDuration: Optional[int] = Field(None, gt=0)
    defaultSlotCapacity: Optional[int] = Field(None, gt=0)
    allowGroupSessions: Optional[bool] = None
    requireApproval: Optional[bool] = None
    displayOrder: Optional[int] = None
    isActive: Optional[bool] = None


class ProviderTypeResponse(BaseModel):
    """Schema for provider type response"""

    id: str
    tenantId: str
    name: str
    nameSingular: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    defaultSlotDuration: int
    defaultSlotCapacity: int
    allowGroupSessions: bool
    requireApproval: bool
    displayOrder: int
    isActive: bool
    providerCount: Optional[int] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, provider_type, provider_count: Optional[int] = None) -> "ProviderTypeResponse":
        return cls(
            id=provider_type.id,
            tenantId=provider_type.tenant_id,
            name=provider_type.name,
            nameSingular=provider_type.name_singular,
            slug=provider_type.slug,
            description=provider_type.description,
            icon=provider_type.icon,
            defaultSlotDuration=provider_type.default_slot_duration,
            defaultSlotCapacity=provider_type.default_slot_capacity,
            allowGroupSessions=provider_type.allow_group_sessions,
            requireApproval=provider_type.require_approval,
            displayOrder=provider_type.display_order,
            isActive=provider_type.is_active,
            providerCount=provider_count,
            createdAt=provider_type.created_at,
            updatedAt=provider_type.updated_at,
        )


class ProviderTypeEnvelope(BaseModel):
    providerType: ProviderTypeResponse


class ProviderTypeCreatedEnvelope(BaseModel):
    message: str
    providerType: ProviderTypeResponse


class ProviderTypeListEnvelope(BaseModel):
    providerTypes: list[ProviderTypeResponse]
