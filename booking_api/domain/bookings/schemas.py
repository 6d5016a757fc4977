"""Booking domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class BookingUpdate(BaseModel):
    """
    Schema for editing a booking.

    clientName and clientEmail are applied only when non-empty; notes is applied
    whenever the key is present, so sending null or "" clears it.
    """

    clientName: Optional[str] = None
    clientEmail: Optional[str] = None
    notes: Optional[str] = None


class AvailabilityResponse(BaseModel):
    id: str
    providerId: Optional[str] = None
    trainerId: Optional[str] = None
    date: datetime
    startTime: str
    endTime: str
    maxCapacity: int
    currentBookings: int
    isActive: bool

    @classmethod
    def from_model(cls, availability) -> "AvailabilityResponse":
        return cls(
            id=availability.id,
            providerId=availability.provider_id,
            trainerId=availability.trainer_id,
            date=availability.date,
            startTime=availability.start_time,
            endTime=availability.end_time,
            maxCapacity=availability.max_capacity,
            currentBookings=availability.current_bookings,
            isActive=availability.is_active,
        )


class ProviderSummary(BaseModel):
    id: str
    tenantId: str
    name: str
    email: str
    slug: str
    bio: Optional[str] = None

    @classmethod
    def from_model(cls, provider) -> "ProviderSummary":
        return cls(
            id=provider.id,
            tenantId=provider.tenant_id,
            name=provider.name,
            email=provider.email,
            slug=provider.slug,
            bio=provider.bio,
        )


class BookingResponse(BaseModel):
    """Schema for booking response"""

    id: str
    tenantId: Optional[str] = None
    availabilityId: str
    providerId: Optional[str] = None
    trainerId: Optional[str] = None
    clientName: str
    clientEmail: str
    clientPhone: Optional[str] = None
    partySize: int
    totalPrice: Optional[float] = None
    notes: Optional[str] = None
    status: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    provider: Optional[ProviderSummary] = None
    availability: Optional[AvailabilityResponse] = None

    @classmethod
    def from_model(cls, booking, include_provider: bool = True) -> "BookingResponse":
        return cls(
            id=booking.id,
            tenantId=booking.tenant_id,
            availabilityId=booking.availability_id,
            providerId=booking.provider_id,
            trainerId=booking.trainer_id,
            clientName=booking.client_name,
            clientEmail=booking.client_email,
            clientPhone=booking.client_phone,
            partySize=booking.party_size,
            totalPrice=booking.total_price,
            notes=booking.notes,
            status=booking.status,
            createdAt=booking.created_at,
            updatedAt=booking.updated_at,
            provider=(
                ProviderSummary.from_model(booking.provider)
                if include_provider and booking.provider
                else None
            ),
            availability=(
                AvailabilityResponse.from_model(booking.availability) if booking.availability else None
            ),
        )
