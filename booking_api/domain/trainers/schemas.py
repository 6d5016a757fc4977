"""Trainer domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from ..bookings.schemas import AvailabilityResponse, BookingResponse


class TrainerCreate(BaseModel):
    name: str
    email: str
    bio: Optional[str] = None


class TrainerPatch(BaseModel):
    """Keys present in the body are written verbatim, explicit null included"""

    name: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None


class TrainerResponse(BaseModel):
    """Schema for trainer response"""

    id: str
    name: str
    email: str
    bio: Optional[str] = None
    rateCard: Optional[Any] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, trainer) -> "TrainerResponse":
        return cls(
            id=trainer.id,
            name=trainer.name,
            email=trainer.email,
            bio=trainer.bio,
            rateCard=trainer.rate_card,
            createdAt=trainer.created_at,
            updatedAt=trainer.updated_at,
        )


class TrainerDetailResponse(TrainerResponse):
    """Trainer with its slots (ascending by date) and bookings"""

    availability: list[AvailabilityResponse] = []
    bookings: list[BookingResponse] = []

    @classmethod
    def from_model(cls, trainer) -> "TrainerDetailResponse":
        base = TrainerResponse.from_model(trainer).model_dump()
        return cls(
            **base,
            availability=[AvailabilityResponse.from_model(a) for a in trainer.availability],
            bookings=[BookingResponse.from_model(b, include_provider=False) for b in trainer.bookings],
        )
