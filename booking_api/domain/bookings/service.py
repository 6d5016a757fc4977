"""Booking service - Business logic for booking operations"""

import logging

from sqlalchemy.orm import Session

from ...errors import NotFoundError
from ...models import Booking
from .repository import BookingRepository
from .schemas import BookingUpdate

logger = logging.getLogger(__name__)


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.repo.get_booking(self.db, booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    def update_booking(self, booking_id: str, data: BookingUpdate) -> Booking:
        booking = self.get_booking(booking_id)

        updates = {}
        if data.clientName:
            updates["client_name"] = data.clientName
        if data.clientEmail:
            updates["client_email"] = data.clientEmail
        if "notes" in data.model_fields_set:
            updates["notes"] = data.notes

        return self.repo.update_booking(self.db, booking, **updates)

    def cancel_booking(self, booking_id: str) -> dict:
        self.repo.cancel_booking(self.db, booking_id)
        return {"message": "Booking cancelled successfully"}
