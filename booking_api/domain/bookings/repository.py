"""Booking repository - Database operations for bookings"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, contains_eager, joinedload

from ...errors import BookingNotFoundError
from ...models import Availability, Booking

logger = logging.getLogger(__name__)


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_booking(db: Session, booking_id: str) -> Optional[Booking]:
        """Get a booking with its provider and availability"""
        return (
            db.query(Booking)
            .options(joinedload(Booking.provider), joinedload(Booking.availability))
            .filter(Booking.id == booking_id)
            .first()
        )

    @staticmethod
    def update_booking(db: Session, booking: Booking, **updates) -> Booking:
        for key, value in updates.items():
            setattr(booking, key, value)

        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def lock_booking(db: Session, booking_id: str) -> Optional[Booking]:
        """Re-read a booking inside the current transaction, locking its row"""
        return db.query(Booking).filter(Booking.id == booking_id).with_for_update().first()

    @staticmethod
    def decrement_slot_count(db: Session, availability_id: str) -> None:
        db.query(Availability).filter(Availability.id == availability_id).update(
            {Availability.current_bookings: Availability.current_bookings - 1},
            synchronize_session=False,
        )

    @staticmethod
    def cancel_booking(db: Session, booking_id: str) -> str:
        """
        Delete a booking and release its slot as one transaction.

        Both writes commit together or neither does. Raises BookingNotFoundError
        when the booking is already gone (e.g. a concurrent cancellation won).
        The slot is only released when this call's DELETE removed the row, since
        SQLite ignores FOR UPDATE.

        Returns:
            The id of the availability slot that was released
        """
        try:
            booking = BookingRepository.lock_booking(db, booking_id)
            if booking is None:
                raise BookingNotFoundError()

            availability_id = booking.availability_id
            deleted = (
                db.query(Booking)
                .filter(Booking.id == booking_id)
                .delete(synchronize_session=False)
            )
            if deleted == 0:
                raise BookingNotFoundError()

            BookingRepository.decrement_slot_count(db, availability_id)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"✅ Booking {booking_id} cancelled, slot {availability_id} released")
        return availability_id

    @staticmethod
    def get_confirmed_bookings_between(db: Session, start: datetime, end: datetime) -> list[Booking]:
        """Confirmed bookings whose slot date falls in [start, end], with provider, slot and tenant"""
        return (
            db.query(Booking)
            .join(Booking.availability)
            .options(
                contains_eager(Booking.availability),
                joinedload(Booking.provider),
                joinedload(Booking.tenant),
            )
            .filter(
                Booking.status == "confirmed",
                Availability.date >= start,
                Availability.date <= end,
            )
            .order_by(Availability.date.asc(), Availability.start_time.asc())
            .all()
        )
