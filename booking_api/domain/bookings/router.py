"""Booking router - FastAPI endpoints for booking operations"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...errors import AppError, InternalError
from .schemas import BookingResponse, BookingUpdate
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
):
    """Get a booking with its provider and availability slot"""
    try:
        booking = service.get_booking(booking_id)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Booking fetch error: {e}")
        raise InternalError("Failed to fetch booking", details=str(e)) from e

    return BookingResponse.from_model(booking)


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: str,
    data: BookingUpdate,
    service: BookingService = Depends(get_booking_service),
):
    try:
        booking = service.update_booking(booking_id, data)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Booking update error: {e}")
        raise InternalError("Failed to update booking", details=str(e)) from e

    return BookingResponse.from_model(booking)


@router.delete("/{booking_id}")
async def cancel_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
):
    """Cancel a booking and release its availability slot"""
    try:
        return service.cancel_booking(booking_id)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Booking cancellation error: {e}")
        raise InternalError("Failed to cancel booking", details=str(e)) from e
