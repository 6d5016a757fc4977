"""
Booking Reminder Worker
Sends a reminder email for every confirmed booking scheduled tomorrow (UTC)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from .. import email_service
from ..domain.bookings.repository import BookingRepository

logger = logging.getLogger(__name__)


@dataclass
class ReminderSummary:
    total: int = 0
    success: int = 0
    failure: int = 0

    def report(self) -> str:
        return "\n".join(
            [
                "--- Summary ---",
                f"Total bookings: {self.total}",
                f"Successfully sent: {self.success}",
                f"Failed: {self.failure}",
            ]
        )


def tomorrow_window(now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """First and last instant of tomorrow's UTC calendar day"""
    now = now or datetime.now(timezone.utc)
    day = (now + timedelta(days=1)).date()
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def format_booking_date(value: datetime) -> str:
    """e.g. "March 5, 2026" """
    return f"{value:%B} {value.day}, {value.year}"


async def send_booking_reminders(db: Session, now: Optional[datetime] = None) -> ReminderSummary:
    """
    Send reminders for tomorrow's confirmed bookings, one at a time.

    A booking without a provider or tenant is counted as a failure and skipped.
    Individual send failures never stop the run; errors from the booking
    query itself propagate to the caller.
    """
    logger.info("🔄 Starting booking reminder process...")

    start, end = tomorrow_window(now)
    bookings = BookingRepository.get_confirmed_bookings_between(db, start, end)
    logger.info(f"📧 Found {len(bookings)} bookings for tomorrow")

    summary = ReminderSummary(total=len(bookings))

    for booking in bookings:
        if not booking.provider or not booking.tenant:
            logger.warning(f"⏭️ Skipping booking {booking.id} - missing provider or tenant")
            summary.failure += 1
            continue

        try:
            result = await email_service.send_booking_reminder(
                client_name=booking.client_name,
                client_email=booking.client_email,
                provider_name=booking.provider.name,
                date=format_booking_date(booking.availability.date),
                start_time=booking.availability.start_time,
                end_time=booking.availability.end_time,
                tenant_name=booking.tenant.name,
                booking_id=booking.id,
            )
        except Exception as e:
            logger.error(f"❌ Error sending reminder for booking {booking.id}: {e}")
            summary.failure += 1
            continue

        if result.get("success"):
            logger.info(f"✅ Sent reminder for booking {booking.id} to {booking.client_email}")
            summary.success += 1
        else:
            logger.error(
                f"❌ Failed to send reminder for booking {booking.id}: {result.get('error')}"
            )
            summary.failure += 1

    logger.info(
        f"📊 Reminder process completed: total={summary.total}, "
        f"success={summary.success}, failure={summary.failure}"
    )
    return summary
