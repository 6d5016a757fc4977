import pytest

from booking_api.domain.bookings.repository import BookingRepository
from booking_api.errors import BookingNotFoundError
from booking_api.models import Availability, Booking

from .conftest import TestingSessionLocal, reload


@pytest.fixture
def booked_slot(factory):
    tenant = factory.tenant()
    pt = factory.provider_type(tenant)
    provider = factory.provider(tenant, pt)
    slot = factory.availability(provider=provider, current=3)
    booking = factory.booking(slot, tenant=tenant, provider=provider, notes="Bring a towel")
    return booking, slot, provider


def test_get_booking_includes_provider_and_slot(client, booked_slot):
    booking, slot, provider = booked_slot

    response = client.get(f"/bookings/{booking.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["clientName"] == "Sam Lee"
    assert body["provider"]["id"] == provider.id
    assert body["availability"]["id"] == slot.id
    assert body["availability"]["startTime"] == "09:00"


def test_get_missing_booking_is_404(client, db_session):
    response = client.get("/bookings/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Booking not found"}


def test_patch_ignores_empty_name_but_applies_notes(client, booked_slot):
    booking, _, _ = booked_slot

    response = client.patch(f"/bookings/{booking.id}", json={"clientName": "", "notes": "cleared"})

    assert response.status_code == 200
    body = response.json()
    assert body["clientName"] == "Sam Lee"
    assert body["notes"] == "cleared"


def test_patch_without_notes_keeps_them(client, booked_slot):
    booking, _, _ = booked_slot

    response = client.patch(f"/bookings/{booking.id}", json={"clientEmail": "sam.lee@example.com"})

    assert response.status_code == 200
    body = response.json()
    assert body["clientEmail"] == "sam.lee@example.com"
    assert body["notes"] == "Bring a towel"


def test_patch_null_notes_clears_them(client, booked_slot):
    booking, _, _ = booked_slot

    response = client.patch(f"/bookings/{booking.id}", json={"notes": None})

    assert response.status_code == 200
    assert reload(Booking, booking.id).notes is None


def test_patch_missing_booking_is_404(client, db_session):
    response = client.patch("/bookings/missing", json={"notes": "x"})

    assert response.status_code == 404


def test_cancel_releases_slot(client, booked_slot):
    booking, slot, _ = booked_slot

    response = client.delete(f"/bookings/{booking.id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Booking cancelled successfully"}
    assert reload(Booking, booking.id) is None
    assert reload(Availability, slot.id).current_bookings == 2
    assert client.get(f"/bookings/{booking.id}").status_code == 404


def test_cancel_missing_booking_is_404(client, db_session):
    response = client.delete("/bookings/missing")

    assert response.status_code == 404
    assert response.json() == {"error": "Booking not found"}


def test_second_cancel_does_not_decrement_again(client, booked_slot):
    booking, slot, _ = booked_slot

    assert client.delete(f"/bookings/{booking.id}").status_code == 200
    assert client.delete(f"/bookings/{booking.id}").status_code == 404
    assert reload(Availability, slot.id).current_bookings == 2


def test_failed_slot_release_rolls_back_the_delete(client, booked_slot, monkeypatch):
    booking, slot, _ = booked_slot

    def fail_decrement(db, availability_id):
        raise RuntimeError("disk I/O error")

    monkeypatch.setattr(BookingRepository, "decrement_slot_count", fail_decrement)

    response = client.delete(f"/bookings/{booking.id}")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to cancel booking"
    assert reload(Booking, booking.id) is not None
    assert reload(Availability, slot.id).current_bookings == 3


def test_interleaved_cancellations_release_slot_once(booked_slot, monkeypatch):
    booking, slot, _ = booked_slot
    lock_booking = BookingRepository.lock_booking
    raced = []
    winners = []

    def lock_then_lose_race(db, booking_id):
        found = lock_booking(db, booking_id)
        if not raced:
            # Another request cancels the same booking after this one has read it
            raced.append(booking_id)
            other = TestingSessionLocal()
            try:
                winners.append(BookingRepository.cancel_booking(other, booking_id))
            finally:
                other.close()
        return found

    monkeypatch.setattr(BookingRepository, "lock_booking", lock_then_lose_race)

    db = TestingSessionLocal()
    try:
        with pytest.raises(BookingNotFoundError):
            BookingRepository.cancel_booking(db, booking.id)
    finally:
        db.close()

    assert winners == [slot.id]
    assert reload(Booking, booking.id) is None
    assert reload(Availability, slot.id).current_bookings == 2
