import pytest

from booking_api.auth import session_from_token
from booking_api.security_utils import create_jwt_token, sanitize_html
from booking_api.shared.validators import generate_slug, normalize_email


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Personal Trainers", "personal-trainers"),
        ("  Yoga & Pilates!  ", "yoga-pilates"),
        ("Massage--Therapists", "massage-therapists"),
        ("Über Coaches", "ber-coaches"),
    ],
)
def test_generate_slug(name, expected):
    assert generate_slug(name) == expected


def test_normalize_email():
    assert normalize_email("  Sam@Example.COM ") == "sam@example.com"
    assert normalize_email(None) is None


def test_session_from_token():
    session = session_from_token(create_jwt_token({"email": "sam@example.com", "name": "Sam"}))

    assert session.email == "sam@example.com"
    assert session.name == "Sam"


def test_session_requires_email_claim():
    assert session_from_token(create_jwt_token({"sub": "123"})) is None


def test_sanitize_html_strips_unsafe_tags():
    cleaned = sanitize_html('<p onclick="x()">Hi</p><script>alert(1)</script>')

    assert cleaned.startswith("<p>Hi</p>")
    assert "<script>" not in cleaned
