import asyncio

import pytest
import resend

from booking_api import config, email_service

PAYLOAD = {"to": "ops@example.com", "subject": "Hello", "message": "<b>Hi</b> there"}


def run(coro):
    return asyncio.run(coro)


class TestTestEmailRoute:
    @pytest.mark.parametrize("missing", ["to", "subject", "message"])
    def test_missing_field_is_400(self, client, missing):
        payload = {k: v for k, v in PAYLOAD.items() if k != missing}

        response = client.post("/test-email", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "to, subject, and message are required"}

    def test_success_returns_message_id(self, client, monkeypatch):
        sent = {}

        async def fake_send(to, subject, html, text=None, from_address=None):
            sent.update(to=to, subject=subject, html=html)
            return {"success": True, "messageId": "msg_123"}

        monkeypatch.setattr(email_service, "send_email", fake_send)

        response = client.post("/test-email", json=PAYLOAD)

        assert response.status_code == 200
        assert response.json() == {"message": "Email sent successfully", "messageId": "msg_123"}
        assert sent["to"] == "ops@example.com"
        assert "Hi" in sent["html"]

    def test_script_tags_are_stripped(self, client, monkeypatch):
        sent = {}

        async def fake_send(to, subject, html, text=None, from_address=None):
            sent["html"] = html
            return {"success": True, "messageId": "msg_1"}

        monkeypatch.setattr(email_service, "send_email", fake_send)

        client.post("/test-email", json={**PAYLOAD, "message": "<script>alert(1)</script>ok"})

        assert "<script>" not in sent["html"]

    def test_provider_failure_is_500(self, client, monkeypatch):
        async def fake_send(**kwargs):
            return {"success": False, "error": "Domain not verified"}

        monkeypatch.setattr(email_service, "send_email", fake_send)

        response = client.post("/test-email", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to send email", "details": "Domain not verified"}

    def test_unexpected_exception_is_500(self, client, monkeypatch):
        async def fake_send(**kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(email_service, "send_email", fake_send)

        response = client.post("/test-email", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to send test email"


class TestSendEmail:
    def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(config, "SMTP_HOST", None)
        monkeypatch.setattr(config, "RESEND_API_KEY", None)

        result = run(email_service.send_email("a@example.com", "Hi", "<p>Hi</p>"))

        assert result == {"success": False, "error": "Email service not configured"}

    def test_resend_success(self, monkeypatch):
        calls = []
        monkeypatch.setattr(config, "SMTP_HOST", None)
        monkeypatch.setattr(config, "RESEND_API_KEY", "re_test")
        monkeypatch.setattr(resend.Emails, "send", lambda params: calls.append(params) or {"id": "re_42"})

        result = run(email_service.send_email("a@example.com", "Hi", "<p>Hello <b>you</b></p>"))

        assert result == {"success": True, "messageId": "re_42"}
        assert calls[0]["to"] == ["a@example.com"]
        assert calls[0]["text"] == "Hello you"

    def test_resend_error_is_reported_not_raised(self, monkeypatch):
        def fail(params):
            raise RuntimeError("rate limited")

        monkeypatch.setattr(config, "SMTP_HOST", None)
        monkeypatch.setattr(config, "RESEND_API_KEY", "re_test")
        monkeypatch.setattr(resend.Emails, "send", fail)

        result = run(email_service.send_email(["a@example.com"], "Hi", "<p>Hi</p>"))

        assert result == {"success": False, "error": "rate limited"}

    def test_booking_reminder_subject_and_body(self, monkeypatch):
        captured = {}

        async def fake_send(to, subject, html, text=None, from_address=None):
            captured.update(to=to, subject=subject, html=html)
            return {"success": True, "messageId": "m"}

        monkeypatch.setattr(email_service, "send_email", fake_send)

        run(
            email_service.send_booking_reminder(
                client_name="Sam <Lee>",
                client_email="sam@example.com",
                provider_name="Jamie Rivera",
                date="March 5, 2026",
                start_time="09:00",
                end_time="10:00",
                tenant_name="Acme Fitness",
                booking_id="b-1",
            )
        )

        assert captured["subject"] == "Reminder: Upcoming Booking Tomorrow - Acme Fitness"
        assert "09:00 - 10:00" in captured["html"]
        assert "Sam &lt;Lee&gt;" in captured["html"]
