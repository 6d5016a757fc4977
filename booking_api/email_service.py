"""
Email Service using SMTP (when configured) or Resend
Send functions report delivery failures in their result instead of raising
"""

import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid
from typing import Optional, Union

import resend

from . import config
from .email_templates import booking_reminder_template
from .utils.sanitization import strip_html_tags

logger = logging.getLogger(__name__)

resend.api_key = config.RESEND_API_KEY


def send_via_smtp(
    to: list[str],
    subject: str,
    html_content: str,
    text_content: str,
    from_address: str,
) -> str:
    """Send email via the configured SMTP server, returning the Message-ID"""
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = from_address
    msg["To"] = ", ".join(to)
    message_id = make_msgid()
    msg["Message-ID"] = message_id

    msg.attach(MIMEText(text_content, "plain"))
    msg.attach(MIMEText(html_content, "html"))

    if config.SMTP_PORT == 465:
        context = ssl.create_default_context()
        server = smtplib.SMTP_SSL(
            config.SMTP_HOST, config.SMTP_PORT, context=context, timeout=config.SMTP_TIMEOUT
        )
    else:
        server = smtplib.SMTP(config.SMTP_HOST, config.SMTP_PORT, timeout=config.SMTP_TIMEOUT)
        if config.SMTP_USE_TLS:
            server.starttls(context=ssl.create_default_context())

    try:
        if config.SMTP_USERNAME:
            server.login(config.SMTP_USERNAME, config.SMTP_PASSWORD or "")
        server.sendmail(from_address.split("<")[-1].rstrip(">"), to, msg.as_string())
    finally:
        server.quit()

    logger.info(f"✅ SMTP email sent successfully via {config.SMTP_HOST}")
    return message_id


def send_via_resend(
    to: list[str],
    subject: str,
    html_content: str,
    text_content: str,
    from_address: str,
) -> Optional[str]:
    """Send email via Resend, returning the provider's message id"""
    response = resend.Emails.send(
        {
            "from": from_address,
            "to": to,
            "subject": subject,
            "html": html_content,
            "text": text_content,
        }
    )
    message_id = response.get("id") if isinstance(response, dict) else getattr(response, "id", None)
    logger.info(f"✅ Email sent successfully via Resend: {message_id}")
    return message_id


async def send_email(
    to: Union[str, list[str]],
    subject: str,
    html: str,
    text: Optional[str] = None,
    from_address: Optional[str] = None,
) -> dict:
    """
    Send an email using SMTP (if configured) or Resend

    Args:
        to: Recipient email(s)
        subject: Email subject line
        html: HTML body
        text: Optional plain-text body (defaults to the HTML with tags stripped)
        from_address: Optional custom from address

    Returns:
        {"success": True, "messageId": ...} or {"success": False, "error": ...}
    """
    recipients = [to] if isinstance(to, str) else list(to)
    sender = from_address or config.EMAIL_FROM_ADDRESS
    text_content = text or strip_html_tags(html)

    try:
        if config.SMTP_HOST:
            logger.info(f"📧 Sending email via SMTP to: {recipients}")
            message_id = send_via_smtp(recipients, subject, html, text_content, sender)
        elif config.RESEND_API_KEY:
            logger.info(f"📧 Sending email via Resend to: {recipients}")
            message_id = send_via_resend(recipients, subject, html, text_content, sender)
        else:
            logger.error("❌ No email service configured - SMTP_HOST and RESEND_API_KEY missing")
            return {"success": False, "error": "Email service not configured"}
    except Exception as e:
        logger.error(f"❌ Email send error to {recipients}: {e}")
        return {"success": False, "error": str(e)}

    return {"success": True, "messageId": message_id}


async def send_booking_reminder(
    client_name: str,
    client_email: str,
    provider_name: str,
    date: str,
    start_time: str,
    end_time: str,
    tenant_name: str,
    booking_id: str,
) -> dict:
    """Send the day-before reminder for one booking"""
    html = booking_reminder_template(
        client_name=client_name,
        provider_name=provider_name,
        date=date,
        start_time=start_time,
        end_time=end_time,
        tenant_name=tenant_name,
        booking_id=booking_id,
    )
    return await send_email(
        to=client_email,
        subject=f"Reminder: Upcoming Booking Tomorrow - {tenant_name}",
        html=html,
    )
