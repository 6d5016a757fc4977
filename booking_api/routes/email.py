"""
Email Routes - For testing email delivery
"""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from .. import email_service
from ..email_templates import plain_message_template
from ..errors import AppError, InternalError, UpstreamServiceError, ValidationError
from ..security_utils import sanitize_html

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Email"])


class TestEmailRequest(BaseModel):
    # Presence is checked in the handler so a missing field is a 400, not a 422
    to: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


@router.post("/test-email")
async def send_test_email(data: TestEmailRequest):
    """Send an arbitrary message wrapped in the standard HTML layout"""
    if not data.to or not data.subject or not data.message:
        raise ValidationError("to, subject, and message are required")

    try:
        result = await email_service.send_email(
            to=data.to,
            subject=data.subject,
            html=plain_message_template(sanitize_html(data.message)),
        )
    except AppError:
        raise
    except Exception as e:
        logger.error(f"❌ Test email error: {e}")
        raise InternalError("Failed to send test email", details=str(e)) from e

    if not result.get("success"):
        raise UpstreamServiceError("Failed to send email", details=result.get("error"))

    return {"message": "Email sent successfully", "messageId": result.get("messageId")}
