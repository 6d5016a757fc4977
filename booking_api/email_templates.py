"""
HTML Email Templates
Fixed inline-CSS templates for the booking emails
"""

from .utils.sanitization import sanitize_string

THEME = {
    "text_primary": "#333333",
    "content_bg": "#f9f9f9",
    "card_bg": "#ffffff",
    "label": "#555555",
    "muted": "#777777",
    "reminder": "#8B5CF6",
}


def get_base_template(content_html: str, header_html: str = "", footer_html: str = "") -> str:
    """Base HTML wrapper shared by all emails"""
    return f"""<!DOCTYPE html>
<html>
<head>
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: {THEME['text_primary']}; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .content {{ background-color: {THEME['content_bg']}; padding: 20px; margin-top: 20px; }}
    .booking-details {{ background-color: {THEME['card_bg']}; padding: 15px; margin: 15px 0; border-left: 4px solid {THEME['reminder']}; }}
    .detail-row {{ padding: 8px 0; border-bottom: 1px solid #eee; }}
    .detail-label {{ font-weight: bold; color: {THEME['label']}; }}
    .footer {{ text-align: center; padding: 20px; color: {THEME['muted']}; font-size: 12px; }}
  </style>
</head>
<body>
  <div class="container">
    {header_html}
    <div class="content">
      {content_html}
    </div>
    {footer_html}
  </div>
</body>
</html>
"""


def plain_message_template(message_html: str) -> str:
    """Wrap an already-sanitized message body in the base layout"""
    return get_base_template(content_html=f"<p>{message_html}</p>")


def booking_reminder_template(
    client_name: str,
    provider_name: str,
    date: str,
    start_time: str,
    end_time: str,
    tenant_name: str,
    booking_id: str,
) -> str:
    header = (
        f'<div style="background-color: {THEME["reminder"]}; color: white; padding: 20px; '
        f'text-align: center;"><h1>Booking Reminder</h1></div>'
    )

    rows = [
        ("Booking ID", booking_id),
        ("Provider", provider_name),
        ("Date", date),
        ("Time", f"{start_time} - {end_time}"),
    ]
    details = "".join(
        f'<div class="detail-row"><span class="detail-label">{label}:</span> {sanitize_string(value)}</div>'
        for label, value in rows
    )

    content = f"""
      <p>Hi {sanitize_string(client_name)},</p>
      <p>This is a friendly reminder about your upcoming booking:</p>
      <div class="booking-details">{details}</div>
      <p>We look forward to seeing you!</p>
    """
    footer = (
        f'<div class="footer"><p>This is an automated message from '
        f"{sanitize_string(tenant_name)}.</p></div>"
    )

    return get_base_template(content_html=content, header_html=header, footer_html=footer)
