"""
Email Service using Resend

Sends admin alert emails. Delivery is best-effort: callers log failures
and carry on.
"""

import asyncio
import logging
import os
from html import escape

import resend

logger = logging.getLogger(__name__)

# Initialize Resend with API key
resend.api_key = os.getenv("RESEND_API_KEY")

# Configurations
EMAIL_FROM = os.getenv("EMAIL_FROM", "DocuPrint <noreply@docuprint.dev>")
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")


async def send_email(
    to_email: str,
    subject: str,
    html_content: str,
) -> bool:
    """
    Send an email using Resend.

    Without RESEND_API_KEY the email is logged instead of sent.

    Returns:
        True if email was sent (or logged) successfully
    """
    if not resend.api_key:
        logger.info(f"RESEND_API_KEY not set - EMAIL TO: {to_email} | SUBJECT: {subject}")
        return True

    try:
        params: resend.Emails.SendParams = {
            "from": EMAIL_FROM,
            "to": [to_email],
            "subject": subject,
            "html": html_content,
        }

        # Resend's client is synchronous
        email = await asyncio.to_thread(resend.Emails.send, params)
        logger.info(f"Email sent successfully to {to_email}, id: {email['id']}")
        return True
    except Exception as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return False


async def send_admin_signup_alert(
    to_email: str,
    admin_name: str,
    resident_name: str,
    mobile: str,
    location: str,
) -> bool:
    """Tell a community admin that a new resident signup awaits review."""
    safe_admin_name = escape(admin_name)
    safe_resident_name = escape(resident_name)
    safe_mobile = escape(mobile)
    safe_location = escape(location)

    review_url = f"{FRONTEND_URL}/admin"
    html_content = f"""
    <!DOCTYPE html>
    <html>
    <head>
        <style>
            body {{ font-family: system-ui, -apple-system, sans-serif; line-height: 1.6; color: #0f172a; }}
            .container {{ max-width: 600px; margin: 0 auto; padding: 40px 20px; }}
            .details {{ background-color: #f8fafc; border: 1px solid #e2e8f0; padding: 16px; border-radius: 8px; margin: 16px 0; }}
            .button {{ display: inline-block; background-color: #0f172a; color: white; padding: 14px 28px; text-decoration: none; border-radius: 8px; margin: 24px 0; }}
        </style>
    </head>
    <body>
        <div class="container">
            <h1>New resident signup</h1>

            <p>Hello {safe_admin_name},</p>

            <p>A resident has requested DocuPrint access in one of your communities:</p>

            <div class="details">
                <p><strong>Name:</strong> {safe_resident_name}</p>
                <p><strong>Mobile:</strong> {safe_mobile}</p>
                <p><strong>Location:</strong> {safe_location}</p>
            </div>

            <a href="{review_url}" class="button">Review signup</a>
        </div>
    </body>
    </html>
    """
    return await send_email(
        to_email=to_email,
        subject=f"DocuPrint: signup request from {safe_resident_name}",
        html_content=html_content,
    )
