"""
SMTP Notifier

Sends password reset emails. Logs the message instead when SMTP is not configured.
"""

import asyncio
import html
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from src.app.services.notifier import Notifier

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Password Reset Request"


def render_reset_email(name: str, reset_url: str) -> tuple[str, str]:
    """Plain text and HTML bodies for the reset email"""
    plain = (
        f"Hello {name},\n\n"
        "We received a request to reset your password. "
        "Open the link below to choose a new one:\n\n"
        f"{reset_url}\n\n"
        "This link expires in 1 hour. If you did not request a reset, "
        "you can ignore this email.\n"
    )
    safe_name = html.escape(name)
    safe_url = html.escape(reset_url, quote=True)
    body = f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: system-ui, sans-serif; color: #333; max-width: 560px;">
<p>Hello {safe_name},</p>
<p>We received a request to reset your password. Click the button below to choose a new one.</p>
<p><a href="{safe_url}" style="display: inline-block; padding: 10px 18px; background: #4f46e5; color: #fff; text-decoration: none; border-radius: 6px;">Reset password</a></p>
<p>Or paste this link into your browser:<br><a href="{safe_url}">{safe_url}</a></p>
<p style="color: #6b7280; font-size: 13px;">This link expires in 1 hour. If you did not request a reset, you can ignore this email.</p>
</body>
</html>"""
    return plain, body


class SmtpNotifier(Notifier):
    def __init__(
        self,
        host: Optional[str],
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender: Optional[str] = None,
        use_tls: bool = True,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.use_tls = use_tls

    async def send_password_reset(self, email: str, name: str, reset_url: str) -> None:
        plain, body = render_reset_email(name, reset_url)

        if not self.host:
            logger.info(
                "Email (SMTP not configured): To=%s Subject=%s Body=%s",
                email,
                RESET_SUBJECT,
                plain[:200],
            )
            return

        msg = MIMEMultipart("alternative")
        msg["Subject"] = RESET_SUBJECT
        msg["From"] = self.sender
        msg["To"] = email
        msg.attach(MIMEText(plain, "plain"))
        msg.attach(MIMEText(body, "html"))

        await asyncio.to_thread(self._send, msg)
        logger.info(f"Password reset email sent to {email}")

    def _send(self, msg: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password or "")
            server.send_message(msg)
