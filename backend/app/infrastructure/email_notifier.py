"""Contact Notifications — best-effort SMTP email when a message is stored.

Invariants:
    - Sender and recipient come from settings; nothing is hardcoded
    - Disabled unless smtp_host and notify_recipient are configured
    - notify_new_message() never raises: failures are logged and reported as False
    - Runs after the HTTP response (FastAPI background task), so it cannot change it
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from app.config import Settings
from app.schemas.message import Message

logger = logging.getLogger(__name__)


class EmailNotifier:
    """Sends the site owner a copy of each contact form submission."""

    def __init__(
        self,
        host: str | None,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        sender: str | None = None,
        recipient: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.recipient = recipient
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "EmailNotifier":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            sender=settings.notify_sender,
            recipient=settings.notify_recipient,
            use_tls=settings.smtp_use_tls,
            timeout=settings.smtp_timeout_seconds,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.host and self.recipient and self.sender)

    def build_email(self, message: Message) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = f"New portfolio message from {message.name}"
        msg["From"] = self.sender
        msg["To"] = self.recipient
        msg["Reply-To"] = message.email
        body = (
            f"Name: {message.name}\n"
            f"Email: {message.email}\n"
            f"Received: {message.created_at.isoformat()}\n\n"
            f"{message.message}\n"
        )
        msg.attach(MIMEText(body, "plain", "utf-8"))
        return msg

    def notify_new_message(self, message: Message) -> bool:
        """Email the configured recipient. Best-effort, never raises."""
        if not self.enabled:
            logger.debug("Contact notification skipped: SMTP not configured")
            return False
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(self.build_email(message))
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                f"Contact notification failed: {e}",
                extra={"entity": "Message", "entity_id": message.id},
            )
            return False
        logger.info(
            "Contact notification sent",
            extra={"entity": "Message", "entity_id": message.id},
        )
        return True
