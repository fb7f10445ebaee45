"""Outbound mail transports for the reset instructions."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from credflow.app.services.mail_notifier import MailDeliveryError, MailNotifier

logger = logging.getLogger(__name__)


class LogMailNotifier(MailNotifier):
    """Development transport: writes the message to the log instead of sending it."""

    async def send(self, sender: str, recipient: str, subject: str, body: str) -> None:
        logger.info("Email from %s to %s\nSubject: %s\n%s", sender, recipient, subject, body)


class SmtpMailNotifier(MailNotifier):
    """
    SMTP transport.

    smtplib is blocking, so delivery runs in a worker thread.
    """

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 10,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    async def send(self, sender: str, recipient: str, subject: str, body: str) -> None:
        message = EmailMessage()
        message["From"] = sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body)

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(f"SMTP delivery to {recipient} failed: {exc}") from exc

        logger.info("Reset instructions sent to %s via %s:%s", recipient, self.host, self.port)

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password or "")
            server.send_message(message)
