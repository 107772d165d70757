from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol

from ..config.settings import MailSettings
from ..core.exceptions import MailDispatchError

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    """Minimal send-email capability used by the notifier."""

    def send(self, *, to: str, subject: str, html: str) -> None:
        raise NotImplementedError


class SmtpMailer:
    """Sends one HTML message per call through an SMTP relay.

    A fresh connection is opened for every message; calls are safe to run
    from several threads at once.
    """

    def __init__(self, settings: MailSettings):
        self._settings = settings

    def send(self, *, to: str, subject: str, html: str) -> None:
        settings = self._settings
        if not settings.has_credentials:
            raise MailDispatchError("SMTP credentials not configured")

        message = EmailMessage()
        message["From"] = settings.user
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")

        try:
            with smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout_seconds) as server:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls()
                    server.ehlo()
                server.login(settings.user, settings.password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDispatchError(f"Failed to send email to {to}: {e}") from e
