"""Email notification observer."""

from __future__ import annotations

import json
import logging
import smtplib
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class EmailLogObserver:
    """Send each observed event as a plain-text email.

    ``send`` receives the built message; when omitted the message is delivered
    through ``smtplib.SMTP(smtp_host, smtp_port)``.
    """

    sender: str
    recipients: Sequence[str]
    send: Callable[[EmailMessage], None] | None = None
    smtp_host: str = "localhost"
    smtp_port: int = 25
    subject_prefix: str = "Log Notification"

    def build_message(self, level: str, message: Any, context: Mapping[str, Any]) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = f"{self.subject_prefix}: {level.upper()}"
        msg["From"] = self.sender
        msg["To"] = ", ".join(self.recipients)
        # default=str keeps malformed context from failing the notification
        body_context = json.dumps(dict(context), ensure_ascii=False, default=str)
        msg.set_content(f"Message: {message}\nContext: {body_context}\n")
        return msg

    def _send_smtp(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self.smtp_host, self.smtp_port) as smtp:
            smtp.send_message(msg)

    def update(self, level: str, message: Any, context: Mapping[str, Any]) -> None:
        msg = self.build_message(level, message, context)
        logger.debug("Sending log notification to %s", msg["To"])
        (self.send or self._send_smtp)(msg)
