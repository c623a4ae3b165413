import logging
from datetime import datetime
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any, Dict, Optional

import aiosmtplib
from fastapi import Request

from app.api.core.config import settings
from app.api.core.dependencies.email.mailer_templates import email_templates

logger = logging.getLogger("app")


class MailClient:
    """
    SMTP client used for operator notifications.

    Sending is disabled when either credential is missing; a disabled or
    closed client skips every send and reports ``False``.
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        hostname: Optional[str] = None,
        port: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        self.username = settings.EMAIL_USER if username is None else username
        self.password = settings.EMAIL_PASS if password is None else password
        self.hostname = hostname or settings.SMTP_SERVER
        self.port = port or settings.SMTP_PORT
        self.timeout = timeout or settings.SMTP_TIMEOUT
        self._open = False

    @property
    def enabled(self) -> bool:
        return bool(self.username and self.password)

    @property
    def is_open(self) -> bool:
        return self._open

    async def start(self) -> None:
        self._open = True
        if self.enabled:
            logger.info(
                "Mail notifications enabled via %s:%s as %s", self.hostname, self.port, self.username
            )
        else:
            logger.info("Mail credentials not configured; notifications disabled")

    async def close(self) -> None:
        self._open = False
        logger.info("Mail client closed")

    async def send_email(
        self, template_name: str, subject: str, recipient: str, context: Dict[str, Any]
    ) -> bool:
        """
        Render ``template_name`` with ``context`` and deliver it to ``recipient``.

        Returns:
            bool: True when the message was handed to the SMTP server.

        Raises:
            aiosmtplib.SMTPException: If the relay rejects or drops the message.
            OSError: If the relay cannot be reached.
        """
        if not self._open:
            logger.debug("Mail client is closed; skipping email to %s", recipient)
            return False

        if not self.enabled:
            logger.debug("Mail credentials not configured; skipping email to %s", recipient)
            return False

        if not recipient:
            logger.error(f"Invalid recipient email: {recipient}")
            return False

        template = email_templates.get_template(template_name)
        html_content = template.render(**{"current_year": datetime.now().year, **context})

        msg = MIMEMultipart("alternative")
        # Header values must be a single line.
        msg["Subject"] = " ".join(subject.split())
        msg["From"] = self.username
        msg["To"] = recipient

        msg.attach(MIMEText(html_content, "html"))

        await aiosmtplib.send(
            msg,
            hostname=self.hostname,
            port=self.port,
            username=self.username,
            password=self.password,
            start_tls=self.port == 587,
            use_tls=self.port == 465,
            timeout=self.timeout,
        )

        logger.info(f"Email sent successfully to {recipient}")
        return True


def get_mailer(request: Request) -> MailClient:
    return request.app.state.mailer
