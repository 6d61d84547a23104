import asyncio
import logging
import smtplib
from email.message import EmailMessage

from src.app.services.notifier import INotifier

logger = logging.getLogger(__name__)


class SmtpNotifier(INotifier):
    """Notifier implementation sending HTML mail over SMTP"""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str = "",
        password: str = "",
        timeout: float = 10.0,
    ):
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._timeout = timeout

    def _build_message(
        self, subject: str, html_body: str, to_address: str, from_address: str
    ) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = from_address
        message["To"] = to_address
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(html_body, subtype="html")
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as conn:
            if self._username:
                conn.starttls()
                conn.login(self._username, self._password)
            conn.send_message(message)

    async def send(
        self, subject: str, html_body: str, to_address: str, from_address: str
    ) -> bool:
        message = self._build_message(subject, html_body, to_address, from_address)
        try:
            await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"SMTP delivery to {to_address} failed: {exc}")
            return False
        logger.info(f"Mail '{subject}' sent to {to_address}")
        return True
