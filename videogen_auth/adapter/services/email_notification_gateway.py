"""Email delivery for verification codes and account notices."""

import asyncio
import html
import logging
import smtplib
from abc import abstractmethod
from email.message import EmailMessage
from typing import Optional

from videogen_auth.app.services.notification_gateway import INotificationGateway

logger = logging.getLogger(__name__)


class EmailTemplates:
    """Subject, plain text and HTML bodies for each notice."""

    def __init__(self, app_name: str, app_url: str, code_ttl_minutes: int = 10):
        self.app_name = app_name
        self.app_url = app_url
        self.code_ttl_minutes = code_ttl_minutes

    def verification_code(self, name: str, code: str):
        subject = f"Your {self.app_name} Verification Code: {code}"
        text = (
            f"Hi {name},\n\n"
            f"Thank you for signing up for {self.app_name}. "
            f"Your verification code is: {code}\n\n"
            f"This code will expire in {self.code_ttl_minutes} minutes.\n\n"
            "If you didn't request this verification, please ignore this email.\n"
        )
        return subject, text, self._html("Email Verification Required", text, code)

    def password_reset_code(self, name: str, code: str):
        subject = f"Your {self.app_name} Password Reset Code: {code}"
        text = (
            f"Hi {name},\n\n"
            f"We received a request to reset your {self.app_name} password. "
            f"Your password reset code is: {code}\n\n"
            f"This code will expire in {self.code_ttl_minutes} minutes.\n\n"
            "If you didn't request this password reset, please ignore this email. "
            "Your password will remain unchanged.\n"
        )
        return subject, text, self._html("Password Reset Request", text, code)

    def welcome(self, name: str):
        subject = f"Welcome to {self.app_name}!"
        text = (
            f"Hi {name},\n\n"
            "Your email has been verified and your account is now active.\n\n"
            f"Get started: {self.app_url}/dashboard\n"
        )
        return subject, text, self._html(f"Welcome to {self.app_name}!", text)

    def password_changed(self, name: str):
        subject = f"Your {self.app_name} password was changed"
        text = (
            f"Hi {name},\n\n"
            f"The password for your {self.app_name} account was just changed.\n\n"
            "If this wasn't you, reset your password immediately.\n"
        )
        return subject, text, self._html("Password Changed", text)

    def _html(self, heading: str, text: str, code: Optional[str] = None) -> str:
        paragraphs = "".join(
            f"<p>{html.escape(block).replace(chr(10), '<br>')}</p>"
            for block in text.split("\n\n")
            if block
        )
        code_block = (
            '<div style="font-size:32px;font-weight:bold;letter-spacing:8px;">'
            f"{html.escape(code)}</div>"
            if code
            else ""
        )
        return (
            '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
            f"<h1>{html.escape(self.app_name)}</h1><h2>{html.escape(heading)}</h2>"
            f"{paragraphs}{code_block}</div>"
        )


class _TemplatedGateway(INotificationGateway):
    def __init__(self, templates: EmailTemplates):
        self.templates = templates

    async def send_verification_code(self, email: str, name: str, code: str) -> bool:
        return await self._send(email, *self.templates.verification_code(name, code))

    async def send_password_reset_code(self, email: str, name: str, code: str) -> bool:
        return await self._send(email, *self.templates.password_reset_code(name, code))

    async def send_welcome(self, email: str, name: str) -> bool:
        return await self._send(email, *self.templates.welcome(name))

    async def send_password_changed(self, email: str, name: str) -> bool:
        return await self._send(email, *self.templates.password_changed(name))

    @abstractmethod
    async def _send(self, to_email: str, subject: str, text: str, html_body: str) -> bool:
        pass


class SmtpNotificationGateway(_TemplatedGateway):
    """Sends multipart emails over SMTP; blocking I/O runs in a worker thread."""

    def __init__(
        self,
        templates: EmailTemplates,
        host: str,
        port: int,
        from_email: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
    ):
        super().__init__(templates)
        self.host = host
        self.port = port
        self.from_email = from_email
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    async def _send(self, to_email: str, subject: str, text: str, html_body: str) -> bool:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = f"{self.templates.app_name} <{self.from_email}>"
        message["To"] = to_email
        message.set_content(text)
        message.add_alternative(html_body, subtype="html")

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"Failed to send email '{subject}' to {to_email}: {exc}")
            return False
        return True

    def _deliver(self, message: EmailMessage) -> None:
        if self.port == 465:
            server = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        with server:
            if self.use_tls and self.port != 465:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(message)


class LoggingNotificationGateway(_TemplatedGateway):
    """Development fallback when SMTP is not configured: logs instead of sending."""

    async def _send(self, to_email: str, subject: str, text: str, html_body: str) -> bool:
        logger.info(f"[EMAIL] {subject} -> {to_email}")
        return True
