import logging

import aiosmtplib

from contact_api.core.config import Settings
from contact_api.core.errors import NotificationError
from contact_api.core.notification import to_email_message
from contact_api.models.contact import NotificationEmail

logger = logging.getLogger(__name__)


class SmtpMailNotifier:
    """Sends notification emails through an authenticated SMTP relay.

    Every send opens its own connection, so one instance is shared across
    concurrent requests.
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        username: str,
        password: str,
        use_tls: bool = True,
        validate_certs: bool = True,
    ):
        self.hostname = hostname
        self.port = port
        self.username = username
        self.password = password
        self.validate_certs = validate_certs
        # Port 465 speaks TLS from the first byte, everything else upgrades with STARTTLS
        self.use_tls_direct = use_tls and port == 465
        self.start_tls = use_tls and not self.use_tls_direct

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpMailNotifier":
        return cls(
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.mailbox,
            password=settings.email_pass,
            use_tls=settings.smtp_use_tls,
            validate_certs=settings.smtp_validate_certs,
        )

    async def send(self, email: NotificationEmail) -> None:
        logger.info(
            f"Sending email '{email.subject}' from {email.from_address} to {email.to} "
            f"(reply-to {email.reply_to})"
        )
        try:
            message = to_email_message(email)
            await aiosmtplib.send(
                message,
                hostname=self.hostname,
                port=self.port,
                username=self.username,
                password=self.password,
                use_tls=self.use_tls_direct,
                start_tls=self.start_tls,
                validate_certs=self.validate_certs,
            )
        except aiosmtplib.SMTPException as e:
            # Reply errors carry (code, message) in args; report the server text
            raise NotificationError(e.message) from e
        except (OSError, ValueError) as e:
            raise NotificationError(str(e)) from e
        logger.info(f"Email sent successfully to: {email.to}")

    async def verify(self) -> bool:
        """Check that the relay accepts a connection and our credentials."""
        smtp = aiosmtplib.SMTP(
            hostname=self.hostname,
            port=self.port,
            use_tls=self.use_tls_direct,
            start_tls=self.start_tls,
            validate_certs=self.validate_certs,
        )
        try:
            async with smtp:
                await smtp.login(self.username, self.password)
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(f"Email transporter error: {e}")
            return False
        logger.info("Email transporter ready")
        return True
