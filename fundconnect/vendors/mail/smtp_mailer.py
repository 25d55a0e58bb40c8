"""
SMTP Mailer

Handles:
    - Plain-text transactional mail (verification links)
    - STARTTLS + login when configured

send() never raises: delivery failures are logged and reported as False.
"""

# Python Packages
import smtplib
import ssl
from email.mime.text import MIMEText

# Constants
from ...base import constants

# Logging
from ...util.logger import get_logger

logger = get_logger("vendors.mail.smtp")

SMTP_TIMEOUT_SECONDS = 20





class SmtpMailer:
    """
    Outgoing mail over SMTP
    """

    def __init__(
        self,
        host: str = None,
        port: int = None,
        user: str = None,
        password: str = None,
        use_tls: bool = None,
        sender: str = None
    ):
        self.host = constants.SMTP_HOST if host is None else host
        self.port = port or constants.SMTP_PORT
        self.user = constants.SMTP_USER if user is None else user
        self.password = constants.SMTP_PASSWORD if password is None else password
        self.use_tls = constants.SMTP_USE_TLS if use_tls is None else use_tls
        self.sender = sender or constants.MAIL_FROM


    @property
    def configured(self) -> bool:
        return bool(self.host)


    # ---------------------------------------------------------
    # 🔹 Send
    # ---------------------------------------------------------
    def send(self, to: str, subject: str, body: str) -> bool:
        """
        Send one plain-text email

        Returns:
            bool: True when the server accepted the message
        """

        if not self.configured:
            logger.warning("SMTP_HOST is not set, email to %s not sent", to)
            return False

        message = MIMEText(body, "plain", "utf-8")
        message["Subject"] = subject
        message["From"] = self.sender
        message["To"] = to

        try:
            with smtplib.SMTP(self.host, self.port, timeout = SMTP_TIMEOUT_SECONDS) as server:
                if self.use_tls:
                    server.starttls(context = ssl.create_default_context())

                if self.user and self.password:
                    server.login(self.user, self.password)

                refused = server.sendmail(self.sender, [to], message.as_string())

        except (smtplib.SMTPException, OSError):
            logger.exception("Failed to send email to %s via %s:%s", to, self.host, self.port)
            return False

        if refused:
            logger.warning("SMTP server refused %s: %r", to, refused)
            return False

        logger.info("Email sent to %s: %s", to, subject)
        return True
