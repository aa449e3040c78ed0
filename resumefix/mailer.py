"""
E-mail delivery of finished resumes over SMTP.
"""

import logging
import smtplib
from email.message import EmailMessage

from .config import EmailConfig

logger = logging.getLogger(__name__)

SUBJECT = "Your Improved Resume — SmartResumeFix"
BODY = "Thanks for your order. Your improved resume is attached."
ATTACHMENT_NAME = "resume.pdf"


def _mask_email(email: str) -> str:
    """Mask an address for logging, e.g. "***@example.com"."""
    if '@' not in email:
        return "***"
    _, domain = email.rsplit('@', 1)
    return f"***@{domain}"


class EmailDelivery:
    """Sends the generated PDF as an attachment."""

    def __init__(self, config: EmailConfig):
        self.config = config

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def _build_message(self, recipient: str, pdf_bytes: bytes) -> EmailMessage:
        msg = EmailMessage()
        msg['From'] = self.config.sender
        msg['To'] = recipient
        msg['Subject'] = SUBJECT
        msg.set_content(BODY)
        msg.add_attachment(pdf_bytes, maintype='application', subtype='pdf', filename=ATTACHMENT_NAME)
        return msg

    def send(self, recipient: str, pdf_bytes: bytes) -> bool:
        """Send the resume. Failures are logged and reported as False."""
        if not self.is_configured:
            logger.error("Email not configured - SMTP settings not set")
            return False

        try:
            msg = self._build_message(recipient, pdf_bytes)
            with smtplib.SMTP(self.config.smtp_host, self.config.smtp_port) as server:
                server.starttls()
                server.login(self.config.smtp_user, self.config.smtp_pass)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {_mask_email(recipient)}: {e}")
            return False

        logger.info(f"Email sent to {_mask_email(recipient)}")
        return True
