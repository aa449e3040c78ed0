"""
Configuration for the SmartResumeFix service.

Settings are read from the environment (and a local .env file) once at
startup and passed to the collaborators that need them.
"""

import os
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class RazorpayConfig(BaseModel):
    """Payment gateway credentials."""
    key_id: Optional[str] = None
    key_secret: Optional[str] = None
    webhook_secret: Optional[str] = None
    base_url: str = Field(default="https://api.razorpay.com/v1")
    currency: str = Field(default="INR")
    default_amount_in_paise: int = Field(default=4900)

    @property
    def is_configured(self) -> bool:
        return bool(self.key_id and self.key_secret)


class EmailConfig(BaseModel):
    """SMTP settings for optional delivery of the finished resume."""
    smtp_host: Optional[str] = None
    smtp_port: int = Field(default=587)
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    from_address: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.smtp_host and self.smtp_user and self.smtp_pass)

    @property
    def sender(self) -> str:
        return self.from_address or self.smtp_user or ""


class Settings(BaseModel):
    """Main application configuration."""
    razorpay: RazorpayConfig = Field(default_factory=RazorpayConfig)
    email: EmailConfig = Field(default_factory=EmailConfig)
    host_url: str = Field(default="http://localhost:4000")
    storage_dir: str = Field(default="resumes")
    port: int = Field(default=4000)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    def download_url(self, file_name: str) -> str:
        return f"{self.host_url.rstrip('/')}/download/{file_name}"


def _env(environ: Dict[str, str], key: str) -> Optional[str]:
    value = environ.get(key)
    return value if value else None


def load_settings(environ: Optional[Dict[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ after loading .env.

    Returns:
        Settings: The application configuration.
    """
    if environ is None:
        load_dotenv()
        environ = dict(os.environ)

    razorpay = RazorpayConfig(
        key_id=_env(environ, 'RAZORPAY_KEY_ID'),
        key_secret=_env(environ, 'RAZORPAY_KEY_SECRET'),
        webhook_secret=_env(environ, 'RAZORPAY_WEBHOOK_SECRET'),
    )

    email = EmailConfig(
        smtp_host=_env(environ, 'EMAIL_SMTP_HOST'),
        smtp_port=int(_env(environ, 'EMAIL_SMTP_PORT') or 587),
        smtp_user=_env(environ, 'EMAIL_SMTP_USER'),
        smtp_pass=_env(environ, 'EMAIL_SMTP_PASS'),
        from_address=_env(environ, 'DELIVERY_EMAIL_FROM'),
    )

    overrides = {}
    if _env(environ, 'HOST_URL'):
        overrides['host_url'] = environ['HOST_URL']
    if _env(environ, 'RESUME_STORAGE_DIR'):
        overrides['storage_dir'] = environ['RESUME_STORAGE_DIR']
    if _env(environ, 'PORT'):
        overrides['port'] = int(environ['PORT'])
    if _env(environ, 'CORS_ORIGINS'):
        origins = [o.strip() for o in environ['CORS_ORIGINS'].split(',') if o.strip()]
        if origins:
            overrides['cors_origins'] = origins

    return Settings(razorpay=razorpay, email=email, **overrides)
