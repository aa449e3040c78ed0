"""
Payment-gated resume generation.
Verifies the payment, extracts fields, renders HTML and PDF, stores the file
and optionally e-mails it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config import Settings
from .exceptions import InputValidationError, PaymentUnverifiedError
from .extractor import ResumeFieldExtractor
from .mailer import EmailDelivery
from .payments import RazorpayClient
from .pdf import HtmlPdfRenderer
from .renderer import DEFAULT_RESUME_TYPE, render_labeled_text, to_markup
from .storage import ArtifactStore

logger = logging.getLogger(__name__)

Scheduler = Callable[..., Any]


@dataclass
class GenerationRequest:
    """A paid request to rebuild a resume."""
    payment_id: str
    resume_text: str
    target_role: str = ""
    resume_type: str = DEFAULT_RESUME_TYPE
    email: Optional[str] = None
    order_id: Optional[str] = None
    name: Optional[str] = None


@dataclass
class GenerationResult:
    """Where the generated resume can be downloaded."""
    file_name: str
    download_url: str
    emailed: bool = False


def _run_now(func: Callable, *args) -> Any:
    return func(*args)


class ResumePipeline:
    """Runs one resume through extraction, rendering and storage."""

    def __init__(self, settings: Settings, payments: RazorpayClient, pdf_renderer: HtmlPdfRenderer,
                 store: ArtifactStore, mailer: Optional[EmailDelivery] = None):
        self.settings = settings
        self.payments = payments
        self.pdf_renderer = pdf_renderer
        self.store = store
        self.mailer = mailer
        self.extractor = ResumeFieldExtractor()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResumePipeline":
        return cls(
            settings=settings,
            payments=RazorpayClient(settings.razorpay),
            pdf_renderer=HtmlPdfRenderer(),
            store=ArtifactStore(settings.storage_dir),
            mailer=EmailDelivery(settings.email),
        )

    def preview(self, resume_text: str, target_role: str = "") -> str:
        """Labeled text for a resume, without payment."""
        if not resume_text:
            raise InputValidationError("Missing resume_text")
        return render_labeled_text(self.extractor.extract(resume_text, target_role))

    def preview_html(self, resume_text: str, target_role: str = "",
                     resume_type: str = DEFAULT_RESUME_TYPE) -> str:
        """HTML page for a resume, without payment."""
        if not resume_text:
            raise InputValidationError("Missing resume_text")
        return to_markup(self.extractor.extract(resume_text, target_role), resume_type)

    async def generate(self, request: GenerationRequest,
                       schedule: Scheduler = _run_now) -> GenerationResult:
        """
        Generate and store the PDF for a paid request.

        Args:
            request: Payment id, resume text and delivery details.
            schedule: Called as schedule(func, *args) to run the e-mail
                delivery, e.g. BackgroundTasks.add_task. Runs inline by default.

        Returns:
            GenerationResult with the stored file name and download URL.
        """
        if not request.payment_id or not request.resume_text:
            raise InputValidationError("Missing payment_id or resume_text")

        if not await self.payments.is_verified(request.payment_id):
            raise PaymentUnverifiedError(request.payment_id)

        fields = self.extractor.extract(request.resume_text, request.target_role)
        html = to_markup(fields, request.resume_type)
        pdf_bytes = await self.pdf_renderer.render(html)

        file_name = self.store.save(pdf_bytes)
        result = GenerationResult(
            file_name=file_name,
            download_url=self.settings.download_url(file_name),
        )

        if request.email and self.mailer is not None and self.mailer.is_configured:
            schedule(self.mailer.send, request.email, pdf_bytes)
            result.emailed = True

        logger.info(f"Generated resume {file_name} for payment {request.payment_id}")
        return result
