"""
Tests for payment-gated resume generation.
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from resumefix.exceptions import InputValidationError, PaymentUnverifiedError, RenderingError
from resumefix.mailer import EmailDelivery
from resumefix.pipeline import GenerationRequest, ResumePipeline
from tests.mocks import FAKE_PDF, FakePayments, FakePdfRenderer


def _pipeline(settings, store, verified=True, pdf_renderer=None, mailer=None):
    return ResumePipeline(
        settings=settings,
        payments=FakePayments(verified),
        pdf_renderer=pdf_renderer or FakePdfRenderer(),
        store=store,
        mailer=mailer,
    )


class TestGenerate:

    def test_verified_payment_stores_pdf(self, settings, store, sample_resume):
        pdf_renderer = FakePdfRenderer()
        pipeline = _pipeline(settings, store, pdf_renderer=pdf_renderer)

        result = asyncio.run(pipeline.generate(GenerationRequest(
            payment_id="pay_1", resume_text=sample_resume, target_role="Backend Engineer",
        )))

        assert result.download_url == f"https://srfix.example/download/{result.file_name}"
        assert store.path_for(result.file_name).read_bytes() == FAKE_PDF
        assert "<h1>Jane Doe</h1>" in pdf_renderer.rendered[0]
        assert result.emailed is False

    @pytest.mark.parametrize("text", ["Name: Jane Doe\nSkills: Go", "   "])
    def test_unverified_payment_writes_nothing(self, settings, store, text):
        pdf_renderer = FakePdfRenderer()
        pipeline = _pipeline(settings, store, verified=False, pdf_renderer=pdf_renderer)

        with pytest.raises(PaymentUnverifiedError):
            asyncio.run(pipeline.generate(GenerationRequest(payment_id="pay_1", resume_text=text)))

        assert pdf_renderer.rendered == []
        assert list(store.directory.iterdir()) == []

    @pytest.mark.parametrize("payment_id,text", [("", "Name: Jane"), ("pay_1", "")])
    def test_missing_input(self, settings, store, payment_id, text):
        pipeline = _pipeline(settings, store)

        with pytest.raises(InputValidationError) as exc_info:
            asyncio.run(pipeline.generate(GenerationRequest(payment_id=payment_id, resume_text=text)))

        assert exc_info.value.user_message == "Missing payment_id or resume_text"
        assert pipeline.payments.checked == []

    def test_rendering_failure_stores_nothing(self, settings, store, sample_resume):
        pipeline = _pipeline(settings, store, pdf_renderer=FakePdfRenderer(fail=True))

        with pytest.raises(RenderingError):
            asyncio.run(pipeline.generate(GenerationRequest(payment_id="pay_1", resume_text=sample_resume)))

        assert list(store.directory.iterdir()) == []

    def test_email_delivery_is_scheduled(self, settings, store, sample_resume):
        mailer = MagicMock(spec=EmailDelivery)
        mailer.is_configured = True
        scheduled = []
        pipeline = _pipeline(settings, store, mailer=mailer)

        result = asyncio.run(pipeline.generate(
            GenerationRequest(payment_id="pay_1", resume_text=sample_resume, email="jane@x.com"),
            schedule=lambda func, *args: scheduled.append((func, args)),
        ))

        assert result.emailed is True
        assert scheduled == [(mailer.send, ("jane@x.com", FAKE_PDF))]

    def test_no_email_when_mail_not_configured(self, settings, store, sample_resume):
        mailer = MagicMock(spec=EmailDelivery)
        mailer.is_configured = False
        pipeline = _pipeline(settings, store, mailer=mailer)

        result = asyncio.run(pipeline.generate(
            GenerationRequest(payment_id="pay_1", resume_text=sample_resume, email="jane@x.com"),
        ))

        assert result.emailed is False
        mailer.send.assert_not_called()


class TestPreview:

    def test_preview_returns_labeled_text(self, settings, store, sample_resume):
        text = _pipeline(settings, store).preview(sample_resume, "Backend Engineer")

        assert text.startswith("NAME: Jane Doe\nCONTACT: jane@x.com\n")
        assert "SKILLS: Python\n• Go\n• SQL\n" in text

    def test_preview_html(self, settings, store, sample_resume):
        html = _pipeline(settings, store).preview_html(sample_resume, resume_type="Compact")

        assert "<h1>Jane Doe</h1>" in html

    def test_preview_needs_text(self, settings, store):
        with pytest.raises(InputValidationError):
            _pipeline(settings, store).preview("")
