"""
Test doubles for the payment gateway and the PDF engine.
"""

from resumefix.exceptions import RenderingError

SAMPLE_RESUME = (
    "Name: Jane Doe\n"
    "Email: jane@x.com\n"
    "Skills: Python, Go, SQL\n"
    "Experience\n"
    "Engineer at Acme\n"
    "Built systems\n"
    "Education\n"
    "BSc CS"
)

FAKE_PDF = b"%PDF-1.4 fake"


class FakePayments:
    """Stands in for RazorpayClient in pipeline tests."""

    def __init__(self, verified: bool = True):
        self.verified = verified
        self.checked = []

    async def is_verified(self, payment_id: str) -> bool:
        self.checked.append(payment_id)
        return self.verified


class FakePdfRenderer:
    """Records the HTML it was given and returns fixed bytes."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.rendered = []

    async def render(self, html: str) -> bytes:
        self.rendered.append(html)
        if self.fail:
            raise RenderingError("chromium crashed")
        return FAKE_PDF
