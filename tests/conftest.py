"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile

import pytest

# web.app builds a module-level app on import; keep its storage out of the repo.
os.environ.setdefault("RESUME_STORAGE_DIR", tempfile.mkdtemp(prefix="srfix-test-"))

from resumefix.config import EmailConfig, RazorpayConfig, Settings  # noqa: E402
from resumefix.storage import ArtifactStore  # noqa: E402
from tests.mocks import SAMPLE_RESUME, FakePdfRenderer  # noqa: E402


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def settings(tmp_path):
    return Settings(
        razorpay=RazorpayConfig(key_id="rzp_test_key", key_secret="secret"),
        email=EmailConfig(),
        host_url="https://srfix.example/",
        storage_dir=str(tmp_path / "resumes"),
    )


@pytest.fixture
def store(settings):
    return ArtifactStore(settings.storage_dir)


@pytest.fixture
def pdf_renderer():
    return FakePdfRenderer()
