"""
Tests for settings loading.
"""

from resumefix.config import EmailConfig, Settings, load_settings


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings({})

        assert settings.host_url == "http://localhost:4000"
        assert settings.storage_dir == "resumes"
        assert settings.port == 4000
        assert settings.razorpay.is_configured is False
        assert settings.email.is_configured is False
        assert settings.email.smtp_port == 587
        assert settings.razorpay.default_amount_in_paise == 4900
        assert settings.cors_origins == ["*"]

    def test_environment_values(self):
        settings = load_settings({
            "RAZORPAY_KEY_ID": "rzp_live_x",
            "RAZORPAY_KEY_SECRET": "s3cret",
            "RAZORPAY_WEBHOOK_SECRET": "whsec",
            "HOST_URL": "https://resumes.example.com/",
            "EMAIL_SMTP_HOST": "smtp.example.com",
            "EMAIL_SMTP_PORT": "2525",
            "EMAIL_SMTP_USER": "mailer@example.com",
            "EMAIL_SMTP_PASS": "pw",
            "RESUME_STORAGE_DIR": "/var/resumes",
            "PORT": "8080",
        })

        assert settings.razorpay.is_configured is True
        assert settings.razorpay.webhook_secret == "whsec"
        assert settings.email.is_configured is True
        assert settings.email.smtp_port == 2525
        assert settings.email.sender == "mailer@example.com"
        assert settings.storage_dir == "/var/resumes"
        assert settings.port == 8080

    def test_blank_values_count_as_missing(self):
        settings = load_settings({"RAZORPAY_KEY_ID": "", "RAZORPAY_KEY_SECRET": "x", "HOST_URL": ""})

        assert settings.razorpay.is_configured is False
        assert settings.host_url == "http://localhost:4000"

    def test_download_url_strips_trailing_slash(self):
        settings = Settings(host_url="https://resumes.example.com/")

        assert settings.download_url("a.pdf") == "https://resumes.example.com/download/a.pdf"

    def test_sender_prefers_delivery_address(self):
        config = EmailConfig(smtp_user="user@example.com", from_address="orders@example.com")

        assert config.sender == "orders@example.com"

    def test_cors_origins_are_comma_separated(self):
        settings = load_settings({"CORS_ORIGINS": "https://a.example, https://b.example,"})

        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_cors_origins_without_entries_keep_default(self):
        assert load_settings({"CORS_ORIGINS": " , "}).cors_origins == ["*"]
