"""
Exceptions raised by the resume pipeline and its collaborators.
"""


class ResumeFixError(Exception):
    """Base exception for pipeline errors."""

    status_code = 500
    public_message = "Resume generation failed. Please try again."

    @property
    def user_message(self) -> str:
        return self.public_message


class InputValidationError(ResumeFixError):
    """Raised when the request is missing resume text or a payment id."""

    status_code = 400

    @property
    def user_message(self) -> str:
        return str(self) or "Invalid request"


class EmptyResumeError(InputValidationError):
    """Raised when the pasted resume text is empty or whitespace."""

    public_message = "Please paste your resume text to proceed."

    @property
    def user_message(self) -> str:
        return self.public_message


class PaymentUnverifiedError(ResumeFixError):
    """Raised when the gateway does not report the payment as captured or authorized."""

    status_code = 400
    public_message = "Payment not verified"


class PaymentNotConfiguredError(ResumeFixError):
    """Raised when Razorpay keys are missing."""

    status_code = 503
    public_message = "Payment system not configured. Please contact support."


class RenderingError(ResumeFixError):
    """Raised when the PDF engine fails. Details are logged, never shown."""


class ArtifactNotFoundError(ResumeFixError):
    """Raised when a stored resume file does not exist."""

    status_code = 404
    public_message = "Not found"
