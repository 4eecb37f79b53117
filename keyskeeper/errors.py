"""Errors raised by the enquiry handlers.

Each error carries the HTTP status and the fixed message shown to the
client. Details about the underlying cause go to the server log only.
"""

from __future__ import annotations


class EnquiryError(Exception):
    """Base class for failures surfaced to the client as ``{"error": ...}``."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(detail or self.message)


class ValidationError(EnquiryError):
    """A required form field is missing or empty."""

    status_code = 400
    message = "Missing required fields"


class ConfigurationError(EnquiryError):
    """The email provider credential is not configured."""

    status_code = 500
    message = "Email service not configured"


class DispatchError(EnquiryError):
    """The provider rejected the email or could not be reached."""

    status_code = 500
    message = "Failed to send email"


class InternalError(EnquiryError):
    """Anything unexpected, including a body that fails to parse."""

    status_code = 500
    message = "Internal server error"
