"""User-facing messages returned by the contact endpoint."""

from digilima.config import settings

MISSING_FIELDS = "Missing required fields. Please fill in all required information."
SUBMISSION_FAILED = "Form submission failed. Please try again."
INVALID_EMAIL = "Please enter a valid email address."
METHOD_NOT_ALLOWED = "Method not allowed"
SUBMISSION_ACCEPTED = (
    "Thank you! Your message has been sent successfully. "
    "We'll get back to you within 24 hours."
)


def delivery_failed() -> str:
    """Generic 500 text, naming the address visitors can write to directly."""
    return (
        "Sorry, there was an error sending your message. "
        f"Please try again or contact us directly at {settings.SUPPORT_EMAIL}."
    )
