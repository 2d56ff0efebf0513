"""
Contact Submission Service
Validates contact form payloads, renders the notification and auto-reply
emails, and hands both to the email provider.
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional, Protocol

from pydantic import ValidationError

from digilima import messages
from digilima.config import settings
from digilima.schemas.contact import ContactSubmission
from digilima.schemas.email import EmailTag, OutboundEmail
from digilima.services.email_templates import render_auto_reply, render_notification
from digilima.utils.validators import is_blank, is_valid_email

logger = logging.getLogger(__name__)

AUTO_REPLY_SUBJECT = "Thank you for contacting {brand} - We'll be in touch soon!"


class SubmissionRejected(ValueError):
    """A submission the visitor has to correct; maps to HTTP 400."""


class EmailProvider(Protocol):
    async def send(self, email: OutboundEmail) -> str:
        ...


def parse_submission(payload: Any) -> ContactSubmission:
    """Coerce a decoded request body into a ContactSubmission.

    Anything that is not an object, or carries wrongly typed fields, is
    reported the same way as a submission with missing fields.
    """
    if not isinstance(payload, dict):
        raise SubmissionRejected(messages.MISSING_FIELDS)
    try:
        return ContactSubmission.model_validate(payload)
    except ValidationError as exc:
        logger.info(f"Contact payload failed schema validation: {exc.error_count()} error(s)")
        raise SubmissionRejected(messages.MISSING_FIELDS) from exc


def validate_submission(submission: ContactSubmission) -> None:
    """Apply the required-field, honeypot and email checks, in that order."""
    if (
        is_blank(submission.name)
        or is_blank(submission.email)
        or is_blank(submission.message)
        or submission.consent is not True
    ):
        raise SubmissionRejected(messages.MISSING_FIELDS)

    if submission.website:
        logger.warning(f"Honeypot field populated, rejecting submission from {submission.email}")
        raise SubmissionRejected(messages.SUBMISSION_FAILED)

    if not is_valid_email(submission.email):
        raise SubmissionRejected(messages.INVALID_EMAIL)


def notification_subject(submission: ContactSubmission) -> str:
    subject = f"New Contact: {submission.name} - {submission.project_type or 'General Inquiry'}"
    if submission.budget:
        subject += f" ({submission.budget})"
    return subject


def notification_tags(submission: ContactSubmission) -> List[EmailTag]:
    return [
        EmailTag(name="source", value="contact_form"),
        EmailTag(name="budget", value=submission.budget or "not_specified"),
        EmailTag(name="project_type", value=submission.project_type or "general"),
    ]


def build_notification_email(submission: ContactSubmission, submitted_at: datetime) -> OutboundEmail:
    html, text = render_notification(submission, submitted_at)
    return OutboundEmail(
        sender=settings.CONTACT_FROM_EMAIL,
        to=[settings.CONTACT_TO_EMAIL],
        reply_to=submission.email,
        subject=notification_subject(submission),
        html=html,
        text=text,
        tags=notification_tags(submission),
    )


def auto_reply_subject() -> str:
    return AUTO_REPLY_SUBJECT.format(brand=settings.BRAND_NAME)


def build_auto_reply_email(submission: ContactSubmission) -> OutboundEmail:
    html, text = render_auto_reply(submission)
    return OutboundEmail(
        sender=settings.AUTO_REPLY_FROM_EMAIL,
        to=[submission.email],
        subject=auto_reply_subject(),
        html=html,
        text=text,
        tags=[EmailTag(name="type", value="auto_reply")],
    )


async def process_submission(
    payload: Any,
    provider: EmailProvider,
    submitted_at: Optional[datetime] = None,
) -> str:
    """Validate, render and dispatch one contact submission.

    The notification is sent first and the auto-reply second, each awaited
    before the next step. A failing auto-reply propagates even though the
    notification has already been delivered; nothing is rolled back and
    repeated calls are not deduplicated.

    Returns:
        str: provider id of the notification email

    Raises:
        SubmissionRejected: the payload failed validation, nothing was sent
    """
    submission = parse_submission(payload)
    validate_submission(submission)

    notification = build_notification_email(submission, submitted_at or datetime.now(timezone.utc))
    auto_reply = build_auto_reply_email(submission)

    email_id = await provider.send(notification)
    logger.info(f"Contact notification sent for {submission.name} ({submission.email}): {email_id}")

    await provider.send(auto_reply)
    logger.info(f"Auto-reply sent to {submission.email}")

    return email_id
