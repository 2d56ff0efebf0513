"""
Email document rendering
Builds the HTML and plain-text bodies of the contact notification and the
auto-reply from Jinja2 templates shipped in ``digilima/templates/email``.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from zoneinfo import ZoneInfo

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from digilima.config import settings
from digilima.schemas.contact import ContactSubmission

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def priority_class(budget: Optional[str]) -> str:
    """Visual marker for the budget row; presentation only."""
    if not budget:
        return ""
    if "10000+" in budget:
        return "priority-high"
    if "5000" in budget:
        return "priority-medium"
    return ""


def format_submitted_at(moment: datetime, timezone: Optional[str] = None) -> str:
    local = moment.astimezone(ZoneInfo(timezone or settings.BUSINESS_TIMEZONE))
    return local.strftime("%d %B %Y, %H:%M").lstrip("0")


def _brand_context() -> Dict[str, Any]:
    return {
        "brand_name": settings.BRAND_NAME,
        "support_email": settings.SUPPORT_EMAIL,
        "support_phone": settings.SUPPORT_PHONE,
        "support_phone_href": "".join(ch for ch in settings.SUPPORT_PHONE if ch == "+" or ch.isdigit()),
        "site_url": settings.SITE_URL.rstrip("/"),
        "site_host": settings.SITE_URL.split("://", 1)[-1].rstrip("/"),
        "location": settings.BUSINESS_LOCATION,
    }


def _submission_context(submission: ContactSubmission) -> Dict[str, Any]:
    # empty optional strings are treated as absent so the template drops them
    return {
        "name": submission.name,
        "email": submission.email,
        "phone": submission.phone or None,
        "company": submission.company or None,
        "budget": submission.budget or None,
        "project_type": submission.project_type or None,
        "message": submission.message,
    }


def _render_pair(template: str, context: Dict[str, Any]) -> Tuple[str, str]:
    html = _env.get_template(f"{template}.html").render(**context)
    text = _env.get_template(f"{template}.txt").render(**context)
    return html, text


def render_notification(submission: ContactSubmission, submitted_at: datetime) -> Tuple[str, str]:
    """Render the (html, text) pair sent to the business inbox."""
    context = {
        **_brand_context(),
        **_submission_context(submission),
        "submitted_at": format_submitted_at(submitted_at),
        "priority_class": priority_class(submission.budget),
    }
    return _render_pair("notification", context)


def render_auto_reply(submission: ContactSubmission) -> Tuple[str, str]:
    """Render the (html, text) pair sent back to the submitter."""
    context = {**_brand_context(), **_submission_context(submission)}
    return _render_pair("auto_reply", context)
