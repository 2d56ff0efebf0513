import logging
import re
from typing import Any, Dict, Optional

import httpx

from digilima.config import settings
from digilima.schemas.email import OutboundEmail

logger = logging.getLogger(__name__)

# Resend only accepts ASCII letters, numbers, underscores and dashes in tags
_TAG_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")


class EmailDeliveryError(Exception):
    """Raised when the provider does not accept an email."""


def normalize_tag_value(value: str) -> str:
    return _TAG_UNSAFE.sub("_", value) or "_"


def build_resend_payload(email: OutboundEmail) -> Dict[str, Any]:
    """Translate an OutboundEmail into the body of ``POST /emails``."""
    payload: Dict[str, Any] = {
        "from": email.sender,
        "to": list(email.to),
        "subject": email.subject,
        "html": email.html,
        "text": email.text,
        "tags": [
            {"name": normalize_tag_value(tag.name), "value": normalize_tag_value(tag.value)}
            for tag in email.tags
        ],
    }
    if email.reply_to:
        payload["reply_to"] = email.reply_to
    return payload


class ResendEmailClient:
    """Sends transactional email through the Resend REST API using httpx."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.RESEND_API_KEY
        self.api_url = (api_url or settings.RESEND_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.EMAIL_TIMEOUT
        self._transport = transport

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, email: OutboundEmail) -> str:
        """Send one email and return the provider's message id.

        Args:
            email: Rendered email to deliver

        Raises:
            EmailDeliveryError: missing credentials, a non-2xx answer, or a
                response without an id
        """
        if not self.api_key:
            raise EmailDeliveryError("RESEND_API_KEY not configured")

        payload = build_resend_payload(email)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(f"{self.api_url}/emails", json=payload, headers=self._get_headers())

        if not resp.is_success:
            logger.error("Resend rejected email to %s: %s %s", email.to, resp.status_code, resp.text)
            raise EmailDeliveryError(f"Resend API error {resp.status_code}: {resp.text}")

        email_id = resp.json().get("id")
        if not email_id:
            raise EmailDeliveryError("Resend response did not include an email id")

        logger.info("Resend email accepted → %s id=%s", ", ".join(email.to), email_id)
        return email_id


def get_email_provider() -> ResendEmailClient:
    """FastAPI dependency returning the configured email provider."""
    return ResendEmailClient()
