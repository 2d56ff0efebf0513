import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from digilima.config import settings

logger = logging.getLogger(__name__)

CONTACT_ENDPOINT = "/api/contact"


@dataclass
class ContactResponse:
    status_code: int
    body: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ContactClient:
    """Posts contact submissions to the site's contact endpoint.

    One request per call, no retry. Transport failures surface as
    ``httpx.HTTPError``; a body that is not JSON raises ``ValueError``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        endpoint: str = CONTACT_ENDPOINT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url or settings.SITE_URL
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    async def submit(self, payload: Dict[str, Any]) -> ContactResponse:
        async with httpx.AsyncClient(base_url=self.base_url, transport=self._transport, timeout=self.timeout) as client:
            resp = await client.post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        body = resp.json()
        logger.debug(f"Contact endpoint answered {resp.status_code}")
        return ContactResponse(status_code=resp.status_code, body=body if isinstance(body, dict) else {})
