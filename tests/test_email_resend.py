from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from digilima.schemas.email import EmailTag, OutboundEmail
from digilima.utils.email_resend import (
    EmailDeliveryError,
    ResendEmailClient,
    build_resend_payload,
    normalize_tag_value,
)


def _email(**overrides) -> OutboundEmail:
    data = dict(
        sender="DigiLima Contact Form <noreply@digilima.com>",
        to=["hello@digilima.com"],
        reply_to="jane@x.com",
        subject="New Contact: Jane - General Inquiry",
        html="<p>Hi</p>",
        text="Hi",
        tags=[EmailTag(name="budget", value="€5000-10000")],
    )
    data.update(overrides)
    return OutboundEmail(**data)


def test_normalize_tag_value_replaces_unsupported_characters() -> None:
    assert normalize_tag_value("€5000-10000") == "_5000-10000"
    assert normalize_tag_value("Web App") == "Web_App"
    assert normalize_tag_value("contact_form") == "contact_form"


def test_payload_omits_reply_to_when_absent() -> None:
    payload = build_resend_payload(_email(reply_to=None))

    assert "reply_to" not in payload
    assert payload["from"] == "DigiLima Contact Form <noreply@digilima.com>"


def test_send_posts_to_resend_and_returns_id() -> None:
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["auth"] = request.headers["Authorization"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "re_123"})

    client = ResendEmailClient(api_key="re_test", api_url="https://api.resend.test", transport=httpx.MockTransport(handler))

    email_id = asyncio.run(client.send(_email()))

    assert email_id == "re_123"
    assert captured["url"] == "https://api.resend.test/emails"
    assert captured["auth"] == "Bearer re_test"
    body = captured["body"]
    assert body["to"] == ["hello@digilima.com"]
    assert body["reply_to"] == "jane@x.com"
    assert body["subject"] == "New Contact: Jane - General Inquiry"
    assert body["html"] == "<p>Hi</p>"
    assert body["text"] == "Hi"
    assert body["tags"] == [{"name": "budget", "value": "_5000-10000"}]


def test_send_raises_on_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "Invalid `to` field"})

    client = ResendEmailClient(api_key="re_test", transport=httpx.MockTransport(handler))

    with pytest.raises(EmailDeliveryError) as excinfo:
        asyncio.run(client.send(_email()))

    assert "422" in str(excinfo.value)


def test_send_raises_when_response_has_no_id() -> None:
    client = ResendEmailClient(
        api_key="re_test",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
    )

    with pytest.raises(EmailDeliveryError):
        asyncio.run(client.send(_email()))


def test_send_without_api_key_fails_before_any_request() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"id": "re_123"})

    client = ResendEmailClient(api_key="", transport=httpx.MockTransport(handler))

    with pytest.raises(EmailDeliveryError) as excinfo:
        asyncio.run(client.send(_email()))

    assert "RESEND_API_KEY" in str(excinfo.value)
    assert calls == []


def test_transport_errors_propagate() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = ResendEmailClient(api_key="re_test", transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.ConnectError):
        asyncio.run(client.send(_email()))
