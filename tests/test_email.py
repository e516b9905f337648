"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import json
import types

import pytest

from hr_notifications.infrastructure import email as email_module


class DummySettings:
    sendgrid_api_key = "SG.fake"
    sendgrid_sender = "sender@example.com"
    email_delivery_timeout_seconds = 7.0


class RecordingClient:
    """Stand-in for ``SendGridAPIClient`` that records sent messages."""

    sent: list = []
    instances: list = []

    def __init__(self, api_key: str):
        self.api_key = api_key
        self.client = types.SimpleNamespace(timeout=None)
        RecordingClient.instances.append(self)

    def send(self, message):
        RecordingClient.sent.append(message)
        return types.SimpleNamespace(status_code=202, body=None)


@pytest.fixture(autouse=True)
def _reset_recording_client():
    RecordingClient.sent = []
    RecordingClient.instances = []
    yield


def test_send_email_without_configuration(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    """When SendGrid settings are missing the helper should exit early."""

    class MissingSettings:
        sendgrid_api_key = None
        sendgrid_sender = None

    monkeypatch.setattr(email_module, "get_settings", lambda: MissingSettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RecordingClient)

    with caplog.at_level("INFO"):
        assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is False

    assert RecordingClient.sent == []
    assert "skipping email delivery" in caplog.text


def test_send_email_success(monkeypatch: pytest.MonkeyPatch) -> None:
    """A successful SendGrid response should return ``True``."""

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RecordingClient)

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is True
    assert len(RecordingClient.sent) == 1
    assert RecordingClient.instances[0].client.timeout == 7.0


def test_send_email_bounds_the_http_request(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RecordingClient)

    assert email_module.send_notification_email(
        "manager@example.com", "Subject", "Body", timeout=0.5
    ) is True
    assert RecordingClient.instances[0].client.timeout == 0.5


def test_sendgrid_client_timeout_reaches_request_builders() -> None:
    client = email_module.SendGridAPIClient("SG.fake")
    client.client.timeout = 1.5

    assert client.client.mail.send.timeout == 1.5


def test_send_email_rejects_non_success_status(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    class RejectingClient(RecordingClient):
        def send(self, message):
            return types.SimpleNamespace(
                status_code=400,
                body=json.dumps({"errors": [{"message": "Invalid recipient"}]}),
            )

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RejectingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email("Subject", "<p>Body</p>", "user@example.com")

    assert result is False
    assert "status 400" in caplog.text
    assert "Invalid recipient" in caplog.text


def test_send_email_logs_forbidden_error(monkeypatch: pytest.MonkeyPatch, caplog):
    """Forbidden responses from SendGrid should surface meaningful log details."""

    class FakeForbiddenError(Exception):
        status_code = 403
        body = json.dumps(
            {
                "errors": [
                    {
                        "message": "The provided authorization grant is invalid.",
                        "help": "https://sendgrid.com/docs/API_Reference/Web_API_v3/How_To_Use_The_Web_API_v3/authentication.html",
                    }
                ]
            }
        ).encode()

    class FailingClient(RecordingClient):
        def send(self, message):
            raise FakeForbiddenError()

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email("Subject", "<p>Body</p>", "user@example.com")

    assert result is False
    assert "status 403" in caplog.text
    assert "authorization grant is invalid" in caplog.text


def test_render_notification_html_escapes_body_and_adds_button() -> None:
    rendered = email_module.render_notification_html(
        "Subject",
        "Line <one>\nLine two",
        "http://localhost:3000/hr/employees/1",
        "View Details",
    )

    assert "Line &lt;one&gt;<br>Line two" in rendered
    assert 'href="http://localhost:3000/hr/employees/1"' in rendered
    assert "View Details</a>" in rendered


def test_render_notification_html_without_action() -> None:
    rendered = email_module.render_notification_html("Subject", "Body")

    assert "<a " not in rendered


def test_render_notification_text_lists_link() -> None:
    rendered = email_module.render_notification_text(
        "Subject", "Body", "http://localhost:3000/x", "Respond Now"
    )

    assert rendered.splitlines()[0] == "Subject"
    assert "Respond Now: http://localhost:3000/x" in rendered
    assert rendered.endswith("Please do not reply to this email.")


def test_send_notification_email_passes_rendered_content(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}

    def fake_send_email(subject, html_content, recipient, *, plain_text_content=None, timeout=None):
        captured.update(
            subject=subject,
            html=html_content,
            recipient=recipient,
            text=plain_text_content,
        )
        return True

    monkeypatch.setattr(email_module, "send_email", fake_send_email)

    assert email_module.send_notification_email(
        "manager@example.com", "Subject", "Body", "http://x/y", "Open"
    ) is True
    assert captured["recipient"] == "manager@example.com"
    assert captured["subject"] == "Subject"
    assert "Open</a>" in captured["html"]
    assert "Open: http://x/y" in captured["text"]
