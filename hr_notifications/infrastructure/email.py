"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import html
import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from hr_notifications.config import get_settings

logger = logging.getLogger(__name__)

_FOOTER = "This is an automated message from the HR system. Please do not reply to this email."


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        # Fall back to a JSON string for unrecognised payloads
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _log_sendgrid_exception(exc: Exception) -> None:
    """Log a SendGrid API error with helpful troubleshooting details."""

    status_code = getattr(exc, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(exc, "body", None))

    if status_code and details:
        logger.error(
            "SendGrid API request failed with status %s: %s", status_code, details
        )
    elif status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid API request failed: %s", details)
    else:
        logger.exception("Error sending email via SendGrid: %s", exc)


def _log_unsuccessful_response(response: Any) -> None:
    """Log details from an unsuccessful SendGrid response object."""

    status_code = getattr(response, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(response, "body", None))

    if details:
        logger.error(
            "SendGrid API responded with status %s: %s", status_code, details
        )
    else:
        logger.error("SendGrid API responded with status %s", status_code)


def send_email(
    subject: str,
    html_content: str,
    recipient: str,
    *,
    plain_text_content: str | None = None,
    timeout: float | None = None,
) -> bool:
    """Send an email using the configured SendGrid credentials.

    ``timeout`` bounds the HTTP request to SendGrid and defaults to
    ``email_delivery_timeout_seconds``.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
        plain_text_content=plain_text_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        # python-http-client hands this to urlopen for every request it builds.
        client.client.timeout = (
            timeout if timeout is not None else settings.email_delivery_timeout_seconds
        )
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_sendgrid_exception(exc)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_unsuccessful_response(response)
        return False

    return True


def render_notification_html(
    subject: str,
    body: str,
    action_url: str | None = None,
    action_button_text: str | None = None,
) -> str:
    """Return the HTML layout shared by every notification email."""

    escaped_body = html.escape(body).replace("\n", "<br>")
    button = ""
    if action_url and action_button_text:
        button = (
            '<div style="text-align: center; margin: 30px 0;">'
            f'<a href="{html.escape(action_url, quote=True)}" '
            'style="background: #667eea; color: white; padding: 15px 30px; '
            'text-decoration: none; border-radius: 5px; display: inline-block;">'
            f"{html.escape(action_button_text)}</a>"
            "</div>"
        )
    return "".join(
        (
            "<!DOCTYPE html><html><head><meta charset=\"utf-8\">",
            f"<title>{html.escape(subject)}</title></head>",
            '<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; '
            'max-width: 600px; margin: 0 auto; padding: 20px;">',
            '<div style="background: #667eea; padding: 30px; text-align: center; '
            'border-radius: 10px 10px 0 0;">',
            '<h1 style="color: white; margin: 0;">HR Notification</h1></div>',
            '<div style="background: #f9f9f9; padding: 30px; border-radius: 0 0 10px 10px;">',
            f"<div>{escaped_body}</div>",
            button,
            '<hr style="border: none; border-top: 1px solid #ddd; margin: 30px 0;">',
            f'<p style="color: #666; font-size: 12px;">{_FOOTER}</p>',
            "</div></body></html>",
        )
    )


def render_notification_text(
    subject: str,
    body: str,
    action_url: str | None = None,
    action_button_text: str | None = None,
) -> str:
    """Return the plain text alternative for a notification email."""

    parts = [subject, "", body]
    if action_url:
        parts.extend(["", f"{action_button_text or 'Click here'}: {action_url}"])
    parts.extend(["", "---", _FOOTER])
    return "\n".join(parts)


def send_notification_email(
    to: str,
    subject: str,
    body: str,
    action_url: str | None = None,
    action_button_text: str | None = None,
    *,
    timeout: float | None = None,
) -> bool:
    """Send an HR notification email with an optional call-to-action button."""

    return send_email(
        subject,
        render_notification_html(subject, body, action_url, action_button_text),
        to,
        plain_text_content=render_notification_text(
            subject, body, action_url, action_button_text
        ),
        timeout=timeout,
    )
