"""Presentation of notification emails on top of the composed message."""

from __future__ import annotations

from datetime import datetime

from hr_notifications.domain.entities import (
    EmailContent,
    EmailDelivery,
    NotificationPriority,
)
from hr_notifications.domain.policies import get_policy, is_known_type

_BANNER_PRIORITIES = (NotificationPriority.HIGH, NotificationPriority.CRITICAL)


def format_deadline(deadline: datetime) -> str:
    """Format ``deadline`` the way emails print dates, e.g. ``October 18, 2026``."""

    return f"{deadline:%B} {deadline.day}, {deadline.year}"


def build_email_content(delivery: EmailDelivery) -> EmailContent:
    """Return the subject, body and button label for ``delivery``."""

    policy = get_policy(delivery.notification_type)
    employee_name = delivery.employee.full_name if delivery.employee else ""

    if is_known_type(delivery.notification_type):
        subject = (
            f"{policy.email_subject_prefix}{policy.title_prefix} - "
            f"{employee_name or policy.email_subject_fallback}"
        )
    else:
        subject = delivery.title

    details: list[str] = []
    if employee_name:
        details.append(f"{policy.email_employee_label}: {employee_name}")
    if delivery.deadline is not None:
        details.append(
            f"{policy.email_deadline_label}: {format_deadline(delivery.deadline)}"
        )

    sections = [delivery.message]
    if details:
        sections.append("\n".join(details))
    if policy.email_closing:
        sections.append(policy.email_closing)
    body = "\n\n".join(sections)

    priority = NotificationPriority.parse(delivery.priority)
    if priority in _BANNER_PRIORITIES:
        body = f"[{priority.value.upper()} PRIORITY]\n\n{body}"

    return EmailContent(
        subject=subject, body=body, action_button_text=policy.button_text
    )


__all__ = ["build_email_content", "format_deadline"]
