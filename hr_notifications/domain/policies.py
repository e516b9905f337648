"""Per-type notification policies.

Every notification type is described by one :class:`NotificationPolicy`
record: its default priority, how far in the future its deadline lies, the
title and message templates, the action link and the wording used when the
notification is emailed. Adding a type means adding one entry to
``NOTIFICATION_POLICIES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from hr_notifications.domain.entities.notification import (
    NotificationPriority,
    NotificationType,
)


@dataclass(frozen=True)
class NotificationPolicy:
    priority: NotificationPriority
    deadline_offset: timedelta
    title_prefix: str
    message_template: str
    action_path: str
    button_text: str
    email_employee_label: str
    email_deadline_label: str
    email_closing: str | None = None
    email_subject_prefix: str = ""
    email_subject_fallback: str = "Action Required"

    def render_title(self, employee_name: str) -> str:
        return f"{self.title_prefix} - {employee_name}"

    def render_message(self, employee_name: str, department: str) -> str:
        return self.message_template.format(name=employee_name, department=department)

    def render_action_url(self, employee_id: str | None) -> str:
        return self.action_path.format(employee_id=employee_id or "")


NOTIFICATION_POLICIES: dict[NotificationType, NotificationPolicy] = {
    NotificationType.PERFORMANCE_PLAN: NotificationPolicy(
        priority=NotificationPriority.NORMAL,
        deadline_offset=timedelta(days=7),
        title_prefix="Performance Plan Required",
        message_template=(
            "A performance improvement plan needs to be created for {name} in "
            "{department}. Please review and take action."
        ),
        action_path="/hr/performance/plans/{employee_id}",
        button_text="View Performance Plan",
        email_employee_label="Employee",
        email_deadline_label="Deadline",
        email_closing="Please review and create the performance plan as soon as possible.",
    ),
    NotificationType.APPRAISAL: NotificationPolicy(
        priority=NotificationPriority.NORMAL,
        deadline_offset=timedelta(days=14),
        title_prefix="Performance Appraisal Due",
        message_template=(
            "Performance appraisal is due for {name} in {department}. "
            "Please complete the evaluation process."
        ),
        action_path="/hr/performance/appraisals/{employee_id}",
        button_text="Complete Appraisal",
        email_employee_label="Employee",
        email_deadline_label="Due Date",
        email_closing="Please complete the performance appraisal evaluation process.",
    ),
    NotificationType.TRAINING: NotificationPolicy(
        priority=NotificationPriority.LOW,
        deadline_offset=timedelta(days=30),
        title_prefix="Training Assignment",
        message_template=(
            "Training assignment required for {name} in {department}. "
            "Please assign appropriate training modules."
        ),
        action_path="/hr/training/assignments/{employee_id}",
        button_text="View Training",
        email_employee_label="Employee",
        email_deadline_label="Training Deadline",
        email_closing="Please assign appropriate training modules.",
    ),
    NotificationType.DEADLINE: NotificationPolicy(
        priority=NotificationPriority.HIGH,
        deadline_offset=timedelta(days=1),
        title_prefix="Deadline Reminder",
        message_template=(
            "Important deadline approaching for {name} in {department}. "
            "Please ensure completion on time."
        ),
        action_path="/hr/employees/{employee_id}",
        button_text="View Details",
        email_employee_label="Related to",
        email_deadline_label="⚠️ Deadline",
        email_closing="Please ensure completion on time.",
    ),
    NotificationType.ESCALATION: NotificationPolicy(
        priority=NotificationPriority.CRITICAL,
        deadline_offset=timedelta(hours=2),
        title_prefix="Escalation Required",
        message_template=(
            "Issue escalation for {name} in {department}. "
            "Immediate supervisor attention required."
        ),
        action_path="/hr/employees/{employee_id}",
        button_text="Respond Now",
        email_employee_label="Employee",
        email_deadline_label="Response Required By",
        email_closing="Immediate supervisor attention required.",
        email_subject_prefix="\U0001f6a8 ",
        email_subject_fallback="Urgent",
    ),
    NotificationType.APPROVAL: NotificationPolicy(
        priority=NotificationPriority.HIGH,
        deadline_offset=timedelta(days=3),
        title_prefix="Approval Required",
        message_template=(
            "Approval required for {name} in {department}. "
            "Please review and approve/reject."
        ),
        action_path="/hr/approvals/{employee_id}",
        button_text="Review & Approve",
        email_employee_label="Employee",
        email_deadline_label="Approval Deadline",
        email_closing="Please review and approve/reject as appropriate.",
    ),
}

DEFAULT_POLICY = NotificationPolicy(
    priority=NotificationPriority.NORMAL,
    deadline_offset=timedelta(days=7),
    title_prefix="HR Notification",
    message_template="HR action required for {name} in {department}.",
    action_path="/hr/employees/{employee_id}",
    button_text="View Notification",
    email_employee_label="Related Employee",
    email_deadline_label="Deadline",
)


def get_policy(notification_type: str | NotificationType | None) -> NotificationPolicy:
    """Return the policy for ``notification_type`` or the generic fallback."""

    if isinstance(notification_type, NotificationType):
        member: NotificationType | None = notification_type
    else:
        member = NotificationType.parse(notification_type)
    if member is None:
        return DEFAULT_POLICY
    return NOTIFICATION_POLICIES.get(member, DEFAULT_POLICY)


def is_known_type(notification_type: str | None) -> bool:
    return NotificationType.parse(notification_type) is not None


__all__ = [
    "DEFAULT_POLICY",
    "NOTIFICATION_POLICIES",
    "NotificationPolicy",
    "get_policy",
    "is_known_type",
]
