"""Fire-and-forget delivery of notification emails."""

from __future__ import annotations

import asyncio
import logging
import threading
from functools import partial
from typing import Callable, Set

import anyio
from anyio import from_thread, to_thread

from hr_notifications.config import get_settings
from hr_notifications.domain.entities import EmailDelivery
from hr_notifications.infrastructure.email import send_notification_email

from .email_content import build_email_content

logger = logging.getLogger(__name__)

# Called as send(to, subject, body, action_url, action_button_text, timeout=...).
EmailSender = Callable[..., bool]


class DeliveryDispatcher:
    """Schedule notification emails without making the caller wait.

    :meth:`dispatch` never blocks on the email transport and never raises.
    The actual attempt happens in :meth:`deliver`, which runs the transport in
    a worker thread and logs, then discards, any failure. The transport gets
    the timeout so its own request ends and releases the thread;
    ``anyio.fail_after`` only bounds how long the task waits for it.
    """

    def __init__(
        self,
        send: EmailSender | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self._send = send or send_notification_email
        self._timeout = timeout
        self._tasks: Set[asyncio.Task] = set()

    @property
    def timeout(self) -> float:
        if self._timeout is not None:
            return self._timeout
        return get_settings().email_delivery_timeout_seconds

    def dispatch(self, delivery: EmailDelivery) -> None:
        """Schedule ``delivery`` on whatever concurrency primitive is available."""

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._dispatch_from_thread(delivery)
        else:
            self._spawn(loop, delivery)

    async def deliver(self, delivery: EmailDelivery) -> bool:
        """Attempt to send ``delivery`` once; return whether the transport accepted it."""

        timeout = self.timeout
        try:
            content = build_email_content(delivery)
            send = partial(
                self._send,
                delivery.to_email,
                content.subject,
                content.body,
                delivery.action_url,
                content.action_button_text,
                timeout=timeout,
            )
            with anyio.fail_after(timeout):
                sent = await to_thread.run_sync(send, abandon_on_cancel=True)
        except TimeoutError:
            logger.warning(
                "Notification email %s to %s timed out after %.1fs",
                delivery.notification_id,
                delivery.to_email,
                timeout,
            )
            return False
        except Exception:
            logger.exception(
                "Failed to send notification email %s to %s",
                delivery.notification_id,
                delivery.to_email,
            )
            return False

        if not sent:
            logger.warning(
                "Email transport did not accept notification %s for %s",
                delivery.notification_id,
                delivery.to_email,
            )
            return False

        logger.info(
            "Notification email %s sent to %s", delivery.notification_id, delivery.to_email
        )
        return True

    def _dispatch_from_thread(self, delivery: EmailDelivery) -> None:
        try:
            # Worker threads started by AnyIO (e.g. sync FastAPI endpoints) can
            # hand the task over to the event loop that owns them.
            from_thread.run_sync(self._spawn_on_running_loop, delivery)
        except RuntimeError:
            worker = threading.Thread(
                target=anyio.run,
                args=(self.deliver, delivery),
                name=f"notification-email-{delivery.notification_id}",
                daemon=True,
            )
            worker.start()

    def _spawn_on_running_loop(self, delivery: EmailDelivery) -> None:
        self._spawn(asyncio.get_running_loop(), delivery)

    def _spawn(self, loop: asyncio.AbstractEventLoop, delivery: EmailDelivery) -> None:
        task = loop.create_task(self.deliver(delivery))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)


delivery_dispatcher = DeliveryDispatcher()


def get_delivery_dispatcher() -> DeliveryDispatcher:
    return delivery_dispatcher


__all__ = [
    "DeliveryDispatcher",
    "EmailSender",
    "delivery_dispatcher",
    "get_delivery_dispatcher",
]
