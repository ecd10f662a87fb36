"""Notification dispatcher: picks a channel per message and delivers it.

The recipient's preferred channel is tried first when it can reach them,
otherwise the first capable channel in registry order. A failed send is
retried at most once, on a different capable channel. Every send is bounded
by the dispatcher timeout.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import structlog

from accounts.domain import User
from notifications.channels import ChannelRegistry, DeliveryOutcome, NotificationChannel
from notifications.messages import Message

logger = structlog.get_logger(__name__)

MAX_ATTEMPTS = 2


@dataclass(frozen=True)
class DispatchResult:
    delivered: bool
    channel: str | None
    attempts: int
    error: str | None = None


class NotificationDispatcher:
    def __init__(self, registry: ChannelRegistry, timeout: float, max_workers: int = 4) -> None:
        self._registry = registry
        self._timeout = timeout
        self._max_workers = max_workers
        # One pool per channel: sends that overrun the timeout keep their
        # worker, and only that channel's later sends wait behind them.
        self._executors: dict[str, ThreadPoolExecutor] = {}
        self._executors_guard = threading.Lock()

    def select_channels(self, recipient: User) -> list[NotificationChannel]:
        """Return capable channels in the order they should be attempted."""
        capable = [c for c in self._registry.all() if self._can_deliver(c, recipient)]
        preferred = recipient.preferred_channel.value
        capable.sort(key=lambda channel: channel.name != preferred)
        return capable[:MAX_ATTEMPTS]

    def dispatch(self, recipient: User, message: Message) -> DispatchResult:
        """Deliver a message. Never raises for delivery problems."""
        channels = self.select_channels(recipient)
        if not channels:
            logger.warning("notification_no_channel", user_id=str(recipient.id))
            return DispatchResult(False, None, 0, "No channel can reach the recipient")

        error: str | None = None
        for attempt, channel in enumerate(channels, start=1):
            outcome = self._send(channel, recipient, message)
            if outcome.delivered:
                logger.info(
                    "notification_delivered",
                    user_id=str(recipient.id),
                    channel=channel.name,
                    attempts=attempt,
                )
                return DispatchResult(True, channel.name, attempt)
            error = outcome.error
            logger.warning(
                "notification_attempt_failed",
                user_id=str(recipient.id),
                channel=channel.name,
                attempt=attempt,
                error=error,
            )
        return DispatchResult(False, channels[-1].name, len(channels), error)

    def _send(self, channel: NotificationChannel, recipient: User, message: Message) -> DeliveryOutcome:
        future = self._executor_for(channel).submit(channel.send, recipient, message)
        try:
            return future.result(timeout=self._timeout)
        except TimeoutError:
            future.cancel()
            return DeliveryOutcome(False, f"{channel.name} timed out after {self._timeout}s")
        except Exception as exc:
            logger.exception("notification_channel_crashed", channel=channel.name)
            return DeliveryOutcome(False, f"{channel.name} failed: {exc.__class__.__name__}")

    def _can_deliver(self, channel: NotificationChannel, recipient: User) -> bool:
        try:
            return channel.can_deliver(recipient)
        except Exception:
            logger.exception("notification_channel_check_crashed", channel=channel.name)
            return False

    def _executor_for(self, channel: NotificationChannel) -> ThreadPoolExecutor:
        with self._executors_guard:
            executor = self._executors.get(channel.name)
            if executor is None:
                executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix=f"notification-{channel.name}",
                )
                self._executors[channel.name] = executor
            return executor
