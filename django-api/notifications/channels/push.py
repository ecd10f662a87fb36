"""Push notification channel.

Messages are handed to an HTTP push gateway that fans out to devices:

    POST {PUSH_GATEWAY_URL}
    {"token": "...", "title": "...", "body": "..."}
"""

import httpx
import structlog
from django.conf import settings

from accounts.domain import ContactChannel, User
from notifications.channels.base import DeliveryOutcome, NotificationChannel
from notifications.messages import Message

logger = structlog.get_logger(__name__)


class PushChannel(NotificationChannel):
    """Push notification channel backed by an HTTP gateway."""

    name = ContactChannel.PUSH.value

    def __init__(
        self,
        gateway_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.gateway_url = gateway_url if gateway_url is not None else settings.PUSH_GATEWAY_URL
        self.timeout = timeout if timeout is not None else settings.NOTIFICATION_TIMEOUT
        self._client = client or httpx.Client(timeout=httpx.Timeout(self.timeout))

    def can_deliver(self, recipient: User) -> bool:
        if not self.gateway_url:
            return False
        return bool(recipient.push_token)

    def send(self, recipient: User, message: Message) -> DeliveryOutcome:
        try:
            response = self._client.post(
                self.gateway_url,
                json={
                    "token": recipient.push_token,
                    "title": message.subject,
                    "body": message.body,
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "push_delivery_rejected",
                user_id=str(recipient.id),
                status_code=exc.response.status_code,
            )
            return DeliveryOutcome(False, f"Push gateway answered {exc.response.status_code}")
        except httpx.RequestError as exc:
            logger.warning(
                "push_delivery_failed",
                user_id=str(recipient.id),
                error=exc.__class__.__name__,
            )
            return DeliveryOutcome(False, f"Push gateway unreachable: {exc.__class__.__name__}")
        return DeliveryOutcome(True)
