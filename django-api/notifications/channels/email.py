"""Email notification channel implementation."""

from smtplib import SMTPException

import structlog
from django.conf import settings
from django.core.mail import send_mail

from accounts.domain import ContactChannel, User
from notifications.channels.base import DeliveryOutcome, NotificationChannel
from notifications.messages import Message

logger = structlog.get_logger(__name__)


class EmailChannel(NotificationChannel):
    """Email notification channel."""

    name = ContactChannel.EMAIL.value

    def can_deliver(self, recipient: User) -> bool:
        if not recipient.email:
            logger.warning("user_missing_email", user_id=str(recipient.id))
            return False
        return True

    def send(self, recipient: User, message: Message) -> DeliveryOutcome:
        try:
            sent = send_mail(
                subject=message.subject,
                message=message.body,
                from_email=settings.DEFAULT_FROM_EMAIL,
                recipient_list=[recipient.email],
            )
        except (SMTPException, OSError) as exc:
            logger.warning(
                "email_delivery_failed",
                user_id=str(recipient.id),
                error=exc.__class__.__name__,
            )
            return DeliveryOutcome(False, f"Email delivery failed: {exc.__class__.__name__}")
        if not sent:
            return DeliveryOutcome(False, "Email backend accepted no messages")
        return DeliveryOutcome(True)
