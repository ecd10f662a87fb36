from notifications.channels.base import DeliveryOutcome, NotificationChannel
from notifications.channels.email import EmailChannel
from notifications.channels.push import PushChannel
from notifications.channels.registry import ChannelRegistry

__all__ = [
    "NotificationChannel",
    "DeliveryOutcome",
    "EmailChannel",
    "PushChannel",
    "ChannelRegistry",
]
