"""Channel registry for notification delivery."""

from notifications.channels.base import NotificationChannel


class ChannelRegistry:
    """Ordered registry of notification delivery channels."""

    def __init__(self, channels: list[NotificationChannel] | None = None) -> None:
        self._channels: dict[str, NotificationChannel] = {}
        for channel in channels or []:
            self.register(channel)

    def register(self, channel: NotificationChannel) -> None:
        self._channels[channel.name] = channel

    def all(self) -> list[NotificationChannel]:
        """Return channels in registration order."""
        return list(self._channels.values())
