"""Base channel interface for notification delivery."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from accounts.domain import User
from notifications.messages import Message


@dataclass(frozen=True)
class DeliveryOutcome:
    delivered: bool
    error: str | None = None


class NotificationChannel(ABC):
    """Abstract base class for notification delivery channels."""

    name: str

    @abstractmethod
    def can_deliver(self, recipient: User) -> bool:
        """Check whether the recipient is reachable through this channel.

        Args:
            recipient: The user to notify

        Returns:
            True if the channel has the contact details it needs
        """
        ...

    @abstractmethod
    def send(self, recipient: User, message: Message) -> DeliveryOutcome:
        """Deliver a message.

        Implementations report expected delivery failures in the outcome and
        may raise for unexpected ones; the dispatcher treats both as failure.

        Args:
            recipient: The user to notify
            message: Subject and body to deliver

        Returns:
            The delivery outcome
        """
        ...
