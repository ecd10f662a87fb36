"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from ads.domain import Ad, AdId


class AdStore(ABC):
    """Interface for ad catalog persistence operations."""

    @abstractmethod
    def list_active_ads(self) -> list[Ad]:
        """Return a point-in-time snapshot of all active ads."""
        ...

    @abstractmethod
    def get_ad(self, ad_id: AdId) -> Ad | None:
        """Return an ad by ID, or None if not found."""
        ...

    @abstractmethod
    def save_ad(self, ad: Ad) -> None:
        """Insert or update an ad. The stored view_count is never lowered."""
        ...

    @abstractmethod
    def increment_view_count(self, ad_id: AdId) -> bool:
        """Atomically add one view. Returns False if the ad does not exist."""
        ...
