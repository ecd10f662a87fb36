"""Domain models for calendar advertising."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Self
from uuid import UUID, uuid4

# Slot ratio: at most one ad per this many calendar events.
EVENTS_PER_AD_SLOT = 10


@dataclass(frozen=True)
class AdId:
    """Unique identifier for an Ad."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Ad:
    """Domain representation of an Ad.

    `target_criteria` maps an attribute name to the value (or values, or a
    predicate) a viewer's interests must satisfy. `view_budget` is the
    number of impressions paid for; None means unlimited.
    """

    id: AdId
    business_id: str
    title: str
    created_at: datetime
    target_criteria: Mapping[str, Any] = field(default_factory=dict)
    view_count: int = 0
    active: bool = True
    view_budget: int | None = None

    @property
    def budget_exhausted(self) -> bool:
        return self.view_budget is not None and self.view_count >= self.view_budget

    @property
    def is_eligible(self) -> bool:
        return self.active and not self.budget_exhausted


@dataclass(frozen=True)
class CalendarContext:
    """What a calendar render knows about itself when asking for ads."""

    event_count: int
    user_interests: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.event_count < 0:
            raise ValueError("event_count cannot be negative")
