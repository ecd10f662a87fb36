"""Notification payloads."""

from dataclasses import dataclass

from events.domain import Event, StudentId


@dataclass(frozen=True)
class Message:
    subject: str
    body: str


def attendee_registered_message(event: Event, student_id: StudentId) -> Message:
    """Build the organizer notice for a new attendee."""
    count = len(event.attendees)
    return Message(
        subject=f"New attendee for {event.title}",
        body=(
            f"{student_id} registered for {event.title}. "
            f"{count} {'student is' if count == 1 else 'students are'} now attending."
        ),
    )
