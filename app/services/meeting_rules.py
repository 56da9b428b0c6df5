from __future__ import annotations

from app.models.enums import BookingStatus, MeetingStatus
from app.schemas.consultation import ConsultationView

JOINABLE_BOOKING_STATUSES = (BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS)
JOINABLE_MEETING_STATUSES = (MeetingStatus.CREATED, MeetingStatus.STARTED)


def can_join_meeting(view: ConsultationView) -> bool:
    """Link present, booking confirmed/in progress, and meeting created/started."""
    return (
        view.meeting_link is not None
        and view.status in JOINABLE_BOOKING_STATUSES
        and view.meeting_status in JOINABLE_MEETING_STATUSES
    )
