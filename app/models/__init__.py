from app.models.enums import (
    BookingStatus,
    MeetingStatus,
    ScheduleType,
    StatusDomain,
    TemporalBucket,
    coerce_status,
)

__all__ = [
    "BookingStatus",
    "MeetingStatus",
    "ScheduleType",
    "StatusDomain",
    "TemporalBucket",
    "coerce_status",
]
