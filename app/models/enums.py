from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED_BY_USER = "cancelled_by_user"
    CANCELLED_BY_CONSULTANT = "cancelled_by_consultant"


class MeetingStatus(str, Enum):
    NOT_CREATED = "not_created"
    PENDING_SETUP = "pending_setup"
    CREATED = "created"
    STARTED = "started"
    ENDED = "ended"
    CANCELLED = "cancelled"


class ScheduleType(str, Enum):
    ADVICE = "advice"
    ANALYSIS = "analysis"


class StatusDomain(str, Enum):
    BOOKING = "booking"
    MEETING = "meeting"


class TemporalBucket(str, Enum):
    TODAY = "today"
    TOMORROW = "tomorrow"
    UPCOMING = "upcoming"
    PAST = "past"


E = TypeVar("E", bound=Enum)


def coerce_status(enum_cls: Type[E], value: Union[E, str]) -> Union[E, str]:
    """Return the enum member for a known value, or the raw string for an unknown one."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


__all__ = [
    "BookingStatus",
    "MeetingStatus",
    "ScheduleType",
    "StatusDomain",
    "TemporalBucket",
    "coerce_status",
]
