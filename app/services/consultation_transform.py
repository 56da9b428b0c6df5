from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Iterable, List

from app.core.config import get_clinic_timezone, settings
from app.models.enums import ScheduleType
from app.schemas.consultation import ConsultationBookingRecord, ConsultationView

DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DISPLAY_DATETIME_FORMAT = "%d/%m/%Y %H:%M"

SPECIALTY_ADVICE = "Tư vấn chung"
SPECIALTY_ANALYSIS = "Phân tích kết quả"


def _parse_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _in_display_zone(parsed: datetime, tz: tzinfo | None = None) -> datetime:
    # Aware values move to the clinic zone when one is known; naive values are left alone.
    if parsed.tzinfo is None:
        return parsed
    target = tz or get_clinic_timezone(settings)
    if target is None:
        return parsed
    return parsed.astimezone(target)


def specialty_for(schedule_type: str) -> str:
    if schedule_type == ScheduleType.ADVICE.value:
        return SPECIALTY_ADVICE
    return SPECIALTY_ANALYSIS


def format_display_date(value: str, tz: tzinfo | None = None) -> str:
    """
    Format an ISO date/datetime string as DD/MM/YYYY.
    Uses the same zone rule as ``format_display_datetime`` so both show the same day.
    """
    return _in_display_zone(_parse_iso(value), tz).strftime(DISPLAY_DATE_FORMAT)


def format_display_datetime(value: str, tz: tzinfo | None = None) -> str:
    """
    Format an ISO datetime string as DD/MM/YYYY HH:MM.
    Aware values are shown in the clinic timezone (or ``tz`` when given);
    naive values, or aware ones with no zone configured, are formatted as-is.
    """
    return _in_display_zone(_parse_iso(value), tz).strftime(DISPLAY_DATETIME_FORMAT)


def transform_consultation_data(record: ConsultationBookingRecord) -> ConsultationView:
    """Map a raw booking record (with its populated schedule) into a ConsultationView."""
    schedule = record.consultant_schedule_id
    consultant = schedule.consultant_user_id
    return ConsultationView(
        id=record.id,
        consultant_name=consultant.full_name,
        consultant_email=consultant.email,
        specialty=specialty_for(schedule.schedule_type),
        schedule_type=schedule.schedule_type,
        date=format_display_date(schedule.date),
        time=schedule.time_slot,
        status=record.status,
        meeting_status=record.meeting_status,
        meeting_link=record.meeting_link,
        question=record.question,
        created_at=record.created_at,
        updated_at=record.updated_at,
        meeting_id=record.meeting_id,
        calendar_event_id=record.calendar_event_id,
    )


def transform_consultations(records: Iterable[ConsultationBookingRecord]) -> List[ConsultationView]:
    return [transform_consultation_data(record) for record in records]
