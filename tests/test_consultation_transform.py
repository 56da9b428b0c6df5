from datetime import date, timedelta, timezone

import pytest

from app.core import config
from app.models.enums import BookingStatus, MeetingStatus, TemporalBucket
from app.schemas.consultation import ConsultationBookingRecord, ConsultationView
from app.services.consultation_transform import (
    SPECIALTY_ADVICE,
    SPECIALTY_ANALYSIS,
    format_display_date,
    format_display_datetime,
    transform_consultation_data,
    transform_consultations,
)
from app.services.consultation_grouping import bucket_for

ICT = timezone(timedelta(hours=7))


@pytest.fixture(autouse=True)
def _no_clinic_zone(monkeypatch):
    monkeypatch.setattr(config.settings, "clinic_utc_offset_hours", None)


def _raw_record(**overrides) -> dict:
    record = {
        "_id": "booking-1",
        "user_id": {"_id": "user-1", "full_name": "Nguyễn Văn A", "email": "a@example.com"},
        "consultant_schedule_id": {
            "_id": "schedule-1",
            "consultant_user_id": {"_id": "consultant-1", "full_name": "BS. Trần Thị B", "email": "b@clinic.vn"},
            "date": "2025-03-05T00:00:00.000Z",
            "time_slot": "09:00 - 10:00",
            "schedule_type": "advice",
            "is_booked": True,
        },
        "status": "confirmed",
        "meeting_status": "created",
        "question": "Kết quả xét nghiệm có bình thường không?",
        "meeting_link": "https://meet.example/abc",
        "created_at": "2025-03-01T08:15:00.000Z",
        "updated_at": "2025-03-02T09:30:00.000Z",
        "meeting_id": "meet-1",
        "calendar_event_id": "cal-1",
        "__v": 0,
    }
    record.update(overrides)
    return record


def test_transform_maps_nested_schedule_fields():
    view = transform_consultation_data(ConsultationBookingRecord.model_validate(_raw_record()))

    assert view.id == "booking-1"
    assert view.consultant_name == "BS. Trần Thị B"
    assert view.consultant_email == "b@clinic.vn"
    assert view.specialty == SPECIALTY_ADVICE
    assert view.schedule_type == "advice"
    assert view.date == "05/03/2025"
    assert view.time == "09:00 - 10:00"
    assert view.status == BookingStatus.CONFIRMED
    assert view.meeting_status == MeetingStatus.CREATED
    assert view.meeting_link == "https://meet.example/abc"
    assert view.question == "Kết quả xét nghiệm có bình thường không?"
    assert view.created_at == "2025-03-01T08:15:00.000Z"
    assert view.meeting_id == "meet-1"
    assert view.calendar_event_id == "cal-1"


@pytest.mark.parametrize("schedule_type", ["analysis", "Advice", "", "other"])
def test_specialty_defaults_to_analysis(schedule_type):
    raw = _raw_record()
    raw["consultant_schedule_id"]["schedule_type"] = schedule_type

    view = transform_consultation_data(ConsultationBookingRecord.model_validate(raw))

    assert view.specialty == SPECIALTY_ANALYSIS


@pytest.mark.parametrize("link", ["null", "", None])
def test_null_sentinel_link_is_normalized_to_none(link):
    view = transform_consultation_data(ConsultationBookingRecord.model_validate(_raw_record(meeting_link=link)))

    assert view.meeting_link is None


def test_missing_optional_fields_pass_through_as_none():
    raw = _raw_record()
    for key in ("question", "meeting_link", "created_at", "updated_at", "meeting_id", "calendar_event_id"):
        raw.pop(key)

    view = transform_consultation_data(ConsultationBookingRecord.model_validate(raw))

    assert view.question is None
    assert view.meeting_link is None
    assert view.meeting_id is None


def test_unknown_statuses_are_kept_as_raw_strings():
    raw = _raw_record(status="on_hold", meeting_status="recording")

    view = transform_consultation_data(ConsultationBookingRecord.model_validate(raw))

    assert view.status == "on_hold"
    assert view.meeting_status == "recording"


def test_view_serializes_with_camel_case_keys():
    view = transform_consultation_data(ConsultationBookingRecord.model_validate(_raw_record()))

    data = view.model_dump(by_alias=True, mode="json")

    assert data["consultantName"] == "BS. Trần Thị B"
    assert data["meetingStatus"] == "created"
    assert data["calendarEventId"] == "cal-1"


def test_transform_consultations_keeps_order():
    records = [
        ConsultationBookingRecord.model_validate(_raw_record(_id="b1")),
        ConsultationBookingRecord.model_validate(_raw_record(_id="b2")),
    ]

    views = transform_consultations(records)

    assert [v.id for v in views] == ["b1", "b2"]
    assert all(isinstance(v, ConsultationView) for v in views)


def test_format_display_date_zero_pads():
    assert format_display_date("2025-01-07") == "07/01/2025"
    assert format_display_date("2025-11-09T17:00:00.000Z") == "09/11/2025"


def test_format_display_datetime_converts_aware_values():
    ict = timezone(timedelta(hours=7))

    assert format_display_datetime("2025-03-01T08:15:00.000Z", tz=ict) == "01/03/2025 15:15"
    assert format_display_datetime("2025-03-01T20:05:00+00:00", tz=ict) == "02/03/2025 03:05"
    assert format_display_datetime("2025-03-01T08:15:00") == "01/03/2025 08:15"


def test_date_and_datetime_helpers_agree_in_clinic_zone():
    clinic_midnight = "2025-12-23T17:00:00.000Z"

    assert format_display_date(clinic_midnight, tz=ICT) == "24/12/2025"
    assert format_display_datetime(clinic_midnight, tz=ICT) == "24/12/2025 00:00"
    assert format_display_date("2025-12-23", tz=ICT) == "23/12/2025"
    assert format_display_date("2025-12-23T17:00:00", tz=ICT) == "23/12/2025"


def test_aware_values_keep_their_own_day_without_clinic_zone():
    assert format_display_date("2025-12-23T17:00:00.000Z") == "23/12/2025"
    assert format_display_datetime("2025-12-23T17:00:00.000Z") == "23/12/2025 17:00"


def test_schedule_stored_as_clinic_midnight_groups_as_today(monkeypatch):
    monkeypatch.setattr(config.settings, "clinic_utc_offset_hours", 7)
    raw = _raw_record()
    raw["consultant_schedule_id"]["date"] = "2025-12-23T17:00:00.000Z"

    view = transform_consultation_data(ConsultationBookingRecord.model_validate(raw))

    assert view.date == "24/12/2025"
    assert bucket_for(view, today=date(2025, 12, 24)) is TemporalBucket.TODAY
