from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.enums import BookingStatus, MeetingStatus, coerce_status

# Legacy wire value some backend rows carry instead of a real null.
NULL_LINK_SENTINEL = "null"


class ConsultantRef(BaseModel):
    id: str = Field(validation_alias="_id")
    full_name: str
    email: str

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ConsultantScheduleRef(BaseModel):
    id: str = Field(validation_alias="_id")
    consultant_user_id: ConsultantRef
    date: str = Field(description="ISO date or datetime of the schedule")
    time_slot: str = Field(description="HH:MM or HH:MM - HH:MM")
    schedule_type: str

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ConsultationBookingRecord(BaseModel):
    """Raw booking row as returned by the booking backend, with its schedule populated."""

    id: str = Field(validation_alias="_id")
    consultant_schedule_id: ConsultantScheduleRef
    status: str
    meeting_status: str
    question: Optional[str] = None
    meeting_link: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    meeting_id: Optional[str] = None
    calendar_event_id: Optional[str] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ConsultationView(BaseModel):
    id: str
    consultant_name: str
    consultant_email: str
    specialty: str
    schedule_type: str
    date: str
    time: str
    status: Union[BookingStatus, str]
    meeting_status: Union[MeetingStatus, str]
    meeting_link: Optional[str] = None
    question: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    meeting_id: Optional[str] = None
    calendar_event_id: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_booking_status(cls, value):
        return coerce_status(BookingStatus, value)

    @field_validator("meeting_status", mode="before")
    @classmethod
    def _coerce_meeting_status(cls, value):
        return coerce_status(MeetingStatus, value)

    @field_validator("meeting_link", mode="before")
    @classmethod
    def _normalize_meeting_link(cls, value):
        if value is None or value == "" or value == NULL_LINK_SENTINEL:
            return None
        return value


class StatusBadge(BaseModel):
    color: str
    text: str


class StatusLabelRow(BaseModel):
    status: str
    color: str
    text: str


class ConsultationCard(ConsultationView):
    status_badge: StatusBadge
    meeting_status_badge: StatusBadge
    can_join_meeting: bool


class GroupedConsultations(BaseModel):
    today: List[ConsultationView] = []
    tomorrow: List[ConsultationView] = []
    upcoming: List[ConsultationView] = []
    past: List[ConsultationView] = []

    def total(self) -> int:
        return len(self.today) + len(self.tomorrow) + len(self.upcoming) + len(self.past)


class GroupedConsultationCards(BaseModel):
    today: List[ConsultationCard] = []
    tomorrow: List[ConsultationCard] = []
    upcoming: List[ConsultationCard] = []
    past: List[ConsultationCard] = []


class ConsultationFilters(BaseModel):
    date_from: Optional[date] = Field(None, description="Start date (YYYY-MM-DD, inclusive)")
    date_to: Optional[date] = Field(None, description="End date (YYYY-MM-DD, inclusive)")
    status: Optional[BookingStatus] = Field(None, description="Booking status, e.g. confirmed")
    consultant: Optional[str] = Field(None, description="Matches consultant name or email")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConsultationClassifyRequest(BaseModel):
    records: List[ConsultationBookingRecord]
    filters: Optional[ConsultationFilters] = None
