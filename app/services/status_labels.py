from __future__ import annotations

from typing import Dict, List, Union

from app.models.enums import BookingStatus, MeetingStatus, StatusDomain
from app.schemas.consultation import StatusBadge, StatusLabelRow

DEFAULT_COLOR = "default"

BOOKING_STATUS_COLORS: Dict[BookingStatus, str] = {
    BookingStatus.PENDING: "orange",
    BookingStatus.CONFIRMED: "blue",
    BookingStatus.IN_PROGRESS: "cyan",
    BookingStatus.COMPLETED: "green",
    BookingStatus.CANCELLED_BY_USER: "red",
    BookingStatus.CANCELLED_BY_CONSULTANT: "volcano",
}

BOOKING_STATUS_TEXT: Dict[BookingStatus, str] = {
    BookingStatus.PENDING: "Chờ xác nhận",
    BookingStatus.CONFIRMED: "Đã xác nhận",
    BookingStatus.IN_PROGRESS: "Đang diễn ra",
    BookingStatus.COMPLETED: "Hoàn thành",
    BookingStatus.CANCELLED_BY_USER: "Người dùng hủy",
    BookingStatus.CANCELLED_BY_CONSULTANT: "Chuyên gia hủy",
}

MEETING_STATUS_COLORS: Dict[MeetingStatus, str] = {
    MeetingStatus.NOT_CREATED: DEFAULT_COLOR,
    MeetingStatus.PENDING_SETUP: "orange",
    MeetingStatus.CREATED: "blue",
    MeetingStatus.STARTED: "green",
    MeetingStatus.ENDED: "gray",
    MeetingStatus.CANCELLED: "red",
}

MEETING_STATUS_TEXT: Dict[MeetingStatus, str] = {
    MeetingStatus.NOT_CREATED: "Chưa tạo",
    MeetingStatus.PENDING_SETUP: "Đang thiết lập",
    MeetingStatus.CREATED: "Đã tạo",
    MeetingStatus.STARTED: "Đã bắt đầu",
    MeetingStatus.ENDED: "Đã kết thúc",
    MeetingStatus.CANCELLED: "Đã hủy",
}

_TABLES = {
    StatusDomain.BOOKING: (BookingStatus, BOOKING_STATUS_COLORS, BOOKING_STATUS_TEXT),
    StatusDomain.MEETING: (MeetingStatus, MEETING_STATUS_COLORS, MEETING_STATUS_TEXT),
}

# Every enum member must have both a color and a text entry.
for _domain, (_enum_cls, _colors, _texts) in _TABLES.items():
    if set(_colors) != set(_enum_cls) or set(_texts) != set(_enum_cls):
        raise RuntimeError(f"Status label tables for {_domain.value} do not cover {_enum_cls.__name__}")

StatusValue = Union[BookingStatus, MeetingStatus, str]


def _lookup(status: StatusValue, domain: StatusDomain | str) -> tuple[object, dict, dict]:
    enum_cls, colors, texts = _TABLES[StatusDomain(domain)]
    try:
        key = enum_cls(status)
    except ValueError:
        key = None
    return key, colors, texts


def _raw(status: StatusValue) -> str:
    return status.value if isinstance(status, (BookingStatus, MeetingStatus)) else str(status)


def color_for(status: StatusValue, domain: StatusDomain | str = StatusDomain.BOOKING) -> str:
    """Display color for a booking or meeting status; unknown values get the neutral color."""
    key, colors, _ = _lookup(status, domain)
    if key is None:
        return DEFAULT_COLOR
    return colors[key]


def text_for(status: StatusValue, domain: StatusDomain | str = StatusDomain.BOOKING) -> str:
    """Display text for a booking or meeting status; unknown values are returned unchanged."""
    key, _, texts = _lookup(status, domain)
    if key is None:
        return _raw(status)
    return texts[key]


def badge_for(status: StatusValue, domain: StatusDomain | str = StatusDomain.BOOKING) -> StatusBadge:
    return StatusBadge(color=color_for(status, domain), text=text_for(status, domain))


def status_label_table(domain: StatusDomain | str = StatusDomain.BOOKING) -> List[StatusLabelRow]:
    enum_cls, colors, texts = _TABLES[StatusDomain(domain)]
    return [StatusLabelRow(status=member.value, color=colors[member], text=texts[member]) for member in enum_cls]
