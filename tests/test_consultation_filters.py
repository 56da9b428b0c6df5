from datetime import date

from app.schemas.consultation import ConsultationFilters, ConsultationView
from app.services.consultation_filters import filter_consultations


def _view(view_id: str, day: str, status: str = "confirmed", name: str = "BS. Hoàng Mai") -> ConsultationView:
    return ConsultationView(
        id=view_id,
        consultant_name=name,
        consultant_email=f"{view_id}@clinic.vn",
        specialty="Tư vấn chung",
        schedule_type="advice",
        date=day,
        time="10:00 - 11:00",
        status=status,
        meeting_status="not_created",
    )


VIEWS = [
    _view("a", "01/03/2025", "pending", "BS. Hoàng Mai"),
    _view("b", "10/03/2025", "confirmed", "BS. Đỗ Quang"),
    _view("c", "20/03/2025", "completed", "BS. Hoàng Mai"),
    _view("d", "bad-date", "confirmed", "BS. Đỗ Quang"),
]


def test_no_filters_returns_everything_in_order():
    assert [v.id for v in filter_consultations(VIEWS)] == ["a", "b", "c", "d"]
    assert [v.id for v in filter_consultations(VIEWS, ConsultationFilters())] == ["a", "b", "c", "d"]


def test_filter_by_status():
    result = filter_consultations(VIEWS, ConsultationFilters(status="confirmed"))

    assert [v.id for v in result] == ["b", "d"]


def test_filter_by_consultant_name_or_email():
    assert [v.id for v in filter_consultations(VIEWS, ConsultationFilters(consultant="hoàng"))] == ["a", "c"]
    assert [v.id for v in filter_consultations(VIEWS, ConsultationFilters(consultant="B@CLINIC"))] == ["b"]


def test_filter_by_inclusive_date_range_skips_unparseable_dates():
    filters = ConsultationFilters(date_from=date(2025, 3, 1), date_to=date(2025, 3, 10))

    assert [v.id for v in filter_consultations(VIEWS, filters)] == ["a", "b"]


def test_filters_combine():
    filters = ConsultationFilters(date_from=date(2025, 3, 5), status="completed", consultant="Mai")

    assert [v.id for v in filter_consultations(VIEWS, filters)] == ["c"]
