from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional

from app.core.config import get_clinic_timezone, settings
from app.models.enums import TemporalBucket
from app.schemas.consultation import ConsultationView, GroupedConsultations
from app.services.consultation_transform import DISPLAY_DATE_FORMAT

logger = logging.getLogger(__name__)

TIME_RANGE_SEPARATOR = " - "


def get_local_today() -> date:
    """Return today's date in the clinic timezone. Separated for monkeypatching in tests."""
    tz = get_clinic_timezone(settings)
    if tz is None:
        return date.today()
    return datetime.now(tz).date()


def parse_display_date(value: str) -> Optional[date]:
    """Parse a DD/MM/YYYY string; None when it is not a valid calendar date."""
    try:
        return datetime.strptime(value, DISPLAY_DATE_FORMAT).date()
    except ValueError:
        return None


def start_time_of(time_slot: str) -> str:
    """Start component of "HH:MM" or "HH:MM - HH:MM"."""
    return time_slot.split(TIME_RANGE_SEPARATOR)[0]


def bucket_for(view: ConsultationView, today: date | None = None) -> TemporalBucket:
    ref = today or get_local_today()
    tomorrow = ref + timedelta(days=1)
    return _bucket_for(view, ref.strftime(DISPLAY_DATE_FORMAT), tomorrow.strftime(DISPLAY_DATE_FORMAT), ref)


def _bucket_for(view: ConsultationView, today_str: str, tomorrow_str: str, today: date) -> TemporalBucket:
    # String equality first so today's slot never depends on parsing.
    if view.date == today_str:
        return TemporalBucket.TODAY
    if view.date == tomorrow_str:
        return TemporalBucket.TOMORROW
    parsed = parse_display_date(view.date)
    if parsed is None:
        logger.debug("Unparseable consultation date %r for %s; grouping as past", view.date, view.id)
        return TemporalBucket.PAST
    if parsed > today:
        return TemporalBucket.UPCOMING
    # Residual bucket: anything not today, tomorrow or later.
    return TemporalBucket.PAST


def group_consultations_by_date(
    views: Iterable[ConsultationView], today: date | None = None
) -> GroupedConsultations:
    """
    Partition consultations into today/tomorrow/upcoming/past.
    Each bucket is sorted by slot start time (stable for equal starts).
    """
    ref = today or get_local_today()
    today_str = ref.strftime(DISPLAY_DATE_FORMAT)
    tomorrow_str = (ref + timedelta(days=1)).strftime(DISPLAY_DATE_FORMAT)

    buckets: Dict[TemporalBucket, List[ConsultationView]] = {bucket: [] for bucket in TemporalBucket}
    for view in views:
        buckets[_bucket_for(view, today_str, tomorrow_str, ref)].append(view)

    return GroupedConsultations(
        **{bucket.value: sorted(items, key=lambda v: start_time_of(v.time)) for bucket, items in buckets.items()}
    )
