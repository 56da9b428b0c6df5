from __future__ import annotations

from typing import Iterable, List, Optional

from app.schemas.consultation import ConsultationFilters, ConsultationView
from app.services.consultation_grouping import parse_display_date


def _matches_consultant(view: ConsultationView, needle: str) -> bool:
    needle = needle.strip().lower()
    if not needle:
        return True
    return needle in view.consultant_name.lower() or needle in view.consultant_email.lower()


def _matches_date_range(view: ConsultationView, filters: ConsultationFilters) -> bool:
    if filters.date_from is None and filters.date_to is None:
        return True
    parsed = parse_display_date(view.date)
    if parsed is None:
        return False
    if filters.date_from and parsed < filters.date_from:
        return False
    if filters.date_to and parsed > filters.date_to:
        return False
    return True


def filter_consultations(
    views: Iterable[ConsultationView], filters: Optional[ConsultationFilters] = None
) -> List[ConsultationView]:
    """Keep views matching every set filter, in input order."""
    if filters is None:
        return list(views)

    result = []
    for view in views:
        if filters.status and view.status != filters.status:
            continue
        if filters.consultant and not _matches_consultant(view, filters.consultant):
            continue
        if not _matches_date_range(view, filters):
            continue
        result.append(view)
    return result
