import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query

from app.core.utf8_json_response import UTF8JSONResponse
from app.models.enums import StatusDomain
from app.schemas.consultation import (
    ConsultationBookingRecord,
    ConsultationCard,
    ConsultationClassifyRequest,
    GroupedConsultationCards,
    StatusLabelRow,
)
from app.services import consultation_grouping
from app.services.consultation_cards import to_card, to_grouped_cards
from app.services.consultation_filters import filter_consultations
from app.services.consultation_transform import transform_consultation_data, transform_consultations
from app.services.status_labels import status_label_table

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=UTF8JSONResponse)

INVALID_SCHEDULE_DATE_ERROR = "Ngày lịch tư vấn không hợp lệ"


@router.post("/consultations/classify", response_model=GroupedConsultationCards)
def classify_consultations(payload: ConsultationClassifyRequest) -> GroupedConsultationCards:
    """Group a fetched snapshot of bookings into today/tomorrow/upcoming/past cards."""
    try:
        views = transform_consultations(payload.records)
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_SCHEDULE_DATE_ERROR)

    views = filter_consultations(views, payload.filters)
    grouped = consultation_grouping.group_consultations_by_date(views)
    logger.info(
        "Classified %s consultations (%s after filters): today=%s tomorrow=%s upcoming=%s past=%s",
        len(payload.records),
        len(views),
        len(grouped.today),
        len(grouped.tomorrow),
        len(grouped.upcoming),
        len(grouped.past),
    )
    return to_grouped_cards(grouped)


@router.post("/consultations/card", response_model=ConsultationCard)
def consultation_card(record: ConsultationBookingRecord) -> ConsultationCard:
    try:
        view = transform_consultation_data(record)
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_SCHEDULE_DATE_ERROR)
    return to_card(view)


@router.get("/consultations/status-labels", response_model=List[StatusLabelRow])
def list_status_labels(
    domain: StatusDomain = Query(StatusDomain.BOOKING, description="booking or meeting"),
) -> List[StatusLabelRow]:
    return status_label_table(domain)
