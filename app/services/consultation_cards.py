from __future__ import annotations

from app.models.enums import StatusDomain
from app.schemas.consultation import ConsultationCard, ConsultationView, GroupedConsultationCards, GroupedConsultations
from app.services.meeting_rules import can_join_meeting
from app.services.status_labels import badge_for


def to_card(view: ConsultationView) -> ConsultationCard:
    return ConsultationCard(
        **view.model_dump(),
        status_badge=badge_for(view.status, StatusDomain.BOOKING),
        meeting_status_badge=badge_for(view.meeting_status, StatusDomain.MEETING),
        can_join_meeting=can_join_meeting(view),
    )


def to_grouped_cards(grouped: GroupedConsultations) -> GroupedConsultationCards:
    return GroupedConsultationCards(
        today=[to_card(v) for v in grouped.today],
        tomorrow=[to_card(v) for v in grouped.tomorrow],
        upcoming=[to_card(v) for v in grouped.upcoming],
        past=[to_card(v) for v in grouped.past],
    )
