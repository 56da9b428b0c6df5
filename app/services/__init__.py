from . import (
    consultation_cards,
    consultation_filters,
    consultation_grouping,
    consultation_transform,
    meeting_rules,
    status_labels,
)

__all__ = [
    "consultation_cards",
    "consultation_filters",
    "consultation_grouping",
    "consultation_transform",
    "meeting_rules",
    "status_labels",
]
