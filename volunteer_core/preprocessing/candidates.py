# volunteer_core/preprocessing/candidates.py
from __future__ import annotations

from typing import List, Sequence

from volunteer_core.domain.models import EventCategory, EventConfig, FieldTripConfig, Volunteer


def by_event(volunteers: Sequence[Volunteer], event_type: str, event_name: str) -> List[Volunteer]:
    return [v for v in volunteers if v.event_type == event_type and v.event_name == event_name]


def by_teacher(volunteers: Sequence[Volunteer], teacher: str) -> List[Volunteer]:
    return [v for v in volunteers if v.teacher == teacher]


def is_all_marker(teachers: Sequence[str], marker: str = "ALL") -> bool:
    return len(teachers) == 1 and teachers[0] == marker


def resolve_teachers(
    event: EventConfig,
    category: EventCategory,
    all_teachers: Sequence[str],
    marker: str = "ALL",
) -> List[str]:
    """
    Teachers taking part in an event:
    - party: every teacher
    - field trip: its own list, or every teacher when the list is the ALL marker
    """
    if category is EventCategory.PARTY or not isinstance(event, FieldTripConfig):
        return list(all_teachers)
    if is_all_marker(event.teachers, marker):
        return list(all_teachers)
    return list(event.teachers)
