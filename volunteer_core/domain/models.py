# volunteer_core/domain/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple


class EventCategory(str, Enum):
    """Dedup namespace; the value doubles as Volunteer.event_type"""
    PARTY = "party"
    FIELD_TRIP = "fieldtrip"


@dataclass(frozen=True)
class Volunteer:
    name: str
    email: str
    phone: str
    teacher: str
    event_type: str   # "party" | "fieldtrip"
    event_name: str
    is_alternate: bool = False


@dataclass(frozen=True)
class EventConfig:
    name: str
    count: int  # primary slots per teacher


@dataclass(frozen=True)
class PartyConfig(EventConfig):
    """Every teacher gets the same count"""


@dataclass(frozen=True)
class FieldTripConfig(EventConfig):
    # explicit teacher names, or the single ALL marker
    teachers: Tuple[str, ...] = ()


# teacher -> assigned volunteers (primaries first, then alternates)
TeacherAssignments = Dict[str, List[Volunteer]]


@dataclass
class AssignmentTable:
    """event name -> teacher -> volunteers, one namespace per category"""
    parties: Dict[str, TeacherAssignments] = field(default_factory=dict)
    field_trips: Dict[str, TeacherAssignments] = field(default_factory=dict)

    def _bucket(self, category: EventCategory) -> Dict[str, TeacherAssignments]:
        if category is EventCategory.PARTY:
            return self.parties
        return self.field_trips

    def open_event(self, category: EventCategory, event_name: str) -> TeacherAssignments:
        return self._bucket(category).setdefault(event_name, {})

    def for_event(self, category: EventCategory, event_name: str) -> TeacherAssignments:
        return self._bucket(category).get(event_name, {})

    def add(self, category: EventCategory, event_name: str, teacher: str, volunteer: Volunteer) -> None:
        self.open_event(category, event_name).setdefault(teacher, []).append(volunteer)

    def primaries(self, category: EventCategory, event_name: str, teacher: str) -> List[Volunteer]:
        return [v for v in self.for_event(category, event_name).get(teacher, []) if not v.is_alternate]

    def alternates(self, category: EventCategory, event_name: str, teacher: str) -> List[Volunteer]:
        return [v for v in self.for_event(category, event_name).get(teacher, []) if v.is_alternate]

    def iter_entries(self) -> Iterator[Tuple[EventCategory, str, str, Volunteer]]:
        for category in (EventCategory.PARTY, EventCategory.FIELD_TRIP):
            for event_name, by_teacher in self._bucket(category).items():
                for teacher, vols in by_teacher.items():
                    for v in vols:
                        yield category, event_name, teacher, v


@dataclass
class InputData:
    volunteers: List[Volunteer]          # one record per (response row, event)
    parties: List[PartyConfig]           # Variables sheet order
    field_trips: List[FieldTripConfig]   # Variables sheet order
    all_teachers: List[str]              # deduplicated, first-seen order


@dataclass
class AllocationResult:
    table: AssignmentTable
    parties: List[PartyConfig]
    field_trips: List[FieldTripConfig]
    seed: int
    all_teachers: List[str] = field(default_factory=list)

    def events(self) -> Iterator[Tuple[EventCategory, EventConfig]]:
        """Declared order: parties first, then field trips"""
        for p in self.parties:
            yield EventCategory.PARTY, p
        for t in self.field_trips:
            yield EventCategory.FIELD_TRIP, t
