# volunteer_core/allocation/engine.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import AbstractSet, Dict, List, Sequence, Set, Tuple, TypeVar

from volunteer_core.config import AppConfig, DEFAULT_CONFIG
from volunteer_core.domain.models import (
    AllocationResult,
    AssignmentTable,
    EventCategory,
    EventConfig,
    FieldTripConfig,
    PartyConfig,
    Volunteer,
)
from volunteer_core.domain.names import name_key
from volunteer_core.preprocessing.candidates import by_event, by_teacher, resolve_teachers

logger = logging.getLogger(__name__)

EventT = TypeVar("EventT", bound=EventConfig)


@dataclass
class AllocationState:
    """Dedup sets owned by a single allocate() call"""
    used_primary: Dict[EventCategory, Set[str]] = field(
        default_factory=lambda: {c: set() for c in EventCategory})
    used_alternate: Dict[EventCategory, Set[str]] = field(
        default_factory=lambda: {c: set() for c in EventCategory})
    # (category, event name) -> name keys assigned as primary for that event
    used_in_event: Dict[Tuple[EventCategory, str], Set[str]] = field(default_factory=dict)

    def event_set(self, category: EventCategory, event_name: str) -> Set[str]:
        return self.used_in_event.setdefault((category, event_name), set())


def is_alternate_eligible(
    key: str,
    used_primary: AbstractSet[str],
    used_in_event: AbstractSet[str],
    used_alternate: AbstractSet[str],
    strict: bool,
) -> bool:
    """
    strict: not a primary anywhere in the category, not used for this event,
            not already an alternate in the category
    relaxed: same, but primaries from other events of the category are accepted
    """
    if key in used_in_event or key in used_alternate:
        return False
    if strict and key in used_primary:
        return False
    return True


def _shuffled(candidates: Sequence[Volunteer], rng: random.Random) -> List[Volunteer]:
    out = list(candidates)
    rng.shuffle(out)
    return out


def first_declarations(events: Sequence[EventT]) -> List[EventT]:
    """Keep the first event of each name; repeated names are ignored"""
    seen: Set[str] = set()
    out: List[EventT] = []
    for e in events:
        if e.name in seen:
            logger.warning("%s is declared more than once; later declarations ignored", e.name)
            continue
        seen.add(e.name)
        out.append(e)
    return out


def _declared_events(
    parties: Sequence[PartyConfig],
    field_trips: Sequence[FieldTripConfig],
) -> List[Tuple[EventCategory, EventConfig]]:
    events: List[Tuple[EventCategory, EventConfig]] = [(EventCategory.PARTY, p) for p in parties]
    events.extend((EventCategory.FIELD_TRIP, t) for t in field_trips)
    return events


def assign_primaries(
    volunteers: Sequence[Volunteer],
    events: Sequence[Tuple[EventCategory, EventConfig]],
    all_teachers: Sequence[str],
    rng: random.Random,
    state: AllocationState,
    table: AssignmentTable,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> None:
    for category, event in events:
        table.open_event(category, event.name)
        used_here = state.event_set(category, event.name)
        used_cat = state.used_primary[category]

        candidates = _shuffled(by_event(volunteers, category.value, event.name), rng)
        teachers = resolve_teachers(event, category, all_teachers, cfg.all_teachers_marker)

        for teacher in teachers:
            assigned = 0
            for v in by_teacher(candidates, teacher):
                if assigned >= event.count:
                    break
                key = name_key(v.name)
                if key in used_cat:
                    continue
                table.add(category, event.name, teacher, v)
                used_cat.add(key)
                used_here.add(key)
                assigned += 1

            if assigned < event.count:
                logger.debug("%s / %s: %d of %d primary slots filled",
                             event.name, teacher, assigned, event.count)


def _pick_alternates(
    candidates: Sequence[Volunteer],
    category: EventCategory,
    event_name: str,
    teacher: str,
    state: AllocationState,
    table: AssignmentTable,
    limit: int,
) -> int:
    used_primary = state.used_primary[category]
    used_alternate = state.used_alternate[category]
    used_here = state.event_set(category, event_name)

    assigned = 0
    # strict walk first, then at most one relaxed walk over the same order
    for strict in (True, False):
        for v in candidates:
            if assigned >= limit:
                break
            key = name_key(v.name)
            if is_alternate_eligible(key, used_primary, used_here, used_alternate, strict):
                table.add(category, event_name, teacher, replace(v, is_alternate=True))
                used_alternate.add(key)
                assigned += 1
        if assigned >= limit:
            break
    return assigned


def assign_alternates(
    volunteers: Sequence[Volunteer],
    events: Sequence[Tuple[EventCategory, EventConfig]],
    all_teachers: Sequence[str],
    rng: random.Random,
    state: AllocationState,
    table: AssignmentTable,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> None:
    for category, event in events:
        candidates = _shuffled(by_event(volunteers, category.value, event.name), rng)
        teachers = resolve_teachers(event, category, all_teachers, cfg.all_teachers_marker)

        for teacher in teachers:
            _pick_alternates(
                by_teacher(candidates, teacher),
                category, event.name, teacher,
                state, table,
                limit=cfg.alternates_per_teacher,
            )


def allocate(
    volunteers: Sequence[Volunteer],
    parties: Sequence[PartyConfig],
    field_trips: Sequence[FieldTripConfig],
    all_teachers: Sequence[str],
    seed: int,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> AllocationResult:
    """
    Assign volunteers to teacher slots.

    - Pass 1 fills primary slots for every party, then every field trip,
      shuffling each event's sign-ups with generator P (seed).
    - Pass 2 runs after all primaries and adds up to cfg.alternates_per_teacher
      alternates per teacher, shuffling with generator A (2 * seed).
    - Names are deduplicated per category: a person is primary for at most one
      party and at most one field trip, and alternate at most once per category.

    Only the first declaration of a repeated event name is allocated.
    Never raises on data-shaped problems; short pools leave slots empty.
    """
    rng_primary = random.Random(seed)
    rng_alternate = random.Random(seed * 2)

    parties = first_declarations(parties)
    field_trips = first_declarations(field_trips)

    state = AllocationState()
    table = AssignmentTable()
    events = _declared_events(parties, field_trips)

    assign_primaries(volunteers, events, all_teachers, rng_primary, state, table, cfg)
    assign_alternates(volunteers, events, all_teachers, rng_alternate, state, table, cfg)

    logger.info(
        "allocated %d entries across %d events (seed=%d)",
        sum(1 for _ in table.iter_entries()), len(events), seed,
    )
    return AllocationResult(
        table=table,
        parties=list(parties),
        field_trips=list(field_trips),
        seed=seed,
        all_teachers=list(all_teachers),
    )
