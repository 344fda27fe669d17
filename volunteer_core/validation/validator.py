# volunteer_core/validation/validator.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List

from volunteer_core.config import AppConfig, DEFAULT_CONFIG
from volunteer_core.domain.models import EventCategory, InputData
from volunteer_core.preprocessing.candidates import by_event, is_all_marker


@dataclass(frozen=True)
class ValidationError(Exception):
    message: str


@dataclass(frozen=True)
class ValidationWarning:
    message: str


def validate_input(data: InputData, cfg: AppConfig = DEFAULT_CONFIG) -> List[ValidationWarning]:
    """
    Checks run before allocation. Only "nothing to allocate" is fatal;
    everything else degrades to empty slots and is reported as a warning.
    """
    if not data.parties and not data.field_trips:
        raise ValidationError("Variables sheet defines no parties and no field trips.")

    warnings: List[ValidationWarning] = []
    known_teachers = set(data.all_teachers)

    for label, events in (("party", data.parties), ("field trip", data.field_trips)):
        dup = [nm for nm, n in Counter(e.name for e in events).items() if n > 1]
        for nm in dup:
            warnings.append(ValidationWarning(f"{label} '{nm}' is listed more than once; only the first declaration is used."))

    shared = {p.name for p in data.parties} & {t.name for t in data.field_trips}
    for nm in sorted(shared):
        warnings.append(ValidationWarning(
            f"'{nm}' is both a party and a field trip; sign-ups are told apart by column."
        ))

    for category, events in ((EventCategory.PARTY, data.parties), (EventCategory.FIELD_TRIP, data.field_trips)):
        for e in events:
            if e.count <= 0:
                warnings.append(ValidationWarning(
                    f"{e.name}: count per teacher is {e.count}; no primary volunteers will be assigned."
                ))
            if not by_event(data.volunteers, category.value, e.name):
                warnings.append(ValidationWarning(f"{e.name}: nobody signed up."))

    for t in data.field_trips:
        if is_all_marker(t.teachers, cfg.all_teachers_marker):
            continue
        for teacher in t.teachers:
            if teacher not in known_teachers:
                warnings.append(ValidationWarning(
                    f"{t.name}: teacher '{teacher}' does not appear in any response."
                ))

    return warnings
