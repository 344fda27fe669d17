# volunteer_core/reporting/report.py
from __future__ import annotations

from typing import List

import pandas as pd

from volunteer_core.config import AppConfig, DEFAULT_CONFIG
from volunteer_core.domain.models import AllocationResult
from volunteer_core.preprocessing.candidates import resolve_teachers
from volunteer_core.reporting.formatting import format_phone_number

ASSIGNMENT_COLUMNS = ["category", "event", "teacher", "role", "name", "phone", "email"]
SUMMARY_COLUMNS = ["category", "event", "teacher", "required", "primaries", "alternates", "shortfall"]


def build_assignment_frame(result: AllocationResult) -> pd.DataFrame:
    """One row per assigned volunteer, events in declared order, teachers sorted"""
    rows = []
    for category, event in result.events():
        by_teacher = result.table.for_event(category, event.name)
        for teacher in sorted(by_teacher):
            for v in by_teacher[teacher]:
                rows.append(dict(
                    category=category.value,
                    event=event.name,
                    teacher=teacher,
                    role="alternate" if v.is_alternate else "primary",
                    name=v.name,
                    phone=format_phone_number(v.phone),
                    email=v.email,
                ))
    return pd.DataFrame(rows, columns=ASSIGNMENT_COLUMNS)


def build_fill_summary(result: AllocationResult, cfg: AppConfig = DEFAULT_CONFIG) -> pd.DataFrame:
    """How full each (event, teacher) slot set ended up; every participating teacher is listed"""
    rows: List[dict] = []
    for category, event in result.events():
        required = max(event.count, 0)
        for teacher in resolve_teachers(event, category, result.all_teachers, cfg.all_teachers_marker):
            n_primary = len(result.table.primaries(category, event.name, teacher))
            n_alt = len(result.table.alternates(category, event.name, teacher))
            rows.append(dict(
                category=category.value,
                event=event.name,
                teacher=teacher,
                required=required,
                primaries=n_primary,
                alternates=n_alt,
                shortfall=required - n_primary,
            ))
    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    if not df.empty:
        df = df.sort_values(["shortfall", "event", "teacher"], ascending=[False, True, True]).reset_index(drop=True)
    return df
