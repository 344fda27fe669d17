# volunteer_core/io_layer/xlsx_reader.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, BinaryIO, Dict, List, Sequence, Tuple, Union

import pandas as pd

from volunteer_core.config import AppConfig
from volunteer_core.domain.models import (
    EventCategory,
    FieldTripConfig,
    InputData,
    PartyConfig,
    Volunteer,
)

logger = logging.getLogger(__name__)

Source = Union[str, BinaryIO]

VARIABLES_WIDTH = 5  # A: party, B: count, C: trip, D: teachers, E: count


class InputFormatError(ValueError):
    """The workbook cannot be interpreted as a sign-up export"""


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return str(value).strip()


def _parse_count(text: str) -> int:
    """Leading integer of a cell ("3", "3.0", "3 parents"); anything else is 0"""
    m = re.match(r"\s*([+-]?\d+)", text or "")
    if not m:
        return 0
    return int(m.group(1))


def _matching_events(answer: str, event_names: Sequence[str], na_marker: str) -> List[str]:
    """Checkbox answers are joined free text; an event matches when its name is contained"""
    if not answer or na_marker in answer:
        return []
    return [nm for nm in event_names if nm in answer]


@dataclass(frozen=True)
class XlsxReader:
    cfg: AppConfig

    def open(self, source: Source) -> pd.ExcelFile:
        try:
            return pd.ExcelFile(source, engine="openpyxl")
        except FileNotFoundError:
            raise
        except Exception as e:
            raise InputFormatError(f"cannot open workbook {source!r}: {e}") from e

    def _sheet_rows(self, xl: pd.ExcelFile, sheet_name: str) -> pd.DataFrame:
        if sheet_name not in xl.sheet_names:
            raise InputFormatError(
                f"sheet '{sheet_name}' not found (available: {', '.join(map(str, xl.sheet_names))})"
            )
        return xl.parse(sheet_name=sheet_name, header=None, dtype=str)

    def read_variables(
        self,
        xl: pd.ExcelFile,
        sheet_name: str,
    ) -> Tuple[List[PartyConfig], List[FieldTripConfig]]:
        """
        Variables sheet (row 1 = header):
        A: party name, B: count per teacher,
        C: field trip name, D: teachers (pipe-separated or ALL), E: count per teacher
        A row may carry a party, a field trip, or both.
        """
        df = self._sheet_rows(xl, sheet_name)

        parties: List[PartyConfig] = []
        trips: List[FieldTripConfig] = []
        for raw in df.iloc[1:].itertuples(index=False):
            cells = [_cell(v) for v in raw][:VARIABLES_WIDTH]
            cells += [""] * (VARIABLES_WIDTH - len(cells))
            party_name, party_count, trip_name, trip_teachers, trip_count = cells

            if party_name and party_count:
                parties.append(PartyConfig(name=party_name, count=_parse_count(party_count)))

            if trip_name and trip_teachers and trip_count:
                if trip_teachers == self.cfg.all_teachers_marker:
                    teachers: Tuple[str, ...] = (self.cfg.all_teachers_marker,)
                else:
                    teachers = tuple(
                        t.strip() for t in trip_teachers.split(self.cfg.teacher_separator) if t.strip()
                    )
                trips.append(FieldTripConfig(
                    name=trip_name,
                    count=_parse_count(trip_count),
                    teachers=teachers,
                ))

        logger.debug("variables: %d parties, %d field trips", len(parties), len(trips))
        return parties, trips

    def detect_columns(self, header: Sequence[Any]) -> Dict[str, int]:
        """Header keyword -> column index; a later column wins over an earlier one"""
        indexes: Dict[str, int] = {}
        for idx, title in enumerate(header):
            text = _cell(title).lower()
            if not text:
                continue
            for key, keyword in self.cfg.columns.ordered():
                if keyword in text:
                    indexes[key] = idx
                    break

        missing = [k for k in ("teacher", "phone", "email") if k not in indexes]
        if "name" not in indexes and not ("first_name" in indexes and "last_name" in indexes):
            missing.append("name")
        if missing:
            raise InputFormatError(f"response sheet is missing column(s): {', '.join(missing)}")
        return indexes

    def read_volunteers(
        self,
        xl: pd.ExcelFile,
        sheet_name: str,
        party_names: Sequence[str],
        trip_names: Sequence[str],
    ) -> Tuple[List[Volunteer], List[str]]:
        """
        One Volunteer per (response row, matched event).
        Returns (volunteers, teachers in first-seen order).
        """
        df = self._sheet_rows(xl, sheet_name)
        if df.empty:
            raise InputFormatError(f"sheet '{sheet_name}' is empty")

        idx = self.detect_columns(list(df.iloc[0]))

        volunteers: List[Volunteer] = []
        teachers: Dict[str, None] = {}

        for row_no, raw in enumerate(df.iloc[1:].itertuples(index=False), start=2):
            row = [_cell(v) for v in raw]

            def col(key: str) -> str:
                i = idx.get(key)
                return row[i] if i is not None and i < len(row) else ""

            teacher = col("teacher")
            if "name" in idx:
                name = col("name")
            else:
                name = f"{col('first_name')} {col('last_name')}".strip()

            if teacher:
                teachers.setdefault(teacher, None)
            if not teacher or not name:
                if any(row):
                    logger.warning("row %d skipped: teacher or name is empty", row_no)
                continue

            phone = col("phone")
            email = col("email")

            for category, answer, names in (
                (EventCategory.PARTY, col("parties"), party_names),
                (EventCategory.FIELD_TRIP, col("field_trips"), trip_names),
            ):
                for event_name in _matching_events(answer, names, self.cfg.not_applicable_marker):
                    volunteers.append(Volunteer(
                        name=name,
                        email=email,
                        phone=phone,
                        teacher=teacher,
                        event_type=category.value,
                        event_name=event_name,
                    ))

        return volunteers, list(teachers)

    def build_input_data(
        self,
        source: Source,
        variables_sheet: str,
        responses_sheet: str,
    ) -> InputData:
        with self.open(source) as xl:
            parties, trips = self.read_variables(xl, variables_sheet)
            volunteers, all_teachers = self.read_volunteers(
                xl,
                responses_sheet,
                party_names=list(dict.fromkeys(p.name for p in parties)),
                trip_names=list(dict.fromkeys(t.name for t in trips)),
            )

        logger.info(
            "read %d sign-ups from %d teachers (%d parties, %d field trips)",
            len(volunteers), len(all_teachers), len(parties), len(trips),
        )
        return InputData(
            volunteers=volunteers,
            parties=parties,
            field_trips=trips,
            all_teachers=all_teachers,
        )
