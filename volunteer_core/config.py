# volunteer_core/config.py
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ColumnKeywords:
    """Form Responses header keywords (lower-case, matched by containment, checked in order)"""
    teacher: str = "teacher"
    full_name: str = "first and last name"
    first_name: str = "first name"
    last_name: str = "last name"
    phone: str = "phone"
    email: str = "email"
    parties: str = "party or parties"
    field_trips: str = "field trip(s)"

    def ordered(self) -> Tuple[Tuple[str, str], ...]:
        # "first and last name" must be tested before "first name"
        return (
            ("teacher", self.teacher),
            ("name", self.full_name),
            ("first_name", self.first_name),
            ("last_name", self.last_name),
            ("phone", self.phone),
            ("email", self.email),
            ("parties", self.parties),
            ("field_trips", self.field_trips),
        )


@dataclass(frozen=True)
class OutputStyle:
    """Workbook colours and geometry"""
    title_size: int = 22
    header_size: int = 14
    teacher_size: int = 12
    text_color: str = "2C3E50"
    teacher_color: str = "1F4E78"
    header_fill: str = "E8F4F8"
    header_border: str = "B4C7E7"
    teacher_fill: str = "D9E2F3"
    teacher_border: str = "8EA9DB"
    alternate_color: str = "595959"
    alternate_fill: str = "F9F9F9"
    divider_color: str = "7F7F7F"
    divider_fill: str = "F2F2F2"
    divider_border: str = "BFBFBF"

    col_widths: Tuple[Tuple[str, int], ...] = (("A", 28), ("B", 32), ("C", 18), ("D", 35))
    title_height: int = 36
    header_height: int = 25
    teacher_height: int = 22
    row_height: int = 20


@dataclass(frozen=True)
class AppConfig:
    default_seed: int = 42
    alternates_per_teacher: int = 2

    # Variables sheet
    all_teachers_marker: str = "ALL"
    teacher_separator: str = "|"

    # Form Responses sheet
    not_applicable_marker: str = "N/A"
    columns: ColumnKeywords = field(default_factory=ColumnKeywords)

    # output workbook
    alternates_label: str = "ALTERNATES"
    include_summary_sheet: bool = True
    summary_sheet_name: str = "Summary"
    style: OutputStyle = field(default_factory=OutputStyle)


DEFAULT_CONFIG = AppConfig()
