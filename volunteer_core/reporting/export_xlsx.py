# volunteer_core/reporting/export_xlsx.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Union

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from volunteer_core.config import AppConfig, DEFAULT_CONFIG, OutputStyle
from volunteer_core.domain.models import AllocationResult, EventConfig, TeacherAssignments, Volunteer
from volunteer_core.reporting.formatting import format_phone_number, unique_sheet_name
from volunteer_core.reporting.report import build_fill_summary

Target = Union[str, BinaryIO]

FIRST_COL, LAST_COL = "A", "D"
HEADERS = ("Teacher", "Name", "Phone", "Email")


def _fill(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _side(color: str) -> Side:
    return Side(style="thin", color=color)


@dataclass(frozen=True)
class CellStyle:
    font: Font = field(default_factory=Font)
    fill: PatternFill = field(default_factory=PatternFill)
    border: Border = field(default_factory=Border)
    alignment: Alignment = field(default_factory=lambda: Alignment(horizontal="left", vertical="center"))


@dataclass(frozen=True)
class SheetStyles:
    title: CellStyle
    header: CellStyle
    teacher: CellStyle
    volunteer: CellStyle
    divider: CellStyle
    alternate: CellStyle

    @classmethod
    def from_config(cls, s: OutputStyle) -> "SheetStyles":
        left = Alignment(horizontal="left", vertical="center")
        return cls(
            title=CellStyle(
                font=Font(bold=True, size=s.title_size, color=s.text_color),
                fill=_fill(s.header_fill),
                border=Border(bottom=_side(s.header_border)),
                alignment=left,
            ),
            header=CellStyle(
                font=Font(bold=True, size=s.header_size, color=s.text_color),
                fill=_fill(s.header_fill),
                border=Border(bottom=_side(s.header_border)),
                alignment=left,
            ),
            teacher=CellStyle(
                font=Font(bold=True, size=s.teacher_size, color=s.teacher_color),
                fill=_fill(s.teacher_fill),
                border=Border(
                    left=_side(s.teacher_border), right=_side(s.teacher_border),
                    top=_side(s.teacher_border), bottom=_side(s.teacher_border),
                ),
                alignment=left,
            ),
            volunteer=CellStyle(alignment=left),
            divider=CellStyle(
                font=Font(bold=True, size=s.teacher_size, color=s.divider_color),
                fill=_fill(s.divider_fill),
                border=Border(top=_side(s.divider_border), bottom=_side(s.divider_border)),
                alignment=Alignment(horizontal="center", vertical="center"),
            ),
            alternate=CellStyle(
                font=Font(italic=True, color=s.alternate_color),
                fill=_fill(s.alternate_fill),
                border=Border(bottom=_side(s.divider_border)),
                alignment=left,
            ),
        )


def _style_row(ws: Worksheet, row: int, style: CellStyle, height: float) -> None:
    for cells in ws[f"{FIRST_COL}{row}:{LAST_COL}{row}"]:
        for c in cells:
            c.font = style.font
            c.fill = style.fill
            c.border = style.border
            c.alignment = style.alignment
    ws.row_dimensions[row].height = height


def _banner_row(ws: Worksheet, row: int, text: str, style: CellStyle, height: float) -> None:
    ws[f"{FIRST_COL}{row}"] = text
    ws.merge_cells(f"{FIRST_COL}{row}:{LAST_COL}{row}")
    _style_row(ws, row, style, height)


def _volunteer_row(ws: Worksheet, row: int, teacher: str, v: Volunteer, style: CellStyle, height: float) -> None:
    ws[f"A{row}"] = teacher
    ws[f"B{row}"] = v.name
    ws[f"C{row}"] = format_phone_number(v.phone)
    ws[f"D{row}"] = v.email
    _style_row(ws, row, style, height)


def write_event_sheet(
    ws: Worksheet,
    event: EventConfig,
    by_teacher: TeacherAssignments,
    styles: SheetStyles,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> None:
    """
    Layout:
    row 1 title, row 2 column headers, then per teacher (sorted):
    teacher banner, primaries, blank rows up to the event count,
    ALTERNATES divider + alternates (if any), one spacer row.
    """
    geo = cfg.style
    _banner_row(ws, 1, event.name, styles.title, geo.title_height)
    for col, width in geo.col_widths:
        ws.column_dimensions[col].width = width

    for col, title in zip("ABCD", HEADERS):
        ws[f"{col}2"] = title
    _style_row(ws, 2, styles.header, geo.header_height)

    row = 3
    for teacher in sorted(by_teacher):
        vols = by_teacher[teacher]
        primaries = [v for v in vols if not v.is_alternate]
        alternates = [v for v in vols if v.is_alternate]

        _banner_row(ws, row, teacher, styles.teacher, geo.teacher_height)
        row += 1

        for v in primaries:
            _volunteer_row(ws, row, teacher, v, styles.volunteer, geo.row_height)
            row += 1

        # open slots stay as blank lines to be filled by hand
        for _ in range(max(event.count, 0) - len(primaries)):
            _style_row(ws, row, styles.volunteer, geo.row_height)
            row += 1

        if alternates:
            _banner_row(ws, row, cfg.alternates_label, styles.divider, geo.row_height)
            row += 1
            for v in alternates:
                _volunteer_row(ws, row, teacher, v, styles.alternate, geo.row_height)
                row += 1

        row += 1


def export_result_xlsx(
    out: Target,
    result: AllocationResult,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> Target:
    if isinstance(out, (str, Path)):
        Path(out).parent.mkdir(parents=True, exist_ok=True)

    styles = SheetStyles.from_config(cfg.style)
    with pd.ExcelWriter(out, engine="openpyxl") as w:
        book = w.book
        # parties first, then field trips, in Variables order
        for category, event in result.events():
            name = unique_sheet_name(event.name, book.sheetnames)
            ws = book.create_sheet(title=name)
            write_event_sheet(ws, event, result.table.for_event(category, event.name), styles, cfg)

        if cfg.include_summary_sheet:
            summary = build_fill_summary(result, cfg)
            sheet = unique_sheet_name(cfg.summary_sheet_name, book.sheetnames)
            summary.to_excel(w, sheet_name=sheet, index=False)
    return out
