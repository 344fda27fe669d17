"""Shared fixtures: volunteer factories and on-the-fly sign-up workbooks."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import Workbook

from volunteer_core.domain.models import EventCategory, Volunteer

VARIABLES_HEADER = ["Party Name", "Count Per Teacher", "Field Trip Name", "Teachers", "Count Per Teacher"]
RESPONSES_HEADER = [
    "Timestamp",
    "Teacher",
    "First and Last Name",
    "Phone Number",
    "Email Address",
    "Which party or parties would you like to help with?",
    "Which field trip(s) can you chaperone?",
]


def _volunteer(name, teacher, event_name, event_type=EventCategory.PARTY.value, phone="", email=""):
    return Volunteer(
        name=name,
        email=email or f"{name.lower().replace(' ', '.')}@example.com",
        phone=phone,
        teacher=teacher,
        event_type=event_type,
        event_name=event_name,
    )


@pytest.fixture
def make_volunteer():
    return _volunteer


def _write_workbook(path: Path, variables_rows, response_rows, responses_header=None, sheets=None) -> Path:
    wb = Workbook()
    ws = wb.active
    ws.title = "Variables"
    ws.append(VARIABLES_HEADER)
    for row in variables_rows:
        ws.append(row)

    resp = wb.create_sheet("Form Responses 1")
    resp.append(responses_header or RESPONSES_HEADER)
    for row in response_rows:
        resp.append(row)

    for name in sheets or []:
        wb.create_sheet(name)

    wb.save(path)
    return path


@pytest.fixture
def write_workbook():
    return _write_workbook


@pytest.fixture
def signup_workbook(tmp_path):
    """A small but complete export: parties, field trips (explicit and ALL), odd rows."""
    variables = [
        ["Fall Fest", 2, "Zoo", "ALL", 1],
        ["Winter Party", "1", "Museum", "Smith | Jones", 2],
        ["Spring Fling", 1, None, None, None],
        [None, None, "Farm", "Jones", "3 parents"],
    ]
    responses = [
        ["2024-09-01 10:00", "Smith", " Ann Lee ", "555-123-4567", "ann@example.com", "Fall Fest, Winter Party", "Zoo"],
        ["2024-09-01 10:05", "Jones", "Bob Ray", "555-987-6543", "bob@example.com", "N/A", "Museum, Farm"],
        ["2024-09-01 10:07", "Smith", "Cat Poe", "", "cat@example.com", "Spring Fling", None],
        ["2024-09-01 10:09", None, "No Teacher", "", "nt@example.com", "Fall Fest", None],
        ["2024-09-01 10:11", "Lopez", "Dee Fox", "1", "dee@example.com", None, None],
    ]
    return _write_workbook(tmp_path / "input.xlsx", variables, responses)
