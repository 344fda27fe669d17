# volunteer_core/reporting/formatting.py
from __future__ import annotations

import re
from typing import Collection

SHEET_NAME_MAX = 31  # Excel limit

_SHEET_REPLACE = {"/": "-", "\\": "-"}
_SHEET_DROP = "?*[]:"


def format_phone_number(raw: str) -> str:
    """10 digits -> (xxx) xxx-xxxx; anything else is returned as typed"""
    digits = re.sub(r"\D", "", raw or "")
    if len(digits) != 10:
        return raw
    return f"({digits[0:3]}) {digits[3:6]}-{digits[6:10]}"


def sanitize_sheet_name(name: str) -> str:
    for old, new in _SHEET_REPLACE.items():
        name = name.replace(old, new)
    name = "".join(ch for ch in name if ch not in _SHEET_DROP)
    return name[:SHEET_NAME_MAX]


def unique_sheet_name(name: str, taken: Collection[str]) -> str:
    """Sanitized name, suffixed " 2", " 3", ... when already used (case-insensitive, like Excel)"""
    base = sanitize_sheet_name(name) or "Sheet"
    lowered = {t.lower() for t in taken}
    if base.lower() not in lowered:
        return base
    n = 2
    while True:
        suffix = f" {n}"
        candidate = base[:SHEET_NAME_MAX - len(suffix)] + suffix
        if candidate.lower() not in lowered:
            return candidate
        n += 1
