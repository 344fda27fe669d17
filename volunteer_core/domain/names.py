# volunteer_core/domain/names.py
from __future__ import annotations


def name_key(name: str) -> str:
    """Dedup identity of a volunteer: case-insensitive name (already trimmed by the reader)"""
    return name.lower()
