"""Tests for pre-allocation checks."""

import pytest

from volunteer_core.domain.models import FieldTripConfig, InputData, PartyConfig
from volunteer_core.validation.validator import ValidationError, validate_input


def _data(volunteers=(), parties=(), trips=(), teachers=("Smith",)):
    return InputData(
        volunteers=list(volunteers),
        parties=list(parties),
        field_trips=list(trips),
        all_teachers=list(teachers),
    )


def _messages(warnings):
    return [w.message for w in warnings]


def test_no_events_is_fatal():
    with pytest.raises(ValidationError) as exc:
        validate_input(_data())
    assert "no parties" in exc.value.message


def test_clean_input_has_no_warnings(make_volunteer):
    vols = [make_volunteer("Ann", "Smith", "Fall Fest")]
    assert validate_input(_data(vols, parties=[PartyConfig("Fall Fest", 1)])) == []


def test_zero_count_warns(make_volunteer):
    vols = [make_volunteer("Ann", "Smith", "Fall Fest")]
    msgs = _messages(validate_input(_data(vols, parties=[PartyConfig("Fall Fest", 0)])))
    assert any("count per teacher is 0" in m for m in msgs)


def test_event_without_signups_warns():
    msgs = _messages(validate_input(_data(parties=[PartyConfig("Bake Sale", 2)])))
    assert msgs == ["Bake Sale: nobody signed up."]


def test_unknown_trip_teacher_warns(make_volunteer):
    vols = [make_volunteer("Ann", "Smith", "Zoo", event_type="fieldtrip")]
    trip = FieldTripConfig("Zoo", 1, ("Smith", "Garcia"))
    msgs = _messages(validate_input(_data(vols, trips=[trip])))
    assert msgs == ["Zoo: teacher 'Garcia' does not appear in any response."]


def test_all_marker_is_not_a_teacher(make_volunteer):
    vols = [make_volunteer("Ann", "Smith", "Zoo", event_type="fieldtrip")]
    trip = FieldTripConfig("Zoo", 1, ("ALL",))
    assert validate_input(_data(vols, trips=[trip])) == []


def test_duplicate_and_shared_names_warn(make_volunteer):
    vols = [
        make_volunteer("Ann", "Smith", "Pumpkins"),
        make_volunteer("Bob", "Smith", "Pumpkins", event_type="fieldtrip"),
    ]
    parties = [PartyConfig("Pumpkins", 1), PartyConfig("Pumpkins", 2)]
    trips = [FieldTripConfig("Pumpkins", 1, ("ALL",))]
    msgs = _messages(validate_input(_data(vols, parties=parties, trips=trips)))
    assert "party 'Pumpkins' is listed more than once; only the first declaration is used." in msgs
    assert any("both a party and a field trip" in m for m in msgs)
