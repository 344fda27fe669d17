"""Tests for candidate filters, teacher resolution and the name key."""

from volunteer_core.domain.models import EventCategory, FieldTripConfig, PartyConfig
from volunteer_core.domain.names import name_key
from volunteer_core.preprocessing.candidates import (
    by_event,
    by_teacher,
    is_all_marker,
    resolve_teachers,
)

PARTY = EventCategory.PARTY.value
TRIP = EventCategory.FIELD_TRIP.value


class TestByEvent:
    def test_matches_type_and_name(self, make_volunteer):
        a = make_volunteer("Ann", "Smith", "Fall Fest")
        b = make_volunteer("Bob", "Smith", "Fall Fest", event_type=TRIP)
        c = make_volunteer("Cat", "Jones", "Winter Party")
        assert by_event([a, b, c], PARTY, "Fall Fest") == [a]
        assert by_event([a, b, c], TRIP, "Fall Fest") == [b]

    def test_event_name_is_case_sensitive(self, make_volunteer):
        a = make_volunteer("Ann", "Smith", "Fall Fest")
        assert by_event([a], PARTY, "fall fest") == []

    def test_preserves_order(self, make_volunteer):
        vols = [make_volunteer(n, "Smith", "Fall Fest") for n in ("Zed", "Amy", "Kim")]
        assert [v.name for v in by_event(vols, PARTY, "Fall Fest")] == ["Zed", "Amy", "Kim"]

    def test_empty_input(self):
        assert by_event([], PARTY, "Fall Fest") == []


class TestByTeacher:
    def test_exact_match(self, make_volunteer):
        a = make_volunteer("Ann", "Smith", "Fall Fest")
        b = make_volunteer("Bob", "smith", "Fall Fest")
        c = make_volunteer("Cat", "Smith", "Fall Fest")
        assert by_teacher([a, b, c], "Smith") == [a, c]

    def test_no_match(self, make_volunteer):
        assert by_teacher([make_volunteer("Ann", "Smith", "Fall Fest")], "Jones") == []


class TestResolveTeachers:
    def test_party_uses_all_teachers(self):
        party = PartyConfig(name="Fall Fest", count=1)
        assert resolve_teachers(party, EventCategory.PARTY, ["Smith", "Jones"]) == ["Smith", "Jones"]

    def test_trip_explicit_list(self):
        trip = FieldTripConfig(name="Zoo", count=1, teachers=("Jones",))
        assert resolve_teachers(trip, EventCategory.FIELD_TRIP, ["Smith", "Jones"]) == ["Jones"]

    def test_trip_all_marker(self):
        trip = FieldTripConfig(name="Zoo", count=1, teachers=("ALL",))
        assert resolve_teachers(trip, EventCategory.FIELD_TRIP, ["A", "B"]) == ["A", "B"]

    def test_all_marker_must_stand_alone(self):
        assert is_all_marker(["ALL"])
        assert not is_all_marker(["ALL", "Smith"])
        assert not is_all_marker([])

    def test_custom_marker(self):
        trip = FieldTripConfig(name="Zoo", count=1, teachers=("*",))
        assert resolve_teachers(trip, EventCategory.FIELD_TRIP, ["A"], marker="*") == ["A"]


class TestNameKey:
    def test_lower_cases(self):
        assert name_key("Ann LEE") == "ann lee"
        assert name_key("ann lee") == name_key("ANN LEE")

    def test_does_not_trim(self):
        assert name_key(" Ann ") == " ann "
