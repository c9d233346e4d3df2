#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the care event model and its serialization boundary."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import attrs
import pytest

from babylog.errors import EventDecodeError
from babylog.events import (
    UNSPECIFIED_VALUE_TAG,
    BottleFeedEvent,
    DiaperChangeEvent,
    EventKind,
    MedicineEvent,
    NoteEvent,
    NotePurpose,
    NursingEvent,
    UnrecognizedEvent,
    compute_hash,
    decode_field,
    display_type,
    event_from_payload,
    event_to_payload,
    events_from_payload,
    format_time,
    format_timestamp,
    is_unspecified,
    parse_timestamp,
    profile_from_payload,
    travel_days,
)


def record(**overrides):
    base = {"id": "e1", "TYPE": "BOTTLE_FEED", "time": "2025-03-14T09:30:00.000Z", "volume": 90}
    base.update(overrides)
    return base


class TestTimestamps:
    """Test timestamp parsing and formatting."""

    def test_parse_utc_designator(self) -> None:
        """Test that a trailing Z parses to an aware UTC datetime."""
        parsed = parse_timestamp("2025-03-14T09:30:00.000Z")
        assert parsed == datetime(2025, 3, 14, 9, 30, tzinfo=UTC)

    def test_naive_input_is_utc(self) -> None:
        """Test that a timestamp without offset is taken as UTC."""
        assert parse_timestamp("2025-03-14T09:30:00").tzinfo == UTC

    def test_format_converts_to_utc_with_milliseconds(self) -> None:
        """Test the wire format of a non-UTC datetime."""
        paris = timezone(timedelta(hours=1))
        value = datetime(2025, 3, 14, 10, 30, 0, 250000, tzinfo=paris)
        assert format_timestamp(value) == "2025-03-14T09:30:00.250Z"

    def test_parse_rejects_non_strings(self) -> None:
        """Test that unsupported values raise ValueError."""
        with pytest.raises(ValueError):
            parse_timestamp(12345)


class TestDecoding:
    """Test decoding wire records into event variants."""

    def test_decodes_matching_variant(self) -> None:
        """Test that the TYPE tag selects the event class."""
        event = event_from_payload(record())
        assert isinstance(event, BottleFeedEvent)
        assert event.kind is EventKind.BOTTLE_FEED
        assert event.volume == 90
        assert event.time == datetime(2025, 3, 14, 9, 30, tzinfo=UTC)

    def test_form_encoded_values_are_coerced(self) -> None:
        """Test that text values are converted by declared field type."""
        event = event_from_payload(
            {
                "id": "n1",
                "TYPE": "NURSING",
                "time": "2025-03-14T09:30:00Z",
                "leftDuration": "480000",
                "rightDuration": "",
            }
        )
        assert isinstance(event, NursingEvent)
        assert event.left_duration == 480000
        assert event.right_duration is None

    def test_boolean_text(self) -> None:
        """Test that diaper flags accept the form spelling of booleans."""
        event = event_from_payload(record(TYPE="DIAPER_CHANGE", pee="true", poop="false"))
        assert isinstance(event, DiaperChangeEvent)
        assert event.pee is True
        assert event.poop is False

    def test_foreign_fields_are_ignored(self) -> None:
        """Test that fields of other kinds do not leak into the event."""
        event = event_from_payload(record(leftDuration=1000, prescription="x"))
        assert not hasattr(event, "left_duration")
        assert "prescription" not in event.variant_values()

    def test_server_hash_is_kept(self) -> None:
        """Test that a HASH sent by the server is used as is."""
        event = event_from_payload(record(HASH="server-token"))
        assert event.hash == "server-token"

    def test_hash_computed_when_absent(self) -> None:
        """Test that a missing HASH is computed from observable fields."""
        event = event_from_payload(record())
        assert event.hash == compute_hash(event)

    @pytest.mark.parametrize(
        ("tag", "purpose"),
        [("MEMORY", NotePurpose.MEMORY), ("FOOD_FIRST_TRY", NotePurpose.FOOD_FIRST_TRY)],
    )
    def test_pseudo_types_become_notes(self, tag: str, purpose: NotePurpose) -> None:
        """Test that pseudo note tags decode to a NOTE with the matching purpose."""
        event = event_from_payload(record(TYPE=tag, title="First smile"))
        assert isinstance(event, NoteEvent)
        assert event.purpose is purpose
        assert event.title == "First smile"

    def test_unknown_type_is_kept_unrecognized(self) -> None:
        """Test that an unknown TYPE decodes to UnrecognizedEvent instead of failing."""
        event = event_from_payload(record(TYPE="TEETHING"))
        assert isinstance(event, UnrecognizedEvent)
        assert event.kind is None
        assert event.type_tag == "TEETHING"
        assert event.raw["volume"] == 90

    def test_missing_id(self) -> None:
        """Test that a record without id is rejected."""
        with pytest.raises(EventDecodeError, match="no 'id'"):
            event_from_payload(record(id=None))

    def test_invalid_time(self) -> None:
        """Test that an unparsable time is rejected with the event id."""
        with pytest.raises(EventDecodeError) as exc_info:
            event_from_payload(record(time="yesterday"))
        assert exc_info.value.event_id == "e1"

    def test_missing_required_field(self) -> None:
        """Test that a bottle feed without volume is rejected."""
        payload = record()
        del payload["volume"]
        with pytest.raises(EventDecodeError, match="missing required field"):
            event_from_payload(payload)

    def test_unspecified_prescription_is_a_value(self) -> None:
        """Test that the unspecified sentinel survives decoding, unlike empty text."""
        event = event_from_payload(record(TYPE="MEDICINE", prescription=UNSPECIFIED_VALUE_TAG))
        assert isinstance(event, MedicineEvent)
        assert is_unspecified(event.prescription)
        assert event_from_payload(record(TYPE="MEDICINE", prescription="")).prescription is None


class TestCanonicalList:
    """Test decoding a whole canonical list."""

    def test_sorted_most_recent_first(self) -> None:
        """Test list ordering by time, descending."""
        events = events_from_payload(
            [
                record(id="a", time="2025-03-14T08:00:00Z"),
                record(id="b", time="2025-03-14T10:00:00Z"),
                record(id="c", time="2025-03-14T09:00:00Z"),
            ]
        )
        assert [e.id for e in events] == ["b", "c", "a"]

    def test_duplicate_ids_rejected(self) -> None:
        """Test that ids must be unique across the list."""
        with pytest.raises(EventDecodeError, match="duplicate"):
            events_from_payload([record(), record()])


class TestEncoding:
    """Test encoding events back to wire records."""

    def test_wire_names_and_tags(self, nursing: NursingEvent) -> None:
        """Test camelCase field names, TYPE and HASH."""
        payload = event_to_payload(nursing)
        assert payload["TYPE"] == "NURSING"
        assert payload["leftDuration"] == 300000
        assert payload["rightDuration"] == 180000
        assert payload["time"] == "2025-03-14T09:30:00.000Z"
        assert payload["HASH"] == nursing.hash

    def test_decode_of_encoded_event_is_equal(self, bottle_feed: BottleFeedEvent) -> None:
        """Test that the codec preserves every observable field."""
        assert event_from_payload(event_to_payload(bottle_feed)) == bottle_feed

    def test_unrecognized_keeps_raw_record(self, unrecognized: UnrecognizedEvent) -> None:
        """Test that unknown records are written back with their own tag."""
        payload = event_to_payload(unrecognized)
        assert payload["TYPE"] == "TEETHING"
        assert payload["id"] == "x1"


class TestHash:
    """Test the change-detection token."""

    def test_changes_with_observable_field(self, bottle_feed: BottleFeedEvent) -> None:
        """Test that changing the volume changes the hash."""
        changed = attrs.evolve(bottle_feed, volume=120, hash=None)
        assert changed.hash != bottle_feed.hash

    def test_stable_for_equal_fields(self, bottle_feed: BottleFeedEvent) -> None:
        """Test that recomputing without changes gives the same hash."""
        assert attrs.evolve(bottle_feed, hash=None).hash == bottle_feed.hash

    def test_comment_is_observable(self, bottle_feed: BottleFeedEvent) -> None:
        """Test that the comment participates in the hash."""
        assert attrs.evolve(bottle_feed, comment="spit up", hash=None).hash != bottle_feed.hash


class TestDecodeField:
    """Test decoding a single field for an existing event."""

    def test_accepts_wire_name(self, bottle_feed: BottleFeedEvent) -> None:
        """Test that wire names map to python names and values are coerced."""
        assert decode_field(bottle_feed, "formulaMilkVolume", "30") == ("formula_milk_volume", 30.0)

    def test_time_is_parsed(self, bottle_feed: BottleFeedEvent) -> None:
        """Test that time values are parsed as timestamps."""
        name, value = decode_field(bottle_feed, "time", "2025-03-14T11:00:00Z")
        assert name == "time"
        assert value == datetime(2025, 3, 14, 11, 0, tzinfo=UTC)

    def test_rejects_foreign_field(self, bottle_feed: BottleFeedEvent) -> None:
        """Test that fields of other kinds are rejected."""
        with pytest.raises(EventDecodeError, match="not a field"):
            decode_field(bottle_feed, "leftDuration", "1000")


class TestDisplayHelpers:
    """Test display labels derived from events."""

    def test_diaper_labels(self, diaper: DiaperChangeEvent) -> None:
        """Test that POOP wins over PEE."""
        assert display_type(diaper) == "PEE"
        assert display_type(attrs.evolve(diaper, poop=True, hash=None)) == "POOP"

    def test_note_labels(self, event_time: datetime) -> None:
        """Test the note labels by purpose."""
        assert display_type(NoteEvent(id="n", time=event_time, purpose=NotePurpose.MEMORY)) == "MEMORY"
        assert display_type(NoteEvent(id="n", time=event_time, purpose=NotePurpose.FOOD_FIRST_TRY)) == "Food"
        assert display_type(NoteEvent(id="n", time=event_time)) == "NOTE"

    def test_other_kinds_use_tag(self, bottle_feed: BottleFeedEvent, unrecognized: UnrecognizedEvent) -> None:
        """Test the default label and the unknown label."""
        assert display_type(bottle_feed) == "BOTTLE_FEED"
        assert display_type(unrecognized) == "UNKNOWN"

    def test_travel_days(self, travel, bottle_feed: BottleFeedEvent) -> None:
        """Test calendar-day difference for trips."""
        assert travel_days(travel) == 3
        assert travel_days(attrs.evolve(travel, end_time=None, hash=None)) is None
        assert travel_days(bottle_feed) is None

    def test_format_time(self, bottle_feed: BottleFeedEvent) -> None:
        """Test the time column with and without date."""
        assert format_time(bottle_feed) == "09:30"
        assert format_time(bottle_feed, show_date=True) == "Mar 14 2025 09:30"


class TestProfile:
    """Test profile decoding."""

    def test_profile_from_payload(self) -> None:
        """Test wire names of the profile record."""
        profile = profile_from_payload(
            {"id": "p1", "name": "Ada", "nickname": "", "dateOfBirth": "2024-12-01T00:00:00.000Z"}
        )
        assert profile.id == "p1"
        assert profile.nickname is None
        assert profile.date_of_birth == date(2024, 12, 1)
        assert profile.display_name == "Ada"


# 🔼⚙️🔚
