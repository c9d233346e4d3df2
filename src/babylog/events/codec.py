#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Serialization boundary between wire records and care event objects.

Wire records use camelCase field names, carry the discriminant under
``TYPE`` and the change token under ``HASH``. ``time`` and ``endTime`` are
ISO-8601 strings on the wire and aware datetimes in memory.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime
from typing import Any

import attrs
from provide.foundation.logger import get_logger

from babylog.errors import EventDecodeError
from babylog.events.kinds import (
    FOOD_LABEL,
    MEMORY_LABEL,
    NOTE_PSEUDO_TYPES,
    PEE_LABEL,
    POOP_LABEL,
    UNKNOWN_LABEL,
    EventKind,
    NotePurpose,
    parse_kind,
)
from babylog.events.models import (
    EVENT_CLASSES,
    CareEvent,
    DiaperChangeEvent,
    NoteEvent,
    Profile,
    TravelEvent,
    UnrecognizedEvent,
)

log = get_logger(__name__)

TYPE_KEY = "TYPE"
HASH_KEY = "HASH"

# python attribute name -> wire field name, for names that differ
WIRE_NAMES = {
    "formula_milk_volume": "formulaMilkVolume",
    "left_duration": "leftDuration",
    "right_duration": "rightDuration",
    "end_time": "endTime",
}
PYTHON_NAMES = {wire: name for name, wire in WIRE_NAMES.items()}

DATETIME_FIELDS = frozenset({"time", "end_time"})


def wire_name(name: str) -> str:
    return WIRE_NAMES.get(name, name)


def python_name(wire: str) -> str:
    return PYTHON_NAMES.get(wire, wire)


def parse_timestamp(value: Any) -> datetime:
    """Parse a wire timestamp into an aware datetime (naive input is UTC)."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
    else:
        raise ValueError(f"Unsupported timestamp value: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime the way the server expects: UTC with millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def encode_value(name: str, value: Any) -> Any:
    """Convert one python field value to its wire representation."""
    if value is None:
        return None
    if name in DATETIME_FIELDS and isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, NotePurpose):
        return value.value
    return value


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _to_int(value: Any) -> int:
    return int(float(value))


def _to_number(value: Any) -> float | int:
    return float(value) if isinstance(value, str) else value


# Form-encoded records carry every value as text; coerce by declared field type.
_COERCIONS = {
    "bool": _to_bool,
    "int | None": _to_int,
    "float": _to_number,
    "float | None": _to_number,
}


def _decode_value(event_cls: type[CareEvent], name: str, value: Any) -> Any:
    if value is None or value == "":
        return None
    if name in DATETIME_FIELDS:
        return parse_timestamp(value)
    if name == "purpose":
        return NotePurpose(value)
    coerce = _COERCIONS.get(str(attrs.fields_dict(event_cls)[name].type))
    return coerce(value) if coerce else value


def decode_field(event: CareEvent, name: str, value: Any) -> tuple[str, Any]:
    """Decode a single field value given by python or wire name for ``event``'s kind.

    Returns:
        The python field name and the decoded value

    Raises:
        EventDecodeError: If the field is unknown to the kind or the value is invalid
    """
    name = python_name(name)
    event_cls = type(event)
    if name not in (*event_cls.variant_fields(), "time", "comment"):
        raise EventDecodeError(f"'{name}' is not a field of {event_cls.__name__}", event.id)
    try:
        return name, _decode_value(event_cls, name, value)
    except ValueError as e:
        raise EventDecodeError(f"invalid '{name}': {e}", event.id) from e


def event_from_payload(record: Mapping[str, Any]) -> CareEvent:
    """Decode a single wire record into the matching care event variant.

    Fields that do not belong to the decoded kind are ignored. A type tag that
    is not a known kind yields an ``UnrecognizedEvent``.

    Raises:
        EventDecodeError: If ``id`` or ``time`` is missing or unparsable, or a
            required kind-specific field is missing.
    """
    event_id = record.get("id")
    if not event_id:
        raise EventDecodeError("record has no 'id'")
    event_id = str(event_id)

    try:
        time = parse_timestamp(record.get("time"))
    except ValueError as e:
        raise EventDecodeError(f"invalid 'time': {e}", event_id) from e

    common: dict[str, Any] = {
        "id": event_id,
        "time": time,
        "comment": record.get("comment") or None,
        "hash": record.get(HASH_KEY) or None,
    }

    tag = record.get(TYPE_KEY)
    kind = parse_kind(tag)
    if kind is None and tag in NOTE_PSEUDO_TYPES:
        kind = EventKind.NOTE
        common["purpose"] = NOTE_PSEUDO_TYPES[tag]
    if kind is None:
        log.debug("Decoding record with unrecognized type", event_id=event_id, type_tag=tag)
        return UnrecognizedEvent(**common, type_tag=str(tag or ""), raw=dict(record))

    event_cls = EVENT_CLASSES[kind]
    values: dict[str, Any] = {}
    for name in event_cls.variant_fields():
        wire = wire_name(name)
        if wire not in record:
            continue
        try:
            decoded = _decode_value(event_cls, name, record[wire])
        except ValueError as e:
            raise EventDecodeError(f"invalid '{wire}': {e}", event_id) from e
        if decoded is not None:
            values[name] = decoded
    values.update({k: v for k, v in common.items() if k not in values})

    try:
        return event_cls(**values)
    except TypeError as e:
        raise EventDecodeError(f"missing required field for {kind.value}: {e}", event_id) from e


def event_to_payload(event: CareEvent) -> dict[str, Any]:
    """Encode a care event into its wire record."""
    if isinstance(event, UnrecognizedEvent):
        payload = dict(event.raw)
        payload.update({"id": event.id, "time": format_timestamp(event.time), TYPE_KEY: event.type_tag})
        return payload

    payload: dict[str, Any] = {
        "id": event.id,
        TYPE_KEY: event.kind.value if event.kind else None,
        "time": format_timestamp(event.time),
        "comment": event.comment,
        HASH_KEY: event.hash,
    }
    for name, value in event.variant_values().items():
        payload[wire_name(name)] = encode_value(name, value)
    return payload


def events_from_payload(records: Iterable[Mapping[str, Any]]) -> list[CareEvent]:
    """Decode a canonical event list, most recent first.

    Raises:
        EventDecodeError: If a record is invalid or two records share an id.
    """
    events = [event_from_payload(record) for record in records]
    seen: set[str] = set()
    for event in events:
        if event.id in seen:
            raise EventDecodeError("duplicate id in canonical list", event.id)
        seen.add(event.id)
    events.sort(key=lambda e: e.time, reverse=True)
    return events


def profile_from_payload(record: Mapping[str, Any]) -> Profile:
    profile_id = record.get("id")
    if not profile_id:
        raise EventDecodeError("profile record has no 'id'")
    dob = record.get("dateOfBirth")
    return Profile(
        id=str(profile_id),
        name=record.get("name") or "",
        nickname=record.get("nickname") or None,
        date_of_birth=date.fromisoformat(dob[:10]) if dob else None,
    )


def travel_days(event: CareEvent) -> int | None:
    """Number of calendar days a trip spans, or None without an end time."""
    if not isinstance(event, TravelEvent) or event.end_time is None:
        return None
    tz = event.time.tzinfo
    return (event.end_time.astimezone(tz).date() - event.time.date()).days


def display_type(event: CareEvent) -> str:
    """Type label shown for an event; some kinds derive it from their fields."""
    if isinstance(event, DiaperChangeEvent):
        return POOP_LABEL if event.poop else PEE_LABEL
    if isinstance(event, NoteEvent):
        if event.purpose is NotePurpose.MEMORY:
            return MEMORY_LABEL
        if event.purpose is NotePurpose.FOOD_FIRST_TRY:
            return FOOD_LABEL
        return EventKind.NOTE.value
    if event.kind is None:
        return UNKNOWN_LABEL
    return event.kind.value


def format_time(event: CareEvent, show_date: bool = False) -> str:
    if show_date:
        return event.time.strftime("%b %d %Y %H:%M")
    return event.time.strftime("%H:%M")


# 🔼⚙️🔚
