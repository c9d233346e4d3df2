#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Care event model.

One frozen attrs class per event kind, plus the serialization boundary that
turns wire records into events and back."""

from babylog.events.codec import (
    decode_field,
    display_type,
    event_from_payload,
    event_to_payload,
    events_from_payload,
    format_time,
    format_timestamp,
    parse_timestamp,
    profile_from_payload,
    travel_days,
)
from babylog.events.kinds import UNSPECIFIED_VALUE_TAG, EventKind, NotePurpose, is_unspecified
from babylog.events.models import (
    EVENT_CLASSES,
    BathEvent,
    BottleFeedEvent,
    CareEvent,
    DiaperChangeEvent,
    MeasurementEvent,
    MedicineEvent,
    NoteEvent,
    NursingEvent,
    PlayEvent,
    Profile,
    PumpingEvent,
    SleepEvent,
    TravelEvent,
    UnrecognizedEvent,
    compute_hash,
)

__all__ = [
    "EVENT_CLASSES",
    "UNSPECIFIED_VALUE_TAG",
    "BathEvent",
    "BottleFeedEvent",
    "CareEvent",
    "DiaperChangeEvent",
    "EventKind",
    "MeasurementEvent",
    "MedicineEvent",
    "NoteEvent",
    "NotePurpose",
    "NursingEvent",
    "PlayEvent",
    "Profile",
    "PumpingEvent",
    "SleepEvent",
    "TravelEvent",
    "UnrecognizedEvent",
    "compute_hash",
    "decode_field",
    "display_type",
    "event_from_payload",
    "event_to_payload",
    "events_from_payload",
    "format_time",
    "format_timestamp",
    "is_unspecified",
    "parse_timestamp",
    "profile_from_payload",
    "travel_days",
]

# 🔼⚙️🔚
