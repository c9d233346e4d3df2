#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Care event variants.

Every kind is its own frozen attrs class carrying only the fields that are
meaningful for it. The shared fields (id, time, comment, hash) live on
``CareEvent``. Records whose type tag is not a known kind are kept as
``UnrecognizedEvent`` so that they can be displayed but never edited.

The ``hash`` field is a change-detection token: it is taken from the server
when present and computed from the observable fields otherwise. Deriving a
new event with ``attrs.evolve(event, ..., hash=None)`` recomputes it.
"""

from __future__ import annotations

from datetime import date, datetime
import hashlib
from typing import Any, ClassVar

import attrs
from attrs import define, field

from babylog.events.kinds import EventKind, NotePurpose

COMMON_FIELDS = ("id", "time", "comment", "hash")


@define(frozen=True, kw_only=True)
class CareEvent:
    """Fields shared by every care event."""

    kind: ClassVar[EventKind | None] = None

    id: str
    time: datetime
    comment: str | None = field(default=None)
    hash: str | None = field(default=None)

    def __attrs_post_init__(self) -> None:
        if self.hash is None:
            object.__setattr__(self, "hash", compute_hash(self))

    @classmethod
    def variant_fields(cls) -> tuple[str, ...]:
        """Names of the fields specific to this kind."""
        return tuple(a.name for a in attrs.fields(cls) if a.name not in COMMON_FIELDS)

    def variant_values(self) -> dict[str, Any]:
        """Values of the kind-specific fields."""
        return {name: getattr(self, name) for name in self.variant_fields()}


@define(frozen=True, kw_only=True)
class BottleFeedEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.BOTTLE_FEED

    volume: float
    formula_milk_volume: float | None = field(default=None)
    duration: int | None = field(default=None)


@define(frozen=True, kw_only=True)
class PumpingEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.PUMPING

    volume: float
    duration: int | None = field(default=None)


@define(frozen=True, kw_only=True)
class NursingEvent(CareEvent):
    """Breastfeeding session; durations are in milliseconds."""

    kind: ClassVar[EventKind] = EventKind.NURSING

    left_duration: int | None = field(default=None)
    right_duration: int | None = field(default=None)


@define(frozen=True, kw_only=True)
class DiaperChangeEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.DIAPER_CHANGE

    pee: bool = field(default=False)
    poop: bool = field(default=False)


@define(frozen=True, kw_only=True)
class PlayEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.PLAY

    duration: int | None = field(default=None)


@define(frozen=True, kw_only=True)
class SleepEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.SLEEP

    duration: int | None = field(default=None)


@define(frozen=True, kw_only=True)
class BathEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.BATH

    duration: int | None = field(default=None)


@define(frozen=True, kw_only=True)
class MeasurementEvent(CareEvent):
    """Height in centimeters, weight in kilograms."""

    kind: ClassVar[EventKind] = EventKind.MEASUREMENT

    height: float | None = field(default=None)
    weight: float | None = field(default=None)


@define(frozen=True, kw_only=True)
class MedicineEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.MEDICINE

    prescription: str | None = field(default=None)


@define(frozen=True, kw_only=True)
class NoteEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.NOTE

    title: str | None = field(default=None)
    purpose: NotePurpose | None = field(default=None)


@define(frozen=True, kw_only=True)
class TravelEvent(CareEvent):
    kind: ClassVar[EventKind] = EventKind.TRAVEL

    destination: str | None = field(default=None)
    end_time: datetime | None = field(default=None)


@define(frozen=True, kw_only=True)
class UnrecognizedEvent(CareEvent):
    """A record with a type tag outside the known kinds. Display only."""

    type_tag: str = field(default="")
    raw: dict[str, Any] = field(factory=dict, eq=False, hash=False, repr=False)

    @classmethod
    def variant_fields(cls) -> tuple[str, ...]:
        return ()


EVENT_CLASSES: dict[EventKind, type[CareEvent]] = {
    EventKind.BOTTLE_FEED: BottleFeedEvent,
    EventKind.PUMPING: PumpingEvent,
    EventKind.NURSING: NursingEvent,
    EventKind.DIAPER_CHANGE: DiaperChangeEvent,
    EventKind.PLAY: PlayEvent,
    EventKind.SLEEP: SleepEvent,
    EventKind.BATH: BathEvent,
    EventKind.MEASUREMENT: MeasurementEvent,
    EventKind.MEDICINE: MedicineEvent,
    EventKind.NOTE: NoteEvent,
    EventKind.TRAVEL: TravelEvent,
}


@define(frozen=True, kw_only=True)
class Profile:
    """The subject the events belong to. Read-only for the core."""

    id: str
    name: str = field(default="")
    nickname: str | None = field(default=None)
    date_of_birth: date | None = field(default=None)

    @property
    def display_name(self) -> str:
        return self.nickname or self.name or self.id


def _token(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, NotePurpose):
        return value.value
    return repr(value)


def compute_hash(event: CareEvent) -> str:
    """Change-detection token over every observable field of an event."""
    kind = event.kind.value if event.kind else getattr(event, "type_tag", "")
    parts = [kind, event.id, _token(event.time), _token(event.comment)]
    parts.extend(f"{name}={_token(value)}" for name, value in event.variant_values().items())
    return hashlib.blake2b("|".join(parts).encode("utf-8"), digest_size=8).hexdigest()


# 🔼⚙️🔚
