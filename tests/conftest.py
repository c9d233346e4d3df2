#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared fixtures: sample events, a recording transport and a dispatcher."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

import pytest

from babylog.config import TimingConfig
from babylog.errors import TransportError
from babylog.events import (
    BottleFeedEvent,
    DiaperChangeEvent,
    MeasurementEvent,
    MedicineEvent,
    NursingEvent,
    Profile,
    TravelEvent,
    UnrecognizedEvent,
)
from babylog.lifecycle import NoticeCollector
from babylog.runtime import MutationDispatcher

MINUTE_MS = 60_000


class RecordingTransport:
    """Command endpoint double that records payloads.

    Set ``gate`` to hold calls in flight until it is set; set ``fail`` to make
    every call raise ``TransportError``.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.gate: asyncio.Event | None = None
        self.fail = False

    async def run_command(self, payload: Mapping[str, Any]) -> Any:
        self.calls.append(dict(payload))
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise TransportError("server unavailable", action=str(payload.get("__action")))
        return {"ok": True}


class ScriptedSuggestions:
    """Suggestion source double answering from a dict, optionally slowly per query."""

    def __init__(self, answers: dict[str, list[str]] | None = None) -> None:
        self.answers = answers or {}
        self.queries: list[tuple[str, str]] = []
        self.delays: dict[str, float] = {}
        self.fail = False

    async def fetch_top_prescriptions(self, profile_id: str, search_text: str) -> list[str]:
        self.queries.append((profile_id, search_text))
        delay = self.delays.get(search_text, 0)
        if delay:
            await asyncio.sleep(delay)
        if self.fail:
            raise TransportError("suggestions unavailable")
        return list(self.answers.get(search_text, []))


@pytest.fixture
def event_time() -> datetime:
    return datetime(2025, 3, 14, 9, 30, tzinfo=UTC)


@pytest.fixture
def profile() -> Profile:
    return Profile(id="p1", name="Ada", nickname="Addie")


@pytest.fixture
def bottle_feed(event_time: datetime) -> BottleFeedEvent:
    return BottleFeedEvent(id="e1", time=event_time, volume=90)


@pytest.fixture
def nursing(event_time: datetime) -> NursingEvent:
    return NursingEvent(id="e2", time=event_time, left_duration=5 * MINUTE_MS, right_duration=3 * MINUTE_MS)


@pytest.fixture
def measurement(event_time: datetime) -> MeasurementEvent:
    return MeasurementEvent(id="e3", time=event_time, height=52, weight=3.8)


@pytest.fixture
def medicine(event_time: datetime) -> MedicineEvent:
    return MedicineEvent(id="e4", time=event_time, prescription="Paracetamol")


@pytest.fixture
def diaper(event_time: datetime) -> DiaperChangeEvent:
    return DiaperChangeEvent(id="e5", time=event_time, pee=True)


@pytest.fixture
def travel(event_time: datetime) -> TravelEvent:
    return TravelEvent(
        id="e6",
        time=event_time,
        destination="Lyon",
        end_time=datetime(2025, 3, 17, 8, 0, tzinfo=UTC),
    )


@pytest.fixture
def unrecognized(event_time: datetime) -> UnrecognizedEvent:
    return UnrecognizedEvent(id="x1", time=event_time, type_tag="TEETHING", raw={"TYPE": "TEETHING"})


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def suggestion_source() -> ScriptedSuggestions:
    return ScriptedSuggestions()


@pytest.fixture
def collector() -> NoticeCollector:
    return NoticeCollector()


@pytest.fixture
def dispatcher(transport: RecordingTransport, collector: NoticeCollector) -> MutationDispatcher:
    return MutationDispatcher(transport, collector=collector, timing=TimingConfig())


# 🔼⚙️🔚
