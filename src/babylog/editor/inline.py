#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Inline numeric editing of a single timeline row."""

from __future__ import annotations

from typing import Any

from provide.foundation.logger import get_logger

from babylog.editor.number_input import (
    HEIGHT,
    INLINE_LEFT_DURATION,
    INLINE_RIGHT_DURATION,
    VOLUME,
    WEIGHT,
    NumberField,
)
from babylog.events.kinds import EventKind
from babylog.events.models import CareEvent
from babylog.runtime.dispatcher import MutationDispatcher

log = get_logger(__name__)

INLINE_FIELDS: dict[EventKind, tuple[NumberField, ...]] = {
    EventKind.BOTTLE_FEED: (VOLUME,),
    EventKind.PUMPING: (VOLUME,),
    EventKind.NURSING: (INLINE_LEFT_DURATION, INLINE_RIGHT_DURATION),
    EventKind.MEASUREMENT: (HEIGHT, WEIGHT),
}


class InlineEventEditor:
    """Local values of a row's inline inputs, pushed to the server debounced.

    Every change updates the local value at once, then cancels and re-arms
    the debounced update. The update carries only the fields changed through
    this editor; untouched fields are omitted so the server keeps them.
    """

    def __init__(
        self,
        event: CareEvent,
        dispatcher: MutationDispatcher,
        *,
        read_only: bool = False,
        window_ms: int | None = None,
    ) -> None:
        self.event = event
        self.read_only = read_only
        self.fields = {f.name: f for f in INLINE_FIELDS.get(event.kind, ())} if event.kind else {}
        self.values: dict[str, Any] = {name: getattr(event, name) for name in self.fields}
        self._touched: dict[str, Any] = {}
        self._update = dispatcher.debounced_update(window_ms)

    @property
    def editable(self) -> bool:
        return bool(self.fields) and not self.read_only

    @property
    def pending(self) -> bool:
        return self._update.pending

    def display_value(self, name: str) -> float | None:
        return self.fields[name].to_display(self.values.get(name))

    def set_value(self, name: str, displayed: float) -> bool:
        """Set a field from its displayed value (ml, minutes, cm, kg).

        Returns:
            False when the editor is read-only or the field is not inline-editable
        """
        if not self.editable or name not in self.fields:
            log.debug("Inline edit ignored", event_id=self.event.id, field=name, read_only=self.read_only)
            return False
        stored = self.fields[name].to_stored(displayed)
        self._update.cancel()
        self.values[name] = stored
        self._touched[name] = stored
        self._update(self.event, dict(self._touched))
        return True

    def increment(self, name: str) -> bool:
        return self._step(name, 1)

    def decrement(self, name: str) -> bool:
        return self._step(name, -1)

    def _step(self, name: str, direction: int) -> bool:
        if name not in self.fields:
            return False
        number = self.fields[name]
        current = number.to_display(self.values.get(name)) or 0
        return self.set_value(name, current + direction * number.step)

    def close(self) -> None:
        """Drop an update still waiting for its window; call when the row goes away."""
        self._update.cancel()

    async def drain(self) -> None:
        await self._update.drain()


# 🔼⚙️🔚
