#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Headless model of the event timeline.

The grid owns nothing but a reference to the last canonical list handed to
it. Its rows are recomputed on every call from that list and the mutations
currently in flight, so an edit shows immediately and a failed one reverts as
soon as the canonical list is refreshed.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from attrs import define, field
from provide.foundation.logger import get_logger

from babylog.client.protocol import SuggestionSource
from babylog.editor.dialog import EventEditor
from babylog.editor.inline import InlineEventEditor
from babylog.events.codec import display_type, format_time, travel_days
from babylog.events.models import CareEvent, Profile
from babylog.lifecycle.mutation import MutationSettled
from babylog.lifecycle.protocol import Notice
from babylog.runtime.dispatcher import MutationDispatcher
from babylog.runtime.reconciler import merge_pending, pending_event_ids, row_key

log = get_logger(__name__)


@define(frozen=True, slots=True)
class EventRow:
    """One displayed timeline row."""

    key: str
    event: CareEvent
    time_label: str
    type_label: str
    pending: bool = field(default=False)
    travel_days: int | None = field(default=None)

    @property
    def comment(self) -> str | None:
        return self.event.comment


class EventGrid:
    """Timeline rows plus the entry points for inline and dialog editing.

    Args:
        profile: Subject the events belong to
        events: Canonical list, most recent first
        dispatcher: Issues mutation calls
        suggestion_source: Prescription lookup for the dialog editor
        read_only: Disable inline edits (and dialog edits unless enabled)
        enable_dialog_edit: Allow the dialog to edit a read-only grid
        show_date: Include the date in time labels
        on_settled: Called when a mutation settles; use it to reload the canonical list
    """

    def __init__(
        self,
        profile: Profile,
        events: Sequence[CareEvent],
        dispatcher: MutationDispatcher,
        suggestion_source: SuggestionSource | None = None,
        *,
        read_only: bool = False,
        enable_dialog_edit: bool = False,
        show_date: bool = False,
        on_settled: Callable[[MutationSettled], None] | None = None,
    ) -> None:
        self.profile = profile
        self.dispatcher = dispatcher
        self.suggestion_source = suggestion_source
        self.read_only = read_only
        self.enable_dialog_edit = enable_dialog_edit
        self.show_date = show_date
        self._events: tuple[CareEvent, ...] = tuple(events)
        self._inline: dict[str, InlineEventEditor] = {}
        self.on_settled = on_settled
        self.editor: EventEditor | None = None
        dispatcher.collector.subscribe(self._handle_notice)

    @property
    def events(self) -> tuple[CareEvent, ...]:
        """The canonical list as last refreshed."""
        return self._events

    def refresh(self, events: Sequence[CareEvent]) -> None:
        """Replace the canonical list with a freshly loaded one.

        A cached inline editor survives only while it still has an update
        scheduled against the same event; every other one is dropped so the
        next lookup rebuilds it from the new values. An update a dropped
        editor still has scheduled is sent anyway.
        """
        self._events = tuple(events)
        current = {row.key: row.event for row in self.rows()}
        for key, editor in list(self._inline.items()):
            event = current.get(key)
            if event is None or not editor.pending or event.hash != editor.event.hash:
                del self._inline[key]
        log.debug("Canonical list refreshed", count=len(self._events))

    def rows(self) -> list[EventRow]:
        pending = self.dispatcher.pending_mutations()
        pending_ids = pending_event_ids(pending)
        return [
            EventRow(
                key=row_key(event, pending_ids),
                event=event,
                time_label=format_time(event, self.show_date),
                type_label=display_type(event),
                pending=event.id in pending_ids,
                travel_days=travel_days(event),
            )
            for event in merge_pending(self._events, pending)
        ]

    def inline_editor(self, row: EventRow) -> InlineEventEditor:
        """Inline editor for a row, kept for as long as the row key is stable."""
        editor = self._inline.get(row.key)
        if editor is None:
            editor = InlineEventEditor(row.event, self.dispatcher, read_only=self.read_only)
            self._inline[row.key] = editor
        return editor

    def open_editor(self, event: CareEvent) -> EventEditor:
        """Open the dialog editor for an event (double click or the row menu)."""
        if self.editor is not None:
            self.editor.close()
        self.editor = EventEditor(
            event,
            self.profile,
            self.dispatcher,
            self.suggestion_source,
            read_only=self.read_only and not self.enable_dialog_edit,
        )
        return self.editor

    def close(self) -> None:
        for editor in self._inline.values():
            editor.close()
        self._inline.clear()
        if self.editor is not None:
            self.editor.close()
        self.dispatcher.collector.unsubscribe(self._handle_notice)

    def _handle_notice(self, notice: Notice) -> None:
        if isinstance(notice, MutationSettled) and self.on_settled is not None:
            self.on_settled(notice)


# 🔼⚙️🔚
