#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Full editor for a single care event.

One editor serves every kind: it keeps a draft of the shared fields plus the
fields of the event's kind. Submitting sends the draft immediately (no
debounce); blank values are pruned so the server leaves those fields alone.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from provide.foundation.logger import get_logger

from babylog.client.protocol import SuggestionSource
from babylog.editor.number_input import DIALOG_FIELDS
from babylog.events.models import CareEvent, MedicineEvent, Profile
from babylog.runtime.dispatcher import MutationDispatcher, MutationResult
from babylog.runtime.suggestions import PrescriptionOption, SuggestionFetcher, resolve_choice

log = get_logger(__name__)

# Fields whose input falls back to 0 when cleared instead of becoming unset.
REQUIRED_NUMBER_FIELDS = frozenset({"volume", "left_duration", "right_duration"})


class EventEditor:
    """Draft state and actions of the event dialog."""

    def __init__(
        self,
        event: CareEvent,
        profile: Profile,
        dispatcher: MutationDispatcher,
        suggestion_source: SuggestionSource | None = None,
        *,
        read_only: bool = False,
    ) -> None:
        self.event = event
        self.profile = profile
        self.dispatcher = dispatcher
        self.read_only = read_only
        self.is_open = True
        self.confirming_removal = False
        self.draft: dict[str, Any] = {
            "time": event.time,
            "comment": event.comment,
            **event.variant_values(),
        }

        self.prescription: PrescriptionOption | None = None
        self.suggestions: SuggestionFetcher | None = None
        if isinstance(event, MedicineEvent):
            if event.prescription:
                self.prescription = PrescriptionOption(prescription=event.prescription)
            if suggestion_source is not None:
                self.suggestions = SuggestionFetcher(
                    suggestion_source,
                    profile,
                    window_ms=dispatcher.timing.suggestion_debounce_ms,
                    collector=dispatcher.collector,
                )

    def set_time(self, value: datetime | None) -> None:
        self.draft["time"] = value or datetime.now(UTC)

    def set_comment(self, value: str | None) -> None:
        self.draft["comment"] = value

    def set_number(self, name: str, displayed: float | None) -> None:
        """Set a numeric field from its displayed value (ml, minutes, cm, kg)."""
        self._require_field(name)
        number = DIALOG_FIELDS[name]
        if displayed is None:
            self.draft[name] = 0 if name in REQUIRED_NUMBER_FIELDS else None
            return
        self.draft[name] = number.to_stored(displayed)

    def display_number(self, name: str) -> float | None:
        self._require_field(name)
        return DIALOG_FIELDS[name].to_display(self.draft.get(name))

    def set_field(self, name: str, value: Any) -> None:
        """Set any other field of the kind (diaper flags, title, destination, ...)."""
        self._require_field(name)
        self.draft[name] = value

    def on_prescription_input(self, text: str, reason: str = "input") -> None:
        if self.suggestions is not None:
            self.suggestions.on_input_change(text, reason)

    def choose_prescription(self, value: str | PrescriptionOption | None) -> None:
        self.prescription = resolve_choice(value)

    def prescription_options(self, input_value: str) -> list[PrescriptionOption]:
        if self.suggestions is None:
            return []
        return self.suggestions.filtered_options(input_value)

    def changes(self) -> dict[str, Any]:
        """The draft as an update: every field of the kind plus time and comment."""
        changes = dict(self.draft)
        if isinstance(self.event, MedicineEvent):
            changes["prescription"] = self.prescription.prescription if self.prescription else ""
        return changes

    async def submit(self) -> MutationResult | None:
        """Send the draft and close the editor."""
        if self.read_only:
            log.debug("Submit ignored on read-only editor", event_id=self.event.id)
            return None
        result = await self.dispatcher.update_event(self.event, self.changes())
        self.close()
        return result

    def request_removal(self) -> None:
        self.confirming_removal = True

    def dismiss_removal(self) -> None:
        self.confirming_removal = False

    async def confirm_removal(self) -> MutationResult | None:
        """Send the remove action and close the editor."""
        self.confirming_removal = False
        if self.read_only:
            log.debug("Removal ignored on read-only editor", event_id=self.event.id)
            return None
        result = await self.dispatcher.remove_event(self.event)
        self.close()
        return result

    def close(self) -> None:
        self.is_open = False
        if self.suggestions is not None:
            self.suggestions.cancel()

    def _require_field(self, name: str) -> None:
        if name not in self.draft or name in ("time", "comment", "prescription"):
            raise KeyError(f"'{name}' is not an editable field of {type(self.event).__name__}")


# 🔼⚙️🔚
