#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Search-as-you-type prescription suggestions.

Keystrokes re-arm a debounced query. Each fired query gets a sequence
number; only the response to the most recently issued query is applied, so a
slow response to a superseded query can never overwrite newer suggestions.
The fetcher is ``LOADING`` while the latest query is outstanding and
``IDLE`` otherwise. Query failures leave the current suggestions in place.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum, auto
import unicodedata

from attrs import define, field
from provide.foundation.logger import get_logger

from babylog.client.protocol import SuggestionSource
from babylog.errors import TransportError
from babylog.events.models import Profile
from babylog.lifecycle.collector import NoticeCollector
from babylog.lifecycle.mutation import SuggestionsApplied
from babylog.runtime.debounce import Debounced

log = get_logger(__name__)

DEFAULT_SUGGESTION_WINDOW_MS = 500

# Input change reasons that do not come from the user typing.
IGNORED_INPUT_REASONS = frozenset({"reset", "clear"})


class FetchState(Enum):
    IDLE = auto()
    LOADING = auto()


@define(frozen=True, slots=True)
class PrescriptionOption:
    """An autocomplete option.

    ``input_value`` is set only on the synthetic "add" option and holds the
    text the user typed.
    """

    prescription: str
    input_value: str | None = field(default=None)

    @property
    def is_new(self) -> bool:
        return self.input_value is not None


def _normalize(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


def filter_options(options: Sequence[PrescriptionOption], input_value: str) -> list[PrescriptionOption]:
    """Options whose label contains the input, plus an "add" option for new text.

    Matching ignores case and accents. The add option is offered when the input
    is non-empty and does not equal an existing option exactly.
    """
    needle = _normalize(input_value)
    filtered = [option for option in options if needle in _normalize(option.prescription)]
    is_existing = any(input_value == option.prescription for option in options)
    if input_value != "" and not is_existing:
        filtered.append(PrescriptionOption(prescription=f'Add "{input_value}"', input_value=input_value))
    return filtered


def resolve_choice(value: str | PrescriptionOption | None) -> PrescriptionOption | None:
    """Turn an autocomplete selection into the chosen prescription.

    Free text typed and confirmed, the synthetic add option and an existing
    suggestion are all valid choices.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return PrescriptionOption(prescription=value)
    if value.input_value:
        return PrescriptionOption(prescription=value.input_value)
    return value


class SuggestionFetcher:
    """Debounced, sequenced prescription lookup for one autocomplete control."""

    def __init__(
        self,
        source: SuggestionSource,
        profile: Profile,
        window_ms: int = DEFAULT_SUGGESTION_WINDOW_MS,
        collector: NoticeCollector | None = None,
    ) -> None:
        self.source = source
        self.profile = profile
        self.collector = collector
        self.state = FetchState.IDLE
        self.suggestions: list[str] = []
        self._issued = 0
        self._debounced = Debounced(self._fetch, window_ms, name="prescription-suggestions")
        self._log = log.bind(profile_id=profile.id)

    @property
    def is_loading(self) -> bool:
        return self.state is FetchState.LOADING

    @property
    def options(self) -> list[PrescriptionOption]:
        return [PrescriptionOption(prescription=p) for p in self.suggestions]

    def on_input_change(self, text: str, reason: str = "input") -> None:
        """React to the control's input text changing."""
        if reason in IGNORED_INPUT_REASONS:
            return
        self._debounced.cancel()
        self._debounced(text)

    def cancel(self) -> None:
        """Drop a scheduled query; a query already sent still completes."""
        self._debounced.cancel()

    def filtered_options(self, input_value: str) -> list[PrescriptionOption]:
        return filter_options(self.options, input_value)

    async def drain(self) -> None:
        await self._debounced.drain()

    async def _fetch(self, search_text: str) -> None:
        self._issued += 1
        sequence = self._issued
        self.state = FetchState.LOADING
        self._log.debug("Querying suggestions", search_text=search_text, sequence=sequence)

        try:
            results = await self.source.fetch_top_prescriptions(self.profile.id, search_text)
        except TransportError as e:
            self._log.warning("Suggestion query failed", search_text=search_text, error=str(e))
            return
        finally:
            # A failed latest query must not leave the control loading.
            if sequence == self._issued:
                self.state = FetchState.IDLE

        if sequence != self._issued:
            self._log.debug("Discarding superseded suggestions", sequence=sequence, latest=self._issued)
            return

        self._apply(search_text, results)

    def _apply(self, search_text: str, results: Iterable[str]) -> None:
        self.suggestions = list(results)
        self.state = FetchState.IDLE
        if self.collector is not None:
            self.collector.emit(
                SuggestionsApplied(
                    description=f"{len(self.suggestions)} suggestions for {search_text!r}",
                    profile_id=self.profile.id,
                    search_text=search_text,
                    count=len(self.suggestions),
                )
            )


# 🔼⚙️🔚
