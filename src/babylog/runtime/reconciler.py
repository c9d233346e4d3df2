#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Optimistic overlay of in-flight edits onto the canonical event list.

The merge is a pure function of the canonical list and the pending mutations
derived from currently outstanding calls. It is recomputed for every render;
once a call completes and the canonical list is refreshed, its overlay is
simply no longer part of the input.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import attrs
from provide.foundation.logger import get_logger

from babylog.events.models import CareEvent
from babylog.runtime.dispatcher import PendingMutation

log = get_logger(__name__)


def apply_mutation(event: CareEvent, mutation: PendingMutation) -> CareEvent:
    """Shallow-merge a pending mutation onto a copy of ``event``.

    Fields that are not valid for the event kind are ignored. When a value
    actually changes the returned event carries a recomputed hash; otherwise
    ``event`` itself is returned and keeps its token.
    """
    allowed = set(type(event).variant_fields()) | {"time", "comment"}
    changes = {
        name: value
        for name, value in mutation.changed_fields.items()
        if name in allowed and getattr(event, name) != value
    }
    if not changes:
        return event
    return attrs.evolve(event, **changes, hash=None)


def merge_pending(events: Sequence[CareEvent], pending: Iterable[PendingMutation]) -> list[CareEvent]:
    """Overlay pending mutations onto the canonical list, for display only.

    Mutations are applied in issue order, so a later call for the same event
    wins field by field. Mutations for ids absent from ``events`` are ignored;
    events without a mutation are passed through unchanged. ``events`` itself
    is never modified.
    """
    merged = list(events)
    index = {event.id: position for position, event in enumerate(merged)}
    for mutation in pending:
        position = index.get(mutation.event_id)
        if position is None:
            log.debug("Pending mutation targets unknown event, ignoring", event_id=mutation.event_id)
            continue
        merged[position] = apply_mutation(merged[position], mutation)
    return merged


def pending_event_ids(pending: Iterable[PendingMutation]) -> frozenset[str]:
    return frozenset(mutation.event_id for mutation in pending)


def row_key(event: CareEvent, pending_ids: frozenset[str]) -> str:
    """Identity key for a displayed row.

    Rows with an overlay are keyed by hash so that their inline inputs are
    rebuilt from the merged values; every other row is keyed by id.
    """
    if event.id in pending_ids:
        return event.hash or event.id
    return event.id


# 🔼⚙️🔚
