#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Action tags understood by the remote command handler.

The update and remove paths both resolve their tag from one table keyed by
operation and event kind, built once at import time."""

from __future__ import annotations

from enum import Enum

from babylog.events.kinds import EventKind
from babylog.events.models import CareEvent

ACTION_KEY = "__action"


class CareOperation(str, Enum):
    UPDATE = "UPDATE"
    REMOVE = "REMOVE"


class CareAction(str, Enum):
    """Every action tag the command endpoint accepts."""

    UPDATE_BOTTLE_FEED_EVENT = "UPDATE_BOTTLE_FEED_EVENT"
    UPDATE_PUMPING_EVENT = "UPDATE_PUMPING_EVENT"
    UPDATE_NURSING_EVENT = "UPDATE_NURSING_EVENT"
    UPDATE_DIAPER_CHANGE_EVENT = "UPDATE_DIAPER_CHANGE_EVENT"
    UPDATE_PLAY_EVENT = "UPDATE_PLAY_EVENT"
    UPDATE_SLEEP_EVENT = "UPDATE_SLEEP_EVENT"
    UPDATE_BATH_EVENT = "UPDATE_BATH_EVENT"
    UPDATE_MEASUREMENT_EVENT = "UPDATE_MEASUREMENT_EVENT"
    UPDATE_MEDICINE_EVENT = "UPDATE_MEDICINE_EVENT"
    UPDATE_NOTE_EVENT = "UPDATE_NOTE_EVENT"
    UPDATE_TRAVEL_EVENT = "UPDATE_TRAVEL_EVENT"

    REMOVE_BOTTLE_FEED_EVENT = "REMOVE_BOTTLE_FEED_EVENT"
    REMOVE_PUMPING_EVENT = "REMOVE_PUMPING_EVENT"
    REMOVE_NURSING_EVENT = "REMOVE_NURSING_EVENT"
    REMOVE_DIAPER_CHANGE_EVENT = "REMOVE_DIAPER_CHANGE_EVENT"
    REMOVE_PLAY_EVENT = "REMOVE_PLAY_EVENT"
    REMOVE_SLEEP_EVENT = "REMOVE_SLEEP_EVENT"
    REMOVE_BATH_EVENT = "REMOVE_BATH_EVENT"
    REMOVE_MEASUREMENT_EVENT = "REMOVE_MEASUREMENT_EVENT"
    REMOVE_MEDICINE_EVENT = "REMOVE_MEDICINE_EVENT"
    REMOVE_NOTE_EVENT = "REMOVE_NOTE_EVENT"
    REMOVE_TRAVEL_EVENT = "REMOVE_TRAVEL_EVENT"

    # origin key shared by every in-flight event edit
    EDIT_GENERIC_EVENT = "EDIT_GENERIC_EVENT"
    FETCH_TOP_PRESCRIPTIONS = "FETCH_TOP_PRESCRIPTIONS"


def _build_action_table() -> dict[tuple[CareOperation, EventKind], CareAction]:
    table = {}
    for operation in CareOperation:
        for kind in EventKind:
            table[(operation, kind)] = CareAction[f"{operation.value}_{kind.value}_EVENT"]
    return table


ACTION_TABLE = _build_action_table()


def resolve_action(event: CareEvent, operation: CareOperation) -> CareAction | None:
    """Pick the action tag for an operation on an event, None for unknown kinds."""
    if event.kind is None:
        return None
    return ACTION_TABLE.get((operation, event.kind))


# 🔼⚙️🔚
