#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Event kind enumeration and the sentinel values shared by all kinds."""

from __future__ import annotations

from enum import Enum

# Marks a value the caregiver explicitly left unspecified, distinct from empty.
UNSPECIFIED_VALUE_TAG = "__UNSPECIFIED__"


class EventKind(str, Enum):
    """Discriminant of the care event tagged union."""

    BOTTLE_FEED = "BOTTLE_FEED"
    PUMPING = "PUMPING"
    NURSING = "NURSING"
    DIAPER_CHANGE = "DIAPER_CHANGE"
    PLAY = "PLAY"
    SLEEP = "SLEEP"
    BATH = "BATH"
    MEASUREMENT = "MEASUREMENT"
    MEDICINE = "MEDICINE"
    NOTE = "NOTE"
    TRAVEL = "TRAVEL"


class NotePurpose(str, Enum):
    """Sub-purposes of a note; a note without purpose is a generic note."""

    MEMORY = "MEMORY"
    FOOD_FIRST_TRY = "FOOD_FIRST_TRY"


# Pseudo type tags some records carry instead of NOTE + purpose.
NOTE_PSEUDO_TYPES = {
    "MEMORY": NotePurpose.MEMORY,
    "FOOD_FIRST_TRY": NotePurpose.FOOD_FIRST_TRY,
}

# Labels shown in the type column for kinds whose label depends on fields.
POOP_LABEL = "POOP"
PEE_LABEL = "PEE"
MEMORY_LABEL = "MEMORY"
FOOD_LABEL = "Food"
UNKNOWN_LABEL = "UNKNOWN"


def is_unspecified(value: object) -> bool:
    """Check whether a text value is the explicit 'unspecified' sentinel."""
    return value == UNSPECIFIED_VALUE_TAG


def parse_kind(tag: str | None) -> EventKind | None:
    """Map a wire type tag to an EventKind, or None if it is not a known kind."""
    if tag is None:
        return None
    try:
        return EventKind(tag)
    except ValueError:
        return None


# 🔼⚙️🔚
