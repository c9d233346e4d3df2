#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Outgoing form payloads.

The command handler treats an absent field as "leave unchanged", so empty
values are dropped before a payload leaves the process."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from babylog.commands.actions import ACTION_KEY
from babylog.events.codec import encode_value, wire_name

RETAINED_KEYS = frozenset({ACTION_KEY, "id"})


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def prune_form_data(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``data`` without None or empty-string values.

    The action tag and the event id are always retained. Pruning is pure and
    idempotent.
    """
    return {key: value for key, value in data.items() if key in RETAINED_KEYS or not is_blank(value)}


def build_payload(action: str, event_id: str, changes: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build the pruned wire payload for an action on one event.

    Args:
        action: Action tag sent under ``__action``
        event_id: Target event id
        changes: Python field name to new value

    Returns:
        Payload keyed by wire field names
    """
    payload: dict[str, Any] = {ACTION_KEY: str(action), "id": event_id}
    for name, value in (changes or {}).items():
        if name in RETAINED_KEYS:
            continue
        payload[wire_name(name)] = encode_value(name, value)
    return prune_form_data(payload)


# 🔼⚙️🔚
