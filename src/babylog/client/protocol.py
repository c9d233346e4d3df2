#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Interfaces of the remote endpoints the mutation core talks to."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CommandTransport(Protocol):
    """Write path: runs one pruned command payload on the server."""

    async def run_command(self, payload: Mapping[str, Any]) -> Any:
        """Send the payload; raise ``TransportError`` if the call fails."""
        ...


@runtime_checkable
class SuggestionSource(Protocol):
    """Read path: prescription suggestions for a profile."""

    async def fetch_top_prescriptions(self, profile_id: str, search_text: str) -> list[str]:
        """Return suggestions ordered by relevance; raise ``TransportError`` on failure."""
        ...


# 🔼⚙️🔚
