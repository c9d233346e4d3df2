#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Notices emitted around remote mutation calls and suggestion queries."""

from __future__ import annotations

from typing import Any, ClassVar

from attrs import define, field

from babylog.lifecycle.base import BaseNotice


@define(frozen=True, slots=True, kw_only=True)
class MutationDispatched(BaseNotice):
    """A mutation call left for the command endpoint."""

    source: ClassVar[str] = "mutation"

    action: str
    event_id: str
    fields: dict[str, Any] = field(factory=dict, hash=False)


@define(frozen=True, slots=True, kw_only=True)
class MutationSettled(BaseNotice):
    """A mutation call completed; subscribers refresh the canonical list."""

    source: ClassVar[str] = "mutation"

    action: str
    event_id: str
    succeeded: bool
    error: str | None = field(default=None)

    def format(self) -> str:
        outcome = "ok" if self.succeeded else f"failed: {self.error}"
        return f"{super().format()} ({outcome})"


@define(frozen=True, slots=True, kw_only=True)
class SuggestionsApplied(BaseNotice):
    """The latest suggestion query returned and its results replaced the list."""

    source: ClassVar[str] = "suggestions"

    profile_id: str
    search_text: str
    count: int


# 🔼⚙️🔚
