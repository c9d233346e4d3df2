#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Base implementation shared by lifecycle notices."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from attrs import define, field


@define(frozen=True, slots=True, kw_only=True)
class BaseNotice:
    """Immutable notice with a timestamp, a description and free-form metadata."""

    source: ClassVar[str] = "babylog"

    description: str
    timestamp: datetime = field(factory=datetime.now)
    metadata: dict[str, Any] = field(factory=dict, hash=False)

    def format(self) -> str:
        """Default formatting: ``[HH:MM:SS] [source] description``."""
        return f"[{self.timestamp.strftime('%H:%M:%S')}] [{self.source}] {self.description}"


# 🔼⚙️🔚
