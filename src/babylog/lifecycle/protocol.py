#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Protocol every lifecycle notice implements."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Notice(Protocol):
    """Something that happened in the mutation core, for subscribers to react to."""

    timestamp: datetime
    source: str
    description: str

    def format(self) -> str:
        """Format the notice for a single log line."""
        ...


# 🔼⚙️🔚
