#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Exception hierarchy for babylog."""

from __future__ import annotations


class BabylogError(Exception):
    """Base exception for babylog errors."""


class ConfigurationError(BabylogError):
    """Raised when the configuration file is missing or invalid."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{message} (config: {path})"
        super().__init__(message)


class EventDecodeError(BabylogError):
    """Raised when an event record cannot be decoded at the serialization boundary."""

    def __init__(self, message: str, event_id: str | None = None):
        self.event_id = event_id
        if event_id:
            message = f"Event '{event_id}': {message}"
        super().__init__(message)


class TransportError(BabylogError):
    """Raised by a remote endpoint when a command or query could not complete."""

    def __init__(self, message: str, action: str | None = None, url: str | None = None):
        self.action = action
        self.url = url
        super().__init__(message)


# 🔼⚙️🔚
