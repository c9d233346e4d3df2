#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Lifecycle notices.

The mutation core announces dispatched and settled calls through a
``NoticeCollector``; the owner of the canonical list subscribes to refresh it."""

from babylog.lifecycle.base import BaseNotice
from babylog.lifecycle.collector import NoticeCollector
from babylog.lifecycle.mutation import MutationDispatched, MutationSettled, SuggestionsApplied
from babylog.lifecycle.protocol import Notice

__all__ = [
    "BaseNotice",
    "MutationDispatched",
    "MutationSettled",
    "Notice",
    "NoticeCollector",
    "SuggestionsApplied",
]

# 🔼⚙️🔚
