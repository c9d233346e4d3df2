#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Action tags and outgoing payload construction."""

from babylog.commands.actions import (
    ACTION_KEY,
    ACTION_TABLE,
    CareAction,
    CareOperation,
    resolve_action,
)
from babylog.commands.forms import build_payload, prune_form_data

__all__ = [
    "ACTION_KEY",
    "ACTION_TABLE",
    "CareAction",
    "CareOperation",
    "build_payload",
    "prune_form_data",
    "resolve_action",
]

# 🔼⚙️🔚
