#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""View-models that drive the mutation core: timeline grid, inline and dialog editors."""

from babylog.editor.dialog import EventEditor
from babylog.editor.grid import EventGrid, EventRow
from babylog.editor.inline import INLINE_FIELDS, InlineEventEditor
from babylog.editor.number_input import NumberField, compute_new_value

__all__ = [
    "INLINE_FIELDS",
    "EventEditor",
    "EventGrid",
    "EventRow",
    "InlineEventEditor",
    "NumberField",
    "compute_new_value",
]

# 🔼⚙️🔚
