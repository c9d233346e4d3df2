#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The mutation core: debounce, dispatch, optimistic overlay and suggestions."""

from babylog.runtime.debounce import Debounced, debounce
from babylog.runtime.dispatcher import (
    MutationDispatcher,
    MutationResult,
    OutstandingCalls,
    PendingMutation,
)
from babylog.runtime.reconciler import merge_pending, pending_event_ids, row_key
from babylog.runtime.suggestions import (
    FetchState,
    PrescriptionOption,
    SuggestionFetcher,
    filter_options,
    resolve_choice,
)

__all__ = [
    "Debounced",
    "FetchState",
    "MutationDispatcher",
    "MutationResult",
    "OutstandingCalls",
    "PendingMutation",
    "PrescriptionOption",
    "SuggestionFetcher",
    "debounce",
    "filter_options",
    "merge_pending",
    "pending_event_ids",
    "resolve_choice",
    "row_key",
]

# 🔼⚙️🔚
