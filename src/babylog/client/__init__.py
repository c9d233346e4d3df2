#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Remote command and suggestion endpoints."""

from babylog.client.http import HttpCommandClient
from babylog.client.protocol import CommandTransport, SuggestionSource

__all__ = ["CommandTransport", "HttpCommandClient", "SuggestionSource"]

# 🔼⚙️🔚
