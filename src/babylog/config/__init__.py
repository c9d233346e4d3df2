#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration module for babylog.

Re-exports the configuration models and the loader."""

from __future__ import annotations

from babylog.config.models import (
    BabylogConfig,
    EndpointConfig,
    GlobalConfig,
    TimingConfig,
    load_config,
)
from babylog.errors import ConfigurationError

__all__ = [
    "BabylogConfig",
    "ConfigurationError",
    "EndpointConfig",
    "GlobalConfig",
    "TimingConfig",
    "load_config",
]

# 🔼⚙️🔚
