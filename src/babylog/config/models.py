#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration models and the TOML loader.

A config file has three optional tables:

    [global]
    log_level = "DEBUG"
    show_date = true

    [timing]
    inline_debounce_ms = 200
    suggestion_debounce_ms = 500

    [endpoint]
    base_url = "http://localhost:3000"
    command_route = "/baby"
    timeout_seconds = 10.0

Missing tables and keys fall back to the defaults below.
"""

from __future__ import annotations

from pathlib import Path
import tomllib
from typing import Any

import attrs
from attrs import define, field
from provide.foundation.logger import get_logger

from babylog.errors import ConfigurationError

log = get_logger(__name__)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive(instance: Any, attribute: attrs.Attribute, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


def _non_negative(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f"{attribute.name} must be non-negative, got {value}")


def _log_level(instance: Any, attribute: attrs.Attribute, value: str) -> None:
    if value.upper() not in LOG_LEVELS:
        raise ValueError(f"{attribute.name} must be one of {', '.join(LOG_LEVELS)}, got {value!r}")


@define(frozen=True, slots=True)
class TimingConfig:
    """Debounce windows, in milliseconds."""

    inline_debounce_ms: int = field(default=200, validator=_non_negative)
    suggestion_debounce_ms: int = field(default=500, validator=_non_negative)


@define(frozen=True, slots=True)
class EndpointConfig:
    """Where the command handler lives."""

    base_url: str = field(default="http://localhost:3000")
    command_route: str = field(default="/baby")
    timeout_seconds: float = field(default=10.0, validator=_positive)

    @base_url.validator
    def _check_base_url(self, attribute: attrs.Attribute, value: str) -> None:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"{attribute.name} must be an http(s) URL, got {value!r}")


@define(frozen=True, slots=True)
class GlobalConfig:
    log_level: str = field(default="INFO", validator=_log_level, converter=str.upper)
    show_date: bool = field(default=False)


@define(frozen=True, slots=True)
class BabylogConfig:
    """Top-level configuration."""

    global_config: GlobalConfig = field(factory=GlobalConfig)
    timing: TimingConfig = field(factory=TimingConfig)
    endpoint: EndpointConfig = field(factory=EndpointConfig)

    def to_dict(self) -> dict[str, Any]:
        return {
            "global": attrs.asdict(self.global_config),
            "timing": attrs.asdict(self.timing),
            "endpoint": attrs.asdict(self.endpoint),
        }


_SECTIONS: dict[str, type] = {
    "global": GlobalConfig,
    "timing": TimingConfig,
    "endpoint": EndpointConfig,
}


def _build_section(name: str, data: Any, path: Path) -> Any:
    section_cls = _SECTIONS[name]
    if not isinstance(data, dict):
        raise ConfigurationError(f"[{name}] must be a table", str(path))
    known = {a.name for a in attrs.fields(section_cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown keys in [{name}]: {', '.join(unknown)}", str(path))
    try:
        return section_cls(**data)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value in [{name}]: {e}", str(path)) from e


def load_config(path: Path | str) -> BabylogConfig:
    """Load and validate a TOML configuration file.

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError("Configuration file not found", str(path))

    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML: {e}", str(path)) from e

    unknown_sections = sorted(set(raw) - set(_SECTIONS))
    if unknown_sections:
        raise ConfigurationError(f"Unknown sections: {', '.join(unknown_sections)}", str(path))

    sections = {name: _build_section(name, raw[name], path) for name in _SECTIONS if name in raw}
    config = BabylogConfig(
        global_config=sections.get("global", GlobalConfig()),
        timing=sections.get("timing", TimingConfig()),
        endpoint=sections.get("endpoint", EndpointConfig()),
    )
    log.debug("Configuration loaded", path=str(path), **config.to_dict()["timing"])
    return config


# 🔼⚙️🔚
