#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Options and setup shared by the babylog commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
import sys
from typing import Any

from attrs import evolve
import click
from provide.foundation import LoggingConfig, TelemetryConfig, get_hub
from provide.foundation.logger import get_logger
from structlog.typing import FilteringBoundLogger as StructLogger

from babylog.config import BabylogConfig, ConfigurationError, load_config

log: StructLogger = get_logger(__name__)


def config_path_option(fn: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "-c",
        "--config-path",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
        default=None,
        envvar="BABYLOG_CONF",
        help="Path to the babylog configuration file (env var BABYLOG_CONF). Defaults apply when omitted.",
        show_envvar=True,
    )(fn)


def setup_telemetry(ctx: click.Context, config: BabylogConfig, options: dict[str, Any]) -> None:
    """Initialise Foundation logging for a command.

    Command options win over the group's options, which win over the
    ``[global]`` table of the configuration file.
    """
    root = ctx.find_root()
    group_options = root.obj.get("logging_options", {}) if isinstance(root.obj, dict) else {}
    level = options.get("log_level") or group_options.get("log_level") or config.global_config.log_level
    log_file = options.get("log_file") or group_options.get("log_file")
    log_format = options.get("log_format") or group_options.get("log_format")

    base_config = TelemetryConfig.from_env()
    logging_config = LoggingConfig(default_level=str(level).upper())
    if log_file:
        logging_config = evolve(logging_config, log_file=Path(log_file))
    if log_format:
        logging_config = evolve(logging_config, console_formatter=log_format)
    telemetry_config = evolve(base_config, service_name="babylog", logging=logging_config)
    get_hub().initialize_foundation(telemetry_config)
    log.debug("Telemetry initialised", log_level=level, log_file=str(log_file) if log_file else None)


def prepare_command(ctx: click.Context, config_path: Path | None, options: dict[str, Any]) -> BabylogConfig:
    """Load the configuration (or the defaults) and set up logging; exit 1 on a bad file."""
    try:
        config = load_config(config_path) if config_path is not None else BabylogConfig()
    except ConfigurationError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)
    setup_telemetry(ctx, config, options)
    return config


# 🔼⚙️🔚
