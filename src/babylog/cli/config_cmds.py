#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Configuration commands for babylog."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.cli.decorators import logging_options
from rich.console import Console
from rich.table import Table

from babylog.cli.options import config_path_option, prepare_command


@click.group(name="config")
def config_cli():
    """Inspect the babylog configuration."""


@config_cli.command(name="show")
@config_path_option
@logging_options
@click.pass_context
def show_config(ctx: click.Context, config_path: Path | None, **kwargs):
    """Load, validate, and display the configuration."""
    config = prepare_command(ctx, config_path, kwargs)

    source = str(config_path) if config_path is not None else "built-in defaults"
    table = Table(title=f"babylog configuration ({source})")
    table.add_column("Section", style="bold")
    table.add_column("Key")
    table.add_column("Value")
    for section, values in config.to_dict().items():
        for key, value in values.items():
            table.add_row(section, key, str(value))
    Console().print(table)


# 🔼⚙️🔚
