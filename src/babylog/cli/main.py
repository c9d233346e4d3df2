#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Main CLI entry point for babylog."""

from __future__ import annotations

import click
from provide.foundation.cli.decorators import logging_options

from babylog import __version__
from babylog.cli.config_cmds import config_cli
from babylog.cli.event_cmds import remove_cmd, show_cmd, suggest_cmd, update_cmd


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="babylog")
@logging_options
@click.pass_context
def cli(ctx: click.Context, **kwargs):
    """babylog - review and edit a baby care event timeline from the terminal."""
    ctx.ensure_object(dict)
    ctx.obj["logging_options"] = {key: value for key, value in kwargs.items() if value is not None}


cli.add_command(show_cmd)
cli.add_command(update_cmd)
cli.add_command(remove_cmd)
cli.add_command(suggest_cmd)
cli.add_command(config_cli)


if __name__ == "__main__":
    cli()

# 🔼⚙️🔚
