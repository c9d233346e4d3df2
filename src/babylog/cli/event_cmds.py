#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Timeline commands: show, update, remove and prescription suggestions."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
import sys
from typing import Any

import click
from provide.foundation.cli.decorators import logging_options
from provide.foundation.logger import get_logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from structlog.typing import FilteringBoundLogger as StructLogger

from babylog.cli.options import config_path_option, prepare_command
from babylog.client.http import HttpCommandClient
from babylog.config import BabylogConfig
from babylog.editor.grid import EventGrid, EventRow
from babylog.editor.number_input import DIALOG_FIELDS
from babylog.errors import BabylogError, EventDecodeError
from babylog.events.codec import decode_field, events_from_payload, profile_from_payload
from babylog.events.models import CareEvent, Profile
from babylog.runtime.dispatcher import MutationDispatcher, MutationResult

log: StructLogger = get_logger(__name__)

events_file_argument = click.argument(
    "events_json",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
)


def load_timeline(path: Path) -> tuple[Profile, list[CareEvent]]:
    """Read a canonical list dumped as JSON.

    The file holds either a bare list of event records or an object with an
    ``events`` list and an optional ``profile`` record.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise EventDecodeError(f"{path} is not valid JSON: {e}") from e

    profile_record: Any = None
    records = data
    if isinstance(data, dict):
        records = data.get("events")
        profile_record = data.get("profile")
    if not isinstance(records, list):
        raise EventDecodeError(f"{path} holds no event list")
    profile = profile_from_payload(profile_record) if profile_record else Profile(id="")
    return profile, events_from_payload(records)


def _find_event(events: list[CareEvent], event_id: str) -> CareEvent:
    for event in events:
        if event.id == event_id:
            return event
    click.echo(f"❌ Error: Event '{event_id}' not found", err=True)
    sys.exit(1)


def _details(row: EventRow) -> str:
    parts = []
    for name, value in row.event.variant_values().items():
        if value is None or name == "purpose":
            continue
        number = DIALOG_FIELDS.get(name)
        if number is not None:
            parts.append(f"{name}={number.to_display(value)} {number.unit}")
        elif name == "end_time":
            parts.append(f"days={row.travel_days}")
        else:
            parts.append(f"{name}={value}")
    return ", ".join(parts)


def _report(result: MutationResult | None, event_id: str) -> None:
    if result is None:
        click.echo(f"⚠️  Event '{event_id}' has an unrecognized type; nothing was sent")
        return
    if not result.succeeded:
        click.echo(f"❌ {result.action} failed for '{event_id}': {result.error}", err=True)
        sys.exit(1)
    click.echo(f"✅ {result.action} sent for '{event_id}'")


async def _run_mutation(config: BabylogConfig, event: CareEvent, changes: dict[str, Any] | None) -> MutationResult | None:
    async with HttpCommandClient(config.endpoint) as client:
        dispatcher = MutationDispatcher(client, timing=config.timing)
        if changes is None:
            return await dispatcher.remove_event(event)
        return await dispatcher.update_event(event, changes)


@click.command(name="show")
@events_file_argument
@click.option("--show-date/--no-show-date", default=None, help="Include the date in the time column.")
@config_path_option
@logging_options
@click.pass_context
def show_cmd(ctx: click.Context, events_json: Path, show_date: bool | None, config_path: Path | None, **kwargs):
    """Print the timeline of a canonical event list, most recent first."""
    config = prepare_command(ctx, config_path, kwargs)
    try:
        profile, events = load_timeline(events_json)
    except BabylogError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    dispatcher = MutationDispatcher(HttpCommandClient(config.endpoint), timing=config.timing)
    grid = EventGrid(
        profile,
        events,
        dispatcher,
        read_only=True,
        show_date=config.global_config.show_date if show_date is None else show_date,
    )

    title = f"Timeline - {profile.display_name}" if profile.id else "Timeline"
    table = Table(title=title)
    table.add_column("Time", no_wrap=True)
    table.add_column("Type", style="bold")
    table.add_column("Details")
    table.add_column("Comment")
    table.add_column("Id", style="dim")
    for row in grid.rows():
        table.add_row(row.time_label, row.type_label, escape(_details(row)), escape(row.comment or ""), row.event.id)
    grid.close()

    Console().print(table)
    log.debug("Timeline printed", count=len(events))


@click.command(name="update")
@events_file_argument
@click.argument("event_id")
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="FIELD=VALUE",
    help="Field to change, by python or wire name (repeatable).",
)
@config_path_option
@logging_options
@click.pass_context
def update_cmd(
    ctx: click.Context,
    events_json: Path,
    event_id: str,
    assignments: tuple[str, ...],
    config_path: Path | None,
    **kwargs,
):
    """Send an update for one event.

    Blank values are dropped, so the server keeps those fields.

    Example:
        babylog update events.json e1 --set volume=120 --set comment="after nap"
    """
    config = prepare_command(ctx, config_path, kwargs)
    try:
        _, events = load_timeline(events_json)
        event = _find_event(events, event_id)
        changes = {}
        for assignment in assignments:
            name, sep, value = assignment.partition("=")
            if not sep:
                raise click.BadParameter(f"expected FIELD=VALUE, got {assignment!r}", param_hint="--set")
            field_name, decoded = decode_field(event, name.strip(), value)
            changes[field_name] = decoded
    except BabylogError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    _report(asyncio.run(_run_mutation(config, event, changes)), event_id)


@click.command(name="remove")
@events_file_argument
@click.argument("event_id")
@config_path_option
@logging_options
@click.pass_context
def remove_cmd(ctx: click.Context, events_json: Path, event_id: str, config_path: Path | None, **kwargs):
    """Send the remove action for one event."""
    config = prepare_command(ctx, config_path, kwargs)
    try:
        _, events = load_timeline(events_json)
    except BabylogError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)
    event = _find_event(events, event_id)
    _report(asyncio.run(_run_mutation(config, event, None)), event_id)


@click.command(name="suggest")
@click.argument("profile_id")
@click.argument("text")
@config_path_option
@logging_options
@click.pass_context
def suggest_cmd(ctx: click.Context, profile_id: str, text: str, config_path: Path | None, **kwargs):
    """Query prescription suggestions for a profile."""
    config = prepare_command(ctx, config_path, kwargs)

    async def _query() -> list[str]:
        async with HttpCommandClient(config.endpoint) as client:
            return await client.fetch_top_prescriptions(profile_id, text)

    try:
        prescriptions = asyncio.run(_query())
    except BabylogError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if not prescriptions:
        click.echo(f"No prescriptions match '{text}'")
        return
    for prescription in prescriptions:
        click.echo(prescription)


# 🔼⚙️🔚
